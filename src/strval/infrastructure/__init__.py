"""Infrastructure layer: adapters for host database libraries."""
