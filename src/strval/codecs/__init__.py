"""Document codecs (JSON, YAML) that emit wrappers as native tokens."""
