"""Domain layer: parsers, the coercion routine, and the value types.

This layer depends only on stdlib, pydantic, and structlog.
It must never import from codecs, infrastructure, commands, or config.
"""
