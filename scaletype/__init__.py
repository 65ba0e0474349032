"""Type metadata for SCALE-encodable types: paths, fields, composites, variants and type definitions with a JSON form."""

__version__ = "0.1.0"

__all__ = ["composite", "fields", "path", "typedef", "utils", "variant"]