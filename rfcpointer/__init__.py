"""JSON Pointer (RFC 6901) lookup and assignment on plain Python JSON data."""

__version__ = "0.1.0"
__all__ = ["pointer"]