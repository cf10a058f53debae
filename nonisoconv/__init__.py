"""Integer-to-string conversion in any radix with 32-bit wrapping, and fixed-width float formatting."""

__version__ = "0.1.0"
__all__ = ["noniso"]