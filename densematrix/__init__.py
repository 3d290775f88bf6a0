"""Dense floating-point matrices with basic linear-algebra operations."""

__version__ = "1.0.0"
__all__ = ["matrix"]