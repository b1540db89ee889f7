"""Two-stack integer sorting with a restricted set of operations, plus small text, byte and list helpers."""

__version__ = "1.0.0"
__all__ = ["__version__"]