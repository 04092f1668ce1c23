"""Parser combinators for repeated application, folding and length-prefixed data."""

__version__ = "0.1.0"
__all__ = ["core", "repeat", "accumulate"]