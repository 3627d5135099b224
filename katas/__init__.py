"""Solutions to classic number, array and string exercises."""

__version__ = "0.1.0"
__all__ = ["arrays", "numbers", "strings"]