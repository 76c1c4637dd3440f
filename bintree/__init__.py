"""Binary trees of integers: building, traversing, measuring and drawing."""

__version__ = "0.1.0"
__all__ = ["render", "tree"]