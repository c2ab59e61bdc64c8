"""A heterogeneous list with type-checked access to its items, and a demo."""

__version__ = "0.1.0"
__all__ = ["anylist", "demo"]