"""Interactive earthquake map renderer."""

__version__ = "1.0.0"
