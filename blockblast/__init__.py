"""Terminal block-placing puzzle game on a 12x12 board."""

__version__ = "0.1.0"
__all__ = ["__version__"]