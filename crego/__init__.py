"""Component registry and command line for browsing the building blocks of Go projects."""

__version__ = "0.1.0"
__all__ = ["__version__"]