"""An interactive shell with built-in count, search and typeline commands."""

__version__ = "0.1.0"
__all__ = ["__version__"]