"""A minimal command shell with PATH lookup, exit and env builtins, and a plainer variant."""

__version__ = "0.1.0"
__all__ = ["__version__"]