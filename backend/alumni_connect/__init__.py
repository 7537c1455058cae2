"""Alumni Connect messaging backend."""

__version__ = "0.1.0"
