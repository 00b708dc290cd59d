"""DevDB command-line client."""

__version__ = "0.4.0"
