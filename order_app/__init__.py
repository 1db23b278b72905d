"""Console order processing demo."""

__version__ = "0.1.0"
