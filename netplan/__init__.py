"""Floor plans from unfolded ASCII room nets."""

__version__ = "0.1.0"
