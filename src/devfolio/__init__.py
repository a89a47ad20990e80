"""devfolio: portfolio backend serving GitHub profile statistics."""

__version__ = "0.1.0"
