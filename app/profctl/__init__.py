"""profctl - swap sets of files between named profiles."""

__version__ = "0.1.0"
