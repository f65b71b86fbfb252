"""Tag correlation analysis for video datasets."""

__version__ = "1.0.0"
