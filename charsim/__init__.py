"""Character-frequency cosine similarity between two text files."""

__version__ = "0.1.0"
