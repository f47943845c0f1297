"""Parent-linked binary trees: construction, measurements, traversals, printing and demonstrations."""

__version__ = "0.1.0"
__all__ = ["tree", "printing", "demos"]