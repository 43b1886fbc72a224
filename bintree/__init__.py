"""Parent-linked binary tree nodes with traversals, measures and rendering."""

__version__ = "0.1.0"
__all__ = ["measures", "node", "render", "traversal"]