"""Binary tree algorithms: traversals, search trees, AVL right rotations, expression and decision trees."""

__version__ = "0.1.0"
__all__ = ["tree", "expression", "decision", "bst", "avl"]