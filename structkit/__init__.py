"""Classic data structures and algorithms: linked lists, a queue, a binary heap, an AVL tree, sorting and searching."""

__version__ = "0.1.0"