"""Classic data structures and algorithms: searching, sorting, dynamic
programming, graphs, a binary tree and linked lists."""

__version__ = "0.1.0"