"""Classic algorithms and data structures in plain Python: sorting, searching,
linked lists, queues, a heap, a binary search tree, matrix and number helpers,
and a small terminal quiz."""

__version__ = "0.1.0"