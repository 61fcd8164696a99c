"""Classic algorithms and data structures: sorting, searching, number theory, trees, heaps, stacks, queues and graphs."""

__version__ = "0.1.0"