"""Classic data structures and algorithms: sorting, searching, stacks, queues,
trees, heaps, disjoint sets and graphs."""

__version__ = "0.1.0"