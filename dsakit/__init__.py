"""Classic data structures and algorithms: arrays, maths, strings, sorting,
stacks, queues, linked lists, recursion and backtracking."""

__version__ = "0.1.0"