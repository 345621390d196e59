"""Classic interview exercises on strings, matrices, linked lists, stacks, queues, trees and graphs."""

__version__ = "0.1.0"