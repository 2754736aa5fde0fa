from .node import Node
from .heap import FibonacciHeap

__all__ = [
    "Node",
    "FibonacciHeap",
]
