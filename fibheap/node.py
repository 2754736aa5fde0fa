from __future__ import annotations
from typing import Generic, List, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """A tree node of a Fibonacci heap.

    Each node owns an ordered list of child nodes. Children are only ever
    appended; the whole list is detached when the node itself is extracted.
    """

    __slots__ = ("value", "children")

    def __init__(self, value: T) -> None:
        self.value = value
        self.children: List[Node[T]] = []

    @property
    def degree(self) -> int:
        """Number of direct children."""
        return len(self.children)

    def add_child(self, node: Node[T]) -> None:
        """Attach *node* as the last child (amortized O(1))."""
        assert not node.value < self.value, "child would violate heap order"
        self.children.append(node)

    def size(self) -> int:
        """Count the nodes in this subtree, including self."""
        total = 0
        stack = [self]
        while stack:
            n = stack.pop()
            total += 1
            stack.extend(n.children)
        return total

    def copy(self) -> Node[T]:
        """Return a deep copy of the subtree rooted here.

        Values are shared, structure is not. Walks the tree with an explicit
        stack so wide or deep subtrees never hit the recursion limit.
        """
        root = Node(self.value)
        stack = [(self, root)]
        while stack:
            src, dst = stack.pop()
            for child in src.children:
                dup = Node(child.value)
                dst.children.append(dup)
                stack.append((child, dup))
        return root

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Node({self.value!r}, degree={self.degree})"
