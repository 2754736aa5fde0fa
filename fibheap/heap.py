from __future__ import annotations
import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from .node import Node

T = TypeVar("T")

logger = logging.getLogger(__name__)


# -----------------------------
# Forest helpers
# -----------------------------
def _min_last(nodes: Iterable[Node[T]]) -> List[Node[T]]:
    """Collect *nodes* into a root list whose minimum sits at the end.

    A single pending slot tracks the smallest node seen so far; every other
    node is emitted as soon as it loses a comparison. On ties the node that
    is already pending stays pending.
    """
    out: List[Node[T]] = []
    pending: Optional[Node[T]] = None
    for node in nodes:
        if pending is not None:
            if node.value < pending.value:
                pending, node = node, pending
            out.append(node)
        else:
            pending = node
    if pending is not None:
        out.append(pending)
    return out


def _carry(table: List[Optional[Node[T]]], node: Node[T]) -> None:
    """Place *node* in the degree table, linking equal-degree trees.

    Works like carry propagation in binary addition: whenever the slot for
    the current degree is taken, the two trees are linked under the smaller
    root and the result moves one slot up.
    """
    deg = node.degree
    while True:
        if deg >= len(table):
            table.extend([None] * (deg + 1 - len(table)))
        other = table[deg]
        if other is None:
            table[deg] = node
            return
        table[deg] = None
        # The occupant keeps its place as root on ties.
        if node.value < other.value:
            node, other = other, node
        other.add_child(node)
        node = other
        deg += 1


class FibonacciHeap(Generic[T]):
    """A lazily consolidated min-heap of multi-way trees.

    ``push``, ``peek`` and ``merge`` are O(1); ``pop`` is amortized
    O(log n). Building from an iterable is O(n) and does no linking at all:
    trees are only combined the first time ``pop`` runs.

    Values only need to support ``<``. ``peek`` and ``pop`` return ``None``
    on an empty heap instead of raising.
    """

    __slots__ = ("_roots", "_top_index", "_len")

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        self._roots: List[Node[T]] = []
        self._top_index = 0
        self._len = 0  # every node in the forest, not just the roots
        if it is not None:
            self._roots = _min_last(Node(v) for v in it)
            self._len = len(self._roots)
            if self._roots:
                self._top_index = self._len - 1  # _min_last puts the minimum last
            logger.debug("built heap with %d roots", self._len)

    @classmethod
    def from_iterable(cls, it: Iterable[T]) -> FibonacciHeap[T]:
        """Build a heap from *it* in O(n)."""
        return cls(it)

    # -----------------------------
    # Public API
    # -----------------------------
    def push(self, item: T) -> None:
        """Add *item* as a new single-node tree (O(1))."""
        roots = self._roots
        if roots and item < roots[self._top_index].value:
            self._top_index = len(roots)
        roots.append(Node(item))
        self._len += 1

    def peek(self) -> Optional[T]:
        """Return the smallest item without removing it, or None if empty."""
        if not self._len:
            return None
        return self._roots[self._top_index].value

    def pop(self) -> Optional[T]:
        """Remove and return the smallest item, or None if empty.

        The children of the removed root join the other roots, and the whole
        candidate set is linked until no two trees share a degree.
        """
        if not self._len:
            return None
        assert 0 <= self._top_index < len(self._roots)

        top_index = self._top_index
        table: List[Optional[Node[T]]] = []
        top: Optional[Node[T]] = None
        for i, node in enumerate(self._roots):
            if i == top_index:
                top = node
                for child in node.children:
                    _carry(table, child)
            else:
                _carry(table, node)
        assert top is not None

        self._roots = _min_last(n for n in table if n is not None)
        if self._roots:
            self._top_index = len(self._roots) - 1
            self._len -= 1
        else:
            self._top_index = 0
            self._len = 0
        top.children = []
        return top.value

    def merge(self, other: FibonacciHeap[T]) -> None:
        """Move every item of *other* into this heap in O(1).

        *other* is left empty. Trees are not linked here; the next ``pop``
        consolidates the combined root list.
        """
        if other is self:
            raise ValueError("cannot merge a heap into itself")
        if other._len:
            if not self._len:
                self._roots = other._roots
                self._top_index = other._top_index
                self._len = other._len
            else:
                if other._roots[other._top_index].value < self._roots[self._top_index].value:
                    self._top_index = len(self._roots) + other._top_index
                self._roots.extend(other._roots)
                self._len += other._len
            logger.debug("merged %d items; heap now holds %d", other._len, self._len)
        other._roots = []
        other._top_index = 0
        other._len = 0

    def drain(self) -> Iterator[T]:
        """Yield items in ascending order, removing each one.

        The generator empties the heap as it goes and cannot be restarted.
        """
        while self._len:
            yield self.pop()  # type: ignore[misc]

    def to_sorted_list(self) -> List[T]:
        """Empty the heap into a list in ascending order."""
        out: List[T] = []
        while self._len:
            out.append(self.pop())  # type: ignore[arg-type]
        return out

    def is_empty(self) -> bool:
        return self._len == 0

    def __len__(self) -> int:
        return self._len

    def __bool__(self) -> bool:
        return self._len != 0

    def __iter__(self) -> Iterator[T]:
        # Consuming: iterating a heap drains it in ascending order.
        return self.drain()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"FibonacciHeap(len={self._len}, roots={len(self._roots)}, top={self.peek()!r})"

    # -----------------------------
    # Internal checks
    # -----------------------------
    def _validate(self) -> bool:
        """Return True if the forest satisfies every structural invariant."""
        roots = self._roots
        if (self._len == 0) != (not roots):
            return False
        if not roots:
            return True
        if not 0 <= self._top_index < len(roots):
            return False
        top = roots[self._top_index].value
        count = 0
        stack = list(roots)
        while stack:
            node = stack.pop()
            count += 1
            if node.value < top:
                return False
            for child in node.children:
                if child.value < node.value:
                    return False
                stack.append(child)
        return count == self._len
