"""Main IndexedSequence implementation."""

from collections.abc import Iterable, Iterator

from indexedseq.errors import OutOfRangeError
from indexedseq.index import DEFAULT_CAPACITY, NodeIndex
from indexedseq.linkedlist import Node, SinglyLinkedList

# Marker printed after the last value by format()
END_MARKER = "END"


def _check_int(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")


class ValuesView:
    """Restartable, lazy view over the values of an IndexedSequence."""

    __slots__ = ("_chain",)

    def __init__(self, chain: SinglyLinkedList) -> None:
        self._chain = chain

    def __iter__(self) -> Iterator[int]:
        for node in self._chain:
            yield node.value

    def __len__(self) -> int:
        return len(self._chain)


class IndexedSequence:
    """
    Ordered, mutable sequence of integers with O(1) positional lookup.

    Elements live in a singly-linked chain (O(1) splicing at either end) and
    a parallel random-access index of the same nodes (O(1) lookup by
    position). Every mutation updates both in lockstep, so ``index[i]`` is
    always the ``i``-th node reached by walking the chain.
    """

    def __init__(self, values: Iterable[int] = (), *, capacity: int = DEFAULT_CAPACITY) -> None:
        """
        Initialize the sequence.

        Args:
            values: Optional initial values, appended in order.
            capacity: Initial number of slots in the random-access index.
                The index doubles whenever it fills up.
        """
        self._chain = SinglyLinkedList()
        self._index = NodeIndex(capacity)
        for value in values:
            self.insert(len(self._index), value)

    @classmethod
    def create(cls, *, capacity: int = DEFAULT_CAPACITY) -> "IndexedSequence":
        """Create an empty sequence."""
        return cls(capacity=capacity)

    def insert(self, position: int, value: int) -> None:
        """
        Insert value so that it ends up at ``position``.

        Args:
            position: Target position, ``0 <= position <= size()``
            value: Integer to store

        Raises:
            OutOfRangeError: If position is outside ``[0, size()]``
            TypeError: If position or value is not an int
        """
        _check_int("position", position)
        _check_int("value", value)
        count = len(self._index)
        if not 0 <= position <= count:
            raise OutOfRangeError(position, count, inclusive=True)

        node = Node(value)
        if position == 0:
            self._chain.appendleft(node)
        elif position == count:
            self._chain.append(node)
        else:
            self._chain.insert_after(self._index[position - 1], node)
        self._index.insert(position, node)

    def remove_at(self, position: int) -> int:
        """
        Remove the element at ``position`` and return its value.

        Raises:
            OutOfRangeError: If position is outside ``[0, size())``
            TypeError: If position is not an int
        """
        self._check_position(position)
        if position == 0:
            self._chain.popleft()
        else:
            self._chain.remove_after(self._index[position - 1])
        return self._index.pop(position).value

    def get(self, position: int) -> int:
        """
        Return the value at ``position``. O(1).

        Raises:
            OutOfRangeError: If position is outside ``[0, size())``
            TypeError: If position is not an int
        """
        self._check_position(position)
        return self._index[position].value

    def traverse(self) -> ValuesView:
        """Return a lazy view that walks the values from first to last."""
        return ValuesView(self._chain)

    def size(self) -> int:
        """Return the number of elements. O(1)."""
        return len(self._index)

    def clear(self) -> None:
        """Release every element and reset to empty."""
        self._chain.clear()
        self._index.clear()

    def format(self) -> str:
        """Render as ``v1 -> v2 -> ... -> END``."""
        return " -> ".join([*(str(v) for v in self.traverse()), END_MARKER])

    def _check_position(self, position: int) -> None:
        _check_int("position", position)
        count = len(self._index)
        if not 0 <= position < count:
            raise OutOfRangeError(position, count)

    def __getitem__(self, position: int) -> int:
        return self.get(position)

    def __iter__(self) -> Iterator[int]:
        return iter(self.traverse())

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.size() > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexedSequence):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
