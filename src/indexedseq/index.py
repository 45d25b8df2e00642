"""Random-access index of chain nodes backed by a doubling array."""

import logging

from indexedseq.linkedlist import Node

logger = logging.getLogger(__name__)

# Initial number of slots in the backing array
DEFAULT_CAPACITY = 1024


class NodeIndex:
    """
    Dynamic array of node references where slot ``i`` holds position ``i``.

    The backing list is pre-sized to its capacity; unused slots hold None.
    Capacity doubles before a write would overflow it, giving amortized O(1)
    growth. Bounds are the caller's responsibility.
    """

    __slots__ = ("_slots", "_count")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._slots: list[Node | None] = [None] * capacity
        self._count = 0

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return len(self._slots)

    def _ensure_capacity(self) -> None:
        if self._count >= len(self._slots):
            old = len(self._slots)
            self._slots.extend([None] * old)
            logger.debug("Grew node index from %d to %d slots", old, len(self._slots))

    def insert(self, position: int, node: Node) -> None:
        """Shift slots at ``position`` and beyond right by one, then store node. O(n)."""
        self._ensure_capacity()
        slots = self._slots
        for i in range(self._count, position, -1):
            slots[i] = slots[i - 1]
        slots[position] = node
        self._count += 1

    def pop(self, position: int) -> Node:
        """Remove and return the node at ``position``, shifting later slots left. O(n)."""
        slots = self._slots
        node = slots[position]
        last = self._count - 1
        for i in range(position, last):
            slots[i] = slots[i + 1]
        slots[last] = None
        self._count = last
        assert node is not None
        return node

    def clear(self) -> None:
        """Drop every reference, keeping the allocated capacity."""
        for i in range(self._count):
            self._slots[i] = None
        self._count = 0

    def __getitem__(self, position: int) -> Node:
        node = self._slots[position] if 0 <= position < self._count else None
        if node is None:
            raise IndexError(position)
        return node

    def __len__(self) -> int:
        return self._count
