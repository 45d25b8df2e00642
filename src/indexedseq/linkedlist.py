"""Singly-linked chain with head and tail references for O(1) splicing."""

from collections.abc import Iterator


class Node:
    """A node in the singly-linked chain."""

    __slots__ = ("value", "next")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: Node | None = None


class SinglyLinkedList:
    """Singly-linked chain that tracks both ends.

    The chain only knows about successors, so removal takes the predecessor
    node (or pops from the head). Callers that need positional access keep
    their own index of nodes.
    """

    def __init__(self) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        self._size = 0

    def append(self, node: Node) -> None:
        """Link node after the current tail. O(1)."""
        node.next = None
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def appendleft(self, node: Node) -> None:
        """Link node before the current head. O(1)."""
        node.next = self.head
        self.head = node
        if self.tail is None:
            self.tail = node
        self._size += 1

    def insert_after(self, prev: Node, node: Node) -> None:
        """Splice node between prev and its successor. O(1)."""
        node.next = prev.next
        prev.next = node
        if prev is self.tail:
            self.tail = node
        self._size += 1

    def popleft(self) -> Node | None:
        """Unlink and return the head node. O(1)."""
        node = self.head
        if node is None:
            return None
        self.head = node.next
        if self.head is None:
            self.tail = None
        node.next = None
        self._size -= 1
        return node

    def remove_after(self, prev: Node) -> Node | None:
        """Unlink and return the successor of prev. O(1).

        If the removed node was the tail, prev becomes the new tail.
        """
        node = prev.next
        if node is None:
            return None
        prev.next = node.next
        if node is self.tail:
            self.tail = prev
        node.next = None
        self._size -= 1
        return node

    def clear(self) -> None:
        """Unlink every node and reset to empty."""
        node = self.head
        while node is not None:
            following = node.next
            node.next = None
            node = following
        self.head = None
        self.tail = None
        self._size = 0

    def __iter__(self) -> Iterator[Node]:
        """Iterate over nodes from head to tail."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        """Return the number of nodes in the chain."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the chain is non-empty."""
        return self._size > 0
