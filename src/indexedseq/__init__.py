"""indexedseq - Integer sequence with a linked chain and an O(1) positional index."""

from indexedseq.core import IndexedSequence, ValuesView
from indexedseq.errors import IndexedSeqError, OutOfRangeError
from indexedseq.index import DEFAULT_CAPACITY, NodeIndex
from indexedseq.linkedlist import Node, SinglyLinkedList

__version__ = "0.0.1"

__all__ = [
    "IndexedSequence",
    "ValuesView",
    "IndexedSeqError",
    "OutOfRangeError",
    "NodeIndex",
    "DEFAULT_CAPACITY",
    "Node",
    "SinglyLinkedList",
]
