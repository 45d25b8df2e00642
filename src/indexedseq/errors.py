"""Exception classes for indexedseq."""


class IndexedSeqError(Exception):
    """Base exception for all indexedseq errors."""


class OutOfRangeError(IndexedSeqError, IndexError):
    """Raised when a position falls outside the valid range for an operation."""

    def __init__(self, position: int, size: int, *, inclusive: bool = False) -> None:
        self.position = position
        self.size = size
        upper = "]" if inclusive else ")"
        super().__init__(f"Position {position} out of range [0, {size}{upper}")
