"""Basic usage example for indexedseq."""

from indexedseq import IndexedSequence, OutOfRangeError


def main() -> None:
    """Demonstrate basic sequence operations."""
    seq = IndexedSequence.create()

    print("=== Basic IndexedSequence Example ===\n")

    seq.insert(0, 10)
    seq.insert(1, 20)
    seq.insert(1, 15)
    print(f"After inserts: {seq.format()}")
    print(f"Value at 1: {seq.get(1)}")

    removed = seq.remove_at(0)
    print(f"Removed {removed}: {seq.format()}")
    print(f"Size: {seq.size()}\n")

    # Out-of-range positions raise and leave the sequence alone
    try:
        seq.get(5)
    except OutOfRangeError as e:
        print(f"Lookup failed: {e}")

    for value in seq.traverse():
        print(f"  {value}")


if __name__ == "__main__":
    main()
