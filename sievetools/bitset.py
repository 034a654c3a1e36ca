"""A fixed-size array of bits with range-checked access."""

import operator

__all__ = ["BitSet"]


class BitSet:
    """A fixed number of bits, all cleared on creation.

    Integer indices must lie in ``0..len-1``; anything else raises
    :class:`IndexError`.  Slices follow the usual Python rules, and assigning
    to a slice sets every bit it selects to the same value.
    """

    __slots__ = ("_size", "_bits")

    def __init__(self, size):
        size = operator.index(size)
        if size <= 0:
            raise ValueError(f"bit set size must be positive, got {size}")
        self._size = size
        self._bits = bytearray(size)

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"{type(self).__name__}({self._size})"

    def fill(self, value):
        """Set every bit to ``value``."""
        if value:
            self._bits = bytearray(b"\x01") * self._size
        else:
            self._bits = bytearray(self._size)

    def _checked(self, index, operation):
        index = operator.index(index)
        if not 0 <= index < self._size:
            raise IndexError(
                f"{operation}: index {index} out of range 0..{self._size - 1}"
            )
        return index

    def __setitem__(self, index, value):
        byte = 1 if value else 0
        if isinstance(index, slice):
            count = len(range(*index.indices(self._size)))
            self._bits[index] = bytes((byte,)) * count
        else:
            self._bits[self._checked(index, "setbit")] = byte

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [bool(bit) for bit in self._bits[index]]
        return bool(self._bits[self._checked(index, "getbit")])