"""The sieve of Eratosthenes over a :class:`BitSet`."""

import math

from .bitset import BitSet

__all__ = ["eratosthenes"]


def eratosthenes(bits: BitSet) -> None:
    """Mark the primes in ``bits``: afterwards bit ``i`` (for ``i >= 2``) is set
    exactly when ``i`` is prime.  Bits 0 and 1 are left set."""
    bits.fill(True)
    size = len(bits)
    for i in range(2, math.isqrt(size) + 1):
        if bits[i]:
            bits[i * i::i] = False