"""Print the largest primes below a limit, found with the sieve of Eratosthenes."""

import argparse
import sys
import time

from .bitset import BitSet
from .eratosthenes import eratosthenes
from .errors import format_error

__all__ = ["last_primes", "main"]

DEFAULT_LIMIT = 666_000_000
PRINT_COUNT = 10


def last_primes(bits: BitSet, count: int) -> list[int]:
    """Return, in ascending order, the ``count`` highest positive indices whose
    bit is set in a sieved ``bits`` (fewer if there are not that many)."""
    found = []
    for index in range(len(bits) - 1, 0, -1):
        if len(found) >= count:
            break
        if bits[index]:
            found.append(index)
    found.reverse()
    return found


def main(argv=None) -> int:
    """Sieve up to the limit and print the last primes below it, one per line."""
    parser = argparse.ArgumentParser(
        prog="primes", description="Print the largest primes below a limit."
    )
    parser.add_argument(
        "limit", nargs="?", type=int, default=DEFAULT_LIMIT,
        help=f"size of the sieve (default {DEFAULT_LIMIT})",
    )
    args = parser.parse_args(argv)

    start = time.process_time()
    try:
        bits = BitSet(args.limit)
    except ValueError as exc:
        print(format_error("%s", exc), file=sys.stderr)
        return 1
    eratosthenes(bits)
    for prime in last_primes(bits, PRINT_COUNT):
        print(prime)
    print("Time=%.3g" % (time.process_time() - start), file=sys.stderr)
    return 0