"""A bit array, a sieve of Eratosthenes and a C comment stripper."""

__version__ = "0.1.0"
__all__ = ["bitset", "eratosthenes", "errors", "no_comment", "primes"]