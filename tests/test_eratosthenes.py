import pytest

from sievetools.bitset import BitSet
from sievetools.eratosthenes import eratosthenes


def _is_prime_by_trial_division(n):
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


@pytest.mark.parametrize("size", [2, 3, 4, 25, 26, 97, 200, 1000])
def test_sieve_matches_trial_division(size):
    bits = BitSet(size)
    eratosthenes(bits)
    assert [bits[i] for i in range(2, size)] == [
        _is_prime_by_trial_division(i) for i in range(2, size)
    ]


def test_first_two_bits_remain_set():
    bits = BitSet(50)
    eratosthenes(bits)
    assert bits[0] is True
    assert bits[1] is True


def test_sieve_resets_previous_contents():
    bits = BitSet(30)
    bits.fill(False)
    eratosthenes(bits)
    assert bits[29] is True
    assert bits[28] is False


def test_size_one():
    bits = BitSet(1)
    eratosthenes(bits)
    assert bits[:] == [True]