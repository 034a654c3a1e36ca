# sievetools

This package holds a few small tools:

- `BitSet` (in `sievetools.bitset`) is a fixed-size array of bits. Every bit starts cleared. Integer indexing is range-checked.
- `eratosthenes` (in `sievetools.eratosthenes`) runs the sieve of Eratosthenes over a `BitSet`.
- `last_primes` (in `sievetools.primes`) reads the highest set bits out of a sieved `BitSet`.
- `strip_comments` (in `sievetools.no_comment`) removes `//` and `/* */` comments from C-style source. It leaves string and character literals alone.

## Installation

```
pip install .
```

## Command-line use

### sievetools-primes

This command prints the ten largest primes below a limit, one per line, in ascending order. The CPU time taken is written to stderr as `Time=...`. The default limit is 666 000 000.

```
sievetools-primes
sievetools-primes 1000
```

If the limit is not positive, the command prints an error and exits with status 1.

### sievetools-no-comment

This command strips comments from one file and writes the result to stdout. With no argument it reads standard input.

```
sievetools-no-comment source.c
sievetools-no-comment < source.c
```

How comments are handled:

- Each `/* ... */` comment is replaced by a single space.
- A `//` comment is removed up to its newline, and the newline is kept.
- A `//` comment that ends with a backslash continues onto the next line.
- Text inside `"..."` and `'...'` literals is copied unchanged, including escaped quotes.

Input is read and written byte for byte, with no decoding, so any encoding passes through unchanged.

The command prints a line starting with `Error: ` to stderr and exits with status 1 in these cases:

- the input ends inside a comment or a literal;
- the file cannot be opened;
- more than one file is given.

## Library use

```python
from sievetools.bitset import BitSet
from sievetools.eratosthenes import eratosthenes
from sievetools.primes import last_primes
from sievetools.no_comment import strip_comments, UnterminatedError

bits = BitSet(100)
eratosthenes(bits)
print(last_primes(bits, 3))        # [83, 89, 97]

print(strip_comments("int x; /* note */\n"))   # "int x;  \n"
```

### BitSet

- `BitSet(size)` needs a positive size. Otherwise it raises `ValueError`.
- `len(bits)` is the size.
- `bits.fill(value)` sets every bit to `value`.
- `bits[i]` returns a `bool`. `bits[i] = value` sets a single bit.
- An integer index outside `0 .. len(bits) - 1` raises `IndexError`. Negative indices are not accepted.
- Slices follow the usual Python rules. Reading a slice returns a list of `bool`. Assigning to a slice sets every selected bit to the same value.

### eratosthenes and last_primes

After `eratosthenes(bits)` runs, bit *i* is set exactly when *i* is prime, for every *i* ≥ 2. Bits 0 and 1 are left set.

`last_primes(bits, count)` returns, in ascending order, up to `count` of the highest indices above 0 whose bit is set. Because bit 1 stays set, a very small sieve can include `1` in the result.

### Errors

- `strip_comments` raises `UnterminatedError` when the text ends inside a comment or a quoted literal. The exception's `state` attribute gives the state the scanner ended in. Its `output` attribute holds the text produced up to that point.
- `sievetools.errors` provides:
  - `FatalError`, the base error type that the commands report before exiting;
  - `format_error(fmt, *args)`, which builds an `Error: `-prefixed message;
  - `warning(fmt, *args)`, which writes a `Warning: `-prefixed message to stderr.

## Running the tests

```
pip install .[test]
pytest
```