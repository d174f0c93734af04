"""GF(2^8) arithmetic without data-dependent branches or table lookups.

Elements are integers in [0, 255] where bit i is the coefficient of x^i.

The field uses the irreducible polynomial standardized for AES in FIPS 197:
    f(x) = x^8 + x^4 + x^3 + x + 1    (0x11B)

Every operation runs a fixed sequence of steps for every operand value.
Conditional work is expressed by ANDing with a mask produced by
:func:`_extend_bit` (0x00 or 0xFF) rather than with ``if``, ternaries,
short-circuit boolean logic or indexing by operand data.
"""

# x^8 + x^4 + x^3 + x + 1
IRREDUCIBLE_POLY = 0x11B

# Reduction constant: the modulus with the x^8 term eliminated.
_REDUCTION = IRREDUCIBLE_POLY & 0xFF

GF256_ZERO = 0x00
GF256_ONE = 0x01


def _extend_bit(bit: int) -> int:
    """Extend the rightmost bit of *bit* across a full byte.

    The low bit is moved into the sign position of an 8-bit word, the word
    is reinterpreted as signed and shifted arithmetically back down, so the
    result is 0xFF when the bit is set and 0x00 otherwise.
    """
    signed = (((bit & 1) << 7) ^ 0x80) - 0x80
    return (signed >> 7) & 0xFF


def gf256_add(a: int, b: int) -> int:
    """Add two GF(2^8) elements (bitwise XOR)."""
    return a ^ b


def gf256_sub(a: int, b: int) -> int:
    """Subtract two GF(2^8) elements.

    Every element is its own additive inverse, so this is the same XOR
    as :func:`gf256_add`.
    """
    return gf256_add(a, b)


def gf256_mul(a: int, b: int) -> int:
    """Multiply two GF(2^8) elements modulo x^8 + x^4 + x^3 + x + 1.

    Carry-less shift-and-add over the eight bits of *b*, reducing *a* each
    time its x^7 coefficient is shifted out.  The loop always runs eight
    times and both the conditional add and the conditional reduction are
    mask operations.

    Args:
        a: First GF(2^8) element as an integer in [0, 255].
        b: Second GF(2^8) element as an integer in [0, 255].

    Returns:
        The product a * b in GF(2^8).
    """
    p = 0
    for _ in range(8):
        # Add a into p when the low bit of b is set.
        p ^= _extend_bit(b & 1) & a
        b >>= 1

        # Coefficient of x^7 before a is multiplied by x.
        carry = (a >> 7) & 1
        a = (a << 1) & 0xFF

        # x^8 == x^4 + x^3 + x + 1 (mod f)
        a ^= _extend_bit(carry) & _REDUCTION
    return p


def gf256_inv(a: int) -> int:
    """Compute the multiplicative inverse of a GF(2^8) element.

    Every one of the 256 byte values is tried as a candidate and the one
    whose product with *a* equals 1 is accumulated into the result through
    a mask.  The search is never cut short when the inverse is found: the
    cost is always 256 multiplications (2048 inner reduction steps), the
    same for every input, trading speed for a uniform execution profile.

    Zero has no multiplicative inverse.  No candidate matches it, so
    ``gf256_inv(0)`` returns 0 by convention instead of raising.

    Args:
        a: A GF(2^8) element as an integer in [0, 255].

    Returns:
        The element y with a * y == 1, or 0 when *a* is 0.
    """
    p = 0
    for x in range(256):
        # Zero exactly when a * x == 1.
        y = gf256_mul(a, x) ^ GF256_ONE

        # Fold all eight bits of y into bit 0.
        folded = y | y >> 1 | y >> 2 | y >> 3 | y >> 4 | y >> 5 | y >> 6 | y >> 7

        # The inverted mask is 0xFF only for the matching candidate.
        p ^= (_extend_bit(folded) ^ 0xFF) & x
    return p


def gf256_pow(base: int, exponent: int) -> int:
    """Compute base^exponent in GF(2^8) using square-and-multiply.

    All eight bits of *exponent* are processed from the most significant
    down.  Each step squares the accumulator, computes the product with
    *base* unconditionally, and keeps either value through a mask, so the
    cost is 16 multiplications for every input.

    Args:
        base:     A GF(2^8) element.
        exponent: Exponent in [0, 255].  Only the low eight bits are read;
                  higher bits are ignored, so 256 behaves like 0.

    Returns:
        base^exponent in GF(2^8).  Returns GF256_ONE when exponent == 0,
        including for a zero base.
    """
    result = GF256_ONE
    for i in range(7, -1, -1):
        result = gf256_mul(result, result)
        product = gf256_mul(result, base)
        mask = _extend_bit(exponent >> i)
        result = (product & mask) | (result & (mask ^ 0xFF))
    return result
