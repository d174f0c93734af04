"""Immutable GF(2^8) element type with operator syntax.

:class:`GF` wraps a single byte and forwards arithmetic to the functions
in :mod:`isogf.gf256`::

    GF(5) + GF(12)                  # GF(0x09)
    GF(32) - GF(219)                # GF(0xfb)
    GF(175) * GF(47)                # GF(0x53)
    GF(110).multiplicative_inverse()  # GF(0x21)

Elements are never mutated.  Augmented assignment (``x *= GF(3)``) binds
the name to a new element.  Ordering compares the underlying byte only and
has no meaning for the field arithmetic; it exists so elements can be
sorted and used as keys.
"""

from dataclasses import dataclass

from .gf256 import gf256_add, gf256_inv, gf256_mul, gf256_pow, gf256_sub


def _check_byte(value, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in the range 0..255, got {value}")


@dataclass(frozen=True, order=True)
class GF:
    """An element of GF(2^8).

    Attributes:
        value: The byte representing the element, bit i holding the
               coefficient of x^i.

    A GF can be used wherever Python expects an integer index, so
    sequence repetition still applies: ``GF(2) * "ab"`` gives ``"abab"``
    rather than a ``TypeError``.

    Raises:
        TypeError:  If *value* is not an ``int``.
        ValueError: If *value* is outside 0..255.
    """

    value: int

    def __post_init__(self) -> None:
        _check_byte(self.value, "value")

    def __repr__(self) -> str:
        return f"GF({self.value:#04x})"

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __add__(self, other):
        if not isinstance(other, GF):
            return NotImplemented
        return GF(gf256_add(self.value, other.value))

    def __sub__(self, other):
        if not isinstance(other, GF):
            return NotImplemented
        return GF(gf256_sub(self.value, other.value))

    def __mul__(self, other):
        if not isinstance(other, GF):
            return NotImplemented
        return GF(gf256_mul(self.value, other.value))

    def __pow__(self, exponent: int) -> "GF":
        """Raise the element to an integer power in 0..255.

        Raises:
            TypeError:  If *exponent* is not an ``int``.
            ValueError: If *exponent* is outside 0..255.
        """
        _check_byte(exponent, "exponent")
        return GF(gf256_pow(self.value, exponent))

    def multiplicative_inverse(self) -> "GF":
        """Return the element whose product with this one is ``GF(1)``.

        The lookup always examines all 256 candidates, whatever the value,
        so it is slow but takes the same path for every input.  ``GF(0)``
        has no inverse and returns ``GF(0)``.
        """
        return GF(gf256_inv(self.value))
