"""isogf – isochronous arithmetic over the finite field GF(2^8).

Public API re-exports for convenience:

    from isogf import GF
    from isogf import gf256_add, gf256_sub, gf256_mul, gf256_inv, gf256_pow
"""

from .element import GF
from .gf256 import (
    GF256_ONE,
    GF256_ZERO,
    IRREDUCIBLE_POLY,
    gf256_add,
    gf256_inv,
    gf256_mul,
    gf256_pow,
    gf256_sub,
)

__all__ = [
    # Element type
    "GF",
    # GF(2^8) functions
    "gf256_add",
    "gf256_sub",
    "gf256_mul",
    "gf256_inv",
    "gf256_pow",
    # Constants
    "IRREDUCIBLE_POLY",
    "GF256_ZERO",
    "GF256_ONE",
]
