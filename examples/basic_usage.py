#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
isogf: Usage Example
--------------------
This script demonstrates the core capabilities of the isogf library:
1. Element Arithmetic: addition, subtraction and multiplication with operators.
2. Inversion: the fixed-cost multiplicative inverse, including the GF(0) convention.
3. Functional API: the same operations on plain integers.
4. Downstream Use: deriving the AES S-box (FIPS 197, Section 5.1.1).

Usage:
    python3 examples/basic_usage.py
"""

from isogf import GF, gf256_inv, gf256_mul

# --- Helpers ---
def rotl8(x, shift):
    return ((x << shift) | (x >> (8 - shift))) & 0xFF

def aes_sbox(byte):
    """Multiplicative inverse followed by the AES affine transformation."""
    s = gf256_inv(byte)
    return s ^ rotl8(s, 1) ^ rotl8(s, 2) ^ rotl8(s, 3) ^ rotl8(s, 4) ^ 0x63

def main():
    print("--- 1. Element Arithmetic ---")
    print(f"  GF(5) + GF(12)   = {GF(5) + GF(12)!r}")
    print(f"  GF(32) - GF(219) = {GF(32) - GF(219)!r}")
    print(f"  GF(175) * GF(47) = {GF(175) * GF(47)!r}")

    x = GF(0x57)
    x *= GF(0x83)
    print(f"  GF(0x57) *= GF(0x83) -> {x!r}")

    print("\n--- 2. Inversion ---")
    element = GF(110)
    inverse = element.multiplicative_inverse()
    print(f"  inverse of {element!r} = {inverse!r}, product = {element * inverse!r}")
    print(f"  inverse of GF(0) = {GF(0).multiplicative_inverse()!r} (by convention)")

    print("\n--- 3. Functional API ---")
    print(f"  gf256_mul(0x53, 0xCA) = {gf256_mul(0x53, 0xCA):#04x}")
    print(f"  gf256_inv(0x02)       = {gf256_inv(0x02):#04x}")

    print("\n--- 4. AES S-box ---")
    sbox = [aes_sbox(b) for b in range(256)]
    for row in range(16):
        print("  " + " ".join(f"{v:02x}" for v in sbox[row * 16:(row + 1) * 16]))
    assert sbox[0x00] == 0x63 and sbox[0x53] == 0xED

if __name__ == "__main__":
    main()
