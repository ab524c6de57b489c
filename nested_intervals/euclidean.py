"""
Extended Euclidean Algorithm

Given integers a and m, iteratively computes:

- coefficients s and t satisfying Bezout's identity: gcd(a, m) == s*a + t*m
- the greatest common divisor gcd(a, m)
- the modular multiplicative inverse of a modulo m, if it exists

A gcd other than 1 is an ordinary outcome, not an error: the inverse is
simply None.
"""

from __future__ import annotations
from typing import NamedTuple, Optional


class EuclideanResult(NamedTuple):
    s: int
    t: int
    gcd: int
    inverse: Optional[int]

    @property
    def coprime(self) -> bool:
        return abs(self.gcd) == 1


def extended_euclidean(a: int, m: int) -> EuclideanResult:
    """
    Run the extended Euclidean algorithm on (a, m).
    
    Division and remainder are floored (divmod), matching the sign
    conventions the tree encoding relies on.
    
    Args:
        a: First integer
        m: Second integer (the modulus for the inverse)
        
    Returns:
        EuclideanResult(s, t, gcd, inverse)
    """
    r0, r1 = a, m
    s, t = 1, 0
    while r1 != 0:
        q, r2 = divmod(r0, r1)
        r0, r1 = r1, r2
        s, t = t, s - q * t
    gcd = r0
    # Bezout's identity gives t exactly
    t = (gcd - s * a) // m if m != 0 else 0
    inverse = None
    if abs(gcd) == 1 and m != 0:
        inverse = (s * gcd) % abs(m)
    return EuclideanResult(s, t, gcd, inverse)


def modular_inverse(a: int, m: int) -> Optional[int]:
    """Inverse of a modulo m in [0, m), or None when gcd(a, m) != 1."""
    return extended_euclidean(a, m).inverse


__all__ = [
    'EuclideanResult',
    'extended_euclidean',
    'modular_inverse',
]
