"""Random integers from the OS CSPRNG.

``secrets`` is safe to call from several threads at once.
"""

from __future__ import annotations

import secrets


def randint(high: int) -> int:
    """Return a uniform random integer in [0, *high*)."""
    if high <= 0:
        raise ValueError(f"Upper bound must be positive, got {high}")
    return secrets.randbelow(high)


def randbits(nbits: int) -> int:
    """Return a random integer of exactly *nbits* bits (top bit set)."""
    if nbits < 1:
        raise ValueError(f"Bit length must be positive, got {nbits}")
    high = 1 << (nbits - 1)
    return high + secrets.randbelow(high)
