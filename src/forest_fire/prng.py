"""Seedable deterministic pseudo-random number generator.

The seed string is hashed with cyrb128 into four 32-bit words which seed an
sfc32 generator. All arithmetic wraps at 32 bits, so a given seed yields the
same sequence on every platform.
"""

from __future__ import annotations

MASK_32 = 0xFFFFFFFF
TWO_POW_32 = 4294967296


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiplication."""
    return (a * b) & MASK_32


def _code_units(text: str) -> list[int]:
    """UTF-16 code units of a string (surrogate pairs for non-BMP characters)."""
    raw = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)]


def cyrb128(text: str) -> tuple[int, int, int, int]:
    """Hash a string into four unsigned 32-bit words."""
    h1, h2, h3, h4 = 1779033703, 3144134277, 1013904242, 2773480762

    for k in _code_units(text):
        h1 = h2 ^ _imul(h1 ^ k, 597399067)
        h2 = h3 ^ _imul(h2 ^ k, 2869860233)
        h3 = h4 ^ _imul(h3 ^ k, 951274213)
        h4 = h1 ^ _imul(h4 ^ k, 2716044179)

    h1 = _imul(h3 ^ (h1 >> 18), 597399067)
    h2 = _imul(h4 ^ (h2 >> 22), 2869860233)
    h3 = _imul(h1 ^ (h3 >> 17), 951274213)
    h4 = _imul(h2 ^ (h4 >> 19), 2716044179)

    return (h1 ^ h2 ^ h3 ^ h4), (h2 ^ h1), (h3 ^ h1), (h4 ^ h1)


class SeededRandom:
    """sfc32 generator seeded from an arbitrary string.

    Attributes:
        seed: The seed string the generator was built from.
    """

    def __init__(self, seed: str):
        self.seed = seed
        self._a, self._b, self._c, self._d = cyrb128(seed)

    def next_u32(self) -> int:
        """Advance the generator and return the next unsigned 32-bit word."""
        a, b, c, d = self._a, self._b, self._c, self._d

        t = (a + b + d) & MASK_32
        d = (d + 1) & MASK_32
        a = b ^ (b >> 9)
        b = (c + (c << 3)) & MASK_32
        c = ((c << 21) | (c >> 11)) & MASK_32
        c = (c + t) & MASK_32

        self._a, self._b, self._c, self._d = a, b, c, d
        return t

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return self.next_u32() / TWO_POW_32

    def next_int(self, max_value: int) -> int:
        """Uniform integer in [0, max_value)."""
        return int(self.random() * max_value)

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed!r})"
