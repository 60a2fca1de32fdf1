from __future__ import annotations

from typing import Protocol

import numpy as np

PERM_SIZE = 512
PERM_MASK = PERM_SIZE // 2 - 1


def fade(t):
    """Quintic fade curve used by Improved Perlin Noise (2002)."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def lerp(t, a, b):
    return a + t * (b - a)


def grad(h: int, offsets, dimensions: int | None = None) -> float:
    """Sign-selected dot product: +offset[i] if bit i of the hash is set.

    Only the first `dimensions` offsets are used when given, so callers can
    pass a reusable buffer sized for the largest supported dimension.
    """

    n = len(offsets) if dimensions is None else int(dimensions)
    result = 0.0
    for i in range(n):
        off = offsets[i]
        result += off if (h >> i) & 1 else -off
    return result


def grad_array(h: np.ndarray, offsets: list[np.ndarray]) -> np.ndarray:
    result = np.zeros(np.shape(h), dtype=np.float64)
    for i, off in enumerate(offsets):
        result += np.where((h >> i) & 1, off, -off)
    return result


def _enumerate_vectors(
    dimensions: int, current: list[int], out: list[tuple[int, ...]]
) -> None:
    if dimensions == 0:
        if any(current):
            out.append(tuple(current))
        return
    pos = len(current) - dimensions
    for c in (-1, 0, 1):
        current[pos] = c
        _enumerate_vectors(dimensions - 1, current, out)


def build_gradients(dimensions: int) -> np.ndarray:
    """All direction vectors over {-1, 0, 1}^d except the zero vector.

    Component 0 varies slowest. The returned table has shape (3^d - 1, d) and
    is read-only so it can be shared between engines.
    """

    dimensions = int(dimensions)
    if dimensions < 1:
        raise ValueError("dimensions must be >= 1")
    vectors: list[tuple[int, ...]] = []
    _enumerate_vectors(dimensions, [0] * dimensions, vectors)
    table = np.array(vectors, dtype=np.float64)
    table.setflags(write=False)
    return table


GRAD2 = build_gradients(2)
GRAD3 = build_gradients(3)
GRAD4 = build_gradients(4)

_GRAD_TABLES = {2: GRAD2, 3: GRAD3, 4: GRAD4}


def gradient_table(dimensions: int) -> np.ndarray:
    table = _GRAD_TABLES.get(int(dimensions))
    if table is None:
        return build_gradients(dimensions)
    return table


class RandomSource(Protocol):
    def next_int(self, bound: int) -> int:  # pragma: no cover
        ...


class JavaLCG:
    """48-bit linear congruential generator (java.util.Random compatible).

    Used for the permutation shuffle so that a seed produces the same lattice
    hash on every platform and in every implementation that follows the same
    generator.
    """

    MULTIPLIER = 0x5DEECE66D
    INCREMENT = 0xB
    MASK = (1 << 48) - 1

    def __init__(self, seed: int):
        self._state = (int(seed) ^ self.MULTIPLIER) & self.MASK

    def next_bits(self, bits: int) -> int:
        self._state = (self._state * self.MULTIPLIER + self.INCREMENT) & self.MASK
        r = self._state >> (48 - bits)
        # Reinterpret as a signed 32-bit value.
        if r >= 1 << 31:
            r -= 1 << 32
        return r

    def next_int32(self) -> int:
        return self.next_bits(32)

    def next_int(self, bound: int) -> int:
        bound = int(bound)
        if bound <= 0:
            raise ValueError("bound must be > 0")

        r = self.next_bits(31)
        m = bound - 1
        if bound & m == 0:
            return (bound * r) >> 31

        u = r
        r = u % bound
        # Reject the tail of the range that would bias small values.
        while u - r + m >= 1 << 31:
            u = self.next_bits(31)
            r = u % bound
        return r


class NumpyRandom:
    def __init__(self, seed: int):
        self._rng = np.random.default_rng(int(seed))

    def next_int(self, bound: int) -> int:
        return int(self._rng.integers(0, int(bound)))


_RNGS = {
    "lcg48": JavaLCG,
    "java": JavaLCG,
    "numpy": NumpyRandom,
}


def make_rng(name: str, seed: int) -> RandomSource:
    name = str(name)
    factory = _RNGS.get(name)
    if factory is None:
        raise ValueError(f"unknown random source: {name}")
    return factory(int(seed))


def build_permutation(seed: int, *, rng: str = "lcg48") -> np.ndarray:
    """Seeded Fisher-Yates shuffle of 0..255, duplicated to 512 entries."""
    source = make_rng(rng, seed)
    p = list(range(PERM_SIZE // 2))
    for i in range(len(p) - 1, 0, -1):
        j = source.next_int(i + 1)
        p[i], p[j] = p[j], p[i]

    perm = np.array(p + p, dtype=np.int32)
    perm.setflags(write=False)
    return perm
