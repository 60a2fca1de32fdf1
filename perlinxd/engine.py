from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from .core import (
    PERM_MASK,
    build_permutation,
    fade,
    grad,
    grad_array,
    gradient_table,
    lerp,
)

logger = logging.getLogger(__name__)

MIN_DIMENSIONS = 2
MAX_DIMENSIONS = 4
MAX_CORNERS = 1 << MAX_DIMENSIONS


class InvalidDimensionError(ValueError):
    """Raised when an engine is built for an unsupported number of axes."""


@dataclass(frozen=True)
class CornerND:
    index: int
    hash: int
    offset: tuple[float, ...]
    value: float


class PerlinND:
    """Gradient noise over 2, 3 or 4 axes with one dimension-generic algorithm.

    Each of the 2^d hypercube corners around a sample is hashed by chaining
    permutation lookups axis by axis, turned into a corner value by a dot
    product with the offset to the sample, and the corners are collapsed back
    to one value by fade-weighted lerps, axis 0 first.

    The scalar `noise` path reuses per-instance buffers, so an instance must
    not be shared between threads.
    """

    def __init__(
        self,
        *,
        seed: int = 0,
        dimensions: int = 3,
        grad_set: str = "sign",
        rng: str = "lcg48",
    ):
        dimensions = int(dimensions)
        if dimensions < MIN_DIMENSIONS or dimensions > MAX_DIMENSIONS:
            raise InvalidDimensionError(
                f"dimensions must be between {MIN_DIMENSIONS} and "
                f"{MAX_DIMENSIONS}, got {dimensions}"
            )

        self.seed = int(seed)
        self.dimensions = dimensions
        self.rng = str(rng)
        self.perm = build_permutation(self.seed, rng=self.rng)
        self._p = self.perm.tolist()

        self.grad_set = str(grad_set)
        if self.grad_set == "sign":
            self.grad_table = None
            self._grad_rows: list[tuple[float, ...]] = []
        elif self.grad_set == "lattice":
            self.grad_table = gradient_table(self.dimensions)
            self._grad_rows = [tuple(row) for row in self.grad_table.tolist()]
        else:
            raise ValueError(f"unknown gradient set: {self.grad_set}")

        self._cell = [0] * MAX_DIMENSIONS
        self._rel = [0.0] * MAX_DIMENSIONS
        self._fades = [0.0] * MAX_DIMENSIONS
        self._offsets = [0.0] * MAX_DIMENSIONS
        self._values = [0.0] * MAX_CORNERS

        logger.debug(
            "PerlinND ready: seed=%d dimensions=%d grad_set=%s rng=%s",
            self.seed,
            self.dimensions,
            self.grad_set,
            self.rng,
        )

    def _check_arity(self, coords: tuple) -> None:
        if len(coords) != self.dimensions:
            raise ValueError(
                f"expected {self.dimensions} coordinates, got {len(coords)}"
            )

    @staticmethod
    def _check_finite(x: float) -> None:
        if not math.isfinite(x):
            raise ValueError(f"coordinates must be finite, got {x!r}")

    def _corner_value(self, h: int, offsets: list[float]) -> float:
        d = self.dimensions
        if self.grad_table is None:
            return grad(h, offsets, d)
        g = self._grad_rows[h % len(self._grad_rows)]
        result = 0.0
        for i in range(d):
            result += g[i] * offsets[i]
        return result

    def noise(self, *coords: float) -> float:
        self._check_arity(coords)
        d = self.dimensions
        p = self._p
        cell = self._cell
        rel = self._rel
        fades = self._fades
        offsets = self._offsets
        values = self._values

        for i in range(d):
            x = float(coords[i])
            self._check_finite(x)
            fx = math.floor(x)
            cell[i] = fx & PERM_MASK
            rel[i] = x - fx
            fades[i] = fade(rel[i])

        n = 1 << d
        for c in range(n):
            h = 0
            for j in range(d):
                if (c >> j) & 1:
                    h = p[(h + cell[j] + 1) & PERM_MASK]
                    offsets[j] = rel[j] - 1.0
                else:
                    h = p[(h + cell[j]) & PERM_MASK]
                    offsets[j] = rel[j]
            values[c] = self._corner_value(h, offsets)

        # Collapse in place: pairs differing in bit `axis` sit next to each
        # other once the lower axes are reduced.
        for axis in range(d):
            n >>= 1
            t = fades[axis]
            for k in range(n):
                values[k] = lerp(t, values[2 * k], values[2 * k + 1])
        return values[0]

    def noise_array(self, *coords: np.ndarray) -> np.ndarray:
        self._check_arity(coords)
        axes = np.broadcast_arrays(*[np.asarray(c, dtype=np.float64) for c in coords])

        cells = []
        rels = []
        fades = []
        for x in axes:
            if not np.isfinite(x).all():
                raise ValueError("coordinates must be finite")
            fx = np.floor(x)
            # Wrap before the int cast; floats past 2**63 do not fit int64.
            cells.append(np.mod(fx, PERM_MASK + 1.0).astype(np.int64))
            rel = x - fx
            rels.append(rel)
            fades.append(fade(rel))

        p = self.perm
        values = []
        for c in range(1 << self.dimensions):
            h = np.zeros(axes[0].shape, dtype=np.int64)
            offsets = []
            for j in range(self.dimensions):
                bit = (c >> j) & 1
                h = p[(h + cells[j] + bit) & PERM_MASK]
                offsets.append(rels[j] - 1.0 if bit else rels[j])
            if self.grad_table is None:
                values.append(grad_array(h, offsets))
            else:
                g = self.grad_table[h % self.grad_table.shape[0]]
                total = np.zeros(axes[0].shape, dtype=np.float64)
                for i, off in enumerate(offsets):
                    total += g[..., i] * off
                values.append(total)

        for t in fades:
            values = [
                lerp(t, values[2 * k], values[2 * k + 1])
                for k in range(len(values) // 2)
            ]
        return values[0]

    def debug_point(self, *coords: float) -> dict:
        # Scalar breakdown for teaching/inspection.
        self._check_arity(coords)
        d = self.dimensions
        xs = [float(c) for c in coords]
        for x in xs:
            self._check_finite(x)
        cell = [math.floor(x) & PERM_MASK for x in xs]
        rel = [x - math.floor(x) for x in xs]
        fades = [fade(r) for r in rel]

        corners = []
        for c in range(1 << d):
            h = 0
            offsets = []
            for j in range(d):
                bit = (c >> j) & 1
                h = self._p[(h + cell[j] + bit) & PERM_MASK]
                offsets.append(rel[j] - 1.0 if bit else rel[j])
            corners.append(
                CornerND(
                    index=c,
                    hash=h,
                    offset=tuple(offsets),
                    value=self._corner_value(h, offsets),
                )
            )

        levels = []
        values = [corner.value for corner in corners]
        for axis in range(d):
            values = [
                lerp(fades[axis], values[2 * k], values[2 * k + 1])
                for k in range(len(values) // 2)
            ]
            levels.append(list(values))

        return {
            "seed": self.seed,
            "dimensions": d,
            "input": xs,
            "cell": cell,
            "relative": rel,
            "fade": fades,
            "corners": [corner.__dict__ for corner in corners],
            "interpolation": levels,
            "noise": values[0],
        }
