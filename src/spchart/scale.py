from __future__ import annotations
from typing import Sequence

import numpy as np


def _interpolate(a: float, b: float, t: np.ndarray) -> np.ndarray:
    return a * (1 - t) + b * t


def _normalize(a: float, b: float, x: np.ndarray) -> np.ndarray:
    """Maps x from [a, b] onto [0, 1]. A zero width interval maps to 0.5."""
    span = b - a
    if np.isnan(span):
        return np.full_like(x, np.nan)
    if span == 0:
        return np.full_like(x, 0.5)
    with np.errstate(invalid="ignore"):
        return (x - a) / span


class LinearScale:

    def __init__(self, domain: Sequence[float], range: Sequence[float], clamp: bool = False):
        """A linear mapping from a data interval onto a pixel interval.

        Parameters
        ----------
        domain : Sequence[float]
            The (start, stop) data values
        range : Sequence[float]
            The (start, stop) pixel values. stop may be smaller than start for
            an inverted axis.
        clamp : bool, optional
            Restrict the output to the range, by default False
        """
        d0, d1 = domain
        r0, r1 = range
        self._domain: tuple[float, float] = (float(d0), float(d1))
        self._range: tuple[float, float] = (float(r0), float(r1))
        self.clamp: bool = clamp

    @property
    def domain(self) -> tuple[float, float]:
        return self._domain

    @property
    def range(self) -> tuple[float, float]:
        return self._range

    def __repr__(self) -> str:
        return f"LinearScale(domain={self._domain}, range={self._range}, clamp={self.clamp})"

    def _map(self, value, source: tuple[float, float], target: tuple[float, float]):
        x = np.asarray(value, dtype=np.float64)
        t = _normalize(source[0], source[1], x)
        if self.clamp:
            t = np.clip(t, 0.0, 1.0)
        with np.errstate(invalid="ignore"):
            out = _interpolate(target[0], target[1], t)
        if out.ndim == 0:
            return float(out)
        return out

    def __call__(self, value: float | np.ndarray) -> float | np.ndarray:
        """Maps data value(s) to pixel offset(s)."""
        return self._map(value, self._domain, self._range)

    def invert(self, pixel: float | np.ndarray) -> float | np.ndarray:
        """Maps pixel offset(s) back to data value(s)."""
        return self._map(pixel, self._range, self._domain)
