from __future__ import annotations
import math
from decimal import Decimal
from typing import Callable, Iterable, NamedTuple


class PathPoint(NamedTuple):
    x: float
    y: float


def format_number(value: float) -> str:
    """Formats a number the way a browser prints it in an SVG path string.

    Integral values have no decimal part, exponent notation is only used
    below 1e-6 and from 1e21 upwards, and non-finite values are written as
    NaN, Infinity and -Infinity.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k
    prefix = "-" if sign else ""
    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * (-n) + digits
    e = n - 1
    e_text = f"e{'+' if e >= 0 else '-'}{abs(e)}"
    if k == 1:
        return prefix + digits + e_text
    return prefix + digits[0] + "." + digits[1:] + e_text


class PathBuilder:
    """Accumulates SVG path commands (M, L, C, Z)."""

    def __init__(self):
        self._parts: list[str] = []
        self._x0 = self._y0 = None
        self._x1 = self._y1 = None

    def move_to(self, x: float, y: float) -> PathBuilder:
        self._x0 = self._x1 = x
        self._y0 = self._y1 = y
        self._parts.append(f"M{format_number(x)},{format_number(y)}")
        return self

    def line_to(self, x: float, y: float) -> PathBuilder:
        self._x1, self._y1 = x, y
        self._parts.append(f"L{format_number(x)},{format_number(y)}")
        return self

    def bezier_curve_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> PathBuilder:
        self._x1, self._y1 = x, y
        coords = ",".join(format_number(v) for v in (x1, y1, x2, y2, x, y))
        self._parts.append(f"C{coords}")
        return self

    def close_path(self) -> PathBuilder:
        if self._x1 is not None:
            self._x1, self._y1 = self._x0, self._y0
            self._parts.append("Z")
        return self

    def __str__(self) -> str:
        return "".join(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)


def _divide(num: float, den: float) -> float:
    """IEEE division: x/0 is a signed infinity and 0/0 is NaN."""
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def _sign(x: float) -> int:
    return -1 if x < 0 else 1


def _nonzero_or_signed_zero(h: float, other: float) -> float:
    if h != 0 and not math.isnan(h):
        return h
    return -0.0 if other < 0 else 0.0


class MonotoneX:
    """Cubic Bezier smoothing that preserves monotonicity in y.

    Tangents follow Steffen's method (A Simple Method for Monotonic
    Interpolation in One Dimension, 1990), assuming x is monotonic.
    """

    def __init__(self, context: PathBuilder):
        self._context = context
        self.line_start()

    def line_start(self) -> None:
        self._x0 = self._x1 = self._y0 = self._y1 = self._t0 = math.nan
        self._point = 0

    def line_end(self) -> None:
        if self._point == 2:
            self._context.line_to(self._x1, self._y1)
        elif self._point == 3:
            self._segment(self._t0, self._slope2(self._t0))
        if self._point == 1:
            self._context.close_path()

    def point(self, x: float, y: float) -> None:
        x, y = float(x), float(y)
        t1 = math.nan
        if x == self._x1 and y == self._y1:
            return
        if self._point == 0:
            self._point = 1
            self._context.move_to(x, y)
        elif self._point == 1:
            self._point = 2
        elif self._point == 2:
            self._point = 3
            t1 = self._slope3(x, y)
            self._segment(self._slope2(t1), t1)
        else:
            t1 = self._slope3(x, y)
            self._segment(self._t0, t1)
        self._x0, self._x1 = self._x1, x
        self._y0, self._y1 = self._y1, y
        self._t0 = t1

    def _slope3(self, x2: float, y2: float) -> float:
        h0 = self._x1 - self._x0
        h1 = x2 - self._x1
        s0 = _divide(self._y1 - self._y0, _nonzero_or_signed_zero(h0, h1))
        s1 = _divide(y2 - self._y1, _nonzero_or_signed_zero(h1, h0))
        p = _divide(s0 * h1 + s1 * h0, h0 + h1)
        if math.isnan(s0) or math.isnan(s1) or math.isnan(p):
            return 0.0
        t = (_sign(s0) + _sign(s1)) * min(abs(s0), abs(s1), 0.5 * abs(p))
        return 0.0 if math.isnan(t) else t

    def _slope2(self, t: float) -> float:
        h = self._x1 - self._x0
        if h == 0 or math.isnan(h):
            return t
        return (3 * (self._y1 - self._y0) / h - t) / 2

    def _segment(self, t0: float, t1: float) -> None:
        x0, y0, x1, y1 = self._x0, self._y0, self._x1, self._y1
        dx = (x1 - x0) / 3
        self._context.bezier_curve_to(x0 + dx, y0 + dx * t0, x1 - dx, y1 - dx * t1, x1, y1)


def line_path(points: Iterable[PathPoint],
              x: Callable[[float], float],
              y: Callable[[float], float]) -> str | None:
    """Returns a monotone-X smoothed SVG path through the points.

    Parameters
    ----------
    points : Iterable[PathPoint]
        Data points, ordered by x
    x : Callable[[float], float]
        Maps a data x value to a pixel offset
    y : Callable[[float], float]
        Maps a data y value to a pixel offset

    Returns
    -------
    str | None
        The path string, or None when there are no points
    """
    context = PathBuilder()
    curve = MonotoneX(context)
    for p in points:
        curve.point(x(p.x), y(p.y))
    curve.line_end()
    return str(context) or None
