from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from numbers import Number
from typing import Any, Mapping, NamedTuple, Sequence

import numpy as np
from loguru import logger

from .errors import MalformedSeries, UnknownQuantity
from .units import FrequencyUnit, normalize_freq


class ComplexSample(NamedTuple):
    """One measured S-parameter point (real + imag*j)."""
    re: float
    im: float

    def to_complex(self) -> complex:
        return complex(self.re, self.im)


class Quantity(Enum):
    RE = "re"
    IM = "im"
    MAG = "mag"
    DB = "db"
    ANGLE = "angle"
    DEG = "deg"

    @classmethod
    def parse(cls, key: str | Quantity) -> Quantity:
        """Looks up a quantity by name, e.g. 'db', 'DB' or the chart key 'sDb'."""
        if isinstance(key, cls):
            return key
        if isinstance(key, str):
            name = key.strip().lower()
            if name.startswith("s") and name[1:] in _QUANTITY_NAMES:
                name = name[1:]
            if name in _QUANTITY_NAMES:
                return cls(name)
        logger.error(f"Plot quantity {key!r} is not one of {', '.join(sorted(_QUANTITY_NAMES))}")
        raise UnknownQuantity(key)


_QUANTITY_NAMES = frozenset(q.value for q in Quantity)


def _malformed(reason: str) -> MalformedSeries:
    logger.error(f"Malformed series: {reason}")
    return MalformedSeries(None, reason)


def _sample_to_complex(sample: Any) -> complex:
    try:
        if isinstance(sample, ComplexSample):
            return complex(float(sample.re), float(sample.im))
        if isinstance(sample, Mapping):
            return complex(float(sample["re"]), float(sample["im"]))
        if isinstance(sample, (tuple, list)) and len(sample) == 2:
            return complex(float(sample[0]), float(sample[1]))
        if isinstance(sample, Number):
            return complex(sample)
    except KeyError as exc:
        raise _malformed(f"sample {sample!r} is missing {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise _malformed(f"cannot interpret {sample!r} as a complex sample") from exc
    raise _malformed(f"cannot interpret {sample!r} as a complex sample")


def as_complex_array(samples: Sequence[Any] | np.ndarray) -> np.ndarray:
    """Converts a sequence of samples into a 1D complex128 array.

    Samples may be ComplexSample tuples, (re, im) pairs, mappings with 're'
    and 'im' keys, or plain (complex) numbers.
    """
    if isinstance(samples, np.ndarray) and samples.dtype.kind in "biufc":
        values = samples.astype(np.complex128)
    else:
        values = np.array([_sample_to_complex(s) for s in samples], dtype=np.complex128)
    if values.ndim != 1:
        raise _malformed(f"samples must be one dimensional, got shape {values.shape}")
    return values


@dataclass(frozen=True, eq=False)
class SComponents:
    """Derived scalar representations of a sequence of complex samples."""
    re: np.ndarray
    im: np.ndarray
    mag: np.ndarray
    db: np.ndarray
    angle: np.ndarray
    deg: np.ndarray

    def __len__(self) -> int:
        return len(self.re)

    def get(self, quantity: str | Quantity) -> np.ndarray:
        """Returns the array for the selected quantity."""
        return getattr(self, Quantity.parse(quantity).value)


@dataclass(frozen=True, eq=False)
class DecoratedSeries(SComponents):
    """All derived components plus the frequency axis in the plot unit."""
    freq: np.ndarray
    unit: FrequencyUnit


def get_s_components(samples: Sequence[Any] | np.ndarray) -> SComponents:
    """Decomposes complex samples into real, imaginary, magnitude, dB and phase.

    Parameters
    ----------
    samples : Sequence | np.ndarray
        Complex samples, see as_complex_array for the accepted shapes

    Returns
    -------
    SComponents
        Arrays in the same order and of the same length as the input. The dB
        value of a zero magnitude sample is -inf.
    """
    s = as_complex_array(samples)
    re = s.real.copy()
    im = s.imag.copy()
    mag = np.sqrt(re * re + im * im)
    with np.errstate(divide="ignore", invalid="ignore"):
        db = 20 * np.log10(mag)
    angle = np.arctan2(im, re)
    deg = angle * 180 / np.pi
    return SComponents(re=re, im=im, mag=mag, db=db, angle=angle, deg=deg)


class Series:

    def __init__(self, freq: Sequence[float] | np.ndarray,
                 s: Sequence[Any] | np.ndarray,
                 unit: str | FrequencyUnit = FrequencyUnit.HZ):
        """A measured S-parameter trace.

        Parameters
        ----------
        freq : Sequence[float] | np.ndarray
            Frequency of every sample, expressed in unit
        s : Sequence | np.ndarray
            Complex samples, one per frequency
        unit : str | FrequencyUnit
            Unit tag of the frequency values
        """
        try:
            self.freq: np.ndarray = np.asarray(freq, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise _malformed(f"frequencies are not numeric ({exc})") from exc
        self.s: np.ndarray = as_complex_array(s)
        self.unit: FrequencyUnit = FrequencyUnit.parse(unit)
        if self.freq.ndim != 1:
            raise _malformed(f"frequencies must be one dimensional, got shape {self.freq.shape}")
        if len(self.freq) != len(self.s):
            raise _malformed(f"{len(self.freq)} frequencies but {len(self.s)} samples")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Series:
        """Builds a series from a {'freq': [...], 's': [...], 'unit': 'GHZ'} mapping."""
        missing = [key for key in ("freq", "s") if key not in data]
        if missing:
            raise _malformed(f"missing field(s) {', '.join(missing)}")
        return cls(data["freq"], data["s"], data.get("unit", FrequencyUnit.HZ))

    def __len__(self) -> int:
        return len(self.freq)

    def __repr__(self) -> str:
        return f"Series({len(self)} points, unit={self.unit.value})"

    def components(self) -> SComponents:
        return get_s_components(self.s)

    def decorate(self, plot_freq_unit: str | FrequencyUnit) -> DecoratedSeries:
        """Returns all derived components with the frequency axis converted to plot_freq_unit."""
        comps = self.components()
        target = FrequencyUnit.parse(plot_freq_unit)
        return DecoratedSeries(
            re=comps.re,
            im=comps.im,
            mag=comps.mag,
            db=comps.db,
            angle=comps.angle,
            deg=comps.deg,
            freq=normalize_freq(self.freq, target, self.unit),
            unit=target,
        )
