from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Sequence

import numpy as np
from loguru import logger

from .errors import InvalidUnit


class FrequencyUnit(Enum):
    HZ = "HZ"
    KHZ = "KHZ"
    MHZ = "MHZ"
    GHZ = "GHZ"
    THZ = "THZ"
    PHZ = "PHZ"

    @property
    def multiplier(self) -> float:
        return UNIT_MULTIPLIERS[self.value]

    @classmethod
    def parse(cls, unit: str | FrequencyUnit) -> FrequencyUnit:
        """Returns the unit for a tag such as 'GHz', 'GHZ' or 'ghz'."""
        if isinstance(unit, cls):
            return unit
        if isinstance(unit, str):
            key = unit.strip().upper()
            if key in UNIT_MULTIPLIERS:
                return cls(key)
        logger.error(f"Frequency unit {unit!r} is not one of {', '.join(UNIT_MULTIPLIERS)}")
        raise InvalidUnit(unit)


UNIT_MULTIPLIERS = MappingProxyType({
    "HZ": 1.0,
    "KHZ": 1e3,
    "MHZ": 1e6,
    "GHZ": 1e9,
    "THZ": 1e12,
    "PHZ": 1e15,
})


def unit_multiplier(unit: str | FrequencyUnit) -> float:
    """Scale factor of a unit relative to Hertz."""
    return FrequencyUnit.parse(unit).multiplier


def normalize_freq(frequencies: Sequence[float] | np.ndarray,
                   output_unit: str | FrequencyUnit,
                   input_unit: str | FrequencyUnit) -> np.ndarray:
    """Converts frequencies from input_unit to output_unit.

    Parameters
    ----------
    frequencies : Sequence[float] | np.ndarray
        Frequency values expressed in input_unit
    output_unit : str | FrequencyUnit
        The unit to convert to
    input_unit : str | FrequencyUnit
        The unit the values are expressed in

    Returns
    -------
    np.ndarray
        The converted frequencies, same length and order as the input
    """
    factor = unit_multiplier(input_unit) / unit_multiplier(output_unit)
    return np.asarray(frequencies, dtype=np.float64) * factor
