"""Axis configuration and view port size."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, fields
from numbers import Integral, Real
from typing import Any, Dict, NamedTuple, Optional

from loguru import logger

from .errors import InvalidAxisSettings
from .units import FrequencyUnit


DEFAULTS: Dict[str, Any] = {
    "inset_top": 0.0,
    "inset_bottom": 0.0,
    "inset_left": 0.0,
    "inset_right": 0.0,
    "y_ticks": 10,
    "x_ticks": 10,
    "plot_freq_unit": "GHZ",
}

# Keys used by the chart component that hosts this package.
_CAMEL_CASE_KEYS = {
    "insetTop": "inset_top",
    "insetBottom": "inset_bottom",
    "insetLeft": "inset_left",
    "insetRight": "inset_right",
    "yTicks": "y_ticks",
    "xTicks": "x_ticks",
    "plotFreqUnit": "plot_freq_unit",
}


class ViewPort(NamedTuple):
    """Pixel dimensions of the drawable area."""
    x: float
    y: float

    @classmethod
    def from_size(cls, width: float, height: float) -> ViewPort:
        return cls(float(width), float(height))

    def validate(self) -> None:
        for name, value in zip(("x", "y"), self):
            if isinstance(value, bool) or not isinstance(value, Real) or not value > 0:
                logger.error(f"View port {name} dimension must be positive, got {value}")
                raise InvalidAxisSettings(f"viewport.{name}", value, "must be positive")


@dataclass(frozen=True)
class AxisSettings:
    inset_top: float = DEFAULTS["inset_top"]
    inset_bottom: float = DEFAULTS["inset_bottom"]
    inset_left: float = DEFAULTS["inset_left"]
    inset_right: float = DEFAULTS["inset_right"]
    y_ticks: int = DEFAULTS["y_ticks"]
    x_ticks: int = DEFAULTS["x_ticks"]
    plot_freq_unit: str | FrequencyUnit = DEFAULTS["plot_freq_unit"]

    @property
    def freq_unit(self) -> FrequencyUnit:
        return FrequencyUnit.parse(self.plot_freq_unit)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AxisSettings:
        """Creates settings from snake_case or camelCase keys on top of DEFAULTS."""
        merged = dict(DEFAULTS)
        known = {f.name for f in fields(cls)}
        for key, value in data.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                logger.debug(f"Ignoring unknown axis setting {key!r}")
                continue
            merged[name] = value
        return cls(**merged)

    def validate(self, viewport: ViewPort) -> None:
        """Checks the settings against the view port they will be applied to.

        Raises
        ------
        InvalidAxisSettings
            For non-numeric, non-finite or negative insets, insets that
            leave no room to plot, or tick counts below one.
        InvalidUnit
            If plot_freq_unit is not a recognized unit.
        """
        for name in ("inset_top", "inset_bottom", "inset_left", "inset_right"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                logger.error(f"Axis setting {name} must be a number, got {value!r}")
                raise InvalidAxisSettings(name, value, "must be a number")
            if not math.isfinite(value) or not value >= 0:
                logger.error(f"Axis setting {name} must be finite and not negative, got {value}")
                raise InvalidAxisSettings(name, value, "must be finite and not negative")
        if self.inset_left + self.inset_right >= viewport.x:
            logger.error(f"Horizontal insets leave no room to plot in a view port {viewport.x} wide")
            raise InvalidAxisSettings("inset_left", self.inset_left, "horizontal insets exceed the view port width")
        if self.inset_top + self.inset_bottom >= viewport.y:
            logger.error(f"Vertical insets leave no room to plot in a view port {viewport.y} high")
            raise InvalidAxisSettings("inset_top", self.inset_top, "vertical insets exceed the view port height")
        for name in ("y_ticks", "x_ticks"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral) or value < 1:
                logger.error(f"Axis setting {name} must be an integer of at least 1, got {value!r}")
                raise InvalidAxisSettings(name, value, "must be an integer of at least 1")
        FrequencyUnit.parse(self.plot_freq_unit)


def load_axis_settings(json_path: Optional[str] = None,
                       overrides: Optional[Dict[str, Any]] = None) -> AxisSettings:
    """Reads axis settings from a JSON file and applies overrides on top."""
    data: Dict[str, Any] = {}
    if json_path:
        with open(json_path, "r") as handle:
            data.update(json.load(handle))
    if overrides:
        data.update(overrides)
    return AxisSettings.from_dict(data)
