from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, NamedTuple, Sequence

import numpy as np
from loguru import logger

from .errors import InvalidAxisSettings, MalformedSeries
from .path import PathBuilder, PathPoint, line_path
from .scale import LinearScale
from .settings import AxisSettings, ViewPort
from .sparam import DecoratedSeries, Quantity, Series


class Tick(NamedTuple):
    label: float
    offset: float


class PlotPath(NamedTuple):
    path: str | None
    path_data: list[PathPoint]


class Limits(NamedTuple):
    y_min: float
    y_max: float
    x_min: float
    x_max: float


@dataclass(frozen=True, eq=False)
class PlotGeometry:
    """Everything a chart needs to draw one rectangular S-parameter plot.

    Axis paths are in the local frame of the scales, the caller translates
    them into the view port. ticks_y, ticks_x and plot_paths are None when
    there is nothing to plot, zero_path is None unless the y domain
    straddles zero.
    """
    y_axis_path: str
    x_axis_path: str
    ticks_y: list[Tick] | None
    ticks_x: list[Tick] | None
    zero_path: str | None
    plot_paths: list[PlotPath] | None
    y_scale: LinearScale
    x_scale: LinearScale
    limits: Limits | None = None


def _extent(values: np.ndarray) -> tuple[float, float] | None:
    valid = values[~np.isnan(values)]
    if valid.size == 0:
        return None
    return float(valid.min()), float(valid.max())


def get_limits(plots: Iterable[DecoratedSeries], selected_plot_type: str | Quantity) -> Limits | None:
    """Returns the bounding extent of frequency and the selected quantity over all plots.

    NaN values are skipped. Returns None if no plot contributes a value on
    either axis.
    """
    quantity = Quantity.parse(selected_plot_type)
    extent_y: list[float] = []
    extent_x: list[float] = []
    for plot in plots:
        ey = _extent(plot.get(quantity))
        ex = _extent(plot.freq)
        if ey is not None:
            extent_y.extend(ey)
        if ex is not None:
            extent_x.extend(ex)
    if not extent_y or not extent_x:
        return None
    return Limits(
        y_min=min(extent_y),
        y_max=max(extent_y),
        x_min=min(extent_x),
        x_max=max(extent_x),
    )


def _ticks(lo: float, hi: float, count: int, scale: LinearScale) -> list[Tick]:
    ticks = []
    for i in range(count + 1):
        label = lo + (hi - lo) * (i / count)
        ticks.append(Tick(label=label, offset=scale(label)))
    return ticks


def _as_viewport(viewport: ViewPort | Sequence[float] | Mapping[str, float]) -> ViewPort:
    if isinstance(viewport, ViewPort):
        return viewport
    try:
        if isinstance(viewport, Mapping):
            return ViewPort.from_size(viewport["x"], viewport["y"])
        return ViewPort.from_size(*viewport)
    except (KeyError, TypeError, ValueError) as exc:
        logger.error(f"Cannot read a view port size from {viewport!r}")
        raise InvalidAxisSettings("viewport", viewport, "expected an (x, y) pair or a mapping with x and y") from exc


def _as_series(plot: Series | Mapping[str, Any], index: int) -> Series:
    try:
        if isinstance(plot, Series):
            return plot
        if isinstance(plot, Mapping):
            return Series.from_dict(plot)
        raise MalformedSeries(None, f"expected a Series or a mapping, got {type(plot).__name__}")
    except MalformedSeries as exc:
        logger.error(f"Plot {index} is malformed: {exc.reason}")
        raise MalformedSeries(index, exc.reason) from exc


def get_plot_data(plots: Sequence[Series | Mapping[str, Any]],
                  selected_plot_type: str | Quantity,
                  viewport: ViewPort | Sequence[float] | Mapping[str, float],
                  axis_settings: AxisSettings | Mapping[str, Any]) -> PlotGeometry:
    """Computes scales, axes, ticks and series paths for a rectangular plot.

    Parameters
    ----------
    plots : Sequence[Series | Mapping]
        The measured traces. Mappings are read with Series.from_dict.
    selected_plot_type : str | Quantity
        Which derived quantity to put on the y axis
    viewport : ViewPort | Sequence[float] | Mapping[str, float]
        Pixel size (x, y) of the drawable area
    axis_settings : AxisSettings | Mapping
        Insets, tick counts and the frequency unit of the x axis. Mappings
        are read with AxisSettings.from_dict.

    Returns
    -------
    PlotGeometry
        The geometry. If there is nothing to plot only the axis paths and
        the scales (over the raw view port bounds) are filled in.

    Raises
    ------
    UnknownQuantity, InvalidUnit, MalformedSeries, InvalidAxisSettings
        On invalid input. Nothing is computed in that case.
    """
    quantity = Quantity.parse(selected_plot_type)
    viewport = _as_viewport(viewport)
    if not isinstance(axis_settings, AxisSettings):
        axis_settings = AxisSettings.from_dict(dict(axis_settings))
    viewport.validate()
    axis_settings.validate(viewport)
    series = [_as_series(plot, i) for i, plot in enumerate(plots)]

    plots_all_types = [s.decorate(axis_settings.freq_unit) for s in series]
    logger.debug(f"Building {quantity.value} plot geometry for {len(plots_all_types)} series")

    y_min = axis_settings.inset_top
    y_max = viewport.y - axis_settings.inset_bottom
    x_min = axis_settings.inset_left
    x_max = viewport.x - axis_settings.inset_right

    y_axis_path = PathBuilder().move_to(0, y_min).line_to(0, y_max)
    x_axis_path = PathBuilder().move_to(x_min, 0).line_to(x_max, 0)

    limits = get_limits(plots_all_types, quantity) if plots_all_types else None
    if limits is None:
        if plots_all_types:
            logger.warning(f"None of the {len(plots_all_types)} series has a {quantity.value} value to plot")
        return PlotGeometry(
            y_axis_path=str(y_axis_path),
            x_axis_path=str(x_axis_path),
            ticks_y=None,
            ticks_x=None,
            zero_path=None,
            plot_paths=None,
            y_scale=LinearScale((0, viewport.y), (y_max, y_min)),
            x_scale=LinearScale((0, viewport.x), (x_min, x_max)),
        )
    logger.debug(f"Plot limits {limits}")

    y_scale = LinearScale((limits.y_min, limits.y_max), (y_max, y_min))
    x_scale = LinearScale((limits.x_min, limits.x_max), (x_min, x_max))

    ticks_y = _ticks(limits.y_min, limits.y_max, axis_settings.y_ticks, y_scale)
    ticks_x = _ticks(limits.x_min, limits.x_max, axis_settings.x_ticks, x_scale)

    zero_path = None
    if limits.y_min < 0 and limits.y_max > 0:
        y0 = y_scale(0)
        zero_path = str(PathBuilder().move_to(0, y0).line_to(x_max - x_min, y0))

    plot_paths = []
    for i, plot in enumerate(plots_all_types):
        if len(plot) == 0:
            logger.warning(f"Series {i} has no samples")
        values = plot.get(quantity)
        path_data = [PathPoint(float(f), float(v)) for f, v in zip(plot.freq, values)]
        plot_paths.append(PlotPath(path=line_path(path_data, x_scale, y_scale), path_data=path_data))

    return PlotGeometry(
        y_axis_path=str(y_axis_path),
        x_axis_path=str(x_axis_path),
        ticks_y=ticks_y,
        ticks_x=ticks_x,
        zero_path=zero_path,
        plot_paths=plot_paths,
        y_scale=y_scale,
        x_scale=x_scale,
        limits=limits,
    )
