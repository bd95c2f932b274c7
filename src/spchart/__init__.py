from .errors import SpChartError, InvalidUnit, MalformedSeries, UnknownQuantity, InvalidAxisSettings
from .units import FrequencyUnit, UNIT_MULTIPLIERS, normalize_freq, unit_multiplier
from .sparam import ComplexSample, Quantity, Series, SComponents, DecoratedSeries, get_s_components
from .settings import AxisSettings, ViewPort, load_axis_settings
from .scale import LinearScale
from .path import PathBuilder, PathPoint, line_path
from .graphing import Limits, PlotGeometry, PlotPath, Tick, get_limits, get_plot_data
