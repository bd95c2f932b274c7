"""This script demonstrates how to turn S-parameter traces into chart geometry.

We build two traces by hand, ask for the dB magnitude plot and print
what a chart component would draw.
"""

# First we import spchart

import numpy as np
import spchart as sc

# A trace is a list of frequencies with one complex sample per frequency.
# The unit tag says how the frequencies are written down.
f = np.linspace(1.8e3, 2.2e3, 41)
S11 = 0.9 * np.exp(-1j * np.pi * (f - 1.8e3) / 100) * (1.02 - np.exp(-((f - 2e3) / 50) ** 2))
S21 = np.sqrt(1 - np.abs(S11) ** 2) * np.exp(-1j * np.pi * (f - 1.8e3) / 100)

s11 = sc.Series(f, S11, "MHz")

# The chart component talks in plain dictionaries. Those work too.
s21 = {"freq": list(f), "s": [{"re": s.real, "im": s.imag} for s in S21], "unit": "MHZ"}

# Insets are the margins we keep free for the tick labels.
settings = sc.AxisSettings(inset_top=10, inset_bottom=30, inset_left=50, inset_right=10,
                           y_ticks=5, x_ticks=4, plot_freq_unit="GHz")

geometry = sc.get_plot_data([s11, s21], "db", sc.ViewPort(800, 400), settings)

print("y axis:", geometry.y_axis_path)
print("x axis:", geometry.x_axis_path)
for tick in geometry.ticks_x:
    print(f"{tick.label:.3f} GHz at x={tick.offset:.1f}")
for tick in geometry.ticks_y:
    print(f"{tick.label:.1f} dB at y={tick.offset:.1f}")

# The scales can be used in the other direction, for example for a tooltip.
print("frequency under the cursor at x=400:", geometry.x_scale.invert(400), "GHz")

for plot in geometry.plot_paths:
    print(plot.path[:80], "...")
