"""
Visualization utilities for rotdiff.

Plotting (requires matplotlib)
------------------------------
- plot_angular_velocity: Components of one angular velocity history
- plot_angular_velocity_comparison: Several histories overlaid

Example
-------
>>> from rotdiff.visualization import plot_angular_velocity
>>> fig, axes = plot_angular_velocity(t, omegas, show_norm=True)
>>> plt.show()
"""

from rotdiff.visualization.plotters import (
    HAS_MATPLOTLIB,
    as_history,
    plot_angular_velocity,
    plot_angular_velocity_comparison,
)

__all__ = [
    "HAS_MATPLOTLIB",
    "as_history",
    "plot_angular_velocity",
    "plot_angular_velocity_comparison",
]
