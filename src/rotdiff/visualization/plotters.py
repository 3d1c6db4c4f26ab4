"""
Plotting utilities for rotdiff.

This module provides functions for inspecting angular velocity histories,
for instance the output of the same motion converted from two different
parameterizations:
- Time series of the three components
- Overlaid comparison of several histories
"""

from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from rotdiff.base import AngularVelocityBase

# Check for matplotlib availability
try:
    import matplotlib.pyplot as plt
    from matplotlib.figure import Figure

    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False
    Figure = Any


COMPONENT_NAMES = ("ω_x [rad/s]", "ω_y [rad/s]", "ω_z [rad/s]")


def _check_matplotlib():
    """Raise error if matplotlib not available."""
    if not HAS_MATPLOTLIB:
        raise ImportError("matplotlib is required for visualization. Install with: pip install matplotlib")


def as_history(velocities) -> np.ndarray:
    """
    Stack an angular velocity history into an (N, 3) array.

    Parameters
    ----------
    velocities : array_like of shape (N, 3) or sequence of AngularVelocityBase
        Samples in time order.

    Raises
    ------
    ValueError
        If the samples are not 3-vectors.
    """
    if len(velocities) > 0 and isinstance(velocities[0], AngularVelocityBase):
        history = np.array([w.vector for w in velocities])
    else:
        history = np.asarray(velocities, dtype=np.float64)

    if history.ndim != 2 or history.shape[1] != 3:
        raise ValueError(f"angular velocity history must have shape (N, 3), got {history.shape}")

    return history


# =============================================================================
# Time Series Plots
# =============================================================================


def plot_angular_velocity(
    t: np.ndarray,
    velocities,
    title: str = "Angular Velocity",
    figsize: Tuple[float, float] = (10, 8),
    show_norm: bool = False,
    grid: bool = True,
) -> Tuple[Figure, np.ndarray]:
    """
    Plot the components of an angular velocity history over time.

    Parameters
    ----------
    t : np.ndarray, shape (N,)
        Time array.
    velocities : array_like of shape (N, 3) or sequence of AngularVelocityBase
        Angular velocity samples.
    title : str
        Figure title.
    figsize : tuple
        Figure size (width, height).
    show_norm : bool
        Add a fourth subplot with ||ω||.
    grid : bool
        Show grid.

    Returns
    -------
    fig : Figure
        Matplotlib figure.
    axes : ndarray of Axes
        One subplot per component (and one for the norm).

    Example
    -------
    >>> omegas = [to_local_angular_velocity(r, dr) for r, dr in zip(rotations, rates)]
    >>> fig, axes = plot_angular_velocity(t, omegas)
    >>> plt.show()
    """
    _check_matplotlib()

    history = as_history(velocities)
    n_rows = 4 if show_norm else 3

    fig, axes = plt.subplots(n_rows, 1, figsize=figsize, sharex=True)
    axes = np.atleast_1d(axes).flatten()

    for i in range(3):
        axes[i].plot(t, history[:, i], linewidth=1.5)
        axes[i].set_ylabel(COMPONENT_NAMES[i])

    if show_norm:
        axes[3].plot(t, np.linalg.norm(history, axis=1), "k-", linewidth=1.5)
        axes[3].set_ylabel("||ω|| [rad/s]")

    for ax in axes:
        if grid:
            ax.grid(True, alpha=0.3)

    axes[-1].set_xlabel("Time [s]")
    fig.suptitle(title)
    fig.tight_layout()

    return fig, axes


def plot_angular_velocity_comparison(
    t: np.ndarray,
    histories: Dict[str, Sequence],
    title: str = "Angular Velocity Comparison",
    figsize: Tuple[float, float] = (10, 8),
    reference: Optional[str] = None,
) -> Tuple[Figure, np.ndarray]:
    """
    Overlay several angular velocity histories sampled at the same times.

    Parameters
    ----------
    t : np.ndarray, shape (N,)
        Time array shared by all histories.
    histories : dict
        Label -> angular velocity history (see :func:`as_history`).
    title : str
        Figure title.
    figsize : tuple
        Figure size.
    reference : str, optional
        Label of a history to draw dashed in black, e.g. the quaternion
        result the others are checked against.

    Returns
    -------
    fig : Figure
    axes : ndarray of Axes
    """
    _check_matplotlib()

    if reference is not None and reference not in histories:
        raise ValueError(f"Unknown reference '{reference}'. Available: {', '.join(histories)}")

    fig, axes = plt.subplots(3, 1, figsize=figsize, sharex=True)

    for label, velocities in histories.items():
        history = as_history(velocities)
        style = {"color": "k", "linestyle": "--"} if label == reference else {}
        for i in range(3):
            axes[i].plot(t, history[:, i], linewidth=1.5, label=label, **style)

    for i in range(3):
        axes[i].set_ylabel(COMPONENT_NAMES[i])
        axes[i].grid(True, alpha=0.3)

    axes[0].legend()
    axes[-1].set_xlabel("Time [s]")
    fig.suptitle(title)
    fig.tight_layout()

    return fig, axes
