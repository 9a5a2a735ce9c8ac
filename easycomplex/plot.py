from typing import Iterable, List, Optional
import math

import matplotlib.pyplot as plt
import matplotlib.animation as animation

from .complex import PolarComplex, RectangularComplex

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
POINT_STYLE   = "ro"     # current sample
TRAIL_STYLE   = "b-"     # path already visited
TRAIL_ALPHA   = 0.5
ROOT_STYLE    = "go"
MARGIN        = 0.1      # fraction of the span added around the data


def _limits(points: List[RectangularComplex]) -> float:
    """Half-width of a square box, centred on 0, that holds every point."""
    span = max(max(abs(z.real) for z in points), max(abs(z.imag) for z in points), 1.0)
    return span * (1.0 + MARGIN)


def _complex_plane(ax, half_width: float, title: str) -> None:
    ax.set_aspect("equal")
    ax.set_xlim(-half_width, half_width)
    ax.set_ylim(-half_width, half_width)
    ax.set_xlabel("Re")
    ax.set_ylabel("Im")
    ax.set_title(title)
    ax.grid(True, linestyle="--", alpha=0.3)


def animate_complex(
    sequence: Iterable,
    *,
    interval: int = 200,
    show: bool = True,
) -> animation.FuncAnimation:
    """
    Animate a sequence of complex‑number samples in the 2‑D plane.

    Parameters
    ----------
    sequence : iterable of `RectangularComplex`, `PolarComplex`, Python
               `complex`, real numbers or (real, imag) tuples
    interval : delay between frames in **ms**
    show     : call `plt.show()` before returning

    Returns
    -------
    matplotlib.animation.FuncAnimation – handy if you need to save().
    """

    # Concrete list, needed to pre‑fit the axes
    seq = [RectangularComplex.convert(z) for z in sequence]
    if not seq:
        raise ValueError("Nothing to animate: the sequence is empty")

    fig, ax = plt.subplots()
    _complex_plane(ax, _limits(seq), "Complex number animation")

    point, = ax.plot([], [], POINT_STYLE, markersize=6)
    trail, = ax.plot([], [], TRAIL_STYLE, alpha=TRAIL_ALPHA, linewidth=1)

    history_x: List[float] = []
    history_y: List[float] = []

    def init():
        history_x.clear()
        history_y.clear()
        point.set_data([], [])
        trail.set_data([], [])
        return point, trail

    def update(frame: int):
        z = seq[frame]
        history_x.append(z.real)
        history_y.append(z.imag)

        point.set_data([z.real], [z.imag])
        trail.set_data(history_x, history_y)
        ax.set_title(f"t = {frame}  |  z = {z}")
        return point, trail

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=len(seq),
        init_func=init,
        interval=interval,
        blit=True,
        repeat=False,
    )
    if show:
        plt.show()
    return anim


def plot_roots(value, n: int, ax: Optional[plt.Axes] = None) -> plt.Axes:
    """
    Scatter the n-th roots of `value` on the circle of radius |value|^(1/n).

    Raises InvalidRootError for n < 1, like `root()` itself.
    """
    roots = PolarComplex.convert(value).root(n)
    points = [z.to_rectangular() for z in roots]
    radius = roots[0].module

    if ax is None:
        _, ax = plt.subplots()
    _complex_plane(ax, _limits(points), f"{n}th roots of {RectangularComplex.convert(value)}")

    circle = [RectangularComplex.from_polar(radius, 2 * math.pi * t / 360) for t in range(361)]
    ax.plot([z.real for z in circle], [z.imag for z in circle], "k:", linewidth=0.8)
    ax.plot([z.real for z in points], [z.imag for z in points], ROOT_STYLE, markersize=6)
    for k, z in enumerate(points):
        ax.annotate(f"k={k}", (z.real, z.imag), textcoords="offset points", xytext=(4, 4))
    return ax


# Example usage:
if __name__ == "__main__":
    # one full turn, one degree per frame
    step = PolarComplex(1, math.pi / 180)
    o = [PolarComplex(1)]
    for i in range(1, 360):
        o.append(o[-1] * step)
    animate_complex(o, interval=1)
