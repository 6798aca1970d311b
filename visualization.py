import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import Polygon

from geometry import Point


def plot_points(points: list[Point], ax: Axes | None = None):
    ax = ax if ax is not None else plt.gca()
    x = [p.x for p in points]
    y = [p.y for p in points]
    ax.scatter(x, y, s=10, c='b')


def plot_hull(points: list[Point], hull: list[Point], ax: Axes | None = None):
    """
    Draw the input points, the closed hull polygon and its anchor (first hull point).
    """
    ax = ax if ax is not None else plt.gca()
    plot_points(points, ax)
    if not hull:
        return

    xs = [p.x for p in hull] + [hull[0].x]
    ys = [p.y for p in hull] + [hull[0].y]
    if len(hull) >= 3:
        ax.add_patch(Polygon([tuple(p) for p in hull], closed=True, alpha=0.2, color='r'))
    ax.plot(xs, ys, c='r')
    ax.scatter([hull[0].x], [hull[0].y], c='k', marker='*', s=80)
    ax.set_aspect('equal', adjustable='datalim')
    ax.grid(True)
