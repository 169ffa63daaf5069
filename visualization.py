import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import Polygon

from geometry import Point
from quickhull import HullResult


def plot_points(points: list[Point], ax: Axes | None = None):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y)
    else:
        ax.scatter(x, y)


def plot_hull(result: HullResult, ax: Axes | None = None) -> Axes:
    """
    Plot all points and the closed hull polygon, area in the title.
    """
    if ax is None:
        ax = plt.gca()

    plot_points(result.all_points(), ax=ax)

    hull = result.hull()
    xs = [pt.x for pt in hull] + [hull[0].x]
    ys = [pt.y for pt in hull] + [hull[0].y]
    ax.plot(xs, ys, c='r')
    ax.scatter(xs[:-1], ys[:-1], c='r', s=20)
    if not result.is_degenerate:
        ax.add_patch(Polygon([(pt.x, pt.y) for pt in hull], closed=True, alpha=0.2, color='r'))

    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title(f"Convex hull ({len(hull)} of {len(result.all_points())} points), area {result.area():.4g}")
    ax.grid(True, alpha=0.3)
    ax.axis('equal')
    return ax
