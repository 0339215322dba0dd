"""Simple geometry visualization helpers for debugging."""

import matplotlib.pyplot as plt
from shapely.geometry import Polygon, MultiPolygon, LineString
from shapely.geometry.base import BaseGeometry


def plot_merge(shapes, result, title: str = "Corridor Merge"):
    """Plot inputs, corridors and merged output side by side.

    Args:
        shapes: Input polygons
        result: MergeResult returned by ``merge_with_corridors``
        title: Plot title
    """
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    # Inputs with every candidate connection and the chosen tree
    for shape in shapes:
        _plot_geometry(ax1, shape, color='#6366f1', alpha=0.5)
    for edge in result.debug.pairs:
        _plot_geometry(ax1, edge.segment, color='lightgray', linewidth=1)
    for edge in result.debug.mst_edges:
        _plot_geometry(ax1, edge.segment, color='red', linewidth=2)
    ax1.set_title("Inputs and connections")
    ax1.set_aspect('equal')
    ax1.grid(True, alpha=0.3)

    # Corridors under the merged output
    for corridor in result.debug.corridor_polygons:
        _plot_geometry(ax2, corridor, color='#f59e0b', alpha=0.6)
    _plot_geometry(ax2, result.output, color='#16a34a', alpha=0.4)
    ax2.set_title("Corridors and merged output")
    ax2.set_aspect('equal')
    ax2.grid(True, alpha=0.3)

    fig.suptitle(title)
    plt.tight_layout()
    plt.show()


def _plot_geometry(ax, geom: BaseGeometry, color='blue', alpha=0.5, linewidth=2):
    """Plot a geometry on the given axes.

    Args:
        ax: Matplotlib axes
        geom: Geometry to plot
        color: Fill or line color
        alpha: Transparency
        linewidth: Width for line geometries
    """
    if geom.is_empty:
        return
    if isinstance(geom, Polygon):
        _plot_polygon(ax, geom, color=color, alpha=alpha)
    elif isinstance(geom, MultiPolygon):
        for poly in geom.geoms:
            _plot_polygon(ax, poly, color=color, alpha=alpha)
    elif isinstance(geom, LineString):
        x, y = geom.xy
        ax.plot(x, y, color=color, linewidth=linewidth)


def _plot_polygon(ax, poly: Polygon, color='blue', alpha=0.5):
    """Plot a single polygon with holes.

    Args:
        ax: Matplotlib axes
        poly: Polygon to plot
        color: Fill color
        alpha: Transparency
    """
    # Plot exterior
    x, y = poly.exterior.xy
    ax.fill(x, y, color=color, alpha=alpha, edgecolor='black', linewidth=1.5)

    # Plot holes (as white)
    for interior in poly.interiors:
        x, y = interior.xy
        ax.fill(x, y, color='white', edgecolor='black', linewidth=1)
