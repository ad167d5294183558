"""
Visualization utilities for polygon plotting.

Draws a polygon with its bounding box and classified query points.
"""

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from ..polygons.polygon import Polygon, QueryPointPosition, polygon_stats


_POSITION_COLORS = {
    QueryPointPosition.INCLUDED: 'steelblue',
    QueryPointPosition.BOUNDARY: 'goldenrod',
    QueryPointPosition.EXCLUDED: 'coral',
}


def plot_polygon(
    polygon: Polygon,
    query_points: Optional[np.ndarray] = None,
    ax: Optional[plt.Axes] = None,
    title: str = "Polygon",
    show_bbox: bool = True,
    show_stats: bool = True
) -> plt.Axes:
    """
    Visualize a polygon, its bounding box and query points in 2D.

    Parameters
    ----------
    polygon : Polygon
        Polygon to draw.
    query_points : np.ndarray, optional
        Query points of shape (N, 2), colored by classification.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    title : str
        Plot title.
    show_bbox : bool
        Whether to draw the bounding box.
    show_stats : bool
        Whether to show polygon statistics.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    poly = polygon.as_array()

    closed_poly = np.vstack([poly, poly[0]])
    ax.plot(closed_poly[:, 0], closed_poly[:, 1], 'k-', linewidth=2, zorder=3)
    ax.fill(poly[:, 0], poly[:, 1], alpha=0.15, color='green', zorder=1)

    ax.scatter(poly[:, 0], poly[:, 1], c='black', s=50, marker='s', zorder=4)

    if show_bbox:
        box = np.array(polygon.bounding_box + polygon.bounding_box[:1])
        ax.plot(box[:, 0], box[:, 1], 'b--', linewidth=1, zorder=2,
                label='Bounding box')

    if query_points is not None:
        query_points = np.atleast_2d(np.asarray(query_points, dtype=np.float64))
        for position, color in _POSITION_COLORS.items():
            mask = np.array([
                polygon.classify(x, y) is position for x, y in query_points
            ], dtype=bool)
            if mask.any():
                ax.scatter(
                    query_points[mask, 0], query_points[mask, 1],
                    c=color, s=60, marker='o', zorder=5, label=position.value
                )

    if show_stats:
        stats = polygon_stats(polygon)
        stats_text = (
            f"Kind: {stats['kind']}\n"
            f"Vertices: {stats['num_vertices']}\n"
            f"Area: {stats['area']:.2f}\n"
            f"Fill: {stats['fill_ratio']:.1%}"
        )
        ax.text(
            0.02, 0.98, stats_text,
            transform=ax.transAxes,
            verticalalignment='top',
            fontfamily='monospace',
            fontsize=9,
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
        )

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title)
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc='upper right')
    ax.set_aspect('equal', adjustable='box')
    ax.grid(True, alpha=0.3)

    return ax
