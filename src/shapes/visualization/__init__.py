"""
Visualization utilities.
"""

from .plotting import plot_polygon

__all__ = ['plot_polygon']
