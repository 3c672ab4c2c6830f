"""
Visualization module for face properties.
"""

from .plotting import reference_length, crosshair_segments, plot_face_properties, plot_batch

__all__ = ['reference_length', 'crosshair_segments', 'plot_face_properties', 'plot_batch']
