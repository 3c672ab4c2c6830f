"""
Face selection utilities: face model, plane fitting and batch evaluation.
"""

from .plane import PlaneFit, fit_plane, newell_normal, is_parallel
from .face import Face, as_face
from .batch import SelectionError, FaceResult, BatchReport, analyze_faces

__all__ = [
    'PlaneFit',
    'fit_plane',
    'newell_normal',
    'is_parallel',
    'Face',
    'as_face',
    'SelectionError',
    'FaceResult',
    'BatchReport',
    'analyze_faces',
]
