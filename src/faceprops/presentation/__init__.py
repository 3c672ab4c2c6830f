"""
Unit conversion and text formatting of results.
"""

from .units import LinearUnit, conversion_factor, convert_properties
from .report import format_properties, format_error, format_batch_summary

__all__ = [
    'LinearUnit',
    'conversion_factor',
    'convert_properties',
    'format_properties',
    'format_error',
    'format_batch_summary',
]
