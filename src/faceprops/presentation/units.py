"""
Linear units and conversion of computed properties between them.
"""

from dataclasses import replace
from enum import Enum

from ..properties.calculator import PolygonProperties


class LinearUnit(Enum):
    """Linear units with their size expressed in inches."""

    INCH = ('in', 1.0)
    FOOT = ('ft', 12.0)
    METER = ('m', 100 / 2.54)
    CENTIMETER = ('cm', 1 / 2.54)
    MILLIMETER = ('mm', 1 / 25.4)

    def __init__(self, symbol: str, inches_per_unit: float):
        self.symbol = symbol
        self.inches_per_unit = inches_per_unit

    @classmethod
    def parse(cls, text: str) -> "LinearUnit":
        """
        Look up a unit by symbol or name, e.g. ``'ft'``, ``'feet'``, ``'foot'``.

        Raises
        ------
        ValueError
            If the text names no known unit.
        """
        key = text.strip().lower()
        for unit in cls:
            if key in _ALIASES[unit]:
                return unit
        raise ValueError(f"Unknown linear unit: {text!r}")


_ALIASES = {
    LinearUnit.INCH: {'in', 'inch', 'inches', '"'},
    LinearUnit.FOOT: {'ft', 'foot', 'feet', "'"},
    LinearUnit.METER: {'m', 'meter', 'meters', 'metre', 'metres'},
    LinearUnit.CENTIMETER: {'cm', 'centimeter', 'centimeters', 'centimetre', 'centimetres'},
    LinearUnit.MILLIMETER: {'mm', 'millimeter', 'millimeters', 'millimetre', 'millimetres'},
}


def conversion_factor(from_unit: LinearUnit, to_unit: LinearUnit) -> float:
    """Multiplier turning a length in ``from_unit`` into ``to_unit``."""
    return from_unit.inches_per_unit / to_unit.inches_per_unit


def convert_properties(
    props: PolygonProperties,
    to_unit: LinearUnit,
    from_unit: LinearUnit = LinearUnit.INCH
) -> PolygonProperties:
    """
    Express properties in another linear unit.

    Lengths scale with the conversion factor, areas with its square and
    second moments with its fourth power.
    """
    k = conversion_factor(from_unit, to_unit)
    if k == 1.0:
        return props

    k2 = k ** 2
    k4 = k ** 4
    return replace(
        props,
        area=props.area * k2,
        signed_area=props.signed_area * k2,
        centroid=tuple(c * k for c in props.centroid),
        perimeter=props.perimeter * k,
        ix=props.ix * k4,
        iy=props.iy * k4,
        ixy=props.ixy * k4,
        signed_ix=props.signed_ix * k4,
        signed_iy=props.signed_iy * k4,
        signed_ixy=props.signed_ixy * k4,
        rx=props.rx * k,
        ry=props.ry * k,
    )
