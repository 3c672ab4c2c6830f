"""
Tests for unit conversion and text reports.
"""

import pytest

from faceprops.faces import analyze_faces
from faceprops.presentation import (
    LinearUnit,
    conversion_factor,
    convert_properties,
    format_batch_summary,
    format_error,
    format_properties,
)
from faceprops.properties import InvalidVertexCount, compute_properties


UNIT_SQUARE = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
FOOT_SQUARE_IN_INCHES = [(0, 0, 0), (12, 0, 0), (12, 12, 0), (0, 12, 0)]


class TestLinearUnit:
    """Tests for the LinearUnit enum."""

    @pytest.mark.parametrize("unit, inches", [
        (LinearUnit.INCH, 1.0),
        (LinearUnit.FOOT, 12.0),
        (LinearUnit.METER, 39.3700787),
        (LinearUnit.CENTIMETER, 0.393700787),
        (LinearUnit.MILLIMETER, 0.0393700787),
    ])
    def test_inches_per_unit(self, unit, inches):
        assert unit.inches_per_unit == pytest.approx(inches)

    @pytest.mark.parametrize("text, unit", [
        ('ft', LinearUnit.FOOT),
        ('Feet', LinearUnit.FOOT),
        ('foot', LinearUnit.FOOT),
        ('m', LinearUnit.METER),
        ('meters', LinearUnit.METER),
        (' cm ', LinearUnit.CENTIMETER),
        ('millimeter', LinearUnit.MILLIMETER),
        ('in', LinearUnit.INCH),
    ])
    def test_parse(self, text, unit):
        assert LinearUnit.parse(text) is unit

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            LinearUnit.parse('furlong')

    def test_conversion_factor(self):
        assert conversion_factor(LinearUnit.INCH, LinearUnit.FOOT) == pytest.approx(1 / 12)
        assert conversion_factor(LinearUnit.METER, LinearUnit.MILLIMETER) == pytest.approx(1000.0)


class TestConvertProperties:
    """Tests for convert_properties()."""

    def test_inches_to_feet(self):
        props = compute_properties(FOOT_SQUARE_IN_INCHES)
        in_feet = convert_properties(props, LinearUnit.FOOT)

        assert in_feet.area == pytest.approx(1.0)
        assert in_feet.centroid == pytest.approx((0.5, 0.5, 0.0))
        assert in_feet.perimeter == pytest.approx(4.0)
        assert in_feet.ix == pytest.approx(1 / 12)
        assert in_feet.rx == pytest.approx((1 / 12) ** 0.5)
        assert in_feet.vertex_count == 4

    def test_signed_values_keep_sign(self):
        props = compute_properties(FOOT_SQUARE_IN_INCHES[::-1])
        in_feet = convert_properties(props, LinearUnit.FOOT)
        assert in_feet.signed_area == pytest.approx(-1.0)
        assert in_feet.signed_ix == pytest.approx(-1 / 12)

    def test_same_unit_is_identity(self):
        props = compute_properties(UNIT_SQUARE)
        assert convert_properties(props, LinearUnit.METER, from_unit=LinearUnit.METER) is props

    def test_round_trip_meters(self):
        props = compute_properties(UNIT_SQUARE)
        back = convert_properties(
            convert_properties(props, LinearUnit.METER),
            LinearUnit.INCH, from_unit=LinearUnit.METER
        )
        assert back.ix == pytest.approx(props.ix)


class TestFormatProperties:
    """Tests for the text report."""

    def test_unit_square_report(self):
        text = format_properties(compute_properties(UNIT_SQUARE))
        assert text == (
            "Face properties (in current model units):\n\n"
            "Centroid = [0.5000,0.5000,0.0000] (x,y,z in from origin)\n"
            "Area = 1.0000 in^2\n"
            "Perimeter = 4.0000 in\n"
            "Ix = 0.0833 in^4\n"
            "Iy = 0.0833 in^4\n"
            "Ixy = 0.0000 in^4\n"
            "rx = 0.2887 in\n"
            "ry = 0.2887 in"
        )

    def test_report_in_feet(self):
        text = format_properties(compute_properties(FOOT_SQUARE_IN_INCHES), unit=LinearUnit.FOOT)
        assert "Area = 1.0000 ft^2" in text
        assert "Centroid = [0.5000,0.5000,0.0000] (x,y,z ft from origin)" in text

    def test_decimals(self):
        text = format_properties(compute_properties(UNIT_SQUARE), decimals=2)
        assert "Area = 1.00 in^2" in text

    def test_clockwise_reports_magnitudes(self):
        text = format_properties(compute_properties(UNIT_SQUARE[::-1]))
        assert "Area = 1.0000 in^2" in text
        assert "-" not in text


class TestSummaries:
    """Tests for error and batch summaries."""

    def test_format_error(self):
        text = format_error(InvalidVertexCount(2))
        assert text.startswith("InvalidVertexCount:")
        assert "2 vertices" in text

    def test_batch_summary(self):
        vertical = [(0, 0, 0), (1, 0, 0), (1, 0, 1), (0, 0, 1)]
        report = analyze_faces([UNIT_SQUARE, vertical, [(0, 0, 0), (1, 0, 0), (2, 0, 0)]])
        text = format_batch_summary(report)

        assert text.splitlines()[0] == "Computed 1 of 3 faces."
        assert "Face 2: DegenerateGeometry" in text
        assert "Skipped 1 faces that were not parallel." in text

    def test_batch_summary_without_skips(self):
        report = analyze_faces([UNIT_SQUARE])
        assert format_batch_summary(report) == "Computed 1 of 1 faces."


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
