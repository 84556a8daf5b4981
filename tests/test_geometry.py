"""Tests for primitive solids and cross-section hydraulics."""

from __future__ import annotations

import logging
import math
from typing import get_args

import pytest

from hydrobim.config import SHAPE_DEFAULTS
from hydrobim.geometry.sections import (
    CHANNEL_SECTION_REGISTRY,
    TRANSITION_SECTION_REGISTRY,
    RectangularSection,
    TrapezoidalSection,
    TriangularSection,
    channel_section,
    chute_section,
    section_properties,
    side_length,
    transition_section,
)
from hydrobim.geometry.solids import (
    SOLID_REGISTRY,
    Box,
    Cone,
    Cylinder,
    Sphere,
    Torus,
    solid_from_shape,
)
from hydrobim.models.scene import (
    ChannelSection,
    ChuteObject,
    SectionType,
    ShapeObject,
    ShapeType,
    TransitionSection,
    TransitionSectionType,
    or_default,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_shape(shape_type: str, parameters: dict | None = None, scale: tuple = (1, 1, 1)) -> ShapeObject:
    x, y, z = scale
    return ShapeObject(
        id="shape-0001",
        name="Test Shape",
        shape_type=shape_type,
        parameters=parameters or {},
        transform={"scale": {"x": x, "y": y, "z": z}},
    )


# ---------------------------------------------------------------------------
# Solids
# ---------------------------------------------------------------------------

class TestBox:

    def test_unit_box(self):
        solid = solid_from_shape(_make_shape("box", {"width": 1, "height": 1, "depth": 1}))
        assert isinstance(solid, Box)
        assert solid.volume == pytest.approx(1.0)
        assert solid.surface_area == pytest.approx(6.0)

    def test_defaults_to_unit_box(self):
        solid = solid_from_shape(_make_shape("box"))
        assert solid.volume == pytest.approx(1.0)
        assert solid.surface_area == pytest.approx(6.0)

    def test_scale_per_axis(self):
        solid = solid_from_shape(_make_shape("box", {"width": 2, "height": 3, "depth": 4}, scale=(1, 2, 1)))
        assert solid.height == pytest.approx(6.0)
        assert solid.volume == pytest.approx(48.0)
        assert solid.surface_area == pytest.approx(88.0)

    def test_dimensions(self):
        dims = solid_from_shape(_make_shape("box", {"width": 2})).dimensions()
        assert dims.width == pytest.approx(2.0)
        assert dims.height == pytest.approx(1.0)
        assert dims.depth == pytest.approx(1.0)
        assert dims.radius is None


class TestCylinder:

    def test_unit_radius_and_height(self):
        solid = solid_from_shape(_make_shape("cylinder", {"radius": 1, "height": 1}))
        assert isinstance(solid, Cylinder)
        assert solid.volume == pytest.approx(math.pi)
        assert solid.surface_area == pytest.approx(4 * math.pi)

    def test_radius_uses_larger_horizontal_scale(self):
        solid = solid_from_shape(_make_shape("cylinder", scale=(2, 1, 3)))
        assert solid.radius == pytest.approx(1.5)
        assert solid.volume == pytest.approx(math.pi * 2.25)
        assert solid.surface_area == pytest.approx(7.5 * math.pi)

    def test_dimensions_report_radius_and_height(self):
        dims = solid_from_shape(_make_shape("cylinder")).dimensions()
        assert dims.radius == pytest.approx(0.5)
        assert dims.height == pytest.approx(1.0)
        assert dims.width is None


class TestSphere:

    def test_radius_uses_largest_scale(self):
        solid = solid_from_shape(_make_shape("sphere", scale=(1, 4, 2)))
        assert isinstance(solid, Sphere)
        assert solid.radius == pytest.approx(2.0)
        assert solid.volume == pytest.approx(32 * math.pi / 3)
        assert solid.surface_area == pytest.approx(16 * math.pi)


class TestCone:

    def test_full_cone(self):
        solid = solid_from_shape(_make_shape("cone", {"bottomRadius": 1, "topRadius": 0, "height": 1}))
        assert isinstance(solid, Cone)
        assert solid.volume == pytest.approx(math.pi / 3)
        assert solid.slant_height == pytest.approx(math.sqrt(2))
        assert solid.surface_area == pytest.approx(math.pi * (1 + math.sqrt(2)))

    def test_frustum(self):
        solid = solid_from_shape(_make_shape("cone", {"bottomRadius": 2, "topRadius": 1, "height": 3}))
        assert solid.volume == pytest.approx(7 * math.pi)
        assert solid.surface_area == pytest.approx(math.pi * (5 + 3 * math.sqrt(10)))

    def test_reports_bottom_radius(self):
        dims = solid_from_shape(_make_shape("cone", {"bottomRadius": 2, "topRadius": 1})).dimensions()
        assert dims.radius == pytest.approx(2.0)


class TestTorus:

    def test_defaults(self):
        solid = solid_from_shape(_make_shape("torus"))
        assert isinstance(solid, Torus)
        assert solid.volume == pytest.approx(2 * math.pi ** 2 * 0.09)
        assert solid.surface_area == pytest.approx(4 * math.pi ** 2 * 0.3)

    def test_minor_radius_scales_with_y(self):
        solid = solid_from_shape(_make_shape("torus", {"majorRadius": 2, "minorRadius": 0.5}, scale=(1, 2, 1)))
        assert solid.major_radius == pytest.approx(2.0)
        assert solid.minor_radius == pytest.approx(1.0)


class TestUnknownShape:

    def test_unknown_type_returns_none(self, caplog):
        with caplog.at_level(logging.WARNING, logger="hydrobim.geometry.solids"):
            assert solid_from_shape(_make_shape("pyramid")) is None
        assert "pyramid" in caplog.text

    def test_every_shape_type_is_registered(self):
        assert set(get_args(ShapeType)) == set(SOLID_REGISTRY)
        assert set(get_args(ShapeType)) == set(SHAPE_DEFAULTS)


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

class TestSections:

    def test_side_length(self):
        assert side_length(3.0, 0.0) == pytest.approx(3.0)
        assert side_length(1.0, 1.0) == pytest.approx(math.sqrt(2))

    def test_rectangular(self):
        props = RectangularSection(width=2, depth=1).properties()
        assert props.cross_section_area == pytest.approx(2.0)
        assert props.wet_perimeter == pytest.approx(4.0)

    def test_trapezoidal(self):
        section = TrapezoidalSection(bottom_width=2, depth=1, side_slope=1.5)
        assert section.top_width == pytest.approx(5.0)
        assert section.area == pytest.approx(3.5)
        assert section.wet_perimeter == pytest.approx(2 + 2 * math.sqrt(3.25))

    def test_triangular(self):
        section = TriangularSection(depth=2, side_slope=1)
        assert section.area == pytest.approx(4.0)
        assert section.wet_perimeter == pytest.approx(2 * math.sqrt(8))

    def test_zero_slope_trapezoid_matches_rectangle(self):
        trap = TrapezoidalSection(bottom_width=2, depth=1, side_slope=0)
        rect = RectangularSection(width=2, depth=1)
        assert trap.area == pytest.approx(rect.area)
        assert trap.wet_perimeter == pytest.approx(rect.wet_perimeter)

    def test_section_properties_of_none_is_zero(self):
        props = section_properties(None)
        assert props.cross_section_area == 0.0
        assert props.wet_perimeter == 0.0

    def test_every_section_type_is_registered(self):
        assert set(get_args(SectionType)) == set(CHANNEL_SECTION_REGISTRY)
        assert set(get_args(TransitionSectionType)) == set(TRANSITION_SECTION_REGISTRY)

    def test_or_default(self):
        assert or_default(None, 0.15) == pytest.approx(0.15)
        assert or_default(0, 0.15) == 0.0
        assert isinstance(or_default(2, 0.0), float)


class TestChannelSection:

    def test_trapezoidal_default_side_slope(self):
        section = channel_section(ChannelSection(type="trapezoidal", bottom_width=2, depth=1))
        assert isinstance(section, TrapezoidalSection)
        assert section.side_slope == pytest.approx(1.5)

    def test_triangular_default_side_slope(self):
        section = channel_section(ChannelSection(type="triangular", depth=1))
        assert isinstance(section, TriangularSection)
        assert section.side_slope == pytest.approx(1.0)

    def test_missing_dimensions_are_zero(self):
        section = channel_section(ChannelSection(type="rectangular"))
        assert section.area == 0.0
        assert section.wet_perimeter == 0.0

    def test_unknown_type_degrades_to_zero(self, caplog):
        with caplog.at_level(logging.WARNING, logger="hydrobim.geometry.sections"):
            section = channel_section(ChannelSection(type="circular", width=1, depth=1))
        assert section is None
        assert "circular" in caplog.text
        assert section_properties(section).cross_section_area == 0.0

    def test_absent_section(self):
        assert channel_section(None) is None

    def test_untyped_section_is_zero(self, caplog):
        with caplog.at_level(logging.WARNING, logger="hydrobim.geometry.sections"):
            section = channel_section(ChannelSection(width=2, depth=1))
        assert section is None
        assert caplog.text == ""


class TestTransitionSection:

    def test_trapezoidal_width_is_bottom_width(self):
        section = transition_section(
            TransitionSection(section_type="trapezoidal", width=1, depth=1, side_slope=1)
        )
        assert isinstance(section, TrapezoidalSection)
        assert section.bottom_width == pytest.approx(1.0)
        assert section.area == pytest.approx(2.0)

    def test_trapezoidal_default_side_slope_is_zero(self):
        section = transition_section(TransitionSection(section_type="trapezoidal", width=2, depth=1))
        assert section.area == pytest.approx(2.0)
        assert section.wet_perimeter == pytest.approx(4.0)

    def test_triangular_end_degrades_to_zero(self, caplog):
        end = TransitionSection(section_type="triangular", depth=1, side_slope=1)
        with caplog.at_level(logging.WARNING, logger="hydrobim.geometry.sections"):
            section = transition_section(end)
        assert section is None
        assert "triangular" in caplog.text
        props = section_properties(section)
        assert props.cross_section_area == 0.0
        assert props.wet_perimeter == 0.0


class TestChuteSection:

    def test_zero_side_slope_is_rectangular(self):
        chute = ChuteObject(id="chute-1", width=2, depth=1, side_slope=0)
        assert isinstance(chute_section(chute), RectangularSection)

    def test_missing_side_slope_is_rectangular(self):
        chute = ChuteObject(id="chute-1", width=2, depth=1)
        assert isinstance(chute_section(chute), RectangularSection)

    def test_sloped_sides_are_trapezoidal(self):
        chute = ChuteObject(id="chute-1", width=2, depth=1, side_slope=0.5)
        section = chute_section(chute)
        assert isinstance(section, TrapezoidalSection)
        assert section.bottom_width == pytest.approx(2.0)
        assert section.area == pytest.approx(2.5)
