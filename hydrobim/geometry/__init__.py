"""Geometry — primitive solids and open-channel cross-sections."""

from hydrobim.geometry.sections import (
    RectangularSection,
    Section,
    TrapezoidalSection,
    TriangularSection,
    section_properties,
)
from hydrobim.geometry.solids import Box, Cone, Cylinder, Solid, Sphere, Torus, solid_from_shape

__all__ = [
    "Box",
    "Cone",
    "Cylinder",
    "RectangularSection",
    "Section",
    "Solid",
    "Sphere",
    "Torus",
    "TrapezoidalSection",
    "TriangularSection",
    "section_properties",
    "solid_from_shape",
]
