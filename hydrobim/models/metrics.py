"""Derived quantities — pure outputs, never persisted."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class SectionProperties(BaseModel):
    """Hydraulic properties of a single cross-section."""

    cross_section_area: float = 0.0
    wet_perimeter: float = 0.0


class ShapeDimensions(BaseModel):
    """Effective (scaled) dimensions of a primitive solid."""

    width: Optional[float] = None
    height: Optional[float] = None
    depth: Optional[float] = None
    radius: Optional[float] = None


class Metrics(BaseModel):
    """Quantities for one structure.

    For conveyances ``volume`` is the conveyed water volume and
    ``surface_area`` the wetted inner surface.  For shapes they are the
    solid's own volume and outer area, and ``concrete_volume`` stays 0.
    """

    volume: float = 0.0
    surface_area: float = 0.0
    concrete_volume: float = 0.0
    cross_section_area: float = 0.0
    wet_perimeter: float = 0.0
    length: float = 0.0
    inclined_length: Optional[float] = None
    dimensions: ShapeDimensions = Field(default_factory=ShapeDimensions)
