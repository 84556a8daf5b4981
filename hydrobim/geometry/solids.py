"""Closed-form volume and surface area of primitive solids.

A :class:`ShapeObject` carries raw parameters plus a transform scale.
:func:`solid_from_shape` folds both into one fully-populated solid model
(defaults applied, scale multiplied in) so the formulas below never see an
optional value.
"""

from __future__ import annotations

import abc
import logging
import math
from typing import Callable

from pydantic import BaseModel

from hydrobim.config import SHAPE_DEFAULTS
from hydrobim.models.metrics import ShapeDimensions
from hydrobim.models.scene import ShapeObject, Vector3

logger = logging.getLogger(__name__)


class Solid(BaseModel, abc.ABC):
    """A primitive solid with effective (already scaled) dimensions."""

    @property
    @abc.abstractmethod
    def volume(self) -> float:
        """Volume in m³."""

    @property
    @abc.abstractmethod
    def surface_area(self) -> float:
        """Outer surface area in m²."""

    @abc.abstractmethod
    def dimensions(self) -> ShapeDimensions:
        """Dimensions worth reporting for this solid."""


class Box(Solid):
    width: float
    height: float
    depth: float

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth

    @property
    def surface_area(self) -> float:
        w, h, d = self.width, self.height, self.depth
        return 2 * (w * h + h * d + w * d)

    def dimensions(self) -> ShapeDimensions:
        return ShapeDimensions(width=self.width, height=self.height, depth=self.depth)


class Cylinder(Solid):
    radius: float
    height: float

    @property
    def volume(self) -> float:
        return math.pi * self.radius * self.radius * self.height

    @property
    def surface_area(self) -> float:
        return 2 * math.pi * self.radius * (self.radius + self.height)

    def dimensions(self) -> ShapeDimensions:
        return ShapeDimensions(radius=self.radius, height=self.height)


class Sphere(Solid):
    radius: float

    @property
    def volume(self) -> float:
        return (4 / 3) * math.pi * self.radius ** 3

    @property
    def surface_area(self) -> float:
        return 4 * math.pi * self.radius * self.radius

    def dimensions(self) -> ShapeDimensions:
        return ShapeDimensions(radius=self.radius)


class Cone(Solid):
    """Right circular frustum; ``top_radius == 0`` gives a full cone."""

    bottom_radius: float
    top_radius: float
    height: float

    @property
    def slant_height(self) -> float:
        return math.sqrt(self.height ** 2 + (self.bottom_radius - self.top_radius) ** 2)

    @property
    def volume(self) -> float:
        rb, rt = self.bottom_radius, self.top_radius
        return (1 / 3) * math.pi * self.height * (rb * rb + rb * rt + rt * rt)

    @property
    def surface_area(self) -> float:
        rb, rt = self.bottom_radius, self.top_radius
        return math.pi * (rb * rb + rt * rt + (rb + rt) * self.slant_height)

    def dimensions(self) -> ShapeDimensions:
        return ShapeDimensions(radius=self.bottom_radius, height=self.height)


class Torus(Solid):
    major_radius: float
    minor_radius: float

    @property
    def volume(self) -> float:
        return 2 * math.pi ** 2 * self.major_radius * self.minor_radius ** 2

    @property
    def surface_area(self) -> float:
        return 4 * math.pi ** 2 * self.major_radius * self.minor_radius

    def dimensions(self) -> ShapeDimensions:
        return ShapeDimensions(radius=self.major_radius)


# Normalizers: (shape_type defaults merged with raw params, scale) -> Solid

def _box(p: dict[str, float], s: Vector3) -> Solid:
    return Box(width=p["width"] * s.x, height=p["height"] * s.y, depth=p["depth"] * s.z)


def _cylinder(p: dict[str, float], s: Vector3) -> Solid:
    return Cylinder(radius=p["radius"] * max(s.x, s.z), height=p["height"] * s.y)


def _sphere(p: dict[str, float], s: Vector3) -> Solid:
    return Sphere(radius=p["radius"] * max(s.x, s.y, s.z))


def _cone(p: dict[str, float], s: Vector3) -> Solid:
    radial = max(s.x, s.z)
    return Cone(
        bottom_radius=p["bottomRadius"] * radial,
        top_radius=p["topRadius"] * radial,
        height=p["height"] * s.y,
    )


def _torus(p: dict[str, float], s: Vector3) -> Solid:
    return Torus(major_radius=p["majorRadius"] * max(s.x, s.z), minor_radius=p["minorRadius"] * s.y)


SOLID_REGISTRY: dict[str, Callable[[dict[str, float], Vector3], Solid]] = {
    "box": _box,
    "cylinder": _cylinder,
    "sphere": _sphere,
    "cone": _cone,
    "torus": _torus,
}


def solid_from_shape(shape: ShapeObject) -> Solid | None:
    """Return the normalized solid for *shape*, or None for an unknown type."""
    builder = SOLID_REGISTRY.get(shape.shape_type)
    if builder is None:
        logger.warning(
            "Unknown shape type %r on object %s; quantities will be zero",
            shape.shape_type,
            shape.id,
        )
        return None

    params = dict(SHAPE_DEFAULTS[shape.shape_type])
    for key in params:
        value = shape.parameters.get(key)
        if value is not None:
            params[key] = float(value)

    return builder(params, shape.transform.scale)
