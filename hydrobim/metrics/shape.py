"""ShapeCalculator — metrics of a primitive solid."""

from __future__ import annotations

from hydrobim.geometry.solids import solid_from_shape
from hydrobim.metrics.base import MetricsCalculator
from hydrobim.models.metrics import Metrics
from hydrobim.models.scene import ShapeObject


class ShapeCalculator(MetricsCalculator):
    """Shapes are the structure itself, so no concrete volume is derived."""

    @property
    def structure_type(self) -> str:
        return "shape"

    def calculate(self, obj: ShapeObject) -> Metrics:
        solid = solid_from_shape(obj)
        if solid is None:
            return Metrics()
        return Metrics(
            volume=solid.volume,
            surface_area=solid.surface_area,
            dimensions=solid.dimensions(),
        )
