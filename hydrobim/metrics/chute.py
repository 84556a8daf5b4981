"""ChuteCalculator — steep channel measured along its slope."""

from __future__ import annotations

import math

from hydrobim.config import DEFAULT_WALL_THICKNESS
from hydrobim.geometry.sections import chute_section
from hydrobim.metrics.base import MetricsCalculator
from hydrobim.models.metrics import Metrics
from hydrobim.models.scene import ChuteObject, or_default


def inclined_length(length: float, drop: float) -> float:
    """True length of the sloped floor for a horizontal run and a drop."""
    return math.sqrt(length * length + drop * drop)


class ChuteCalculator(MetricsCalculator):
    """Volumes and areas use the inclined length, not the horizontal run."""

    @property
    def structure_type(self) -> str:
        return "chute"

    def calculate(self, obj: ChuteObject) -> Metrics:
        length = or_default(obj.length, 0.0)
        drop = or_default(obj.drop, 0.0)
        thickness = or_default(obj.thickness, DEFAULT_WALL_THICKNESS)
        run = inclined_length(length, drop)

        section = chute_section(obj).properties()
        return self._conveyance_metrics(section, thickness, run, length, inclined_length=run)
