"""Abstract MetricsCalculator interface.

Every calculator turns one kind of scene object into a :class:`Metrics`
record.  Conveyance calculators share :meth:`_conveyance_metrics`, which
applies the prismatic formulas to a section and a run length.
"""

from __future__ import annotations

import abc
from typing import Any

from hydrobim.models.metrics import Metrics, SectionProperties


class MetricsCalculator(abc.ABC):
    """Base class for all structure calculators."""

    @property
    @abc.abstractmethod
    def structure_type(self) -> str:
        """The scene object ``type`` this calculator handles."""

    @abc.abstractmethod
    def calculate(self, obj: Any) -> Metrics:
        """Return the metrics for *obj*."""

    # Helpers shared by conveyance calculators

    @staticmethod
    def _conveyance_metrics(
        section: SectionProperties,
        thickness: float,
        run_length: float,
        length: float,
        inclined_length: float | None = None,
    ) -> Metrics:
        """Water volume, wetted surface and lining concrete over *run_length*."""
        return Metrics(
            volume=section.cross_section_area * run_length,
            surface_area=section.wet_perimeter * run_length,
            concrete_volume=section.wet_perimeter * thickness * run_length,
            cross_section_area=section.cross_section_area,
            wet_perimeter=section.wet_perimeter,
            length=length,
            inclined_length=inclined_length,
        )
