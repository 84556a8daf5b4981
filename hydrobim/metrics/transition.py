"""TransitionCalculator — prismoidal approximation between two sections."""

from __future__ import annotations

from hydrobim.config import DEFAULT_WALL_THICKNESS
from hydrobim.geometry.sections import section_properties, transition_section
from hydrobim.metrics.base import MetricsCalculator
from hydrobim.models.metrics import Metrics, SectionProperties
from hydrobim.models.scene import TransitionObject, TransitionSection, or_default


class TransitionCalculator(MetricsCalculator):
    """Averages the derived end quantities, not the end dimensions.

    Inlet and outlet area and wetted perimeter are computed independently
    and then averaged, together with the two wall thicknesses.  Averaging
    widths and depths first would give different numbers for trapezoidal
    ends.
    """

    @property
    def structure_type(self) -> str:
        return "transition"

    def calculate(self, obj: TransitionObject) -> Metrics:
        length = or_default(obj.length, 0.0)
        inlet = section_properties(transition_section(obj.inlet))
        outlet = section_properties(transition_section(obj.outlet))

        average = SectionProperties(
            cross_section_area=(inlet.cross_section_area + outlet.cross_section_area) / 2,
            wet_perimeter=(inlet.wet_perimeter + outlet.wet_perimeter) / 2,
        )
        thickness = (self._wall_thickness(obj.inlet) + self._wall_thickness(obj.outlet)) / 2

        return self._conveyance_metrics(average, thickness, length, length)

    def _wall_thickness(self, end: TransitionSection | None) -> float:
        if end is None:
            return DEFAULT_WALL_THICKNESS
        return or_default(end.wall_thickness, DEFAULT_WALL_THICKNESS)
