"""ChannelCalculator — prismatic open channel."""

from __future__ import annotations

from hydrobim.config import DEFAULT_WALL_THICKNESS
from hydrobim.geometry.sections import channel_section, section_properties
from hydrobim.metrics.base import MetricsCalculator
from hydrobim.models.metrics import Metrics
from hydrobim.models.scene import ChannelObject, or_default


class ChannelCalculator(MetricsCalculator):
    """Constant section along the channel length."""

    @property
    def structure_type(self) -> str:
        return "channel"

    def calculate(self, obj: ChannelObject) -> Metrics:
        length = or_default(obj.length, 0.0)
        thickness = or_default(obj.thickness, DEFAULT_WALL_THICKNESS)
        section = section_properties(channel_section(obj.section))
        return self._conveyance_metrics(section, thickness, length, length)
