"""Cross-section hydraulics: flow area and wetted perimeter.

Channels and transitions name their section type explicitly; chutes are
rectangular when their side slope is zero and trapezoidal otherwise.
"""

from __future__ import annotations

import abc
import logging
import math
from typing import Callable

from pydantic import BaseModel

from hydrobim.config import (
    DEFAULT_TRANSITION_SIDE_SLOPE,
    DEFAULT_TRAPEZOIDAL_SIDE_SLOPE,
    DEFAULT_TRIANGULAR_SIDE_SLOPE,
)
from hydrobim.models.metrics import SectionProperties
from hydrobim.models.scene import ChannelSection, ChuteObject, TransitionSection, or_default

logger = logging.getLogger(__name__)


def side_length(depth: float, side_slope: float) -> float:
    """Length of one sloped side wall of height *depth* at *side_slope* H:V."""
    return math.sqrt(depth * depth + (side_slope * depth) ** 2)


class Section(BaseModel, abc.ABC):
    """A fully-populated cross-section."""

    @property
    @abc.abstractmethod
    def area(self) -> float:
        """Flow area in m²."""

    @property
    @abc.abstractmethod
    def wet_perimeter(self) -> float:
        """Wetted perimeter in m."""

    def properties(self) -> SectionProperties:
        return SectionProperties(cross_section_area=self.area, wet_perimeter=self.wet_perimeter)


class RectangularSection(Section):
    width: float
    depth: float

    @property
    def area(self) -> float:
        return self.width * self.depth

    @property
    def wet_perimeter(self) -> float:
        return self.width + 2 * self.depth


class TrapezoidalSection(Section):
    bottom_width: float
    depth: float
    side_slope: float

    @property
    def top_width(self) -> float:
        return self.bottom_width + 2 * self.side_slope * self.depth

    @property
    def area(self) -> float:
        return (self.bottom_width + self.top_width) / 2 * self.depth

    @property
    def wet_perimeter(self) -> float:
        return self.bottom_width + 2 * side_length(self.depth, self.side_slope)


class TriangularSection(Section):
    depth: float
    side_slope: float

    @property
    def area(self) -> float:
        return self.side_slope * self.depth * self.depth

    @property
    def wet_perimeter(self) -> float:
        return 2 * side_length(self.depth, self.side_slope)


# Channel sections

def _channel_rectangular(s: ChannelSection) -> Section:
    return RectangularSection(width=or_default(s.width, 0.0), depth=or_default(s.depth, 0.0))


def _channel_trapezoidal(s: ChannelSection) -> Section:
    return TrapezoidalSection(
        bottom_width=or_default(s.bottom_width, 0.0),
        depth=or_default(s.depth, 0.0),
        side_slope=or_default(s.side_slope, DEFAULT_TRAPEZOIDAL_SIDE_SLOPE),
    )


def _channel_triangular(s: ChannelSection) -> Section:
    return TriangularSection(
        depth=or_default(s.depth, 0.0),
        side_slope=or_default(s.side_slope, DEFAULT_TRIANGULAR_SIDE_SLOPE),
    )


CHANNEL_SECTION_REGISTRY: dict[str, Callable[[ChannelSection], Section]] = {
    "rectangular": _channel_rectangular,
    "trapezoidal": _channel_trapezoidal,
    "triangular": _channel_triangular,
}


# Transition ends are rectangular or trapezoidal; ``width`` is the bottom
# width of a trapezoidal end

def _transition_rectangular(s: TransitionSection) -> Section:
    return RectangularSection(width=or_default(s.width, 0.0), depth=or_default(s.depth, 0.0))


def _transition_trapezoidal(s: TransitionSection) -> Section:
    return TrapezoidalSection(
        bottom_width=or_default(s.width, 0.0),
        depth=or_default(s.depth, 0.0),
        side_slope=or_default(s.side_slope, DEFAULT_TRANSITION_SIDE_SLOPE),
    )


TRANSITION_SECTION_REGISTRY: dict[str, Callable[[TransitionSection], Section]] = {
    "rectangular": _transition_rectangular,
    "trapezoidal": _transition_trapezoidal,
}


def channel_section(section: ChannelSection | None) -> Section | None:
    """Normalize a channel's section; None if absent, untyped or of unknown type."""
    if section is None or section.type is None:
        return None
    builder = CHANNEL_SECTION_REGISTRY.get(section.type)
    if builder is None:
        logger.warning("Unknown channel section type %r; area and perimeter will be zero", section.type)
        return None
    return builder(section)


def transition_section(end: TransitionSection | None) -> Section | None:
    """Normalize one end of a transition; None if absent or of unknown type."""
    if end is None:
        return None
    builder = TRANSITION_SECTION_REGISTRY.get(end.section_type)
    if builder is None:
        logger.warning("Unknown transition section type %r; area and perimeter will be zero", end.section_type)
        return None
    return builder(end)


def chute_section(chute: ChuteObject) -> Section:
    """Chutes are rectangular at zero side slope, trapezoidal otherwise."""
    width = or_default(chute.width, 0.0)
    depth = or_default(chute.depth, 0.0)
    side_slope = or_default(chute.side_slope, 0.0)
    if side_slope == 0:
        return RectangularSection(width=width, depth=depth)
    return TrapezoidalSection(bottom_width=width, depth=depth, side_slope=side_slope)


def section_properties(section: Section | None) -> SectionProperties:
    """Area and wetted perimeter of *section*; zeros when there is none."""
    if section is None:
        return SectionProperties()
    return section.properties()
