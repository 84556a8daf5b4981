"""Structure metrics calculators — one per scene object type."""

from __future__ import annotations

import logging
from typing import Any

from hydrobim.metrics.base import MetricsCalculator
from hydrobim.metrics.channel import ChannelCalculator
from hydrobim.metrics.chute import ChuteCalculator
from hydrobim.metrics.shape import ShapeCalculator
from hydrobim.metrics.transition import TransitionCalculator
from hydrobim.models.metrics import Metrics

logger = logging.getLogger(__name__)


class UnsupportedStructureError(ValueError):
    """Raised when no calculator is registered for a structure type."""


CALCULATOR_REGISTRY: dict[str, type[MetricsCalculator]] = {
    "shape": ShapeCalculator,
    "channel": ChannelCalculator,
    "transition": TransitionCalculator,
    "chute": ChuteCalculator,
}


def get_calculator(structure_type: str) -> MetricsCalculator:
    """Return the calculator instance for a structure type."""
    calculator_cls = CALCULATOR_REGISTRY.get(structure_type)
    if calculator_cls is None:
        raise UnsupportedStructureError(f"No metrics calculator for structure type {structure_type!r}")
    return calculator_cls()


def calculate_metrics(obj: Any) -> Metrics:
    """Compute the metrics of any supported scene object."""
    metrics = get_calculator(obj.type).calculate(obj)
    logger.debug(
        "Metrics for %s %s: volume=%.6f surface=%.6f concrete=%.6f",
        obj.type,
        obj.id,
        metrics.volume,
        metrics.surface_area,
        metrics.concrete_volume,
    )
    return metrics


__all__ = [
    "CALCULATOR_REGISTRY",
    "ChannelCalculator",
    "ChuteCalculator",
    "MetricsCalculator",
    "ShapeCalculator",
    "TransitionCalculator",
    "UnsupportedStructureError",
    "calculate_metrics",
    "get_calculator",
]
