"""Per-structure structural summary.

Applies the advisor rules to a conveyance's metrics using the footprint
and wall conventions of each structure type:

* channel — solado width is the section width plus both walls;
* transition — mean of inlet and outlet widths plus both inlet walls, and
  the inlet wall thickness drives the rebar;
* chute — solado length is the inclined length.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from hydrobim.config import DEFAULT_WALL_THICKNESS, MIN_REBAR_RATIO, STEEL_FY_MPA, STEEL_GRADE
from hydrobim.models.metrics import Metrics
from hydrobim.models.scene import ChannelObject, ChuteObject, TransitionObject, or_default
from hydrobim.structural.advisor import (
    ConcreteGrade,
    RebarRequirement,
    Solado,
    recommend_concrete_grade,
    required_rebar_area,
    solado_properties,
)

logger = logging.getLogger(__name__)


class StructuralDesign(BaseModel):
    concrete: ConcreteGrade
    rebar: RebarRequirement
    solado: Solado
    steel_grade: str = STEEL_GRADE
    steel_fy_mpa: float = STEEL_FY_MPA
    min_rebar_ratio: float = MIN_REBAR_RATIO


def _footprint(obj: Any, metrics: Metrics) -> tuple[float, float, float]:
    """Return (wall thickness, solado length, solado width) for *obj*."""
    if isinstance(obj, ChannelObject):
        thickness = or_default(obj.thickness, DEFAULT_WALL_THICKNESS)
        width = or_default(obj.section.width if obj.section else None, 0.0)
        return thickness, metrics.length, width + 2 * thickness

    if isinstance(obj, TransitionObject):
        thickness = or_default(obj.inlet.wall_thickness if obj.inlet else None, DEFAULT_WALL_THICKNESS)
        inlet_width = or_default(obj.inlet.width if obj.inlet else None, 0.0)
        outlet_width = or_default(obj.outlet.width if obj.outlet else None, 0.0)
        return thickness, metrics.length, (inlet_width + outlet_width) / 2 + 2 * thickness

    if isinstance(obj, ChuteObject):
        thickness = or_default(obj.thickness, DEFAULT_WALL_THICKNESS)
        run = metrics.inclined_length if metrics.inclined_length is not None else metrics.length
        return thickness, run, or_default(obj.width, 0.0) + 2 * thickness

    raise TypeError(f"No structural design for {type(obj).__name__}")


def structural_design(obj: Any, metrics: Metrics) -> StructuralDesign | None:
    """Structural summary for a conveyance; None for primitive shapes."""
    if obj.type == "shape":
        return None

    thickness, length, width = _footprint(obj, metrics)
    design = StructuralDesign(
        concrete=recommend_concrete_grade(metrics.concrete_volume),
        rebar=required_rebar_area(metrics.wet_perimeter * thickness, thickness),
        solado=solado_properties(length, width),
    )
    logger.debug(
        "Structural design for %s %s: f'c=%s MPa, As=%.3f cm2/m",
        obj.type,
        obj.id,
        design.concrete.fc_mpa,
        design.rebar.rebar_area_per_meter,
    )
    return design
