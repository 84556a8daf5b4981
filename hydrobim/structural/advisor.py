"""Structural rules of thumb: concrete grade, minimum steel, solado.

These are quantity-takeoff aids, not a structural design.  The concrete
grade follows the size of the pour, not the loads on it.
"""

from __future__ import annotations

from pydantic import BaseModel

from hydrobim.config import MIN_REBAR_RATIO, SOLADO_THICKNESS


class ConcreteGrade(BaseModel):
    """Specified compressive strength f'c."""

    fc_mpa: float
    fc_kg_cm2: float
    type: str


class RebarRequirement(BaseModel):
    """Minimum reinforcement for a wall/slab section."""

    rebar_area: float
    """Total area over the gross section, cm²."""

    rebar_area_per_meter: float
    """Area per metre of wall, cm²/m."""


class Solado(BaseModel):
    """Lean-concrete mud mat under the structure footprint."""

    area: float
    volume: float
    thickness: float = SOLADO_THICKNESS


def _grade(fc_mpa: float, fc_kg_cm2: float) -> ConcreteGrade:
    return ConcreteGrade(fc_mpa=fc_mpa, fc_kg_cm2=fc_kg_cm2, type=f"Concreto f'c={fc_kg_cm2:.0f} kg/cm²")


# (upper bound on concrete volume m³, exclusive; grade).  First match wins.
CONCRETE_GRADES: list[tuple[float, ConcreteGrade]] = [
    (5.0, _grade(21, 210)),
    (20.0, _grade(24, 245)),
    (float("inf"), _grade(28, 280)),
]


def recommend_concrete_grade(concrete_volume: float) -> ConcreteGrade:
    """Pick f'c from the concrete volume of the structure."""
    for upper, grade in CONCRETE_GRADES:
        if concrete_volume < upper:
            return grade
    # NaN compares false against every bound
    return CONCRETE_GRADES[-1][1]


def required_rebar_area(concrete_area: float, thickness: float) -> RebarRequirement:
    """Minimum steel from ρ_min.

    Parameters
    ----------
    concrete_area:
        Gross concrete cross-section in m².
    thickness:
        Wall thickness in m.
    """
    concrete_area_cm2 = concrete_area * 10000
    thickness_cm = thickness * 100
    return RebarRequirement(
        rebar_area=MIN_REBAR_RATIO * concrete_area_cm2,
        rebar_area_per_meter=MIN_REBAR_RATIO * thickness_cm * 100,
    )


def solado_properties(length: float, width: float) -> Solado:
    """Size the mud mat.  *width* already includes the wall allowance."""
    area = length * width
    return Solado(area=area, volume=area * SOLADO_THICKNESS, thickness=SOLADO_THICKNESS)
