"""Structural advisor — concrete grade, minimum reinforcement, solado."""

from hydrobim.structural.advisor import (
    CONCRETE_GRADES,
    ConcreteGrade,
    RebarRequirement,
    Solado,
    recommend_concrete_grade,
    required_rebar_area,
    solado_properties,
)
from hydrobim.structural.design import StructuralDesign, structural_design

__all__ = [
    "CONCRETE_GRADES",
    "ConcreteGrade",
    "RebarRequirement",
    "Solado",
    "StructuralDesign",
    "recommend_concrete_grade",
    "required_rebar_area",
    "solado_properties",
    "structural_design",
]
