"""Cost estimation — material and formwork pricing per structure."""

from hydrobim.cost.engine import CostEngine
from hydrobim.cost.pricing import LocalProvider, PricingProvider, UnitCost, material_type_from_color
from hydrobim.cost.report import CostReport

__all__ = [
    "CostEngine",
    "CostReport",
    "LocalProvider",
    "PricingProvider",
    "UnitCost",
    "material_type_from_color",
]
