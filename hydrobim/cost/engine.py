"""CostEngine — material, formwork and total cost of one structure.

Usage::

    from hydrobim.cost import CostEngine

    engine = CostEngine()
    report = engine.estimate(obj, metrics)
"""

from __future__ import annotations

import logging
from typing import Any

from hydrobim.cost.pricing import LocalProvider, PricingProvider, material_type_from_color
from hydrobim.cost.report import CostReport
from hydrobim.models.metrics import Metrics

logger = logging.getLogger(__name__)


class CostEngine:
    """Cost estimation engine.

    Parameters
    ----------
    provider:
        Pricing provider.  Defaults to LocalProvider (embedded seed data).
    """

    def __init__(self, provider: PricingProvider | None = None) -> None:
        self.provider = provider or LocalProvider()

    def estimate(self, obj: Any, metrics: Metrics) -> CostReport:
        """Estimate cost for a scene object from its computed metrics.

        Shapes are priced by their own volume at the rate of the material
        inferred from their color.  Channels, transitions and chutes are
        always concrete and are priced by their concrete volume.
        """
        if obj.type == "shape":
            material = material_type_from_color(obj.material.color)
            quantity_m3 = metrics.volume
        else:
            material = "concrete"
            quantity_m3 = metrics.concrete_volume

        unit_cost = self.provider.get_unit_cost(material)
        formwork_rate = self.provider.get_formwork_cost()

        material_cost = quantity_m3 * unit_cost.material_cost_per_m3
        formwork_cost = metrics.surface_area * formwork_rate
        total = material_cost + formwork_cost

        logger.debug(
            "Cost for %s %s: material=%.2f formwork=%.2f total=%.2f",
            obj.type,
            obj.id,
            material_cost,
            formwork_cost,
            total,
        )

        return CostReport(
            element_id=obj.id,
            structure_type=obj.type,
            material=unit_cost.material,
            material_cost_usd=material_cost,
            formwork_cost_usd=formwork_cost,
            total_cost_usd=total,
            unit_costs={
                unit_cost.material: unit_cost.to_dict(),
                "formwork": {"cost_per_m2": formwork_rate},
            },
            quantities={
                "material_volume_m3": quantity_m3,
                "formwork_area_m2": metrics.surface_area,
            },
            source=unit_cost.source,
        )
