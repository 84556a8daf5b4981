"""PricingProvider interface and local seed-data provider."""

from __future__ import annotations

import abc
import logging
from typing import Any

from hydrobim.cost.seed_data import (
    DEFAULT_PRICING,
    FORMWORK_COST_PER_M2,
    MATERIAL_COLOR_HINTS,
    SEED_PRICING,
)

logger = logging.getLogger(__name__)

DEFAULT_MATERIAL = "default"


class UnitCost:
    """Volumetric unit cost of one material."""

    def __init__(
        self,
        material: str,
        material_cost_per_m3: float,
        source: str = "",
    ) -> None:
        self.material = material
        self.material_cost_per_m3 = material_cost_per_m3
        self.source = source

    def to_dict(self) -> dict[str, Any]:
        return {
            "material": self.material,
            "material_cost_per_m3": self.material_cost_per_m3,
            "source": self.source,
        }


def material_type_from_color(color: str | None) -> str:
    """Classify a display color as 'concrete', 'steel' or 'default'."""
    if not color:
        return DEFAULT_MATERIAL
    lowered = color.lower()
    for material, hints in MATERIAL_COLOR_HINTS.items():
        if any(hint in lowered for hint in hints):
            return material
    return DEFAULT_MATERIAL


class PricingProvider(abc.ABC):
    """Abstract pricing provider."""

    @abc.abstractmethod
    def get_unit_cost(self, material: str) -> UnitCost:
        """Return the unit cost for *material*, falling back to a default."""

    @abc.abstractmethod
    def get_formwork_cost(self) -> float:
        """Return formwork cost in USD per m²."""

    @abc.abstractmethod
    def is_available(self) -> bool:
        """Return True if this provider is ready."""


class LocalProvider(PricingProvider):
    """Pricing from embedded seed data.  Always available."""

    def get_unit_cost(self, material: str) -> UnitCost:
        data = SEED_PRICING.get(material.lower())
        if data is None:
            data = DEFAULT_PRICING
            material = DEFAULT_MATERIAL
        return UnitCost(
            material=material,
            material_cost_per_m3=data["material_cost_per_m3"],
            source=data.get("source", ""),
        )

    def get_formwork_cost(self) -> float:
        return FORMWORK_COST_PER_M2

    def is_available(self) -> bool:
        return True
