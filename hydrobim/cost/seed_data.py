"""Embedded unit prices — no external price files required.

Rough takeoff prices in USD for concrete conveyance work.
"""

from __future__ import annotations

from typing import Any

SOURCE = "HydroBIM default takeoff rates"

# material -> {material_cost_per_m3, source}
SEED_PRICING: dict[str, dict[str, Any]] = {
    "concrete": {
        "material_cost_per_m3": 150.00,
        "source": SOURCE,
    },
    "steel": {
        "material_cost_per_m3": 2500.00,
        "source": SOURCE,
    },
}

DEFAULT_PRICING: dict[str, Any] = {
    "material_cost_per_m3": 100.00,
    "source": SOURCE,
}

# Formwork, per m² of formed surface
FORMWORK_COST_PER_M2 = 25.00

# Color fragments (lower-case) that identify a shape's material
MATERIAL_COLOR_HINTS: dict[str, tuple[str, ...]] = {
    "concrete": ("808080", "gray", "grey"),
    "steel": ("c0c0c0", "silver"),
}
