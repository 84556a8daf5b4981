"""CostReport model and Markdown generation."""

from __future__ import annotations

import json
from typing import Any


class CostReport:
    """Cost breakdown for one structure."""

    def __init__(
        self,
        element_id: str = "",
        structure_type: str = "",
        material: str = "",
        material_cost_usd: float = 0.0,
        formwork_cost_usd: float = 0.0,
        total_cost_usd: float = 0.0,
        unit_costs: dict[str, Any] | None = None,
        quantities: dict[str, float] | None = None,
        source: str = "",
    ) -> None:
        self.element_id = element_id
        self.structure_type = structure_type
        self.material = material
        self.material_cost_usd = material_cost_usd
        self.formwork_cost_usd = formwork_cost_usd
        self.total_cost_usd = total_cost_usd
        self.unit_costs = unit_costs or {}
        self.quantities = quantities or {}
        self.source = source

    def to_markdown(self) -> str:
        """Render a short cost summary."""
        lines: list[str] = []

        lines.append(f"# Cost Estimate — {self.element_id or 'Unknown'}")
        lines.append("")
        lines.append(f"**Structure:** `{self.structure_type}`")
        lines.append(f"**Material:** {self.material}")
        lines.append(f"**Source:** {self.source}")
        lines.append("")

        if self.quantities:
            lines.append("## Quantities")
            lines.append("")
            lines.append("| Quantity | Value |")
            lines.append("|---------|-------|")
            for key, val in self.quantities.items():
                lines.append(f"| {key} | {val:.3f} |")
            lines.append("")

        lines.append("## Cost Breakdown")
        lines.append("")
        lines.append("| Category | Amount (USD) |")
        lines.append("|----------|-------------|")
        lines.append(f"| Material Cost | ${self.material_cost_usd:,.2f} |")
        lines.append(f"| Formwork Cost | ${self.formwork_cost_usd:,.2f} |")
        lines.append(f"| **Total Estimate** | **${self.total_cost_usd:,.2f}** |")
        lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        """Return structured JSON for audit trail."""
        return json.dumps(self.to_dict(), indent=2, default=str)

    def to_dict(self) -> dict[str, Any]:
        return {
            "element_id": self.element_id,
            "structure_type": self.structure_type,
            "material": self.material,
            "material_cost_usd": self.material_cost_usd,
            "formwork_cost_usd": self.formwork_cost_usd,
            "total_cost_usd": self.total_cost_usd,
            "unit_costs": self.unit_costs,
            "quantities": self.quantities,
            "source": self.source,
        }
