"""ReportAssembler — flattens metrics, structural design and cost into rows.

Row order for every object:

    Identification -> Geometry -> Dimensions -> Hydraulics -> Quantities
    -> Structural -> Costs -> Metadata -> State

Dimension rows are only emitted for parameters that are set and non-zero.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from hydrobim.config import (
    CURRENCY_DECIMALS,
    DEFAULT_MANNING_N,
    OBJECT_ID_DISPLAY_LENGTH,
    RATIO_DECIMALS,
    REBAR_DECIMALS,
    SLOPE_DECIMALS,
    STRENGTH_DECIMALS,
)
from hydrobim.cost.engine import CostEngine
from hydrobim.cost.report import CostReport
from hydrobim.metrics import calculate_metrics
from hydrobim.models.metrics import Metrics
from hydrobim.models.scene import ChannelObject, ChuteObject, ShapeObject, TransitionObject
from hydrobim.report.formatting import capitalize, format_number, format_timestamp
from hydrobim.report.labels import LabelProvider, default_labels
from hydrobim.report.rows import BIMReport, BIMRow
from hydrobim.structural.design import StructuralDesign, structural_design

logger = logging.getLogger(__name__)

# category key -> English fallback
CATEGORIES: dict[str, str] = {
    "identification": "Identification",
    "geometry": "Geometry",
    "dimensions": "Dimensions",
    "hydraulics": "Hydraulics",
    "quantities": "Quantities",
    "structural": "Structural",
    "costs": "Costs",
    "metadata": "Metadata",
    "state": "State",
}

M, M2, M3, USD = "m", "m²", "m³", "USD"


class _RowWriter:
    """Appends translated rows for one report."""

    def __init__(self, t: LabelProvider) -> None:
        self.t = t
        self.rows: list[BIMRow] = []

    def add(
        self,
        category: str,
        key: str,
        fallback: str,
        value: str,
        unit: str | None = None,
        highlight: bool = False,
    ) -> None:
        self.rows.append(
            BIMRow(
                category=self.t(f"bim.{category}", CATEGORIES[category]),
                property=self.t(f"bim.{key}", fallback),
                value=value,
                unit=unit,
                highlight=highlight,
            )
        )

    def length(self, category: str, key: str, fallback: str, value: float, highlight: bool = False) -> None:
        self.add(category, key, fallback, format_number(value), M, highlight)

    def length_if_set(self, key: str, fallback: str, value: float | None) -> None:
        if value:
            self.length("dimensions", key, fallback, value)


class ReportAssembler:
    """Build the ordered BIM rows for a scene object.

    Parameters
    ----------
    labels:
        ``t(key, fallback)`` callable for display strings.  Defaults to the
        English fallbacks.
    cost_engine:
        Cost engine to price structures with.  Defaults to local seed rates.
    """

    def __init__(
        self,
        labels: LabelProvider | None = None,
        cost_engine: CostEngine | None = None,
    ) -> None:
        self.labels = labels or default_labels
        self.cost_engine = cost_engine or CostEngine()
        self._sections: dict[str, Callable[[_RowWriter, Any, Metrics], None]] = {
            "shape": self._shape_rows,
            "channel": self._channel_rows,
            "transition": self._transition_rows,
            "chute": self._chute_rows,
        }

    def build(self, obj: Any) -> BIMReport:
        """Return the report for *obj*."""
        writer = _RowWriter(self.labels)
        metrics = calculate_metrics(obj)

        self._identification_rows(writer, obj)
        self._sections[obj.type](writer, obj, metrics)
        self._metadata_rows(writer, obj)

        logger.debug("Assembled %d rows for %s %s", len(writer.rows), obj.type, obj.id)
        return BIMReport(object_id=obj.id, rows=writer.rows)

    # Common blocks

    def _identification_rows(self, w: _RowWriter, obj: Any) -> None:
        w.add("identification", "objectId", "Object ID", obj.id[:OBJECT_ID_DISPLAY_LENGTH] + "...")
        w.add("identification", "objectType", "Type", capitalize(obj.type))
        w.add("identification", "name", "Name", obj.name, highlight=True)

    def _metadata_rows(self, w: _RowWriter, obj: Any) -> None:
        w.add("metadata", "created", "Created", format_timestamp(obj.created_at))
        w.add("metadata", "modified", "Modified", format_timestamp(obj.updated_at))
        yes, no = self.labels("common.yes", "Yes"), self.labels("common.no", "No")
        w.add("state", "visible", "Visible", yes if obj.visible else no)
        w.add("state", "locked", "Locked", yes if obj.locked else no)

    def _hydraulics_rows(self, w: _RowWriter, slope: float, manning_n: float | None) -> None:
        w.add("hydraulics", "slope", "Slope", format_number(slope, SLOPE_DECIMALS), "m/m")
        if manning_n is not None:
            w.add("hydraulics", "manningN", "Manning's n", format_number(manning_n, RATIO_DECIMALS))

    def _conveyance_quantity_rows(self, w: _RowWriter, metrics: Metrics) -> None:
        w.add("quantities", "waterVolume", "Water Volume", format_number(metrics.volume), M3, highlight=True)
        w.add("quantities", "crossSectionArea", "Cross Section Area", format_number(metrics.cross_section_area), M2)
        w.add("quantities", "wetSurfaceArea", "Wet Surface Area", format_number(metrics.surface_area), M2)
        w.add("quantities", "concreteVolume", "Concrete Volume", format_number(metrics.concrete_volume), M3, highlight=True)

    def _structural_rows(self, w: _RowWriter, design: StructuralDesign) -> None:
        concrete = design.concrete
        strength = (
            f"{format_number(concrete.fc_mpa, STRENGTH_DECIMALS)} MPa / "
            f"{format_number(concrete.fc_kg_cm2, STRENGTH_DECIMALS)} kg/cm²"
        )
        w.add("structural", "concreteType", "Concrete Type", concrete.type)
        w.add("structural", "concreteStrength", "Concrete Strength (f'c)", strength)
        w.add("structural", "steelGrade", "Steel Grade", design.steel_grade)
        w.add("structural", "steelYield", "Steel Yield Strength (fy)", format_number(design.steel_fy_mpa, STRENGTH_DECIMALS), "MPa")
        w.add("structural", "minRebarRatio", "Minimum Rebar Ratio (ρ_min)", format_number(design.min_rebar_ratio, RATIO_DECIMALS))
        w.add(
            "structural",
            "rebarArea",
            "Required Rebar Area",
            format_number(design.rebar.rebar_area_per_meter, REBAR_DECIMALS),
            "cm²/m",
            highlight=True,
        )
        w.add("structural", "soladoThickness", "Solado Thickness", format_number(design.solado.thickness), M)
        w.add("structural", "soladoArea", "Solado Area", format_number(design.solado.area), M2)
        w.add("structural", "soladoVolume", "Solado Volume", format_number(design.solado.volume), M3)

    def _cost_rows(self, w: _RowWriter, cost: CostReport, material_key: str, material_fallback: str) -> None:
        w.add("costs", material_key, material_fallback, format_number(cost.material_cost_usd, CURRENCY_DECIMALS), USD)
        w.add("costs", "formworkCost", "Formwork Cost", format_number(cost.formwork_cost_usd, CURRENCY_DECIMALS), USD)
        w.add(
            "costs",
            "totalEstimate",
            "Total Estimate",
            format_number(cost.total_cost_usd, CURRENCY_DECIMALS),
            USD,
            highlight=True,
        )

    def _conveyance_tail(self, w: _RowWriter, obj: Any, metrics: Metrics) -> None:
        """Quantities, structural and cost blocks shared by all conveyances."""
        self._conveyance_quantity_rows(w, metrics)
        design = structural_design(obj, metrics)
        if design is not None:
            self._structural_rows(w, design)
        self._cost_rows(w, self.cost_engine.estimate(obj, metrics), "concreteCost", "Concrete Cost")

    # Per-kind blocks

    def _shape_rows(self, w: _RowWriter, obj: ShapeObject, metrics: Metrics) -> None:
        w.add("geometry", "shapeType", "Shape Type", capitalize(obj.shape_type))

        dims = metrics.dimensions
        w.length_if_set("width", "Width", dims.width)
        w.length_if_set("height", "Height", dims.height)
        w.length_if_set("depth", "Depth", dims.depth)
        w.length_if_set("radius", "Radius", dims.radius)

        w.add("quantities", "volume", "Volume", format_number(metrics.volume), M3, highlight=True)
        w.add("quantities", "surfaceArea", "Surface Area", format_number(metrics.surface_area), M2)

        self._cost_rows(w, self.cost_engine.estimate(obj, metrics), "materialCost", "Material Cost")

    def _channel_rows(self, w: _RowWriter, obj: ChannelObject, metrics: Metrics) -> None:
        section = obj.section
        w.add("geometry", "sectionType", "Section Type", capitalize(section.type if section else None))

        w.length("dimensions", "length", "Length", metrics.length, highlight=True)
        if section is not None:
            if section.type == "rectangular":
                w.length_if_set("width", "Width", section.width)
            if section.type == "trapezoidal":
                w.length_if_set("bottomWidth", "Bottom Width", section.bottom_width)
            w.length_if_set("depth", "Depth", section.depth)
        w.length_if_set("freeBoard", "Free Board", obj.free_board)
        w.length_if_set("thickness", "Wall Thickness", obj.thickness)

        manning_n = obj.manning_n if obj.manning_n is not None else DEFAULT_MANNING_N
        self._hydraulics_rows(w, obj.slope or 0.0, manning_n)
        self._conveyance_tail(w, obj, metrics)

    def _transition_rows(self, w: _RowWriter, obj: TransitionObject, metrics: Metrics) -> None:
        w.add("geometry", "transitionType", "Transition Type", capitalize(obj.transition_type))

        w.length("dimensions", "length", "Length", metrics.length, highlight=True)
        if obj.inlet is not None:
            w.length("dimensions", "inletWidth", "Inlet Width", obj.inlet.width or 0.0)
            w.length("dimensions", "inletDepth", "Inlet Depth", obj.inlet.depth or 0.0)
        if obj.outlet is not None:
            w.length("dimensions", "outletWidth", "Outlet Width", obj.outlet.width or 0.0)
            w.length("dimensions", "outletDepth", "Outlet Depth", obj.outlet.depth or 0.0)
        if obj.inlet is not None:
            w.length_if_set("thickness", "Wall Thickness", obj.inlet.wall_thickness)

        self._hydraulics_rows(w, transition_slope(obj), None)
        self._conveyance_tail(w, obj, metrics)

    def _chute_rows(self, w: _RowWriter, obj: ChuteObject, metrics: Metrics) -> None:
        w.add("geometry", "chuteType", "Chute Type", capitalize(obj.chute_type))

        w.length("dimensions", "length", "Horizontal Length", metrics.length)
        w.length("dimensions", "inclinedLength", "Inclined Length", metrics.inclined_length or 0.0, highlight=True)
        w.length("dimensions", "drop", "Drop", obj.drop or 0.0)
        w.length("dimensions", "width", "Width", obj.width or 0.0)
        w.length("dimensions", "depth", "Depth", obj.depth or 0.0)
        w.length_if_set("thickness", "Wall Thickness", obj.thickness)

        manning_n = obj.manning_n if obj.manning_n is not None else DEFAULT_MANNING_N
        self._hydraulics_rows(w, obj.slope or 0.0, manning_n)
        self._conveyance_tail(w, obj, metrics)


def transition_slope(obj: TransitionObject) -> float:
    """Mean bed slope from the end elevations; 0 for a zero-length transition."""
    length = obj.length or 0.0
    if length <= 0:
        return 0.0
    return abs(obj.end_elevation - obj.start_elevation) / length


def build_report(obj: Any, labels: LabelProvider | None = None) -> BIMReport:
    """Convenience wrapper: assemble the report with default pricing."""
    return ReportAssembler(labels=labels).build(obj)
