"""HydroBIM — quantity takeoff and cost estimation for hydraulic structures."""

__version__ = "1.0.0"

from hydrobim.cost.engine import CostEngine
from hydrobim.cost.report import CostReport
from hydrobim.engine import QuantityEngine
from hydrobim.metrics import UnsupportedStructureError, calculate_metrics
from hydrobim.models.metrics import Metrics
from hydrobim.models.scene import (
    ChannelObject,
    ChuteObject,
    ShapeObject,
    TransitionObject,
    parse_scene_object,
)
from hydrobim.report.assembler import ReportAssembler, build_report
from hydrobim.report.formatting import format_number
from hydrobim.report.rows import BIMReport, BIMRow
from hydrobim.structural.design import StructuralDesign, structural_design

__all__ = [
    "__version__",
    # Facade
    "QuantityEngine",
    # Inputs
    "ChannelObject",
    "ChuteObject",
    "ShapeObject",
    "TransitionObject",
    "parse_scene_object",
    # Engines
    "CostEngine",
    "CostReport",
    "Metrics",
    "ReportAssembler",
    "StructuralDesign",
    "UnsupportedStructureError",
    "calculate_metrics",
    "structural_design",
    # Rows
    "BIMReport",
    "BIMRow",
    "build_report",
    "format_number",
]
