"""Report assembly — labeled, formatted rows for display."""

from hydrobim.report.assembler import CATEGORIES, ReportAssembler, build_report, transition_slope
from hydrobim.report.formatting import format_number
from hydrobim.report.labels import DictLabelProvider, LabelProvider, default_labels
from hydrobim.report.rows import BIMReport, BIMRow, filter_rows, group_by_category

__all__ = [
    "BIMReport",
    "BIMRow",
    "CATEGORIES",
    "DictLabelProvider",
    "LabelProvider",
    "ReportAssembler",
    "build_report",
    "default_labels",
    "filter_rows",
    "format_number",
    "group_by_category",
    "transition_slope",
]
