"""BIMRow — one labeled line of the quantity report — and row utilities."""

from __future__ import annotations

from typing import Iterable, Optional

from pydantic import BaseModel, Field

ALL_CATEGORIES = "all"


class BIMRow(BaseModel):
    category: str
    property: str
    value: str
    unit: Optional[str] = None
    highlight: bool = False


def group_by_category(rows: Iterable[BIMRow]) -> dict[str, list[BIMRow]]:
    """Group rows by category, keeping first-occurrence category order."""
    groups: dict[str, list[BIMRow]] = {}
    for row in rows:
        groups.setdefault(row.category, []).append(row)
    return groups


def filter_rows(
    rows: Iterable[BIMRow],
    category: str = ALL_CATEGORIES,
    query: str = "",
) -> list[BIMRow]:
    """Keep rows in *category* matching *query*.

    *query* is matched case-insensitively against the property, value and
    category of each row.  ``category="all"`` keeps every category.
    """
    result = [row for row in rows if category == ALL_CATEGORIES or row.category == category]
    if query:
        needle = query.lower()
        result = [
            row
            for row in result
            if needle in row.property.lower()
            or needle in row.value.lower()
            or needle in row.category.lower()
        ]
    return result


class BIMReport(BaseModel):
    """Ordered rows for one scene object."""

    object_id: str
    rows: list[BIMRow] = Field(default_factory=list)

    @property
    def grouped(self) -> dict[str, list[BIMRow]]:
        return group_by_category(self.rows)

    @property
    def categories(self) -> list[str]:
        return list(self.grouped)

    def filter(self, category: str = ALL_CATEGORIES, query: str = "") -> list[BIMRow]:
        return filter_rows(self.rows, category, query)
