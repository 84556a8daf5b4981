"""Number and value formatting for report rows."""

from __future__ import annotations

import logging
import math
from datetime import datetime

from hydrobim.config import LENGTH_DECIMALS, TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)


def format_number(value: float, decimals: int = LENGTH_DECIMALS) -> str:
    """Fixed-point string with *decimals* places.

    Non-finite values are rendered as zero so no row ever shows ``nan`` or
    ``inf``.
    """
    if not math.isfinite(value):
        logger.warning("Non-finite value %r formatted as zero", value)
        value = 0.0
    return f"{value:.{decimals}f}"


def capitalize(value: str | None, missing: str = "N/A") -> str:
    """Upper-case the first letter only; *missing* for empty values."""
    if not value:
        return missing
    return value[:1].upper() + value[1:]


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)
