"""QuantityEngine — single entry point for the display layer.

Usage::

    from hydrobim import QuantityEngine

    engine = QuantityEngine(labels=t)
    report = engine.report(obj)
    for row in report.rows:
        ...
"""

from __future__ import annotations

import logging
from typing import Any

from hydrobim.cost.engine import CostEngine
from hydrobim.cost.pricing import PricingProvider
from hydrobim.cost.report import CostReport
from hydrobim.metrics import calculate_metrics
from hydrobim.models.metrics import Metrics
from hydrobim.models.scene import SceneObject, parse_scene_object
from hydrobim.report.assembler import ReportAssembler
from hydrobim.report.labels import LabelProvider
from hydrobim.report.rows import BIMReport
from hydrobim.structural.design import StructuralDesign, structural_design

logger = logging.getLogger(__name__)


class QuantityEngine:
    """Quantity, structural and cost takeoff for scene objects.

    Every method accepts either a scene object model or a raw mapping as
    exported by the modelling store.

    Parameters
    ----------
    labels:
        ``t(key, fallback)`` label provider.
    provider:
        Pricing provider; defaults to the embedded seed rates.
    """

    def __init__(
        self,
        labels: LabelProvider | None = None,
        provider: PricingProvider | None = None,
    ) -> None:
        self.cost_engine = CostEngine(provider)
        self.assembler = ReportAssembler(labels=labels, cost_engine=self.cost_engine)

    def metrics(self, obj: SceneObject | dict[str, Any]) -> Metrics:
        return calculate_metrics(self._coerce(obj))

    def design(self, obj: SceneObject | dict[str, Any]) -> StructuralDesign | None:
        """Structural summary; None for primitive shapes."""
        obj = self._coerce(obj)
        return structural_design(obj, calculate_metrics(obj))

    def cost(self, obj: SceneObject | dict[str, Any]) -> CostReport:
        obj = self._coerce(obj)
        return self.cost_engine.estimate(obj, calculate_metrics(obj))

    def report(self, obj: SceneObject | dict[str, Any]) -> BIMReport:
        return self.assembler.build(self._coerce(obj))

    @staticmethod
    def _coerce(obj: SceneObject | dict[str, Any]) -> SceneObject:
        if isinstance(obj, SceneObject):
            return obj
        return parse_scene_object(obj)
