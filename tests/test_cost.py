"""Tests for cost estimation.

Covers: material classification, pricing provider, CostEngine and CostReport.
"""

from __future__ import annotations

import json

import pytest

from hydrobim.cost.engine import CostEngine
from hydrobim.cost.pricing import LocalProvider, PricingProvider, UnitCost, material_type_from_color
from hydrobim.cost.report import CostReport
from hydrobim.cost.seed_data import SEED_PRICING
from hydrobim.metrics import calculate_metrics
from hydrobim.models.metrics import Metrics
from hydrobim.models.scene import ChannelObject, ChuteObject, ShapeObject


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_box(color: str | None = None, **params) -> ShapeObject:
    return ShapeObject(
        id="box-0001",
        name="Cost Test Box",
        shape_type="box",
        parameters=params,
        material={"color": color},
    )


def _make_channel() -> ChannelObject:
    return ChannelObject(
        id="channel-0001",
        name="Cost Test Channel",
        length=10.0,
        thickness=0.15,
        section={"type": "rectangular", "width": 2.0, "depth": 1.0},
    )


class _FlatRateProvider(PricingProvider):
    def get_unit_cost(self, material: str) -> UnitCost:
        return UnitCost(material, 10.0, "flat rate")

    def get_formwork_cost(self) -> float:
        return 1.0

    def is_available(self) -> bool:
        return True


# ---------------------------------------------------------------------------
# Material classification
# ---------------------------------------------------------------------------

class TestMaterialType:

    @pytest.mark.parametrize(
        "color, expected",
        [
            ("#808080", "concrete"),
            ("Gray", "concrete"),
            ("dark-grey", "concrete"),
            ("#C0C0C0", "steel"),
            ("silver", "steel"),
            ("#ff0000", "default"),
            ("", "default"),
            (None, "default"),
        ],
    )
    def test_color_to_material(self, color, expected):
        assert material_type_from_color(color) == expected


# ---------------------------------------------------------------------------
# Pricing Provider
# ---------------------------------------------------------------------------

class TestPricingProvider:

    def test_local_provider_available(self):
        assert LocalProvider().is_available()

    def test_concrete_price(self):
        uc = LocalProvider().get_unit_cost("concrete")
        assert uc.material_cost_per_m3 == pytest.approx(150.0)

    def test_steel_price(self):
        uc = LocalProvider().get_unit_cost("steel")
        assert uc.material_cost_per_m3 == pytest.approx(2500.0)

    def test_unknown_material_falls_back_to_default(self):
        uc = LocalProvider().get_unit_cost("unknownium")
        assert uc.material == "default"
        assert uc.material_cost_per_m3 == pytest.approx(100.0)

    def test_formwork_price(self):
        assert LocalProvider().get_formwork_cost() == pytest.approx(25.0)

    def test_all_seed_data_valid(self):
        provider = LocalProvider()
        for material in SEED_PRICING:
            uc = provider.get_unit_cost(material)
            assert uc.material_cost_per_m3 > 0
            assert uc.source != ""


# ---------------------------------------------------------------------------
# CostEngine
# ---------------------------------------------------------------------------

class TestCostEngine:

    def test_default_material_totals(self):
        report = CostEngine().estimate(_make_box(), Metrics(volume=2.0, surface_area=16.0))
        assert report.material == "default"
        assert report.material_cost_usd == pytest.approx(200.0)
        assert report.formwork_cost_usd == pytest.approx(400.0)
        assert report.total_cost_usd == pytest.approx(600.0)

    def test_steel_box(self):
        box = _make_box("#c0c0c0")
        report = CostEngine().estimate(box, calculate_metrics(box))
        assert report.material == "steel"
        assert report.material_cost_usd == pytest.approx(2500.0)
        assert report.formwork_cost_usd == pytest.approx(150.0)
        assert report.total_cost_usd == pytest.approx(2650.0)

    def test_concrete_box(self):
        box = _make_box("grey", width=2.0)
        report = CostEngine().estimate(box, calculate_metrics(box))
        assert report.material_cost_usd == pytest.approx(300.0)

    def test_channel_priced_by_concrete_volume(self):
        channel = _make_channel()
        report = CostEngine().estimate(channel, calculate_metrics(channel))
        assert report.material == "concrete"
        assert report.material_cost_usd == pytest.approx(6.0 * 150)
        assert report.formwork_cost_usd == pytest.approx(40.0 * 25)
        assert report.total_cost_usd == pytest.approx(1900.0)

    def test_chute_priced_along_slope(self):
        chute = ChuteObject(id="chute-0001", length=3.0, drop=4.0, width=2.0, depth=1.0, thickness=0.15)
        report = CostEngine().estimate(chute, calculate_metrics(chute))
        assert report.material_cost_usd == pytest.approx(3.0 * 150)
        assert report.formwork_cost_usd == pytest.approx(20.0 * 25)

    def test_custom_provider(self):
        channel = _make_channel()
        report = CostEngine(_FlatRateProvider()).estimate(channel, calculate_metrics(channel))
        assert report.material_cost_usd == pytest.approx(60.0)
        assert report.formwork_cost_usd == pytest.approx(40.0)
        assert report.source == "flat rate"

    def test_total_is_sum(self):
        channel = _make_channel()
        report = CostEngine().estimate(channel, calculate_metrics(channel))
        assert report.total_cost_usd == pytest.approx(report.material_cost_usd + report.formwork_cost_usd)


# ---------------------------------------------------------------------------
# CostReport
# ---------------------------------------------------------------------------

class TestCostReport:

    def test_to_markdown(self):
        channel = _make_channel()
        md = CostEngine().estimate(channel, calculate_metrics(channel)).to_markdown()
        assert "# Cost Estimate — channel-0001" in md
        assert "Material Cost" in md
        assert "Formwork Cost" in md
        assert "$1,900.00" in md

    def test_to_json(self):
        channel = _make_channel()
        data = json.loads(CostEngine().estimate(channel, calculate_metrics(channel)).to_json())
        assert data["structure_type"] == "channel"
        assert data["total_cost_usd"] == pytest.approx(1900.0)
        assert data["quantities"]["material_volume_m3"] == pytest.approx(6.0)
        assert data["unit_costs"]["formwork"]["cost_per_m2"] == pytest.approx(25.0)

    def test_empty_report(self):
        report = CostReport()
        assert report.to_dict()["unit_costs"] == {}
        assert "Unknown" in report.to_markdown()
