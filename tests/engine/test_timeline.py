from dataclasses import replace
from decimal import Decimal

import pytest

from src.engine.comparison import TransferDetails
from src.engine.timeline import build_timeline_data, project_scenario_costs
from src.models.results import ScenarioType

TRANSFER = TransferDetails(
    transfer_fee=Decimal("400"),
    marketplace_fee=Decimal("100"),
    registration_fee=Decimal("150"),
)


class TestProjectScenarioCosts:
    def test_today(self, canonical_lease):
        projection = project_scenario_costs(canonical_lease, 0)
        assert projection.month == 0
        assert projection.costs[ScenarioType.RETURN] == Decimal("5114.96")
        assert projection.costs[ScenarioType.EARLY_TERMINATION] == Decimal("5614.96")
        assert projection.costs[ScenarioType.SELL_PRIVATELY] is None
        assert projection.costs[ScenarioType.EXTENSION] is None
        assert projection.costs[ScenarioType.LEASE_TRANSFER] is None

    def test_six_months_out(self, canonical_lease):
        projection = project_scenario_costs(canonical_lease, 6)
        assert projection.costs[ScenarioType.RETURN] == Decimal("2754.98")

    def test_extension_only_at_lease_end(self, canonical_lease):
        projection = project_scenario_costs(canonical_lease, 12)
        assert projection.costs[ScenarioType.EXTENSION] == Decimal("2359.98")
        assert projection.costs[ScenarioType.BUYOUT] == Decimal("19605")

    def test_early_termination_includes_projected_mileage(self, canonical_lease):
        """9K miles over at $0.25 lands in both return and early termination."""
        lease = replace(canonical_lease, current_mileage=30000)
        projection = project_scenario_costs(lease, 0)
        assert projection.costs[ScenarioType.RETURN] == Decimal("7364.96")
        assert projection.costs[ScenarioType.EARLY_TERMINATION] == Decimal("7864.96")

    def test_optional_scenarios(self, canonical_lease, market_value):
        projection = project_scenario_costs(canonical_lease, 12, market_value, TRANSFER)
        assert projection.costs[ScenarioType.SELL_PRIVATELY] == Decimal("-2395")
        assert projection.costs[ScenarioType.LEASE_TRANSFER] == Decimal("650")


class TestBuildTimelineData:
    def test_one_point_per_month(self, canonical_lease):
        series = build_timeline_data(canonical_lease)
        assert series.months_remaining == 12
        assert [p.month for p in series.data] == list(range(13))

    def test_floats_rounded_to_cents(self, canonical_lease):
        first = build_timeline_data(canonical_lease).data[0]
        assert first.return_ == pytest.approx(5114.96)
        assert isinstance(first.buyout, float)
        assert round(first.buyout, 2) == first.buyout

    def test_lease_end_point(self, canonical_lease):
        last = build_timeline_data(canonical_lease).data[-1]
        assert last.return_ == 395.0
        assert last.buyout == 19605.0
        assert last.early_termination == 895.0
        assert last.extension == 2359.98

    def test_extension_absent_before_end(self, canonical_lease):
        series = build_timeline_data(canonical_lease)
        assert all(p.extension is None for p in series.data[:-1])

    def test_scenarios_without_optional_inputs(self, canonical_lease):
        series = build_timeline_data(canonical_lease)
        assert not series.has_market_value
        assert series.scenarios == (
            ScenarioType.RETURN,
            ScenarioType.BUYOUT,
            ScenarioType.EARLY_TERMINATION,
            ScenarioType.EXTENSION,
        )

    def test_scenarios_with_optional_inputs(self, canonical_lease, market_value):
        series = build_timeline_data(canonical_lease, market_value, TRANSFER)
        assert series.has_market_value
        assert series.scenarios == (
            ScenarioType.RETURN,
            ScenarioType.BUYOUT,
            ScenarioType.SELL_PRIVATELY,
            ScenarioType.EARLY_TERMINATION,
            ScenarioType.EXTENSION,
            ScenarioType.LEASE_TRANSFER,
        )
        assert all(p.sell_privately is not None for p in series.data)
        assert all(p.lease_transfer == 650.0 for p in series.data)

    def test_buyout_falls_toward_residual(self, canonical_lease):
        series = build_timeline_data(canonical_lease)
        buyouts = [p.buyout for p in series.data]
        assert buyouts == sorted(buyouts, reverse=True)

    def test_ended_lease_single_point(self, ended_lease):
        series = build_timeline_data(ended_lease)
        assert series.months_remaining == 0
        assert len(series.data) == 1
