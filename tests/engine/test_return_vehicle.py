from decimal import Decimal

import pytest

from src.engine import disclaimers
from src.engine.scenarios.return_vehicle import ReturnParams, evaluate_return
from src.models.results import ScenarioType


def _params(**overrides) -> ReturnParams:
    values = dict(
        disposition_fee=Decimal("395"),
        current_mileage=24000,
        months_elapsed=24,
        term_months=36,
        allowed_miles_per_year=12000,
        overage_fee_per_mile=Decimal("0.25"),
        wear_and_tear_estimate=Decimal("0"),
        remaining_payments=Decimal("4719.96"),
    )
    values.update(overrides)
    return ReturnParams(**values)


class TestEvaluateReturn:
    def test_on_pace_mileage(self):
        result = evaluate_return(_params())
        assert result.type is ScenarioType.RETURN
        assert result.excess_mileage_cost == Decimal("0")
        assert result.total_cost == Decimal("5114.96")
        assert result.net_cost == result.total_cost
        assert result.warnings == ()
        assert not result.incomplete

    def test_projected_overage(self):
        """15K miles in 12 of 36 months -> 9K over at $0.25."""
        result = evaluate_return(_params(current_mileage=15000, months_elapsed=12,
                                         remaining_payments=Decimal("9439.92")))
        assert result.excess_mileage_cost == Decimal("2250")
        assert result.total_cost == Decimal("9439.92") + Decimal("395") + Decimal("2250")
        assert any("9,000 miles over" in w for w in result.warnings)

    def test_wear_and_tear(self):
        result = evaluate_return(_params(wear_and_tear_estimate=Decimal("750")))
        assert result.total_cost == Decimal("5864.96")
        assert any("user-estimated" in w for w in result.warnings)

    def test_line_items(self):
        result = evaluate_return(_params())
        labels = [item.label for item in result.line_items]
        assert labels == [
            "Remaining Payments",
            "Disposition Fee",
            "Excess Mileage (Projected)",
            "Wear and Tear Estimate",
        ]
        assert sum(item.amount for item in result.line_items) == result.total_cost

    def test_disclaimers(self):
        result = evaluate_return(_params())
        assert result.disclaimers == (disclaimers.GENERAL, disclaimers.MILEAGE)

    def test_negative_months_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            evaluate_return(_params(months_elapsed=-1))

    def test_past_term_raises(self):
        with pytest.raises(ValueError, match="cannot exceed"):
            evaluate_return(_params(months_elapsed=37))

    def test_no_pace_at_signing(self):
        with pytest.raises(ValueError, match="greater than 0"):
            evaluate_return(_params(months_elapsed=0))
