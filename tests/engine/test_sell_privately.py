from decimal import Decimal

import pytest

from src.engine import disclaimers
from src.engine.scenarios.sell_privately import SellPrivatelyParams, evaluate_sell_privately
from src.models.results import LineItemType, ScenarioType


def _params(**overrides) -> SellPrivatelyParams:
    values = dict(
        estimated_sale_price=Decimal("22000"),
        residual_value=Decimal("18000"),
        net_cap_cost=Decimal("30000"),
        money_factor=Decimal("0.00125"),
        monthly_payment=Decimal("400"),
        term_months=36,
        months_elapsed=36,
        purchase_fee=Decimal("300"),
    )
    values.update(overrides)
    return SellPrivatelyParams(**values)


class TestEvaluateSellPrivately:
    def test_profitable_sale(self):
        result = evaluate_sell_privately(_params())
        assert result.type is ScenarioType.SELL_PRIVATELY
        assert result.payoff_amount == Decimal("18300")
        assert result.net_proceeds == Decimal("3700")
        assert result.net_cost == Decimal("-3700")
        assert result.total_cost == Decimal("18300")
        assert result.line_items[-1].type is LineItemType.ASSET

    def test_state_adds_buyout_tax(self):
        result = evaluate_sell_privately(_params(state_code="TX"))
        assert result.payoff_amount == Decimal("19425")
        assert result.net_proceeds == Decimal("2575")
        assert "  ↳ Sales Tax" in [item.label for item in result.line_items]

    def test_no_tax_line_without_state(self):
        result = evaluate_sell_privately(_params())
        assert "  ↳ Sales Tax" not in [item.label for item in result.line_items]

    def test_shortfall(self):
        result = evaluate_sell_privately(_params(estimated_sale_price=Decimal("17000")))
        assert result.net_proceeds == Decimal("-1300")
        assert result.net_cost == Decimal("1300")
        assert result.line_items[-1].type is LineItemType.LIABILITY
        assert any("less than payoff amount" in w and "$1300.00" in w for w in result.warnings)

    def test_timing_warning_mid_lease(self):
        result = evaluate_sell_privately(_params(months_elapsed=30))
        assert any("6 remaining months" in w for w in result.warnings)

    def test_always_warns_about_sales_tax(self):
        result = evaluate_sell_privately(_params())
        assert len(result.warnings) == 1
        assert result.warnings[0].startswith("Sales tax may apply at buyout")

    def test_line_items(self):
        result = evaluate_sell_privately(_params())
        labels = [item.label for item in result.line_items]
        assert labels[0] == "Estimated Sale Price"
        assert labels[1] == "Lease Buyout Cost"
        assert labels[-1] == "Net Proceeds"

    def test_disclaimers(self):
        result = evaluate_sell_privately(_params())
        assert result.disclaimers == (
            disclaimers.GENERAL, disclaimers.TAX, disclaimers.MARKET_VALUE,
        )

    def test_negative_months_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            evaluate_sell_privately(_params(months_elapsed=-2))
