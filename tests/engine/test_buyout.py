from decimal import Decimal

from src.engine import disclaimers
from src.engine.payoff import compute_lease_payoff
from src.engine.scenarios.buyout import BuyoutParams, evaluate_buyout
from src.models.results import ScenarioType


def _params(**overrides) -> BuyoutParams:
    values = dict(
        residual_value=Decimal("18000"),
        net_cap_cost=Decimal("30000"),
        money_factor=Decimal("0.00125"),
        monthly_payment=Decimal("393.33"),
        term_months=36,
        months_elapsed=36,
        purchase_fee=Decimal("300"),
        state_code="TX",
    )
    values.update(overrides)
    return BuyoutParams(**values)


class TestEvaluateBuyout:
    def test_end_of_lease_texas(self):
        result = evaluate_buyout(_params())
        assert result.type is ScenarioType.BUYOUT
        assert result.payoff_amount == Decimal("18000")
        assert result.remaining_depreciation == Decimal("0")
        assert result.sales_tax == Decimal("1125")
        assert result.total_cost == Decimal("19425")
        assert result.net_cost == result.total_cost
        assert result.warnings == ()

    def test_mid_lease_uses_constant_yield_payoff(self):
        result = evaluate_buyout(_params(months_elapsed=24, state_code="CA"))
        payoff = compute_lease_payoff(
            Decimal("30000"), Decimal("18000"), Decimal("393.33"), 36, 24, Decimal("0.00125")
        )
        assert result.payoff_amount == payoff
        assert result.remaining_depreciation == payoff - Decimal("18000")
        assert result.sales_tax == Decimal("1305")
        assert result.total_cost == payoff + Decimal("300") + Decimal("1305")

    def test_mid_lease_warning(self):
        result = evaluate_buyout(_params(months_elapsed=24))
        assert len(result.warnings) == 1
        assert "12 months remaining" in result.warnings[0]
        assert "contact your lender" in result.warnings[0]

    def test_oregon_has_no_sales_tax(self):
        result = evaluate_buyout(_params(state_code="OR"))
        assert result.sales_tax == Decimal("0")
        assert result.total_cost == Decimal("18300")

    def test_line_items(self):
        result = evaluate_buyout(_params())
        labels = [item.label for item in result.line_items]
        assert labels == [
            "Payoff Amount",
            "  ↳ Residual Value",
            "  ↳ Remaining Depreciation",
            "Purchase Fee",
            "Sales Tax",
        ]
        top_level = [item.amount for item in result.line_items if not item.sub_item]
        assert sum(top_level) == result.total_cost
        assert "6.25%" in result.line_items[-1].description

    def test_disclaimers(self):
        assert evaluate_buyout(_params()).disclaimers == (disclaimers.GENERAL, disclaimers.TAX)
