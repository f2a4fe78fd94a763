from decimal import Decimal

import pytest

from src.engine import disclaimers
from src.engine.scenarios.early_termination import (
    EarlyTerminationParams,
    evaluate_early_termination,
)
from src.models.results import ScenarioType


def _params(**overrides) -> EarlyTerminationParams:
    values = dict(
        net_cap_cost=Decimal("30000"),
        residual_value=Decimal("18000"),
        money_factor=Decimal("0.00125"),
        term_months=36,
        months_elapsed=18,
        monthly_payment=Decimal("393.33"),
        early_termination_fee=Decimal("500"),
        disposition_fee=Decimal("395"),
    )
    values.update(overrides)
    return EarlyTerminationParams(**values)


class TestWithoutWholesaleValue:
    def test_remaining_payments_cap(self):
        result = evaluate_early_termination(_params())
        assert result.type is ScenarioType.EARLY_TERMINATION
        assert result.remaining_payments == Decimal("7079.94")
        assert result.option_a is None
        assert result.option_b == Decimal("7079.94")
        assert result.used_option == "b-only"
        assert result.total_cost == Decimal("7974.94")
        assert result.net_cost == result.total_cost

    def test_at_term_only_fees(self):
        result = evaluate_early_termination(_params(months_elapsed=36))
        assert result.total_cost == Decimal("895")

    def test_charges_add_to_option_b(self):
        result = evaluate_early_termination(
            _params(excess_wear_charge=Decimal("250"), excess_mileage_charge=Decimal("100"))
        )
        assert result.option_b == Decimal("7429.94")
        labels = [item.label for item in result.line_items]
        assert "  ↳ Excess Wear Charge" in labels
        assert "  ↳ Excess Mileage Charge" in labels

    def test_warns_estimate_is_high(self):
        result = evaluate_early_termination(_params())
        assert "remaining payments as the liability cap" in result.warnings[0]
        assert any("exact payoff quote" in w for w in result.warnings)


class TestWithWholesaleValue:
    def test_payoff_below_wholesale(self):
        result = evaluate_early_termination(
            _params(months_elapsed=36, estimated_wholesale_value=Decimal("19000"))
        )
        assert result.option_a == Decimal("0")
        assert result.used_option == "a"
        assert result.total_cost == Decimal("895")

    def test_lesser_of_picks_remaining_payments(self):
        """Wholesale of zero leaves the full payoff, far above the remaining payments."""
        result = evaluate_early_termination(_params(estimated_wholesale_value=Decimal("0")))
        assert result.option_a > result.option_b
        assert result.used_option == "b"
        assert result.total_cost == Decimal("7974.94")

    def test_lesser_of_picks_payoff_gap(self):
        result = evaluate_early_termination(_params(estimated_wholesale_value=Decimal("22000")))
        assert result.used_option == "a"
        assert result.total_cost == result.option_a + Decimal("895")
        labels = [item.label for item in result.line_items]
        assert "  ↳ Payoff Less Wholesale Value" in labels
        assert "  ↳ Remaining Payments" not in labels

    def test_option_a_hides_charge_breakdown(self):
        result = evaluate_early_termination(
            _params(estimated_wholesale_value=Decimal("22000"), excess_wear_charge=Decimal("250"),
                    excess_mileage_charge=Decimal("100"))
        )
        assert result.used_option == "a"
        assert [item.label for item in result.line_items if item.sub_item] == [
            "  ↳ Payoff Less Wholesale Value",
        ]

    def test_option_b_hides_payoff_gap(self):
        result = evaluate_early_termination(_params(estimated_wholesale_value=Decimal("0")))
        labels = [item.label for item in result.line_items]
        assert "  ↳ Remaining Payments" in labels
        assert "  ↳ Payoff Less Wholesale Value" not in labels


class TestEdgeCases:
    def test_first_year_warning(self):
        result = evaluate_early_termination(_params(months_elapsed=6))
        assert any("first year" in w for w in result.warnings)

    def test_no_first_year_warning_later(self):
        result = evaluate_early_termination(_params(months_elapsed=12))
        assert not any("first year" in w for w in result.warnings)

    def test_negative_months_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            evaluate_early_termination(_params(months_elapsed=-1))

    def test_past_term_raises(self):
        with pytest.raises(ValueError, match="exceeded term"):
            evaluate_early_termination(_params(months_elapsed=40))

    def test_top_level_items_sum_to_total(self):
        result = evaluate_early_termination(_params())
        top_level = [item.amount for item in result.line_items if not item.sub_item]
        assert sum(top_level) == result.total_cost

    def test_disclaimers(self):
        result = evaluate_early_termination(_params())
        assert result.disclaimers == (disclaimers.GENERAL, disclaimers.EARLY_TERMINATION)
