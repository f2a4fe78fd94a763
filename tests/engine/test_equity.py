from decimal import Decimal

from src.engine.equity import calculate_equity
from src.models.results import LineItemType


class TestCalculateEquity:
    def test_positive_equity_at_lease_end(self):
        result = calculate_equity(Decimal("22000"), Decimal("18000"), Decimal("0"), Decimal("300"))
        assert result.buyout_cost == Decimal("18300")
        assert result.equity == Decimal("3700")
        assert result.has_positive_equity

    def test_negative_equity(self):
        result = calculate_equity(Decimal("17000"), Decimal("18000"), Decimal("0"), Decimal("300"))
        assert result.equity == Decimal("-1300")
        assert not result.has_positive_equity

    def test_zero_equity_is_not_positive(self):
        result = calculate_equity(Decimal("18300"), Decimal("18000"), Decimal("0"), Decimal("300"))
        assert result.equity == Decimal("0")
        assert not result.has_positive_equity

    def test_mid_lease_balance_counts(self):
        result = calculate_equity(
            Decimal("24000"), Decimal("18000"), Decimal("4200.50"), Decimal("300")
        )
        assert result.buyout_cost == Decimal("22500.50")
        assert result.equity == Decimal("1499.50")

    def test_line_items(self):
        result = calculate_equity(Decimal("22000"), Decimal("18000"), Decimal("0"), Decimal("300"))
        labels = [item.label for item in result.line_items]
        assert labels == ["Market Value", "Residual Value", "Remaining Depreciation", "Buyout Fee"]
        assert result.line_items[0].type is LineItemType.ASSET
        assert all(item.type is LineItemType.LIABILITY for item in result.line_items[1:])
