from decimal import Decimal

from src.engine import disclaimers
from src.engine.scenarios.extension import ExtensionParams, evaluate_extension
from src.models.results import ScenarioType


class TestEvaluateExtension:
    def test_with_monthly_tax(self):
        result = evaluate_extension(ExtensionParams(Decimal("400"), 6, Decimal("29")))
        assert result.type is ScenarioType.EXTENSION
        assert result.total_cost == Decimal("2574")
        assert result.total_extension_cost == result.total_cost
        assert result.monthly_extension_payment == Decimal("400")
        assert result.extension_months == 6

    def test_without_tax(self):
        result = evaluate_extension(ExtensionParams(Decimal("393.33"), 6))
        assert result.total_cost == Decimal("2359.98")

    def test_standard_warnings(self):
        result = evaluate_extension(ExtensionParams(Decimal("400"), 6))
        assert len(result.warnings) == 2

    def test_warranty_warning_past_six_months(self):
        result = evaluate_extension(ExtensionParams(Decimal("400"), 7))
        assert len(result.warnings) == 3
        assert "warranty" in result.warnings[-1]

    def test_only_total_is_top_level(self):
        result = evaluate_extension(ExtensionParams(Decimal("400"), 6, Decimal("29")))
        top_level = [item for item in result.line_items if not item.sub_item]
        assert [item.label for item in top_level] == ["Total Extension Cost"]
        assert top_level[0].amount == result.total_cost

    def test_disclaimers(self):
        result = evaluate_extension(ExtensionParams(Decimal("400"), 6))
        assert result.disclaimers == (disclaimers.GENERAL,)
