"""Tests for market value providers."""

from decimal import Decimal

import pytest

from src.data.valuation import (
    ManualValuationProvider,
    ValuationProvider,
    get_valuation_provider,
)
from src.models.lease import ValuationSource


@pytest.fixture
def provider():
    return ManualValuationProvider()


class TestManualValuationProvider:
    def test_satisfies_protocol(self, provider):
        assert isinstance(provider, ValuationProvider)
        assert provider.name == "manual"

    async def test_lookup_returns_nothing(self, provider):
        result = await provider.get_market_value("Honda", "Accord", 2023, mileage=24000)
        assert result is None

    def test_manual_entry(self, provider):
        value = provider.create_manual_entry(22000)
        assert value.value == Decimal("22000")
        assert value.source is ValuationSource.MANUAL
        assert value.source_label == "Your estimate"

    def test_manual_entry_from_float(self, provider):
        assert provider.create_manual_entry(21999.99).value == Decimal("21999.99")

    def test_zero_is_allowed(self, provider):
        assert provider.create_manual_entry("0").value == Decimal("0")

    def test_negative_rejected(self, provider):
        with pytest.raises(ValueError, match="cannot be negative"):
            provider.create_manual_entry(Decimal("-1"))


class TestGetValuationProvider:
    @pytest.mark.parametrize("source", ["manual", "kbb", "edmunds", "carvana"])
    def test_known_sources(self, source):
        assert isinstance(get_valuation_provider(source), ManualValuationProvider)

    def test_unknown_source(self):
        with pytest.raises(ValueError):
            get_valuation_provider("blackbook")
