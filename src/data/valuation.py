"""Market value sources for the sell-privately and equity calculations.

Only manual entry is supported. Named third-party sources resolve to the
manual provider and nothing is fetched.
"""

from decimal import Decimal
from typing import Protocol, runtime_checkable

from src.models.lease import MarketValue, ValuationSource


@runtime_checkable
class ValuationProvider(Protocol):
    name: str

    async def get_market_value(
        self,
        make: str | None = None,
        model: str | None = None,
        year: int | None = None,
        mileage: int = 0,
        zip_code: str | None = None,
    ) -> MarketValue | None:
        """Look up a market value for a vehicle, None if unavailable."""
        ...


class ManualValuationProvider:
    name = "manual"

    async def get_market_value(
        self,
        make: str | None = None,
        model: str | None = None,
        year: int | None = None,
        mileage: int = 0,
        zip_code: str | None = None,
    ) -> MarketValue | None:
        # Manual values are entered by the user, never looked up
        return None

    def create_manual_entry(self, value: Decimal | int | float | str) -> MarketValue:
        value = Decimal(str(value))
        if value < 0:
            raise ValueError(f"Market value cannot be negative, got {value}")
        return MarketValue(value=value, source=ValuationSource.MANUAL, source_label="Your estimate")


def get_valuation_provider(source: str) -> ValuationProvider:
    """Provider for a known source name. Raises ValueError for unknown names."""
    ValuationSource(source)
    # KBB, Edmunds and Carvana have no integration yet
    return ManualValuationProvider()
