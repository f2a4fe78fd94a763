"""Canonical test fixtures used across all engine tests.

Fixture: 36-month lease, $30K net cap cost, $18K residual, MF 0.00125
(3.0% APR), $393.33/mo base payment, 12K miles/yr at $0.25/mile, California.
"""

import pytest
from decimal import Decimal

from src.engine.primitives import monthly_payment
from src.models.lease import Lease, MarketValue


@pytest.fixture
def exact_payment() -> Decimal:
    """Unrounded depreciation + rent charge for the canonical contract."""
    return monthly_payment(Decimal("30000"), Decimal("18000"), Decimal("0.00125"), 36)


@pytest.fixture
def canonical_lease() -> Lease:
    """Two years into the canonical lease, driving on pace with the allowance."""
    return Lease(
        net_cap_cost=Decimal("30000"),
        residual_value=Decimal("18000"),
        money_factor=Decimal("0.00125"),
        monthly_payment=Decimal("393.33"),
        term_months=36,
        months_elapsed=24,
        current_mileage=24000,
        allowed_miles_per_year=12000,
        overage_fee_per_mile=Decimal("0.25"),
        disposition_fee=Decimal("395"),
        purchase_fee=Decimal("300"),
        state_code="CA",
    )


@pytest.fixture
def ended_lease(canonical_lease) -> Lease:
    """Same contract on the day the lease ends."""
    return Lease(
        net_cap_cost=canonical_lease.net_cap_cost,
        residual_value=canonical_lease.residual_value,
        money_factor=canonical_lease.money_factor,
        monthly_payment=Decimal("400"),
        term_months=36,
        months_elapsed=36,
        current_mileage=36000,
        allowed_miles_per_year=12000,
        overage_fee_per_mile=Decimal("0.25"),
        disposition_fee=Decimal("395"),
        purchase_fee=Decimal("300"),
        state_code="CA",
    )


@pytest.fixture
def market_value() -> MarketValue:
    return MarketValue(value=Decimal("22000"))
