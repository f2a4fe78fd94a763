"""Straight-line mileage projection and overage cost."""

from decimal import Decimal, ROUND_HALF_UP

from src.engine.precision import DecimalPolicy, MONEY, WHOLE, ZERO
from src.models.results import MileageProjection


def project_mileage(
    current_mileage: int,
    months_elapsed: int,
    term_months: int,
    allowed_miles_per_year: int,
    overage_fee_per_mile: Decimal,
    policy: DecimalPolicy = MONEY,
) -> MileageProjection:
    """Project end-of-lease mileage at the current driving pace.

    Raises ValueError when months_elapsed <= 0; there is no pace to project yet.
    """
    if months_elapsed <= 0:
        raise ValueError(f"months_elapsed must be greater than 0, got {months_elapsed}")

    with policy.enter():
        average = Decimal(current_mileage) / months_elapsed
        projected_end = int((average * term_months).quantize(WHOLE, ROUND_HALF_UP))
        allowed = Decimal(allowed_miles_per_year) * term_months / 12
        overage = max(ZERO, projected_end - allowed)
        overage_cost = overage * overage_fee_per_mile

    return MileageProjection(
        current_mileage=current_mileage,
        months_elapsed=months_elapsed,
        term_months=term_months,
        average_miles_per_month=average,
        projected_end_mileage=projected_end,
        allowed_miles=allowed,
        projected_overage=overage,
        projected_overage_cost=overage_cost,
    )
