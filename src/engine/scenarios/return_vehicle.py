"""Return the vehicle at lease end.

Cost = remaining payments + disposition fee + projected excess mileage
       + wear and tear estimate
"""

from dataclasses import dataclass
from decimal import Decimal

from src.engine import disclaimers
from src.engine.mileage import project_mileage
from src.engine.precision import DecimalPolicy, MONEY, to_cents
from src.models.results import LineItem, LineItemType, ReturnResult


@dataclass(frozen=True)
class ReturnParams:
    disposition_fee: Decimal
    current_mileage: int
    months_elapsed: int
    term_months: int
    allowed_miles_per_year: int
    overage_fee_per_mile: Decimal
    wear_and_tear_estimate: Decimal
    remaining_payments: Decimal


def evaluate_return(params: ReturnParams, policy: DecimalPolicy = MONEY) -> ReturnResult:
    if params.months_elapsed < 0:
        raise ValueError(f"months_elapsed cannot be negative, got {params.months_elapsed}")
    if params.months_elapsed > params.term_months:
        raise ValueError(
            f"months_elapsed ({params.months_elapsed}) cannot exceed "
            f"term_months ({params.term_months})"
        )

    mileage = project_mileage(
        params.current_mileage,
        params.months_elapsed,
        params.term_months,
        params.allowed_miles_per_year,
        params.overage_fee_per_mile,
        policy,
    )
    excess_mileage = mileage.projected_overage_cost

    with policy.enter():
        total = (
            params.remaining_payments
            + params.disposition_fee
            + excess_mileage
            + params.wear_and_tear_estimate
        )

    line_items = (
        LineItem(
            "Remaining Payments", params.remaining_payments,
            "Sum of all remaining monthly lease payments", LineItemType.LIABILITY,
        ),
        LineItem(
            "Disposition Fee", params.disposition_fee,
            "Fee charged by lessor for processing vehicle return", LineItemType.FEE,
        ),
        LineItem(
            "Excess Mileage (Projected)", excess_mileage,
            f"Projected overage: {mileage.projected_overage:,.0f} miles at "
            f"{to_cents(params.overage_fee_per_mile)}/mile",
            LineItemType.FEE,
        ),
        LineItem(
            "Wear and Tear Estimate", params.wear_and_tear_estimate,
            "User-estimated cost for excessive wear and tear", LineItemType.FEE,
        ),
    )

    warnings = []
    if excess_mileage > 0:
        warnings.append(
            f"Projected excess mileage: {mileage.projected_overage:,.0f} miles over "
            f"allowance, resulting in an estimated charge of ${to_cents(excess_mileage)}."
        )
    if params.wear_and_tear_estimate > 0:
        warnings.append(
            "Wear and tear estimate is user-estimated and may not reflect actual "
            "inspection charges. Actual charges depend on lease agreement terms and "
            "vehicle condition at return."
        )

    return ReturnResult(
        total_cost=total,
        net_cost=total,
        line_items=line_items,
        warnings=tuple(warnings),
        disclaimers=(disclaimers.GENERAL, disclaimers.MILEAGE),
        remaining_payments=params.remaining_payments,
        disposition_fee=params.disposition_fee,
        excess_mileage_cost=excess_mileage,
        wear_and_tear_estimate=params.wear_and_tear_estimate,
    )
