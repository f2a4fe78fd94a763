"""Lease sales tax by state timing rule.

Upfront states (TX, NY, GA, NC) tax the total of scheduled payments at
signing. Monthly states tax each payment, and some (CA) also tax the cap
cost reduction once. Oregon charges nothing.

Pure functions. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.engine.precision import DecimalPolicy, MONEY, ZERO
from src.engine.tax_rules import TaxTiming, get_state_tax_rule


@dataclass(frozen=True)
class TaxResult:
    upfront_tax: Decimal
    monthly_tax: Decimal
    total_tax: Decimal
    timing: TaxTiming
    state_code: str


def calculate_lease_tax(
    state_code: str,
    monthly_payment: Decimal,
    term_months: int,
    cap_cost_reduction: Decimal | None = None,
    policy: DecimalPolicy = MONEY,
) -> TaxResult:
    """Compute upfront, monthly and total lease tax for a state.

    Args:
        state_code: Two-letter state code
        monthly_payment: Base monthly payment before tax
        term_months: Lease term in months
        cap_cost_reduction: Down payment, taxed only where the state says so

    Raises UnsupportedStateError for unknown states.
    """
    rule = get_state_tax_rule(state_code)
    upfront = ZERO
    monthly = ZERO

    with policy.enter():
        if rule.timing is TaxTiming.UPFRONT:
            upfront = monthly_payment * term_months * rule.rate
        elif rule.timing is TaxTiming.MONTHLY:
            monthly = monthly_payment * rule.rate
            if rule.applies_to_down_payment and cap_cost_reduction:
                upfront = cap_cost_reduction * rule.rate

        total = upfront + monthly * term_months

    return TaxResult(
        upfront_tax=upfront,
        monthly_tax=monthly,
        total_tax=total,
        timing=rule.timing,
        state_code=rule.state_code,
    )


def buyout_sales_tax(
    state_code: str,
    residual_value: Decimal,
    policy: DecimalPolicy = MONEY,
) -> Decimal:
    """Sales tax charged on the residual value when the vehicle is purchased."""
    rule = get_state_tax_rule(state_code)
    with policy.enter():
        return residual_value * rule.rate
