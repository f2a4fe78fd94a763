"""Terminate the lease before the scheduled end.

Most contracts charge the lesser of two liabilities:
    A = max(0, payoff - wholesale value)        (only with a wholesale value)
    B = remaining payments + excess wear + excess mileage
plus the early termination fee and the disposition fee.

Without a wholesale value only B can be computed. B is the upper bound of
the lesser-of clause, so the estimate errs on the high side.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.engine import disclaimers
from src.engine.payoff import compute_lease_payoff
from src.engine.precision import DecimalPolicy, MONEY, ZERO
from src.models.results import EarlyTerminationResult, LineItem, LineItemType

FIRST_YEAR_MONTHS = 12


@dataclass(frozen=True)
class EarlyTerminationParams:
    net_cap_cost: Decimal
    residual_value: Decimal
    money_factor: Decimal
    term_months: int
    months_elapsed: int
    monthly_payment: Decimal
    early_termination_fee: Decimal
    disposition_fee: Decimal
    estimated_wholesale_value: Decimal | None = None
    excess_wear_charge: Decimal = Decimal("0")
    excess_mileage_charge: Decimal = Decimal("0")


def evaluate_early_termination(
    params: EarlyTerminationParams,
    policy: DecimalPolicy = MONEY,
) -> EarlyTerminationResult:
    if params.months_elapsed < 0:
        raise ValueError(f"months_elapsed cannot be negative, got {params.months_elapsed}")
    if params.months_elapsed > params.term_months:
        raise ValueError(
            f"Cannot evaluate early termination after lease has exceeded term "
            f"(months_elapsed={params.months_elapsed}, term_months={params.term_months})"
        )

    months_remaining = params.term_months - params.months_elapsed

    with policy.enter():
        remaining_payments = params.monthly_payment * months_remaining
        option_b = remaining_payments + params.excess_wear_charge + params.excess_mileage_charge

    option_a = None
    if params.estimated_wholesale_value is not None:
        payoff = compute_lease_payoff(
            params.net_cap_cost,
            params.residual_value,
            params.monthly_payment,
            params.term_months,
            params.months_elapsed,
            params.money_factor,
            policy,
        )
        with policy.enter():
            option_a = max(ZERO, payoff - params.estimated_wholesale_value)

    if option_a is None:
        used_option, liability = "b-only", option_b
    elif option_a <= option_b:
        used_option, liability = "a", option_a
    else:
        used_option, liability = "b", option_b

    with policy.enter():
        total = liability + params.early_termination_fee + params.disposition_fee

    line_items = [
        LineItem(
            "Termination Liability", liability,
            "Lesser of payoff minus wholesale value, or remaining payments plus charges"
            if option_a is not None
            else "Remaining payments plus charges (no wholesale value provided)",
            LineItemType.LIABILITY,
        ),
    ]
    # Break down only the option that makes up the liability
    if used_option == "a":
        line_items.append(
            LineItem(
                "  ↳ Payoff Less Wholesale Value", option_a,
                "Lender payoff minus the estimated wholesale value (floored at zero)",
                LineItemType.LIABILITY, sub_item=True,
            )
        )
    else:
        line_items.append(
            LineItem(
                "  ↳ Remaining Payments", remaining_payments,
                f"{months_remaining} remaining monthly payments",
                LineItemType.LIABILITY, sub_item=True,
            )
        )
        if params.excess_wear_charge > 0:
            line_items.append(
                LineItem(
                    "  ↳ Excess Wear Charge", params.excess_wear_charge,
                    "Charge for wear beyond normal use", LineItemType.FEE, sub_item=True,
                )
            )
        if params.excess_mileage_charge > 0:
            line_items.append(
                LineItem(
                    "  ↳ Excess Mileage Charge", params.excess_mileage_charge,
                    "Charge for miles over the allowance", LineItemType.FEE, sub_item=True,
                )
            )
    line_items += [
        LineItem(
            "Early Termination Fee", params.early_termination_fee,
            "Fee charged by lender for early lease termination", LineItemType.FEE,
        ),
        LineItem(
            "Disposition Fee", params.disposition_fee,
            "Fee for processing lease termination", LineItemType.FEE,
        ),
    ]

    warnings = []
    if option_a is None:
        warnings.append(
            "No wholesale value provided, so this estimate uses your remaining payments "
            "as the liability cap. Your actual termination cost may be lower."
        )
    warnings.append(
        "This estimate uses a generic lesser-of method. Contact your leasing company "
        "directly for an exact payoff quote."
    )
    if params.months_elapsed < FIRST_YEAR_MONTHS:
        warnings.append("Early termination in the first year typically incurs the highest penalties.")

    return EarlyTerminationResult(
        total_cost=total,
        net_cost=total,
        line_items=tuple(line_items),
        warnings=tuple(warnings),
        disclaimers=(disclaimers.GENERAL, disclaimers.EARLY_TERMINATION),
        early_termination_fee=params.early_termination_fee,
        disposition_fee=params.disposition_fee,
        remaining_payments=remaining_payments,
        option_a=option_a,
        option_b=option_b,
        used_option=used_option,
    )
