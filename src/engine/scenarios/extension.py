"""Keep the car month-to-month after the lease ends.

Most lessors keep the same payment for a month-to-month extension.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.engine import disclaimers
from src.engine.precision import DecimalPolicy, MONEY
from src.models.results import ExtensionResult, LineItem, LineItemType

WARRANTY_WARNING_MONTHS = 6


@dataclass(frozen=True)
class ExtensionParams:
    monthly_payment: Decimal
    extension_months: int
    monthly_tax: Decimal = Decimal("0")


def evaluate_extension(params: ExtensionParams, policy: DecimalPolicy = MONEY) -> ExtensionResult:
    with policy.enter():
        per_month = params.monthly_payment + params.monthly_tax
        total = per_month * params.extension_months

    line_items = (
        LineItem("Monthly Payment", params.monthly_payment,
                 "Monthly payment amount (per month)", LineItemType.LIABILITY, sub_item=True),
        LineItem("Monthly Tax", params.monthly_tax,
                 "Monthly tax amount", LineItemType.TAX, sub_item=True),
        LineItem("Total per Month", per_month,
                 "Total monthly cost including tax", LineItemType.LIABILITY, sub_item=True),
        LineItem("Total Extension Cost", total,
                 f"Total cost for {params.extension_months} month extension",
                 LineItemType.LIABILITY),
    )

    warnings = [
        "Month-to-month extension terms may differ from your original lease agreement.",
        "Your leasing company may change rates or terms during the extension period.",
    ]
    if params.extension_months > WARRANTY_WARNING_MONTHS:
        warnings.append(
            "Extended lease periods may result in the vehicle falling outside warranty coverage."
        )

    return ExtensionResult(
        total_cost=total,
        net_cost=total,
        line_items=line_items,
        warnings=tuple(warnings),
        disclaimers=(disclaimers.GENERAL,),
        monthly_extension_payment=params.monthly_payment,
        extension_months=params.extension_months,
        total_extension_cost=total,
    )
