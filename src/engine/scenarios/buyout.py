"""Buy the vehicle from the lessor.

Cost = lender payoff (constant yield) + purchase fee + sales tax on residual.
Mid-lease the payoff carries the undepreciated balance above residual.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.engine import disclaimers
from src.engine.payoff import compute_lease_payoff
from src.engine.precision import DecimalPolicy, MONEY, to_cents
from src.engine.tax_rules import get_state_tax_rule
from src.models.results import BuyoutResult, LineItem, LineItemType


@dataclass(frozen=True)
class BuyoutParams:
    residual_value: Decimal
    net_cap_cost: Decimal
    money_factor: Decimal
    monthly_payment: Decimal
    term_months: int
    months_elapsed: int
    purchase_fee: Decimal
    state_code: str


def evaluate_buyout(params: BuyoutParams, policy: DecimalPolicy = MONEY) -> BuyoutResult:
    tax_rule = get_state_tax_rule(params.state_code)
    months_remaining = params.term_months - params.months_elapsed

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
        remaining_depreciation = payoff - params.residual_value
        # Tax is charged on the residual (the purchase price), not the payoff
        sales_tax = params.residual_value * tax_rule.rate
        total = payoff + params.purchase_fee + sales_tax
        rate_pct = tax_rule.rate * 100

    line_items = (
        LineItem(
            "Payoff Amount", payoff,
            "Amount owed to lender to purchase the vehicle", LineItemType.LIABILITY,
        ),
        LineItem(
            "  ↳ Residual Value", params.residual_value,
            "Predetermined buyout price at lease end", LineItemType.LIABILITY,
            sub_item=True,
        ),
        LineItem(
            "  ↳ Remaining Depreciation", remaining_depreciation,
            f"Remaining book value above residual ({months_remaining} months left)",
            LineItemType.LIABILITY,
            sub_item=True,
        ),
        LineItem(
            "Purchase Fee", params.purchase_fee,
            "Administrative fee charged for lease buyout", LineItemType.FEE,
        ),
        LineItem(
            "Sales Tax", sales_tax,
            f"{tax_rule.state_name} sales tax on residual value ({rate_pct:.2f}%)",
            LineItemType.TAX,
        ),
    )

    warnings = []
    if months_remaining > 0:
        warnings.append(
            f"Payoff of ${to_cents(payoff)} is an estimate with {months_remaining} "
            f"months remaining. Mid-lease payoffs vary by lender, so contact your "
            f"lender for an exact payoff quote."
        )

    return BuyoutResult(
        total_cost=total,
        net_cost=total,
        line_items=line_items,
        warnings=tuple(warnings),
        disclaimers=(disclaimers.GENERAL, disclaimers.TAX),
        residual_value=params.residual_value,
        payoff_amount=payoff,
        remaining_depreciation=remaining_depreciation,
        purchase_fee=params.purchase_fee,
        sales_tax=sales_tax,
    )
