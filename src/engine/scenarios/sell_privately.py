"""Buy the lease out, then sell the vehicle privately.

Buyout cost = lender payoff + purchase fee (+ sales tax on residual when the
state is known). Net cost = buyout cost - sale price, which goes negative
when the sale clears the payoff.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.engine import disclaimers
from src.engine.payoff import compute_lease_payoff
from src.engine.precision import DecimalPolicy, MONEY, ZERO, to_cents
from src.engine.tax import buyout_sales_tax
from src.models.results import LineItem, LineItemType, SellPrivatelyResult


@dataclass(frozen=True)
class SellPrivatelyParams:
    estimated_sale_price: Decimal
    residual_value: Decimal
    net_cap_cost: Decimal
    money_factor: Decimal
    monthly_payment: Decimal
    term_months: int
    months_elapsed: int
    purchase_fee: Decimal
    state_code: str | None = None  # Omit to leave buyout tax out of the total


def evaluate_sell_privately(
    params: SellPrivatelyParams,
    policy: DecimalPolicy = MONEY,
) -> SellPrivatelyResult:
    if params.months_elapsed < 0:
        raise ValueError(f"months_elapsed cannot be negative, got {params.months_elapsed}")

    months_remaining = params.term_months - params.months_elapsed

    lease_payoff = compute_lease_payoff(
        params.net_cap_cost,
        params.residual_value,
        params.monthly_payment,
        params.term_months,
        params.months_elapsed,
        params.money_factor,
        policy,
    )
    sales_tax = (
        buyout_sales_tax(params.state_code, params.residual_value, policy)
        if params.state_code
        else ZERO
    )

    with policy.enter():
        remaining_depreciation = lease_payoff - params.residual_value
        payoff_amount = lease_payoff + params.purchase_fee + sales_tax
        net_proceeds = params.estimated_sale_price - payoff_amount

    profitable = net_proceeds >= 0
    line_items = [
        LineItem(
            "Estimated Sale Price", params.estimated_sale_price,
            "Expected private party sale price", LineItemType.ASSET,
        ),
        LineItem(
            "Lease Buyout Cost", payoff_amount,
            "Total cost to purchase vehicle from lessor", LineItemType.LIABILITY,
        ),
        LineItem(
            "  ↳ Lease Payoff", lease_payoff,
            "Amount owed to lender (residual + remaining book value)",
            LineItemType.LIABILITY, sub_item=True,
        ),
        LineItem(
            "    ↳ Residual Value", params.residual_value,
            "Predetermined vehicle value at lease end",
            LineItemType.LIABILITY, sub_item=True,
        ),
        LineItem(
            "    ↳ Remaining Depreciation", remaining_depreciation,
            f"Remaining book value above residual ({months_remaining} months left)",
            LineItemType.LIABILITY, sub_item=True,
        ),
        LineItem(
            "  ↳ Purchase Fee", params.purchase_fee,
            "Administrative buyout fee", LineItemType.FEE, sub_item=True,
        ),
    ]
    if sales_tax > 0:
        line_items.append(
            LineItem(
                "  ↳ Sales Tax", sales_tax,
                "Sales tax on residual value at buyout", LineItemType.TAX, sub_item=True,
            )
        )
    line_items.append(
        LineItem(
            "Net Proceeds", net_proceeds,
            "Cash received after sale (profit)" if profitable
            else "Cash needed to cover payoff (loss)",
            LineItemType.ASSET if profitable else LineItemType.LIABILITY,
        )
    )

    warnings = []
    if net_proceeds < 0:
        warnings.append(
            f"Sale price is less than payoff amount. You will need to cover the "
            f"difference of ${to_cents(-net_proceeds)} to complete the sale."
        )
    if months_remaining > 0:
        warnings.append(
            f"You have {months_remaining} remaining months on your lease. Important "
            f"timing consideration: you must buy out the lease before selling "
            f"privately. Coordinate buyout and sale carefully to minimize time "
            f"between transactions."
        )
    warnings.append(
        "Sales tax may apply at buyout depending on your state. Check with your "
        "local DMV or tax advisor for exact obligations."
    )

    return SellPrivatelyResult(
        total_cost=payoff_amount,
        net_cost=-net_proceeds,
        line_items=tuple(line_items),
        warnings=tuple(warnings),
        disclaimers=(disclaimers.GENERAL, disclaimers.TAX, disclaimers.MARKET_VALUE),
        estimated_sale_price=params.estimated_sale_price,
        payoff_amount=payoff_amount,
        net_proceeds=net_proceeds,
    )
