"""Vehicle equity: market value against the cost to buy the lease out.

Positive equity means the car is worth more than the buyout, which makes
selling privately or trading in worth a look. Sales tax is left out; it is
owed whether or not the car is resold.
"""

from decimal import Decimal

from src.engine.precision import DecimalPolicy, MONEY
from src.models.results import EquityCalculation, LineItem, LineItemType


def calculate_equity(
    market_value: Decimal,
    residual_value: Decimal,
    remaining_balance: Decimal,
    buyout_fee: Decimal,
    policy: DecimalPolicy = MONEY,
) -> EquityCalculation:
    """Equity = market value - (residual + remaining balance + buyout fee).

    Args:
        market_value: What the vehicle would sell for today
        residual_value: Contract residual
        remaining_balance: Lender payoff above residual (zero at lease end)
        buyout_fee: Purchase option fee
    """
    with policy.enter():
        buyout_cost = residual_value + remaining_balance + buyout_fee
        equity = market_value - buyout_cost

    line_items = (
        LineItem("Market Value", market_value,
                 "Current market value of the vehicle", LineItemType.ASSET),
        LineItem("Residual Value", residual_value,
                 "Predetermined residual value at lease end", LineItemType.LIABILITY),
        LineItem("Remaining Depreciation", remaining_balance,
                 "Payoff balance above residual value", LineItemType.LIABILITY),
        LineItem("Buyout Fee", buyout_fee,
                 "Administrative fee for lease buyout", LineItemType.LIABILITY),
    )

    return EquityCalculation(
        market_value=market_value,
        buyout_cost=buyout_cost,
        equity=equity,
        has_positive_equity=equity > 0,
        line_items=line_items,
    )
