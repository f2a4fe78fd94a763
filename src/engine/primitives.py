"""Core lease money formulas: depreciation, rent charge, payment, total cost.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal

from src.engine.precision import DecimalPolicy, MONEY

# APR (percent) = money factor * 2400
APR_FACTOR = Decimal("2400")


def depreciation(
    net_cap_cost: Decimal,
    residual_value: Decimal,
    term_months: int,
    policy: DecimalPolicy = MONEY,
) -> Decimal:
    """Monthly depreciation = (net cap cost - residual) / term."""
    with policy.enter():
        return (net_cap_cost - residual_value) / term_months


def rent_charge(
    net_cap_cost: Decimal,
    residual_value: Decimal,
    money_factor: Decimal,
    policy: DecimalPolicy = MONEY,
) -> Decimal:
    """Monthly rent charge = (net cap cost + residual) * money factor."""
    with policy.enter():
        return (net_cap_cost + residual_value) * money_factor


def monthly_payment(
    net_cap_cost: Decimal,
    residual_value: Decimal,
    money_factor: Decimal,
    term_months: int,
    policy: DecimalPolicy = MONEY,
) -> Decimal:
    """Base monthly payment before tax: depreciation + rent charge."""
    dep = depreciation(net_cap_cost, residual_value, term_months, policy)
    rent = rent_charge(net_cap_cost, residual_value, money_factor, policy)
    with policy.enter():
        return dep + rent


def total_cost(
    payment: Decimal,
    term_months: int,
    down_payment: Decimal,
    total_tax: Decimal,
    policy: DecimalPolicy = MONEY,
) -> Decimal:
    """Total out-of-pocket lease cost: payments + down payment + tax."""
    with policy.enter():
        return payment * term_months + down_payment + total_tax


def money_factor_to_apr(money_factor: Decimal, policy: DecimalPolicy = MONEY) -> Decimal:
    with policy.enter():
        return money_factor * APR_FACTOR


def apr_to_money_factor(apr: Decimal, policy: DecimalPolicy = MONEY) -> Decimal:
    with policy.enter():
        return apr / APR_FACTOR
