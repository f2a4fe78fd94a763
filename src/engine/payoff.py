"""Lease payoff (Adjusted Lease Balance) via the constant yield method.

Lease contracts (e.g. GM Financial section 22) compute each period's rent
charge on the outstanding balance, like mortgage amortization. Payoff quotes
are therefore higher early in the lease and lower late in the lease than a
straight-line depreciation schedule would suggest.

Annuity-due structure: the first base payment is made at signing.
    BSRC_0 = cap_cost - payment
    BSRC_k = BSRC_0 * (1+r)^k - payment * ((1+r)^k - 1) / r
    BSRC_N = residual - payment
    payoff = BSRC + payment

The implicit monthly rate r has no closed form and is solved with
Newton-Raphson. A failed or zero-rate solve falls back to straight-line.

Pure functions. No I/O.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from src.engine.precision import DecimalPolicy, MONEY, ZERO

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 100
TOLERANCE = Decimal("1e-10")
STEP = Decimal("1e-8")  # Centered-difference step
FLAT_DERIVATIVE = Decimal("1e-15")
ZERO_RATE = Decimal("1e-10")
DEFAULT_SEED = Decimal("0.003")


@dataclass(frozen=True)
class Converged:
    rate: Decimal


@dataclass(frozen=True)
class FallbackRequired:
    reason: str
    iterations: int


SolverOutcome = Converged | FallbackRequired


def bsrc_at_period(
    start_bsrc: Decimal,
    payment: Decimal,
    rate: Decimal,
    periods: int,
    policy: DecimalPolicy = MONEY,
) -> Decimal:
    """Balance subject to rent charge after ``periods`` payments."""
    if periods == 0:
        return start_bsrc

    with policy.enter():
        if abs(rate) < ZERO_RATE:
            return start_bsrc - payment * periods

        growth = (1 + rate) ** periods
        return start_bsrc * growth - payment * (growth - 1) / rate


def solve_implicit_rate(
    start_bsrc: Decimal,
    payment: Decimal,
    periods: int,
    target_bsrc: Decimal,
    seed: Decimal | None = None,
    policy: DecimalPolicy = MONEY,
) -> SolverOutcome:
    """Find r such that bsrc_at_period(start, payment, r, periods) == target.

    Newton-Raphson with a centered numerical derivative.
    """
    rate = seed if seed is not None else DEFAULT_SEED

    with policy.enter():
        for iteration in range(MAX_ITERATIONS):
            residual = bsrc_at_period(start_bsrc, payment, rate, periods, policy) - target_bsrc

            if abs(residual) < TOLERANCE:
                return Converged(rate)

            f_plus = bsrc_at_period(start_bsrc, payment, rate + STEP, periods, policy) - target_bsrc
            f_minus = bsrc_at_period(start_bsrc, payment, rate - STEP, periods, policy) - target_bsrc
            derivative = (f_plus - f_minus) / (STEP * 2)

            if abs(derivative) < FLAT_DERIVATIVE:
                return FallbackRequired("derivative too flat", iteration + 1)

            rate = rate - residual / derivative

            # Rate cannot go negative; a lease that wants one carries no rent charge
            if rate <= 0:
                return Converged(ZERO)

    return FallbackRequired("did not converge", MAX_ITERATIONS)


def straight_line_payoff(
    cap_cost: Decimal,
    residual_value: Decimal,
    term_months: int,
    months_elapsed: int,
    policy: DecimalPolicy = MONEY,
) -> Decimal:
    """residual + monthly depreciation * months remaining."""
    with policy.enter():
        monthly_dep = (cap_cost - residual_value) / term_months
        return residual_value + monthly_dep * (term_months - months_elapsed)


def compute_lease_payoff(
    cap_cost: Decimal,
    residual_value: Decimal,
    payment: Decimal,
    term_months: int,
    months_elapsed: int,
    money_factor: Decimal | None = None,
    policy: DecimalPolicy = MONEY,
) -> Decimal:
    """Lender-style payoff at ``months_elapsed`` months into the lease.

    Args:
        cap_cost: Adjusted capitalized cost
        residual_value: Contract residual value
        payment: Base monthly payment (before tax)
        term_months: Lease term in months
        months_elapsed: Months since lease start
        money_factor: Optional hint; the solver is seeded at 2x this value

    Always returns a usable amount. Solver failure falls back to straight-line.
    """
    if months_elapsed >= term_months:
        return residual_value

    with policy.enter():
        start_bsrc = cap_cost - payment
        end_bsrc = residual_value - payment
        seed = money_factor * 2 if money_factor else None

    outcome = solve_implicit_rate(start_bsrc, payment, term_months, end_bsrc, seed, policy)

    if isinstance(outcome, FallbackRequired) or abs(outcome.rate) < ZERO_RATE:
        if isinstance(outcome, FallbackRequired):
            logger.debug(
                "Implicit rate solve failed (%s after %d iterations), using straight-line",
                outcome.reason,
                outcome.iterations,
            )
        return straight_line_payoff(cap_cost, residual_value, term_months, months_elapsed, policy)

    # +1 for the payment made at signing (period 0)
    periods = min(months_elapsed + 1, term_months)
    current_bsrc = bsrc_at_period(start_bsrc, payment, outcome.rate, periods, policy)

    with policy.enter():
        return current_bsrc + payment
