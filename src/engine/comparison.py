"""Run every exit scenario for one lease and rank them.

Complete results sort by net cost ascending. Results that lack the inputs
they need (market value, transfer details, a lease that has actually ended)
are flagged incomplete, sorted last, and never picked as the best option.
"""

import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal

from src.config import settings
from src.engine.equity import calculate_equity
from src.engine.precision import DecimalPolicy, MONEY
from src.engine.scenarios.buyout import BuyoutParams, evaluate_buyout
from src.engine.scenarios.early_termination import EarlyTerminationParams, evaluate_early_termination
from src.engine.scenarios.extension import ExtensionParams, evaluate_extension
from src.engine.scenarios.lease_transfer import LeaseTransferParams, evaluate_lease_transfer
from src.engine.scenarios.return_vehicle import ReturnParams, evaluate_return
from src.engine.scenarios.sell_privately import SellPrivatelyParams, evaluate_sell_privately
from src.engine.tax import calculate_lease_tax
from src.models.lease import Lease, MarketValue
from src.models.results import (
    BuyoutResult,
    ComparisonData,
    ScenarioResult,
    ScenarioType,
    TieResult,
)

logger = logging.getLogger(__name__)

MISSING_MARKET_VALUE = "Add your vehicle's market value for accurate sell-privately results"
EXTENSION_NOT_YET = "Extension only applies after your lease ends"
MISSING_TRANSFER_DETAILS = "Add your transfer details for accurate lease transfer results"


@dataclass(frozen=True)
class TransferDetails:
    transfer_fee: Decimal
    marketplace_fee: Decimal
    registration_fee: Decimal
    incentive_payments: Decimal = Decimal("0")


@dataclass(frozen=True)
class ScenarioOptions:
    """Inputs the lease record does not carry."""
    extension_months: int = field(default_factory=lambda: settings.default_extension_months)
    early_termination_fee: Decimal = Decimal("0")
    wear_and_tear_estimate: Decimal = Decimal("0")
    wholesale_value: Decimal | None = None  # Lender's wholesale estimate, if quoted
    transfer: TransferDetails | None = None
    tie_threshold: Decimal = field(default_factory=lambda: settings.tie_threshold)
    extension_incomplete_after_months: int = field(
        default_factory=lambda: settings.extension_incomplete_after_months
    )


def _default_transfer() -> TransferDetails:
    return TransferDetails(
        transfer_fee=settings.default_transfer_fee,
        marketplace_fee=settings.default_marketplace_fee,
        registration_fee=settings.default_registration_fee,
    )


def _mark_incomplete(result: ScenarioResult, warning: str) -> ScenarioResult:
    logger.debug("Marking %s incomplete: %s", result.type.value, warning)
    return replace(result, incomplete=True, warnings=result.warnings + (warning,))


def evaluate_all_scenarios(
    lease: Lease,
    market_value: MarketValue | None = None,
    options: ScenarioOptions | None = None,
    policy: DecimalPolicy = MONEY,
) -> tuple[ScenarioResult, ...]:
    """Evaluate all six scenarios, complete ones first by net cost."""
    options = options or ScenarioOptions()
    remaining_payments = lease.remaining_payments

    return_result = evaluate_return(
        ReturnParams(
            disposition_fee=lease.disposition_fee,
            current_mileage=lease.current_mileage,
            months_elapsed=lease.months_elapsed,
            term_months=lease.term_months,
            allowed_miles_per_year=lease.allowed_miles_per_year,
            overage_fee_per_mile=lease.overage_fee_per_mile,
            wear_and_tear_estimate=options.wear_and_tear_estimate,
            remaining_payments=remaining_payments,
        ),
        policy,
    )

    buyout_result = evaluate_buyout(
        BuyoutParams(
            residual_value=lease.residual_value,
            net_cap_cost=lease.net_cap_cost,
            money_factor=lease.money_factor,
            monthly_payment=lease.monthly_payment,
            term_months=lease.term_months,
            months_elapsed=lease.months_elapsed,
            purchase_fee=lease.purchase_fee,
            state_code=lease.state_code,
        ),
        policy,
    )

    # Residual stands in for the sale price until the user supplies one
    sale_price = market_value.value if market_value else lease.residual_value
    sell_result = evaluate_sell_privately(
        SellPrivatelyParams(
            estimated_sale_price=sale_price,
            residual_value=lease.residual_value,
            net_cap_cost=lease.net_cap_cost,
            money_factor=lease.money_factor,
            monthly_payment=lease.monthly_payment,
            term_months=lease.term_months,
            months_elapsed=lease.months_elapsed,
            purchase_fee=lease.purchase_fee,
            state_code=lease.state_code,
        ),
        policy,
    )
    if market_value is None:
        sell_result = _mark_incomplete(sell_result, MISSING_MARKET_VALUE)

    early_termination_result = evaluate_early_termination(
        EarlyTerminationParams(
            net_cap_cost=lease.net_cap_cost,
            residual_value=lease.residual_value,
            money_factor=lease.money_factor,
            term_months=lease.term_months,
            months_elapsed=lease.months_elapsed,
            monthly_payment=lease.monthly_payment,
            early_termination_fee=options.early_termination_fee,
            disposition_fee=lease.disposition_fee,
            estimated_wholesale_value=options.wholesale_value,
            excess_wear_charge=options.wear_and_tear_estimate,
            excess_mileage_charge=return_result.excess_mileage_cost,
        ),
        policy,
    )

    monthly_tax = calculate_lease_tax(
        lease.state_code, lease.monthly_payment, lease.term_months, policy=policy
    ).monthly_tax
    extension_result = evaluate_extension(
        ExtensionParams(
            monthly_payment=lease.monthly_payment,
            extension_months=options.extension_months,
            monthly_tax=monthly_tax,
        ),
        policy,
    )
    if lease.months_remaining > options.extension_incomplete_after_months:
        extension_result = _mark_incomplete(extension_result, EXTENSION_NOT_YET)

    transfer = options.transfer or _default_transfer()
    transfer_result = evaluate_lease_transfer(
        LeaseTransferParams(
            transfer_fee=transfer.transfer_fee,
            marketplace_fee=transfer.marketplace_fee,
            registration_fee=transfer.registration_fee,
            remaining_payments=remaining_payments,
            months_remaining=lease.months_remaining,
            incentive_payments=transfer.incentive_payments,
        ),
        policy,
    )
    if options.transfer is None:
        transfer_result = _mark_incomplete(transfer_result, MISSING_TRANSFER_DETAILS)

    results = [
        return_result,
        buyout_result,
        sell_result,
        early_termination_result,
        extension_result,
        transfer_result,
    ]
    # Stable: equal net costs keep evaluation order
    return tuple(sorted(results, key=lambda r: (r.incomplete, r.net_cost)))


def check_for_tie(
    scenarios: tuple[ScenarioResult, ...] | list[ScenarioResult],
    threshold: Decimal | None = None,
) -> TieResult:
    """Top two (already sorted) results within ``threshold`` dollars, inclusive.

    The threshold defaults to ``settings.tie_threshold``.
    """
    if threshold is None:
        threshold = settings.tie_threshold
    if len(scenarios) < 2:
        return TieResult(is_tie=False)

    first, second = scenarios[0], scenarios[1]
    if abs(second.net_cost - first.net_cost) <= threshold:
        return TieResult(is_tie=True, tied_options=(first.type, second.type))
    return TieResult(is_tie=False)


def get_comparison_data(
    lease: Lease,
    market_value: MarketValue | None = None,
    options: ScenarioOptions | None = None,
    policy: DecimalPolicy = MONEY,
) -> ComparisonData:
    options = options or ScenarioOptions()
    scenarios = evaluate_all_scenarios(lease, market_value, options, policy)
    complete = [s for s in scenarios if not s.incomplete]

    best_option = complete[0] if complete else scenarios[0]
    return_option = next(s for s in scenarios if s.type is ScenarioType.RETURN)
    savings_vs_return = return_option.net_cost - best_option.net_cost

    equity = None
    if market_value is not None:
        buyout: BuyoutResult = next(s for s in scenarios if s.type is ScenarioType.BUYOUT)
        equity = calculate_equity(
            market_value.value,
            buyout.residual_value,
            buyout.remaining_depreciation,
            buyout.purchase_fee,
            policy,
        )

    logger.info(
        "Compared %d scenarios: best=%s, savings vs return=%s",
        len(scenarios),
        best_option.type.value,
        savings_vs_return,
    )

    return ComparisonData(
        scenarios=scenarios,
        best_option=best_option,
        return_option=return_option,
        savings_vs_return=savings_vs_return,
        tie=check_for_tie(complete, options.tie_threshold),
        has_market_value=market_value is not None,
        equity=equity,
    )
