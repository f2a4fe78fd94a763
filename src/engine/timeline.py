"""Month-by-month cost of each exit scenario from today to lease end.

Each offset re-runs the evaluators as if ``offset`` more months had passed.
Wear and tear is not projected. Extension only exists once the lease has
ended, and sell-privately only when a market value was supplied.
"""

from decimal import Decimal

from src.config import settings
from src.engine.comparison import TransferDetails
from src.engine.precision import DecimalPolicy, MONEY, to_cents
from src.engine.scenarios.buyout import BuyoutParams, evaluate_buyout
from src.engine.scenarios.early_termination import EarlyTerminationParams, evaluate_early_termination
from src.engine.scenarios.extension import ExtensionParams, evaluate_extension
from src.engine.scenarios.lease_transfer import LeaseTransferParams, evaluate_lease_transfer
from src.engine.scenarios.return_vehicle import ReturnParams, evaluate_return
from src.engine.scenarios.sell_privately import SellPrivatelyParams, evaluate_sell_privately
from src.models.lease import Lease, MarketValue
from src.models.results import ScenarioType
from src.models.timeline import MonthlyProjection, TimelineDataPoint, TimelineSeries


def project_scenario_costs(
    lease: Lease,
    month_offset: int,
    market_value: MarketValue | None = None,
    transfer: TransferDetails | None = None,
    policy: DecimalPolicy = MONEY,
) -> MonthlyProjection:
    months_elapsed = lease.months_elapsed + month_offset
    months_remaining = lease.term_months - months_elapsed
    with policy.enter():
        remaining_payments = lease.monthly_payment * months_remaining

    return_result = evaluate_return(
        ReturnParams(
            disposition_fee=lease.disposition_fee,
            current_mileage=lease.current_mileage,
            months_elapsed=months_elapsed,
            term_months=lease.term_months,
            allowed_miles_per_year=lease.allowed_miles_per_year,
            overage_fee_per_mile=lease.overage_fee_per_mile,
            wear_and_tear_estimate=Decimal("0"),
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
            months_elapsed=months_elapsed,
            purchase_fee=lease.purchase_fee,
            state_code=lease.state_code,
        ),
        policy,
    )

    sell_privately = None
    if market_value is not None:
        sell_privately = evaluate_sell_privately(
            SellPrivatelyParams(
                estimated_sale_price=market_value.value,
                residual_value=lease.residual_value,
                net_cap_cost=lease.net_cap_cost,
                money_factor=lease.money_factor,
                monthly_payment=lease.monthly_payment,
                term_months=lease.term_months,
                months_elapsed=months_elapsed,
                purchase_fee=lease.purchase_fee,
                state_code=lease.state_code,
            ),
            policy,
        ).net_cost

    early_termination_result = evaluate_early_termination(
        EarlyTerminationParams(
            net_cap_cost=lease.net_cap_cost,
            residual_value=lease.residual_value,
            money_factor=lease.money_factor,
            term_months=lease.term_months,
            months_elapsed=months_elapsed,
            monthly_payment=lease.monthly_payment,
            early_termination_fee=settings.timeline_early_termination_fee,
            disposition_fee=lease.disposition_fee,
            excess_mileage_charge=return_result.excess_mileage_cost,
        ),
        policy,
    )

    extension = None
    if months_remaining == 0:
        extension = evaluate_extension(
            ExtensionParams(
                monthly_payment=lease.monthly_payment,
                extension_months=settings.default_extension_months,
            ),
            policy,
        ).total_cost

    lease_transfer = None
    if transfer is not None:
        lease_transfer = evaluate_lease_transfer(
            LeaseTransferParams(
                transfer_fee=transfer.transfer_fee,
                marketplace_fee=transfer.marketplace_fee,
                registration_fee=transfer.registration_fee,
                remaining_payments=remaining_payments,
                months_remaining=months_remaining,
                incentive_payments=transfer.incentive_payments,
            ),
            policy,
        ).net_cost

    return MonthlyProjection(
        month=month_offset,
        costs={
            ScenarioType.RETURN: return_result.net_cost,
            ScenarioType.BUYOUT: buyout_result.net_cost,
            ScenarioType.SELL_PRIVATELY: sell_privately,
            ScenarioType.EARLY_TERMINATION: early_termination_result.net_cost,
            ScenarioType.EXTENSION: extension,
            ScenarioType.LEASE_TRANSFER: lease_transfer,
        },
    )


def _to_float(value: Decimal | None) -> float | None:
    return None if value is None else float(to_cents(value))


def build_timeline_data(
    lease: Lease,
    market_value: MarketValue | None = None,
    transfer: TransferDetails | None = None,
    policy: DecimalPolicy = MONEY,
) -> TimelineSeries:
    """One data point per month from today (0) to lease end, inclusive."""
    months_remaining = lease.months_remaining

    data = []
    for offset in range(months_remaining + 1):
        costs = project_scenario_costs(lease, offset, market_value, transfer, policy).costs
        data.append(
            TimelineDataPoint(
                month=offset,
                return_=_to_float(costs[ScenarioType.RETURN]),
                buyout=_to_float(costs[ScenarioType.BUYOUT]),
                sell_privately=_to_float(costs[ScenarioType.SELL_PRIVATELY]),
                early_termination=_to_float(costs[ScenarioType.EARLY_TERMINATION]),
                extension=_to_float(costs[ScenarioType.EXTENSION]),
                lease_transfer=_to_float(costs[ScenarioType.LEASE_TRANSFER]),
            )
        )

    scenarios = [ScenarioType.RETURN, ScenarioType.BUYOUT]
    if market_value is not None:
        scenarios.append(ScenarioType.SELL_PRIVATELY)
    scenarios += [ScenarioType.EARLY_TERMINATION, ScenarioType.EXTENSION]
    if transfer is not None:
        scenarios.append(ScenarioType.LEASE_TRANSFER)

    return TimelineSeries(
        data=tuple(data),
        months_remaining=months_remaining,
        has_market_value=market_value is not None,
        scenarios=tuple(scenarios),
    )
