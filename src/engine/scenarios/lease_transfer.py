"""Hand the lease to a new lessee (SwapALease, LeaseTrader, Leasehackr).

Cost = transfer fee + marketplace fee + registration fee + incentives.
The remaining payments are avoided rather than paid.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.engine import disclaimers
from src.engine.precision import DecimalPolicy, MONEY
from src.models.results import LeaseTransferResult, LineItem, LineItemType

HIGH_TRANSFER_FEE = Decimal("500")
SHORT_LEASE_MONTHS = 6


@dataclass(frozen=True)
class LeaseTransferParams:
    transfer_fee: Decimal
    marketplace_fee: Decimal
    registration_fee: Decimal
    remaining_payments: Decimal
    months_remaining: int
    incentive_payments: Decimal = Decimal("0")


def evaluate_lease_transfer(
    params: LeaseTransferParams,
    policy: DecimalPolicy = MONEY,
) -> LeaseTransferResult:
    line_items = [
        LineItem(
            "Transfer Fee", params.transfer_fee,
            "Fee charged by leasing company to transfer lease to new lessee",
            LineItemType.FEE,
        ),
        LineItem(
            "Marketplace Listing Fee", params.marketplace_fee,
            "Fee for listing on a lease transfer marketplace (e.g., SwapALease ~$100, "
            "LeaseTrader ~$50-200, or free on Leasehackr forums)",
            LineItemType.FEE,
        ),
        LineItem(
            "Registration Fee", params.registration_fee,
            "Fee for new lessee registration and title transfer", LineItemType.FEE,
        ),
    ]
    if params.incentive_payments > 0:
        line_items.append(
            LineItem(
                "Incentive Payments", params.incentive_payments,
                "Payments offered to new lessee to sweeten the deal", LineItemType.FEE,
            )
        )

    with policy.enter():
        total = (
            params.transfer_fee
            + params.marketplace_fee
            + params.registration_fee
            + params.incentive_payments
        )

    warnings = []
    if params.transfer_fee > HIGH_TRANSFER_FEE:
        warnings.append(
            "Transfer fee exceeds $500, which is higher than typical. Verify this fee "
            "with your leasing company and compare against alternative exit options."
        )
    if params.months_remaining < SHORT_LEASE_MONTHS:
        warnings.append(
            "Lease has fewer than 6 months remaining. Finding a qualified transferee "
            "may be difficult for short-term leases. Consider alternative options like "
            "returning the vehicle or negotiating an early termination."
        )

    return LeaseTransferResult(
        total_cost=total,
        net_cost=total,
        line_items=tuple(line_items),
        warnings=tuple(warnings),
        disclaimers=(disclaimers.GENERAL, disclaimers.LEASE_TRANSFER),
        transfer_fee=params.transfer_fee,
        marketplace_fee=params.marketplace_fee,
        registration_fee=params.registration_fee,
        incentive_payments=params.incentive_payments,
        payments_avoided=params.remaining_payments,
    )
