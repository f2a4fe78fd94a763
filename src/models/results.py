from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class ScenarioType(Enum):
    RETURN = "return"
    BUYOUT = "buyout"
    SELL_PRIVATELY = "sell-privately"
    EARLY_TERMINATION = "early-termination"
    EXTENSION = "extension"
    LEASE_TRANSFER = "lease-transfer"


class LineItemType(Enum):
    ASSET = "asset"
    LIABILITY = "liability"
    FEE = "fee"
    TAX = "tax"


@dataclass(frozen=True)
class LineItem:
    label: str
    amount: Decimal
    description: str
    type: LineItemType
    sub_item: bool = False  # Breakdown of the line above; never summed


# Scenario results. Each variant repeats the shared fields
# (total_cost, net_cost, line_items, warnings, disclaimers, incomplete)
# and is discriminated by its fixed ``type``.
#
# net_cost is positive for a cost to the lessee, negative for net proceeds.


@dataclass(frozen=True)
class ReturnResult:
    total_cost: Decimal
    net_cost: Decimal
    line_items: tuple[LineItem, ...]
    warnings: tuple[str, ...]
    disclaimers: tuple[str, ...]
    remaining_payments: Decimal
    disposition_fee: Decimal
    excess_mileage_cost: Decimal
    wear_and_tear_estimate: Decimal
    incomplete: bool = False
    type: ScenarioType = field(default=ScenarioType.RETURN, init=False)


@dataclass(frozen=True)
class BuyoutResult:
    total_cost: Decimal
    net_cost: Decimal
    line_items: tuple[LineItem, ...]
    warnings: tuple[str, ...]
    disclaimers: tuple[str, ...]
    residual_value: Decimal
    payoff_amount: Decimal  # Lender payoff, before fee and tax
    remaining_depreciation: Decimal  # payoff - residual
    purchase_fee: Decimal
    sales_tax: Decimal
    incomplete: bool = False
    type: ScenarioType = field(default=ScenarioType.BUYOUT, init=False)


@dataclass(frozen=True)
class SellPrivatelyResult:
    total_cost: Decimal
    net_cost: Decimal
    line_items: tuple[LineItem, ...]
    warnings: tuple[str, ...]
    disclaimers: tuple[str, ...]
    estimated_sale_price: Decimal
    payoff_amount: Decimal  # Lease payoff + purchase fee + buyout sales tax (when a state is given)
    net_proceeds: Decimal  # Sale price - buyout cost; negative = shortfall
    incomplete: bool = False
    type: ScenarioType = field(default=ScenarioType.SELL_PRIVATELY, init=False)


@dataclass(frozen=True)
class EarlyTerminationResult:
    total_cost: Decimal
    net_cost: Decimal
    line_items: tuple[LineItem, ...]
    warnings: tuple[str, ...]
    disclaimers: tuple[str, ...]
    early_termination_fee: Decimal
    disposition_fee: Decimal
    remaining_payments: Decimal
    option_a: Decimal | None  # None when no wholesale value was supplied
    option_b: Decimal
    used_option: str  # "a", "b" or "b-only"
    incomplete: bool = False
    type: ScenarioType = field(default=ScenarioType.EARLY_TERMINATION, init=False)


@dataclass(frozen=True)
class ExtensionResult:
    total_cost: Decimal
    net_cost: Decimal
    line_items: tuple[LineItem, ...]
    warnings: tuple[str, ...]
    disclaimers: tuple[str, ...]
    monthly_extension_payment: Decimal
    extension_months: int
    total_extension_cost: Decimal
    incomplete: bool = False
    type: ScenarioType = field(default=ScenarioType.EXTENSION, init=False)


@dataclass(frozen=True)
class LeaseTransferResult:
    total_cost: Decimal
    net_cost: Decimal
    line_items: tuple[LineItem, ...]
    warnings: tuple[str, ...]
    disclaimers: tuple[str, ...]
    transfer_fee: Decimal
    marketplace_fee: Decimal
    registration_fee: Decimal
    incentive_payments: Decimal
    payments_avoided: Decimal
    incomplete: bool = False
    type: ScenarioType = field(default=ScenarioType.LEASE_TRANSFER, init=False)


ScenarioResult = (
    ReturnResult
    | BuyoutResult
    | SellPrivatelyResult
    | EarlyTerminationResult
    | ExtensionResult
    | LeaseTransferResult
)


@dataclass(frozen=True)
class MileageProjection:
    current_mileage: int
    months_elapsed: int
    term_months: int
    average_miles_per_month: Decimal
    projected_end_mileage: int
    allowed_miles: Decimal
    projected_overage: Decimal
    projected_overage_cost: Decimal


@dataclass(frozen=True)
class EquityCalculation:
    market_value: Decimal
    buyout_cost: Decimal
    equity: Decimal
    has_positive_equity: bool
    line_items: tuple[LineItem, ...]


@dataclass(frozen=True)
class TieResult:
    is_tie: bool
    tied_options: tuple[ScenarioType, ...] = ()


@dataclass(frozen=True)
class ComparisonData:
    scenarios: tuple[ScenarioResult, ...]  # Complete by net cost, then incomplete
    best_option: ScenarioResult
    return_option: ScenarioResult
    savings_vs_return: Decimal  # Positive = best option beats returning
    tie: TieResult
    has_market_value: bool
    equity: EquityCalculation | None = None
