from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class Lease:
    # Contract
    net_cap_cost: Decimal
    residual_value: Decimal
    money_factor: Decimal
    monthly_payment: Decimal  # Base payment, before tax
    term_months: int
    state_code: str  # Two-letter tax jurisdiction
    months_elapsed: int = 0

    # Mileage
    current_mileage: int = 0
    allowed_miles_per_year: int = 12000
    overage_fee_per_mile: Decimal = Decimal("0.25")

    # Fees
    disposition_fee: Decimal = Decimal("0")  # Charged on return
    purchase_fee: Decimal = Decimal("0")  # Charged on buyout

    # Descriptive, not used by the engine
    make: str | None = None
    model: str | None = None
    year: int | None = None
    msrp: Decimal | None = None
    down_payment: Decimal | None = None

    def __post_init__(self):
        if self.term_months <= 0:
            raise ValueError(f"term_months must be positive, got {self.term_months}")
        if not 0 <= self.months_elapsed <= self.term_months:
            raise ValueError(
                f"months_elapsed must be between 0 and {self.term_months}, "
                f"got {self.months_elapsed}"
            )

    @property
    def months_remaining(self) -> int:
        return self.term_months - self.months_elapsed

    @property
    def remaining_payments(self) -> Decimal:
        return self.monthly_payment * self.months_remaining


class ValuationSource(Enum):
    MANUAL = "manual"
    KBB = "kbb"
    EDMUNDS = "edmunds"
    CARVANA = "carvana"


@dataclass(frozen=True)
class MarketValue:
    """Externally supplied estimate of what the vehicle would sell for today."""
    value: Decimal
    source: ValuationSource = ValuationSource.MANUAL
    source_label: str = "Your estimate"
