"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field, model_validator


# ---- Request schemas ----

class LeaseInput(BaseModel):
    net_cap_cost: Decimal = Field(..., gt=0, description="Adjusted capitalized cost")
    residual_value: Decimal = Field(..., gt=0)
    money_factor: Decimal = Field(..., ge=0)
    monthly_payment: Decimal = Field(..., gt=0, description="Base payment before tax")
    term_months: int = Field(..., gt=0, le=120)
    months_elapsed: int = Field(0, ge=0)

    current_mileage: int = Field(0, ge=0)
    allowed_miles_per_year: int = Field(12000, gt=0)
    overage_fee_per_mile: Decimal = Field(Decimal("0.25"), ge=0)

    disposition_fee: Decimal = Field(Decimal("0"), ge=0)
    purchase_fee: Decimal = Field(Decimal("0"), ge=0)
    state_code: str = Field("CA", pattern=r"^[A-Za-z]{2}$")

    make: str | None = None
    model: str | None = None
    year: int | None = None

    @model_validator(mode="after")
    def check_contract(self):
        if self.months_elapsed > self.term_months:
            raise ValueError("months_elapsed cannot exceed term_months")
        if self.residual_value >= self.net_cap_cost:
            raise ValueError("residual_value must be less than net_cap_cost")
        return self


class TransferInput(BaseModel):
    transfer_fee: Decimal = Field(..., ge=0)
    marketplace_fee: Decimal = Field(Decimal("0"), ge=0)
    registration_fee: Decimal = Field(Decimal("0"), ge=0)
    incentive_payments: Decimal = Field(Decimal("0"), ge=0)


class CompareRequest(BaseModel):
    lease: LeaseInput
    market_value: Decimal | None = Field(None, ge=0, description="Estimated private sale price")
    valuation_source: str = "manual"

    # Optional overrides
    extension_months: int | None = Field(None, gt=0)
    early_termination_fee: Decimal = Field(Decimal("0"), ge=0)
    wear_and_tear_estimate: Decimal = Field(Decimal("0"), ge=0)
    wholesale_value: Decimal | None = Field(None, ge=0)
    transfer: TransferInput | None = None


class TimelineRequest(BaseModel):
    lease: LeaseInput
    market_value: Decimal | None = Field(None, ge=0)
    valuation_source: str = "manual"
    transfer: TransferInput | None = None


class PayoffRequest(BaseModel):
    lease: LeaseInput


# ---- Response schemas ----

class LineItemResponse(BaseModel):
    label: str
    amount: Decimal
    description: str
    type: str
    sub_item: bool = False


class ScenarioResponse(BaseModel):
    type: str
    name: str
    total_cost: Decimal
    net_cost: Decimal
    line_items: list[LineItemResponse]
    warnings: list[str]
    disclaimers: list[str]
    incomplete: bool = False
    details: dict[str, Decimal | int | str | None] = {}


class TieResponse(BaseModel):
    is_tie: bool
    tied_options: list[str] = []


class EquityResponse(BaseModel):
    market_value: Decimal
    buyout_cost: Decimal
    equity: Decimal
    has_positive_equity: bool
    line_items: list[LineItemResponse]


class ComparisonResponse(BaseModel):
    scenarios: list[ScenarioResponse]
    best_option: ScenarioResponse
    return_option: ScenarioResponse
    savings_vs_return: Decimal
    tie: TieResponse
    has_market_value: bool
    equity: EquityResponse | None = None


class TimelinePointResponse(BaseModel):
    month: int
    return_: float = Field(..., serialization_alias="return")
    buyout: float
    sell_privately: float | None = None
    early_termination: float
    extension: float | None = None
    lease_transfer: float | None = None


class CrossoverResponse(BaseModel):
    month: int
    scenario: str
    overtakes: str
    message: str


class ScenarioCostResponse(BaseModel):
    scenario: str
    cost: float
    month: int = 0


class RecommendationResponse(BaseModel):
    best_now: ScenarioCostResponse
    best_overall: ScenarioCostResponse
    should_wait: bool
    savings: float
    message: str


class TimelineResponse(BaseModel):
    data: list[TimelinePointResponse]
    months_remaining: int
    has_market_value: bool
    scenarios: list[str]
    crossovers: list[CrossoverResponse]
    recommendation: RecommendationResponse


class PayoffResponse(BaseModel):
    payoff: Decimal
    straight_line_payoff: Decimal
    residual_value: Decimal
    remaining_depreciation: Decimal
    months_remaining: int
    apr: Decimal


class TaxRuleResponse(BaseModel):
    state_code: str
    state_name: str
    timing: str
    rate: Decimal
    applies_to_down_payment: bool
    notes: str
