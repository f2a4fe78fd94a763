"""Lease exit routes: compare scenarios, project the timeline, quote a payoff."""

import dataclasses
import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_policy, get_settings
from src.api.schemas import (
    CompareRequest,
    ComparisonResponse,
    CrossoverResponse,
    EquityResponse,
    LeaseInput,
    LineItemResponse,
    PayoffRequest,
    PayoffResponse,
    RecommendationResponse,
    ScenarioCostResponse,
    ScenarioResponse,
    TaxRuleResponse,
    TieResponse,
    TimelinePointResponse,
    TimelineRequest,
    TimelineResponse,
    TransferInput,
)
from src.config import Settings
from src.data.valuation import get_valuation_provider
from src.engine.comparison import ScenarioOptions, TransferDetails, get_comparison_data
from src.engine.crossover import detect_crossovers
from src.engine.decision_window import generate_recommendation
from src.engine.formatting import format_option_name
from src.engine.payoff import compute_lease_payoff, straight_line_payoff
from src.engine.precision import DecimalPolicy
from src.engine.primitives import money_factor_to_apr
from src.engine.tax_rules import STATE_TAX_RULES, get_state_tax_rule
from src.engine.timeline import build_timeline_data
from src.models.lease import Lease, MarketValue
from src.models.results import LineItem, ScenarioResult
from src.models.timeline import ScenarioCost

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/leases", tags=["leases"])

_SHARED_FIELDS = {
    "type", "total_cost", "net_cost", "line_items", "warnings", "disclaimers", "incomplete",
}


def _build_lease(data: LeaseInput) -> Lease:
    """Build the engine lease from validated input. Unknown states fail here."""
    get_state_tax_rule(data.state_code)
    return Lease(
        net_cap_cost=data.net_cap_cost,
        residual_value=data.residual_value,
        money_factor=data.money_factor,
        monthly_payment=data.monthly_payment,
        term_months=data.term_months,
        months_elapsed=data.months_elapsed,
        current_mileage=data.current_mileage,
        allowed_miles_per_year=data.allowed_miles_per_year,
        overage_fee_per_mile=data.overage_fee_per_mile,
        disposition_fee=data.disposition_fee,
        purchase_fee=data.purchase_fee,
        state_code=data.state_code.upper(),
        make=data.make,
        model=data.model,
        year=data.year,
    )


def _build_market_value(value: Decimal | None, source: str) -> MarketValue | None:
    if value is None:
        return None
    return get_valuation_provider(source).create_manual_entry(value)


def _build_transfer(data: TransferInput | None) -> TransferDetails | None:
    if data is None:
        return None
    return TransferDetails(
        transfer_fee=data.transfer_fee,
        marketplace_fee=data.marketplace_fee,
        registration_fee=data.registration_fee,
        incentive_payments=data.incentive_payments,
    )


def _line_item_response(item: LineItem) -> LineItemResponse:
    return LineItemResponse(
        label=item.label,
        amount=item.amount,
        description=item.description,
        type=item.type.value,
        sub_item=item.sub_item,
    )


def _scenario_response(result: ScenarioResult) -> ScenarioResponse:
    details = {
        f.name: getattr(result, f.name)
        for f in dataclasses.fields(result)
        if f.name not in _SHARED_FIELDS
    }
    return ScenarioResponse(
        type=result.type.value,
        name=format_option_name(result.type),
        total_cost=result.total_cost,
        net_cost=result.net_cost,
        line_items=[_line_item_response(i) for i in result.line_items],
        warnings=list(result.warnings),
        disclaimers=list(result.disclaimers),
        incomplete=result.incomplete,
        details=details,
    )


def _cost_response(cost: ScenarioCost) -> ScenarioCostResponse:
    return ScenarioCostResponse(scenario=cost.scenario.value, cost=cost.cost, month=cost.month)


@router.post("/compare", response_model=ComparisonResponse)
async def compare(
    req: CompareRequest,
    config: Settings = Depends(get_settings),
    policy: DecimalPolicy = Depends(get_policy),
):
    """Evaluate and rank every exit scenario for a lease."""
    try:
        lease = _build_lease(req.lease)
        market_value = _build_market_value(req.market_value, req.valuation_source)
        options = ScenarioOptions(
            extension_months=req.extension_months or config.default_extension_months,
            early_termination_fee=req.early_termination_fee,
            wear_and_tear_estimate=req.wear_and_tear_estimate,
            wholesale_value=req.wholesale_value,
            transfer=_build_transfer(req.transfer),
            tie_threshold=config.tie_threshold,
            extension_incomplete_after_months=config.extension_incomplete_after_months,
        )
        data = get_comparison_data(lease, market_value, options, policy)
    except ValueError as e:
        logger.info("Rejected compare request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    equity = None
    if data.equity is not None:
        equity = EquityResponse(
            market_value=data.equity.market_value,
            buyout_cost=data.equity.buyout_cost,
            equity=data.equity.equity,
            has_positive_equity=data.equity.has_positive_equity,
            line_items=[_line_item_response(i) for i in data.equity.line_items],
        )

    return ComparisonResponse(
        scenarios=[_scenario_response(s) for s in data.scenarios],
        best_option=_scenario_response(data.best_option),
        return_option=_scenario_response(data.return_option),
        savings_vs_return=data.savings_vs_return,
        tie=TieResponse(
            is_tie=data.tie.is_tie,
            tied_options=[t.value for t in data.tie.tied_options],
        ),
        has_market_value=data.has_market_value,
        equity=equity,
    )


@router.post("/timeline", response_model=TimelineResponse)
async def timeline(req: TimelineRequest, policy: DecimalPolicy = Depends(get_policy)):
    """Month-by-month costs with crossover points and an act-now-or-wait call."""
    try:
        lease = _build_lease(req.lease)
        market_value = _build_market_value(req.market_value, req.valuation_source)
        series = build_timeline_data(lease, market_value, _build_transfer(req.transfer), policy)
        recommendation = generate_recommendation(series.data)
    except ValueError as e:
        logger.info("Rejected timeline request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    crossovers = detect_crossovers(series.data)

    return TimelineResponse(
        data=[
            TimelinePointResponse(
                month=p.month,
                return_=p.return_,
                buyout=p.buyout,
                sell_privately=p.sell_privately,
                early_termination=p.early_termination,
                extension=p.extension,
                lease_transfer=p.lease_transfer,
            )
            for p in series.data
        ],
        months_remaining=series.months_remaining,
        has_market_value=series.has_market_value,
        scenarios=[s.value for s in series.scenarios],
        crossovers=[
            CrossoverResponse(
                month=c.month,
                scenario=c.scenario.value,
                overtakes=c.overtakes.value,
                message=c.message,
            )
            for c in crossovers
        ],
        recommendation=RecommendationResponse(
            best_now=_cost_response(recommendation.best_now),
            best_overall=_cost_response(recommendation.best_overall),
            should_wait=recommendation.should_wait,
            savings=recommendation.savings,
            message=recommendation.message,
        ),
    )


@router.post("/payoff", response_model=PayoffResponse)
async def payoff(req: PayoffRequest, policy: DecimalPolicy = Depends(get_policy)):
    """Constant-yield payoff quote next to the straight-line figure."""
    data = req.lease
    amount = compute_lease_payoff(
        data.net_cap_cost,
        data.residual_value,
        data.monthly_payment,
        data.term_months,
        data.months_elapsed,
        data.money_factor,
        policy,
    )
    linear = straight_line_payoff(
        data.net_cap_cost, data.residual_value, data.term_months, data.months_elapsed, policy
    )
    return PayoffResponse(
        payoff=amount,
        straight_line_payoff=linear,
        residual_value=data.residual_value,
        remaining_depreciation=amount - data.residual_value,
        months_remaining=data.term_months - data.months_elapsed,
        apr=money_factor_to_apr(data.money_factor, policy),
    )


@router.get("/tax-rules", response_model=list[TaxRuleResponse])
async def tax_rules():
    return [
        TaxRuleResponse(
            state_code=rule.state_code,
            state_name=rule.state_name,
            timing=rule.timing.value,
            rate=rule.rate,
            applies_to_down_payment=rule.applies_to_down_payment,
            notes=rule.notes,
        )
        for rule in STATE_TAX_RULES.values()
    ]
