from dataclasses import dataclass
from decimal import Decimal

from src.models.results import ScenarioType


@dataclass(frozen=True)
class MonthlyProjection:
    """Scenario net costs at one month offset, full precision.

    None means the scenario does not apply at that month.
    """
    month: int
    costs: dict[ScenarioType, Decimal | None]


@dataclass(frozen=True)
class TimelineDataPoint:
    # Plain floats rounded to cents, ready for charting
    month: int
    return_: float
    buyout: float
    sell_privately: float | None
    early_termination: float
    extension: float | None
    lease_transfer: float | None

    def cost_of(self, scenario: ScenarioType) -> float | None:
        return {
            ScenarioType.RETURN: self.return_,
            ScenarioType.BUYOUT: self.buyout,
            ScenarioType.SELL_PRIVATELY: self.sell_privately,
            ScenarioType.EARLY_TERMINATION: self.early_termination,
            ScenarioType.EXTENSION: self.extension,
            ScenarioType.LEASE_TRANSFER: self.lease_transfer,
        }[scenario]


@dataclass(frozen=True)
class TimelineSeries:
    data: tuple[TimelineDataPoint, ...]
    months_remaining: int
    has_market_value: bool
    scenarios: tuple[ScenarioType, ...]


@dataclass(frozen=True)
class CrossoverPoint:
    month: int
    scenario: ScenarioType
    overtakes: ScenarioType
    message: str


@dataclass(frozen=True)
class ScenarioCost:
    scenario: ScenarioType
    cost: float
    month: int = 0


@dataclass(frozen=True)
class RecommendationResult:
    best_now: ScenarioCost
    best_overall: ScenarioCost
    should_wait: bool
    savings: float
    message: str
