"""Find the months where the cheapest exit scenario changes."""

from src.engine.formatting import format_option_name
from src.models.results import ScenarioType
from src.models.timeline import CrossoverPoint, ScenarioCost, TimelineDataPoint

# Ties go to whichever scenario comes first here
SCENARIO_ORDER = (
    ScenarioType.RETURN,
    ScenarioType.BUYOUT,
    ScenarioType.SELL_PRIVATELY,
    ScenarioType.EARLY_TERMINATION,
    ScenarioType.EXTENSION,
    ScenarioType.LEASE_TRANSFER,
)


def cheapest_scenario(point: TimelineDataPoint) -> ScenarioCost | None:
    """Lowest-cost scenario at one point, or None if nothing applies."""
    cheapest = None
    for scenario in SCENARIO_ORDER:
        cost = point.cost_of(scenario)
        if cost is None:
            continue
        if cheapest is None or cost < cheapest.cost:
            cheapest = ScenarioCost(scenario=scenario, cost=cost, month=point.month)
    return cheapest


def detect_crossovers(data: list[TimelineDataPoint] | tuple[TimelineDataPoint, ...]) -> list[CrossoverPoint]:
    """Crossover points in month order, one per change of cheapest scenario."""
    crossovers = []
    if len(data) <= 1:
        return crossovers

    previous = cheapest_scenario(data[0])
    for point in data[1:]:
        current = cheapest_scenario(point)
        if previous and current and current.scenario is not previous.scenario:
            crossovers.append(
                CrossoverPoint(
                    month=point.month,
                    scenario=current.scenario,
                    overtakes=previous.scenario,
                    message=(
                        f"{format_option_name(current.scenario)} becomes cheaper than "
                        f"{format_option_name(previous.scenario)} after month {point.month}"
                    ),
                )
            )
        previous = current

    return crossovers
