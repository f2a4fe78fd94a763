"""Act now or wait: compare today's best option with the best in the window.

Waiting is only recommended when it saves more than the tie threshold;
a $100 difference is within estimate noise.
"""

from src.config import settings
from src.engine.crossover import cheapest_scenario
from src.engine.formatting import format_currency, format_option_name
from src.models.timeline import RecommendationResult, TimelineDataPoint


def generate_recommendation(
    data: list[TimelineDataPoint] | tuple[TimelineDataPoint, ...],
    threshold: float | None = None,
) -> RecommendationResult:
    if threshold is None:
        threshold = float(settings.tie_threshold)
    if not data:
        raise ValueError("Timeline data cannot be empty")

    best_now = cheapest_scenario(data[0])
    if best_now is None:
        raise ValueError(f"No valid scenarios at month {data[0].month}")

    best_overall = best_now
    for point in data[1:]:
        cheapest = cheapest_scenario(point)
        if cheapest and cheapest.cost < best_overall.cost:
            best_overall = cheapest

    # Costs are cents already; keep float noise out of the threshold check
    savings = round(best_now.cost - best_overall.cost, 2)
    should_wait = savings > threshold

    if should_wait:
        message = (
            f"Waiting {best_overall.month} months could save you {format_currency(savings)}, "
            f"{format_option_name(best_overall.scenario)} becomes your best option "
            f"in month {best_overall.month}"
        )
    else:
        message = (
            f"{format_option_name(best_now.scenario)} is your best option today, "
            f"and waiting won't improve it"
        )

    return RecommendationResult(
        best_now=best_now,
        best_overall=best_overall,
        should_wait=should_wait,
        savings=savings,
        message=message,
    )
