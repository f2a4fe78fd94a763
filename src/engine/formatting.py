"""Display formatting at the edge of the engine.

Amounts stay Decimal everywhere upstream; they become strings only here.
"""

from decimal import Decimal

from src.engine.precision import to_cents
from src.models.results import ScenarioType

OPTION_NAMES = {
    ScenarioType.RETURN: "Return Vehicle",
    ScenarioType.BUYOUT: "Buy Out Lease",
    ScenarioType.SELL_PRIVATELY: "Sell Privately",
    ScenarioType.EARLY_TERMINATION: "Early Termination",
    ScenarioType.EXTENSION: "Keep Paying (Extend)",
    ScenarioType.LEASE_TRANSFER: "Transfer Lease",
}


def format_currency(value: Decimal | float | int) -> str:
    """$1,234.56 style; negatives as -$1,234.56."""
    cents = to_cents(Decimal(str(value)))
    if cents < 0:
        return f"-${-cents:,.2f}"
    return f"${cents:,.2f}"


def format_option_name(scenario: ScenarioType) -> str:
    return OPTION_NAMES[scenario]
