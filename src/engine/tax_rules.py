"""State lease tax rules.

Source: LeaseGuide.com state-by-state lease tax guide (researched 2026-01-28).

Rates are state-level only. County, municipal and special district taxes are
not modelled. Verify current rates with the state tax authority before
relying on them.

Covers the 15 most populous states supported by the tool (~65% of the US
population).
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType


class TaxTiming(Enum):
    UPFRONT = "upfront"  # On total scheduled payments, at signing
    MONTHLY = "monthly"  # Added to every payment
    NONE = "none"


@dataclass(frozen=True)
class StateTaxRule:
    state_code: str
    state_name: str
    timing: TaxTiming
    rate: Decimal
    applies_to_down_payment: bool = False
    notes: str = ""


class UnsupportedStateError(ValueError):
    def __init__(self, state_code: str, supported: tuple[str, ...]):
        self.state_code = state_code
        self.supported = supported
        super().__init__(
            f"Tax rules not available for state code '{state_code}'. "
            f"Supported states: {', '.join(supported)}"
        )


_RULES = (
    StateTaxRule("CA", "California", TaxTiming.MONTHLY, Decimal("0.0725"), True,
                 "Sales tax applies to monthly payments and cap cost reduction"),
    StateTaxRule("TX", "Texas", TaxTiming.UPFRONT, Decimal("0.0625"), False,
                 "Motor vehicle sales tax paid upfront on total lease payments"),
    StateTaxRule("FL", "Florida", TaxTiming.MONTHLY, Decimal("0.06"), False,
                 "Sales tax on monthly payments only"),
    StateTaxRule("NY", "New York", TaxTiming.UPFRONT, Decimal("0.04"), False,
                 "State sales tax on total lease payments for leases over 1 year"),
    StateTaxRule("PA", "Pennsylvania", TaxTiming.MONTHLY, Decimal("0.06"), False,
                 "Sales tax on monthly payments"),
    StateTaxRule("IL", "Illinois", TaxTiming.MONTHLY, Decimal("0.0625"), False,
                 "Sales tax on monthly payments"),
    StateTaxRule("OH", "Ohio", TaxTiming.MONTHLY, Decimal("0.0575"), False,
                 "Sales tax on monthly payments"),
    StateTaxRule("GA", "Georgia", TaxTiming.UPFRONT, Decimal("0.066"), False,
                 "Title Ad Valorem Tax (TAVT), simplified as 6.6% of total payments"),
    StateTaxRule("NC", "North Carolina", TaxTiming.UPFRONT, Decimal("0.03"), False,
                 "Highway Use Tax on total lease payments"),
    StateTaxRule("MI", "Michigan", TaxTiming.MONTHLY, Decimal("0.06"), False,
                 "Sales tax on monthly payments"),
    StateTaxRule("NJ", "New Jersey", TaxTiming.MONTHLY, Decimal("0.06625"), False,
                 "Sales tax on monthly payments"),
    StateTaxRule("VA", "Virginia", TaxTiming.MONTHLY, Decimal("0.0415"), False,
                 "Motor vehicle sales tax on monthly payments"),
    StateTaxRule("WA", "Washington", TaxTiming.MONTHLY, Decimal("0.065"), False,
                 "Sales tax on monthly payments"),
    StateTaxRule("AZ", "Arizona", TaxTiming.MONTHLY, Decimal("0.056"), False,
                 "Transaction privilege tax on monthly payments"),
    StateTaxRule("OR", "Oregon", TaxTiming.NONE, Decimal("0"), False,
                 "Oregon has no sales tax"),
)

# Read-only view; the table is never mutated at runtime
STATE_TAX_RULES = MappingProxyType({rule.state_code: rule for rule in _RULES})


def supported_states() -> tuple[str, ...]:
    return tuple(STATE_TAX_RULES)


def get_state_tax_rule(state_code: str) -> StateTaxRule:
    """Look up the tax rule for a two-letter state code (case-insensitive).

    Raises UnsupportedStateError for unknown codes. There is no default rate.
    """
    rule = STATE_TAX_RULES.get(state_code.strip().upper())
    if rule is None:
        raise UnsupportedStateError(state_code, supported_states())
    return rule
