"""CLI client for the Lease Exit Analyzer API: posts a lease and prints a terminal report.

Usage:
    python lease-analyzer/analyze_lease.py --cap-cost 30000 --residual 18000 --mf 0.00125 \
        --payment 393.33 --term 36 --elapsed 24 --mileage 26000 --state CA
    python lease-analyzer/analyze_lease.py ... --market-value 21500 --timeline
"""

import argparse
import asyncio
import sys
from decimal import Decimal

import httpx


# ── Helpers ──────────────────────────────────────────────────────────────────

def _dollar(v) -> str:
    v = float(v)
    sign = "-" if v < 0 else ""
    return f"{sign}${abs(v):,.2f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_ranking(data: dict) -> None:
    _header("Exit Options (cheapest first)")
    for i, s in enumerate(data["scenarios"], start=1):
        flag = "  (incomplete)" if s["incomplete"] else ""
        print(f"  {i}. {s['name']:<24} {_dollar(s['net_cost']):>14}{flag}")

    best = data["best_option"]
    print()
    print(f"  Best Option:      {best['name']}")
    print(f"  Savings vs Return: {_dollar(data['savings_vs_return'])}")
    tie = data["tie"]
    if tie["is_tie"]:
        print(f"  Near tie:         {' / '.join(tie['tied_options'])} (within $100)")


def print_breakdown(scenario: dict) -> None:
    _header(f"{scenario['name']} Breakdown")
    for item in scenario["line_items"]:
        print(f"    {item['label']:<34} {_dollar(item['amount']):>14}")
    if scenario["warnings"]:
        print()
        for w in scenario["warnings"]:
            print(f"  ! {w}")


def print_equity(data: dict) -> None:
    equity = data.get("equity")
    if not equity:
        return
    _header("Equity")
    print(f"  Market Value:     {_dollar(equity['market_value'])}")
    print(f"  Buyout Cost:      {_dollar(equity['buyout_cost'])}")
    print(f"  Equity:           {_dollar(equity['equity'])}")


def print_timeline(data: dict) -> None:
    _header("Cost Over Time")
    print(f"  {'Mo':>3}  {'Return':>12}  {'Buyout':>12}  {'Early Term':>12}")
    print(f"  {'---':>3}  {'-' * 12}  {'-' * 12}  {'-' * 12}")
    for p in data["data"]:
        print(
            f"  {p['month']:>3}  {_dollar(p['return']):>12}  "
            f"{_dollar(p['buyout']):>12}  {_dollar(p['early_termination']):>12}"
        )

    if data["crossovers"]:
        print()
        for c in data["crossovers"]:
            print(f"  * {c['message']}")

    print()
    print(f"  {data['recommendation']['message']}")


# ── Main ─────────────────────────────────────────────────────────────────────

async def _post(client: httpx.AsyncClient, url: str, payload: dict) -> dict:
    try:
        resp = await client.post(url, json=payload)
    except httpx.ConnectError:
        print(f"Error: Could not connect to API at {url}", file=sys.stderr)
        print("Is the server running? Start with: uvicorn src.api.app:app --reload", file=sys.stderr)
        sys.exit(1)
    except httpx.TimeoutException:
        print("Error: Request timed out", file=sys.stderr)
        sys.exit(1)

    if resp.status_code != 200:
        print(f"Error: API returned {resp.status_code}", file=sys.stderr)
        try:
            detail = resp.json().get("detail", resp.text)
        except ValueError:
            detail = resp.text
        print(f"  {detail}", file=sys.stderr)
        sys.exit(1)

    return resp.json()


async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Compare the cost of exiting a vehicle lease via the Lease Exit Analyzer API"
    )
    parser.add_argument("--cap-cost", type=Decimal, required=True, help="Net capitalized cost")
    parser.add_argument("--residual", type=Decimal, required=True, help="Residual value")
    parser.add_argument("--mf", type=Decimal, required=True, help="Money factor")
    parser.add_argument("--payment", type=Decimal, required=True, help="Base monthly payment")
    parser.add_argument("--term", type=int, required=True, help="Lease term in months")
    parser.add_argument("--elapsed", type=int, required=True, help="Months elapsed")
    parser.add_argument("--mileage", type=int, default=0, help="Current odometer reading")
    parser.add_argument("--miles-per-year", type=int, help="Allowed miles per year")
    parser.add_argument("--overage-fee", type=Decimal, help="Fee per mile over allowance")
    parser.add_argument("--disposition-fee", type=Decimal, help="Disposition fee")
    parser.add_argument("--purchase-fee", type=Decimal, help="Purchase option fee")
    parser.add_argument("--state", default="CA", help="Two-letter state code (default: CA)")
    parser.add_argument("--market-value", type=Decimal, help="Estimated private sale price")
    parser.add_argument("--wholesale-value", type=Decimal, help="Lender wholesale estimate")
    parser.add_argument("--termination-fee", type=Decimal, help="Early termination fee")
    parser.add_argument("--timeline", action="store_true", help="Also print the cost timeline")
    parser.add_argument(
        "--api-url",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )

    args = parser.parse_args()

    lease: dict = {
        "net_cap_cost": str(args.cap_cost),
        "residual_value": str(args.residual),
        "money_factor": str(args.mf),
        "monthly_payment": str(args.payment),
        "term_months": args.term,
        "months_elapsed": args.elapsed,
        "current_mileage": args.mileage,
        "state_code": args.state,
    }
    field_map = {
        "miles_per_year": "allowed_miles_per_year",
        "overage_fee": "overage_fee_per_mile",
        "disposition_fee": "disposition_fee",
        "purchase_fee": "purchase_fee",
    }
    for cli_name, api_name in field_map.items():
        val = getattr(args, cli_name)
        if val is not None:
            lease[api_name] = val if not isinstance(val, Decimal) else str(val)

    payload: dict = {"lease": lease}
    if args.market_value is not None:
        payload["market_value"] = str(args.market_value)

    compare_payload = dict(payload)
    if args.wholesale_value is not None:
        compare_payload["wholesale_value"] = str(args.wholesale_value)
    if args.termination_fee is not None:
        compare_payload["early_termination_fee"] = str(args.termination_fee)

    base = f"{args.api_url}/api/v1/leases"
    async with httpx.AsyncClient(timeout=30) as client:
        comparison = await _post(client, f"{base}/compare", compare_payload)
        timeline = await _post(client, f"{base}/timeline", payload) if args.timeline else None

    print_ranking(comparison)
    print_breakdown(comparison["best_option"])
    print_equity(comparison)
    if timeline:
        print_timeline(timeline)
    print()


if __name__ == "__main__":
    asyncio.run(main())
