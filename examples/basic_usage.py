#!/usr/bin/env python3
"""
Basic Usage Example - Finance Contract

This script demonstrates the basic usage of the contract library. It shows
how to:
- Build a contract from explicit fields
- Encode it to a shortcode and decode it back
- Read catalog attributes and time calculations
- Handle legacy shortcodes

Run: python examples/basic_usage.py
"""

from datetime import datetime, timedelta, timezone

from finance_contract.contract import Contract
from finance_contract.logging import configure_logging
from finance_contract.shortcode import decode


def print_contract(contract: Contract) -> None:
    """Print the main attributes of a contract."""
    print(f"   Shortcode: {contract.shortcode}")
    print(f"   Type: {contract.code} ({contract.display_name}), category {contract.category_code}")
    print(f"   Barrier category: {contract.barrier_category()}")
    print(f"   Starts: {contract.date_start.isoformat()}")
    print(f"   Expires: {contract.date_expiry.isoformat()}")
    print(f"   Forward starting: {contract.is_forward_starting}")
    print(f"   Time in days: {contract.time_in_days.amount:.6f}")
    print(f"   Time in years: {contract.time_in_years.amount:.8f}")


def main():
    """Main demonstration function."""
    configure_logging(level="INFO")

    print("Finance Contract - Basic Usage Demo")
    print("=" * 60)

    now = datetime.now(timezone.utc).replace(microsecond=0)

    # Build a tick contract
    print("1. Building an at-the-money 5 tick CALL...")
    tick_call = Contract(
        currency="USD",
        contract_type_code="CALL",
        underlying_symbol="frxUSDJPY",
        payout=100,
        duration="5t",
        supplied_barrier="S0P",
        date_start=now,
        date_pricing=now,
    )
    print_contract(tick_call)
    print(f"   Ticks to expiry: {tick_call.ticks_to_expiry()}")
    print()

    # Forward-starting contract with an absolute barrier
    print("2. Building a forward-starting ONETOUCH and a forward-starting CALL...")
    for code in ("ONETOUCH", "CALL"):
        contract = Contract(
            currency="USD",
            contract_type_code=code,
            underlying_symbol="frxEURUSD",
            payout=25.5,
            date_start=now + timedelta(minutes=10),
            duration="1h",
            supplied_barrier=1.10523,
            date_pricing=now,
        )
        print_contract(contract)
        print()

    # Round trip through the shortcode
    print("3. Decoding the CALL shortcode back into parameters...")
    params = decode(tick_call.shortcode, "USD")
    for key, value in params.to_dict().items():
        print(f"   {key}: {value}")
    rebuilt = Contract.from_params(params, date_pricing=now)
    print(f"   Re-encoded: {rebuilt.shortcode}")
    print()

    # Legacy shortcodes decode to a placeholder
    print("4. Decoding a retired shortcode...")
    legacy = decode("SPREADU_R_10_1.5_1415865600_10_5_POINT", "USD")
    print(f"   Legacy record: {legacy.to_dict()}")
    print()

    print("Demo completed successfully!")


if __name__ == "__main__":
    main()
