"""Tests for contract construction and derived attributes."""

import pytest
from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

from finance_contract.contract import BarrierType, Contract
from finance_contract.errors import (
    InvalidContractError,
    InvalidDurationError,
    MissingCurrencyError,
    UnknownContractTypeError,
)

DAY = 86400


def make_contract(**kwargs) -> Contract:
    fields = {
        "currency": "USD",
        "contract_type_code": "CALL",
        "underlying_symbol": "frxUSDJPY",
        "payout": 100,
        "date_start": 1000,
        "date_pricing": 1000,
    }
    fields.update(kwargs)
    return Contract(**fields)


class TestConstruction:
    """Test field resolution at construction."""

    def test_currency_required(self):
        with pytest.raises(MissingCurrencyError):
            make_contract(currency="", duration="1h")

    def test_unknown_contract_type(self):
        with pytest.raises(UnknownContractTypeError) as exc_info:
            make_contract(contract_type_code="NOTATYPE", duration="1h")
        assert exc_info.value.contract_type_code == "NOTATYPE"

    def test_expiry_required(self):
        with pytest.raises(InvalidContractError) as exc_info:
            make_contract()
        assert exc_info.value.field == "date_expiry"

    def test_invalid_duration_propagates(self):
        with pytest.raises(InvalidDurationError):
            make_contract(duration="5x")

    def test_negative_payout(self):
        with pytest.raises(InvalidContractError):
            make_contract(duration="1h", payout=-1)

    def test_dates_are_coerced(self):
        contract = make_contract(date_expiry="2023-01-01T12:00:00Z")
        assert contract.date_start == datetime.fromtimestamp(1000, tz=timezone.utc)
        assert contract.date_expiry == datetime(2023, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_dates_default_to_now(self, frozen_now):
        contract = Contract(currency="USD", contract_type_code="CALL", duration="1h")
        assert contract.date_start == frozen_now
        assert contract.date_pricing == frozen_now
        assert contract.date_expiry == frozen_now + timedelta(hours=1)

    def test_pricing_milliseconds_marker(self):
        pricing = datetime(2023, 1, 1, 12, 0, 0, 123000, tzinfo=timezone.utc)
        contract = make_contract(duration="1h", date_pricing=pricing)
        assert contract.date_pricing_milliseconds == 1672574400123

    def test_create_maps_amount_to_payout(self):
        contract = Contract.create(currency="USD", contract_type_code="CALL",
                                   underlying_symbol="R_100", amount=20, amount_type="payout",
                                   date_start=1000, date_pricing=1000, duration="1h")
        assert contract.payout == 20.0

    def test_create_prefers_explicit_payout(self):
        contract = Contract.create(currency="USD", contract_type_code="CALL", payout=5, amount=20,
                                   date_start=1000, date_pricing=1000, duration="1h")
        assert contract.payout == 5.0

    def test_create_rejects_stake(self):
        with pytest.raises(InvalidContractError) as exc_info:
            Contract.create(currency="USD", contract_type_code="CALL", amount=20,
                            amount_type="stake", date_start=1000, duration="1h")
        assert exc_info.value.field == "amount_type"

    def test_immutable(self):
        contract = make_contract(duration="1h")
        with pytest.raises(FrozenInstanceError):
            contract.date_expiry = 5000


class TestFixedExpiry:
    """fixed_expiry defaults to whether an explicit expiry was given."""

    def test_explicit_expiry(self):
        assert make_contract(date_expiry=2000).fixed_expiry is True

    def test_duration(self):
        assert make_contract(duration="1h").fixed_expiry is False

    def test_explicit_expiry_with_duration(self):
        contract = make_contract(date_expiry=2000, duration="1h")
        assert contract.fixed_expiry is False
        assert contract.date_expiry == datetime.fromtimestamp(2000, tz=timezone.utc)

    def test_explicit_flag_wins(self):
        assert make_contract(duration="1h", fixed_expiry=True).fixed_expiry is True


class TestTickExpiry:
    """Tick durations and tick counts."""

    def test_tick_duration(self):
        contract = make_contract(duration="5t")
        assert contract.tick_count == 5
        assert contract.tick_expiry is True
        assert contract.fixed_expiry is False
        assert contract.date_expiry == datetime.fromtimestamp(1010, tz=timezone.utc)

    def test_tick_count_with_timestamp_expiry(self):
        contract = make_contract(tick_count=5, date_expiry=2000)
        assert contract.tick_expiry is False

    def test_ticks_to_expiry(self):
        assert make_contract(duration="5t").ticks_to_expiry() == 6

    def test_ticks_to_expiry_without_ticks(self):
        with pytest.raises(InvalidContractError):
            make_contract(duration="1h").ticks_to_expiry()

    def test_decoded_tick_contract(self):
        contract = Contract.from_shortcode("DIGITOVER_R_50_10_5T", "USD", date_pricing=10)
        assert contract.tick_expiry is True
        assert contract.tick_count == 5
        assert contract.get_time_to_expiry(contract.date_start) == timedelta(seconds=10)
        assert contract.get_time_to_expiry() == timedelta(seconds=10)


class TestEffectiveStart:
    """Test effective_start selection."""

    def test_not_started(self):
        contract = make_contract(date_start=2000, date_pricing=1000, duration="1h")
        assert contract.effective_start() == contract.date_start

    def test_active(self):
        contract = make_contract(date_start=1000, date_pricing=1500, duration="1h")
        assert contract.effective_start() == contract.date_pricing

    def test_expired(self):
        contract = make_contract(date_start=1000, date_pricing=9000, duration="1h")
        assert contract.effective_start() == contract.date_start


class TestTimeToExpiry:
    """Test get_time_to_expiry and remaining_time."""

    def test_never_negative(self):
        contract = make_contract(date_expiry=2000, date_pricing=5000)
        assert contract.get_time_to_expiry() == timedelta(0)

    def test_from_start(self):
        contract = make_contract(date_start=2000, date_pricing=1000, duration="1h")
        assert contract.get_time_to_expiry() == timedelta(seconds=4600)
        assert contract.get_time_to_expiry(contract.date_start) == timedelta(hours=1)

    def test_remaining_time_forward_starting(self):
        contract = make_contract(date_start=2000, date_pricing=1000, duration="1h")
        assert contract.remaining_time == timedelta(hours=1)

    def test_remaining_time_active(self):
        contract = make_contract(date_start=1000, date_pricing=1600, duration="1h")
        assert contract.remaining_time == timedelta(seconds=3000)

    def test_remaining_time_expired(self):
        contract = make_contract(date_start=1000, date_pricing=9000, duration="1h")
        assert contract.remaining_time == timedelta(0)


class TestTimeInDaysAndYears:
    """Test bounded duration quantities."""

    def test_time_in_days(self):
        contract = make_contract(date_expiry=1000 + 73 * DAY)
        assert contract.time_in_days.amount == pytest.approx(73)
        assert contract.time_in_years.amount == pytest.approx(0.2)

    def test_clamped_to_maximum(self):
        contract = make_contract(date_expiry=1000 + 800 * DAY)
        assert contract.time_in_days.amount == 730
        assert contract.time_in_days.is_clamped is True
        assert contract.time_in_years.amount == pytest.approx(2.0)

    def test_clamped_to_minimum(self):
        contract = make_contract(date_expiry=1000)
        assert contract.time_in_days.amount == 0.000001
        assert contract.time_in_years.amount == pytest.approx(0.000001 / 365)

    def test_years_are_composed_from_days(self):
        contract = make_contract(duration="1d")
        assert contract.time_in_years.peek_amount("time_in_days") == pytest.approx(1)
        assert contract.time_in_years.peek_amount("days_per_year") == 365

    def test_deterministic(self):
        first = make_contract(duration="3h")
        second = make_contract(duration="3h")
        assert first.time_in_days.amount == second.time_in_days.amount
        assert first.time_in_days.amount == first.time_in_days.amount


class TestForwardStarting:
    """Test forward-starting detection."""

    def test_pricing_before_start(self):
        assert make_contract(date_start=2000, date_pricing=1000, duration="1h").is_forward_starting is True

    def test_pricing_at_start(self):
        assert make_contract(duration="1h").is_forward_starting is False

    def test_category_disallows(self):
        contract = make_contract(contract_type_code="ONETOUCH", date_start=2000, date_pricing=1000,
                                 duration="1h")
        assert contract.is_forward_starting is False

    def test_reprice_after_start(self):
        contract = make_contract(date_start=2000, date_pricing=1000, duration="1h",
                                 starts_as_forward_starting=True)
        repriced = contract.with_date_pricing(2500)
        assert contract.is_forward_starting is True
        assert repriced.is_forward_starting is False
        assert repriced.starts_as_forward_starting is True


class TestBarriers:
    """Test ATM detection, barrier categories and barrier types."""

    def test_atm(self):
        assert make_contract(duration="1h", supplied_barrier="S0P").is_atm_bet() is True

    @pytest.mark.parametrize("barrier", ["S10P", "S-1P", "s0p", 101.5, None])
    def test_not_atm(self, barrier):
        assert make_contract(duration="1h", supplied_barrier=barrier).is_atm_bet() is False

    def test_two_barrier_is_never_atm(self):
        contract = make_contract(contract_type_code="EXPIRYRANGE", duration="1h", supplied_barrier="S0P")
        assert contract.is_atm_bet() is False

    @pytest.mark.parametrize("code,barrier,expected", [
        ("CALL", "S0P", "euro_atm"),
        ("CALL", "S10P", "euro_non_atm"),
        ("EXPIRYRANGE", None, "euro_non_atm"),
        ("ONETOUCH", "S10P", "american"),
        ("RANGE", None, "american"),
        ("DIGITMATCH", 5, "non_financial"),
        ("ASIANU", None, "asian"),
    ])
    def test_barrier_category(self, code, barrier, expected):
        contract = make_contract(contract_type_code=code, duration="5t", supplied_barrier=barrier)
        assert contract.barrier_category() == expected

    @pytest.mark.parametrize("barrier,expected", [
        ("S10P", BarrierType.RELATIVE),
        ("-0.035", BarrierType.DIFFERENCE),
        ("+0.5", BarrierType.DIFFERENCE),
        ("103.45", BarrierType.ABSOLUTE),
        (103.45, BarrierType.ABSOLUTE),
        (None, None),
    ])
    def test_inferred_barrier_type(self, barrier, expected):
        assert make_contract(duration="1h", supplied_barrier=barrier).supplied_barrier_type == expected

    def test_explicit_barrier_type(self):
        contract = make_contract(duration="1h", supplied_barrier="0.5", supplied_barrier_type="difference")
        assert contract.supplied_barrier_type is BarrierType.DIFFERENCE

    def test_unknown_barrier_type(self):
        with pytest.raises(InvalidContractError):
            make_contract(duration="1h", supplied_barrier="1", supplied_barrier_type="sideways")


class TestCatalogAttributes:
    """Catalog metadata is exposed on the contract."""

    def test_call(self):
        contract = make_contract(duration="1h")
        assert contract.category_code == "callput"
        assert contract.allow_forward_starting is True
        assert contract.barrier_at_start is True
        assert contract.is_path_dependent is False
        assert contract.two_barriers is False
        assert contract.supported_expiries == ("intraday", "daily", "tick")
        assert contract.id == 1
        assert contract.pricing_code == "CALL"
        assert contract.display_name == "Higher"
        assert contract.sentiment == "up"
        assert contract.other_side_code == "PUT"
        assert contract.payout_type == "binary"
        assert contract.payouttime == "end"

    def test_touch(self):
        contract = make_contract(contract_type_code="ONETOUCH", duration="1h")
        assert contract.is_path_dependent is True
        assert contract.payouttime == "hit"


class TestLegacyContract:
    """Placeholder contracts built from unrecognised shortcodes."""

    def test_placeholder(self, frozen_now):
        contract = Contract.from_shortcode("UNKNOWNTYPE_frxUSDJPY_100_123_456", "USD")
        assert contract.is_legacy is True
        assert contract.code == "Invalid"
        assert contract.underlying_symbol == "config"
        assert contract.currency == "USD"
        assert contract.category is None
        assert contract.is_forward_starting is False

    def test_derived_attributes_need_expiry(self, frozen_now):
        contract = Contract.from_shortcode("UNKNOWNTYPE_frxUSDJPY_100_123_456", "USD")
        with pytest.raises(InvalidContractError):
            contract.time_in_days

    def test_missing_currency(self):
        with pytest.raises(MissingCurrencyError):
            Contract.from_shortcode("CALL_FRXUSDJPY_100_1000_2000_S0P_0", "")


class TestClone:
    """Clone-with-override operations."""

    def test_with_date_expiry(self):
        contract = make_contract(date_expiry=2000)
        assert contract.time_in_days.amount == pytest.approx(1000 / DAY)

        extended = contract.with_date_expiry(1000 + DAY)
        assert extended.date_expiry == datetime.fromtimestamp(1000 + DAY, tz=timezone.utc)
        assert extended.time_in_days.amount == pytest.approx(1)
        assert contract.time_in_days.amount == pytest.approx(1000 / DAY)
        assert extended.fixed_expiry is True

    def test_equality_ignores_cached_values(self):
        first = make_contract(duration="1h")
        second = make_contract(duration="1h")
        first.time_in_days
        assert first == second
