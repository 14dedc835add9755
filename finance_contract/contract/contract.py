"""
Contract model for a single option.

A Contract is built either from explicit fields or from a shortcode and
currency pair. Dates, duration and tick count are resolved once at
construction; everything time-based (forward-starting status, remaining
time, time in days and years) is derived from the resolved dates on first
access and cached on the instance.

    contract = Contract(
        currency="USD",
        contract_type_code="CALL",
        underlying_symbol="frxUSDJPY",
        payout=100,
        duration="5t",
        supplied_barrier="S0P",
    )
    Contract.from_shortcode(contract.shortcode, "USD")
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from functools import cached_property
from typing import Optional, Union

from ..catalog import BARRIER_CATEGORIES, ContractCategory, ContractTypeCatalog, ContractTypeMetadata
from ..catalog import get_default_catalog
from ..config.defaults import DefaultConfig, get_default_config
from ..errors import InvalidContractError, MissingCurrencyError, UnknownContractTypeError
from ..logging import get_logger
from ..shortcode import ContractParams, decode, encode
from ..utils import time as time_utils
from ..utils.calculated import CalculatedValue
from .models import BarrierType, infer_barrier_type

logger = get_logger(__name__)

BarrierValue = Union[str, int, float, None]
DateValue = Union[datetime, int, float, str, None]

_DEFAULT_CONFIG = get_default_config()


@dataclass(frozen=True)
class Contract:
    """A single option contract."""

    currency: str
    contract_type_code: Optional[str] = None
    underlying_symbol: Optional[str] = None
    payout: Optional[float] = None
    date_start: DateValue = None
    date_expiry: DateValue = None
    date_pricing: DateValue = None                   # valuation time, "now" when not given
    fixed_expiry: Optional[bool] = None
    duration: Optional[str] = None                   # e.g. "5t", "3h"
    tick_count: Optional[int] = None
    tick_expiry: Optional[bool] = None
    prediction: Optional[float] = None
    starts_as_forward_starting: bool = False         # intent at purchase, never changes
    supplied_barrier_type: Optional[BarrierType] = None
    supplied_barrier: BarrierValue = None
    supplied_high_barrier: BarrierValue = None
    supplied_low_barrier: BarrierValue = None
    catalog: Optional[ContractTypeCatalog] = field(default=None, repr=False, compare=False)
    config: Optional[DefaultConfig] = field(default=None, repr=False, compare=False)

    # Distinguishes a freshly priced contract from a repriced one.
    _date_pricing_milliseconds: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.currency:
            raise MissingCurrencyError("Contract needs a currency")

        config = self.config or _DEFAULT_CONFIG
        catalog = self.catalog or get_default_catalog()
        self._set("config", config)
        self._set("catalog", catalog)

        code = self.contract_type_code
        is_legacy = code == config.shortcode.legacy_code
        if code is not None and not is_legacy and code not in catalog:
            raise UnknownContractTypeError(
                f"Unknown contract type '{code}'", contract_type_code=code)

        now = time_utils.utc_now()
        date_start = time_utils.to_instant(self.date_start) if self.date_start is not None else now
        date_pricing = time_utils.to_instant(self.date_pricing) if self.date_pricing is not None else now
        date_expiry = time_utils.to_instant(self.date_expiry) if self.date_expiry is not None else None
        self._set("date_start", date_start)
        self._set("date_pricing", date_pricing)
        self._set("_date_pricing_milliseconds", time_utils.epoch_milliseconds(date_pricing))

        if self.fixed_expiry is None:
            self._set("fixed_expiry", date_expiry is not None and self.duration is None)

        tick_count = self.tick_count
        if self.duration is not None:
            ticks = time_utils.parse_tick_duration(str(self.duration))
            if ticks is not None:
                if tick_count is None:
                    tick_count = ticks
            elif date_expiry is None:
                date_expiry = date_start + time_utils.parse_interval(self.duration)

        if tick_count is not None:
            tick_count = int(tick_count)
            if tick_count < 0:
                raise InvalidContractError(
                    f"tick_count must be non-negative, got {tick_count}", field="tick_count")
        self._set("tick_count", tick_count)

        if self.tick_expiry is None:
            self._set("tick_expiry", tick_count is not None and date_expiry is None)

        if self.tick_expiry and date_expiry is None:
            if tick_count is None:
                raise InvalidContractError(
                    "Tick expiry contract needs a tick_count", field="tick_count")
            date_expiry = date_start + timedelta(seconds=tick_count * config.time.seconds_per_tick)

        if date_expiry is None and not is_legacy:
            raise InvalidContractError(
                "Contract needs date_expiry, duration or tick_count", field="date_expiry")
        self._set("date_expiry", date_expiry)

        if self.payout is not None:
            payout = float(self.payout)
            if payout < 0:
                raise InvalidContractError(f"payout must be non-negative, got {payout}",
                                           field="payout")
            self._set("payout", payout)

        if self.supplied_barrier_type is not None:
            try:
                barrier_type = BarrierType(self.supplied_barrier_type)
            except ValueError as e:
                raise InvalidContractError(
                    f"Unknown barrier type '{self.supplied_barrier_type}'",
                    field="supplied_barrier_type") from e
        else:
            barrier_type = infer_barrier_type(
                self.supplied_barrier if self.supplied_barrier is not None
                else self.supplied_high_barrier)
        self._set("supplied_barrier_type", barrier_type)

    def _set(self, name: str, value) -> None:
        object.__setattr__(self, name, value)

    # Construction

    @classmethod
    def create(cls, **fields) -> "Contract":
        """
        Keyword construction that also accepts the decoder's amount and amount_type.

        amount is taken as the payout when amount_type is "payout" or missing
        and no payout is given.

        Raises:
            InvalidContractError: If amount_type is not "payout"
        """
        amount = fields.pop("amount", None)
        amount_type = fields.pop("amount_type", None)
        if amount is not None and fields.get("payout") is None:
            if amount_type not in (None, "payout"):
                raise InvalidContractError(
                    f"Unsupported amount_type '{amount_type}'", field="amount_type")
            fields["payout"] = amount
        return cls(**fields)

    @classmethod
    def from_params(cls, params: ContractParams, **overrides) -> "Contract":
        """Build a contract from decoded shortcode parameters."""
        fields = dict(
            currency=params.currency,
            contract_type_code=params.code,
            underlying_symbol=params.underlying_symbol,
            date_start=params.date_start,
            prediction=params.prediction,
        )
        if not params.is_legacy:
            fields.update(
                amount=params.amount,
                amount_type=params.amount_type,
                date_expiry=params.date_expiry,
                tick_count=params.tick_count,
                tick_expiry=params.tick_expiry,
                fixed_expiry=params.fixed_expiry,
                starts_as_forward_starting=params.starts_as_forward_starting,
                supplied_barrier=params.barrier,
                supplied_high_barrier=params.high_barrier,
                supplied_low_barrier=params.low_barrier,
            )
        fields.update(overrides)
        return cls.create(**fields)

    @classmethod
    def from_shortcode(cls, shortcode: str, currency: Optional[str],
                       catalog: Optional[ContractTypeCatalog] = None,
                       config: Optional[DefaultConfig] = None,
                       **overrides) -> "Contract":
        """
        Instantiate a contract from a shortcode and currency.

        Extra keyword arguments (typically date_pricing) override decoded fields.

        Raises:
            MissingCurrencyError: If currency is empty
        """
        params = decode(shortcode, currency, catalog=catalog, config=config)
        return cls.from_params(params, catalog=catalog, config=config, **overrides)

    def with_date_expiry(self, date_expiry: DateValue) -> "Contract":
        """Copy of this contract with a different expiry."""
        return replace(self, date_expiry=date_expiry)

    def with_date_pricing(self, date_pricing: DateValue) -> "Contract":
        """Copy of this contract priced at a different time."""
        return replace(self, date_pricing=date_pricing)

    # Catalog-backed attributes

    @property
    def code(self) -> Optional[str]:
        return self.contract_type_code

    @property
    def is_legacy(self) -> bool:
        """True for the placeholder built from an unrecognised shortcode."""
        return self.contract_type_code == self.config.shortcode.legacy_code

    @property
    def contract_type(self) -> Optional[ContractTypeMetadata]:
        return self.catalog.lookup_type(self.contract_type_code)

    @property
    def category(self) -> Optional[ContractCategory]:
        contract_type = self.contract_type
        return contract_type.category if contract_type else None

    @property
    def category_code(self) -> Optional[str]:
        category = self.category
        return category.code if category else None

    @property
    def allow_forward_starting(self) -> bool:
        return bool(self.category and self.category.allow_forward_starting)

    @property
    def barrier_at_start(self) -> bool:
        return bool(self.category and self.category.barrier_at_start)

    @property
    def is_path_dependent(self) -> bool:
        return bool(self.category and self.category.is_path_dependent)

    @property
    def two_barriers(self) -> bool:
        return bool(self.category and self.category.two_barriers)

    @property
    def supported_expiries(self) -> tuple[str, ...]:
        return self.category.supported_expiries if self.category else ()

    @property
    def id(self) -> Optional[int]:
        return self.contract_type.id if self.contract_type else None

    @property
    def pricing_code(self) -> Optional[str]:
        return self.contract_type.pricing_code if self.contract_type else None

    @property
    def display_name(self) -> Optional[str]:
        return self.contract_type.display_name if self.contract_type else None

    @property
    def sentiment(self) -> Optional[str]:
        return self.contract_type.sentiment if self.contract_type else None

    @property
    def other_side_code(self) -> Optional[str]:
        return self.contract_type.other_side_code if self.contract_type else None

    @property
    def payout_type(self) -> Optional[str]:
        return self.contract_type.payout_type if self.contract_type else None

    @property
    def payouttime(self) -> Optional[str]:
        return self.contract_type.payouttime if self.contract_type else None

    @property
    def date_pricing_milliseconds(self) -> int:
        return self._date_pricing_milliseconds

    # Derived attributes

    @property
    def shortcode(self) -> str:
        """Compact string form holding everything but the currency."""
        return encode(self)

    @cached_property
    def is_forward_starting(self) -> bool:
        """True while the contract is priced before a start its category lets lie in the future."""
        return self.allow_forward_starting and time_utils.is_before(self.date_pricing, self.date_start)

    @cached_property
    def remaining_time(self) -> timedelta:
        """Time left until expiry, never counting time before the start."""
        self._require_expiry()
        when = (self.date_pricing if time_utils.is_after(self.date_pricing, self.date_start)
                else self.date_start)
        return self.get_time_to_expiry(when)

    def effective_start(self) -> datetime:
        """
        Start point for duration calculations.

        For backpricing (pricing after expiry) and for forward-starting
        contracts this is date_start; for active contracts it is date_pricing.
        """
        date_expiry = self._require_expiry()
        if time_utils.is_after(self.date_pricing, date_expiry):
            return self.date_start
        if time_utils.is_after(self.date_pricing, self.date_start):
            return self.date_pricing
        return self.date_start

    def get_time_to_expiry(self, from_: Optional[datetime] = None) -> timedelta:
        """
        Time from a point until expiry, zero once the point is past expiry.

        For a forward-starting contract this is NOT the contract lifetime;
        pass from_=contract.date_start for that.
        """
        date_expiry = self._require_expiry()
        start = time_utils.to_instant(from_) if from_ is not None else self.date_pricing
        seconds = max(0, time_utils.epoch(date_expiry) - time_utils.epoch(start))
        return timedelta(seconds=seconds)

    @cached_property
    def time_in_days(self) -> CalculatedValue:
        """Contract duration in days, bounded to the valid range."""
        bounds = self.config.time
        days = time_utils.interval_days(self.get_time_to_expiry(self.effective_start()))
        time_in_days = CalculatedValue(
            name="time_in_days",
            description="Duration of this contract in days",
            set_by=type(self).__name__,
            minimum=bounds.min_time_in_days,
            maximum=bounds.max_time_in_days,
            base_amount=days,
        )
        if time_in_days.is_clamped:
            logger.debug("Contract duration clamped",
                         contract_type=self.contract_type_code,
                         raw_days=days, time_in_days=time_in_days.amount)
        return time_in_days

    @cached_property
    def time_in_years(self) -> CalculatedValue:
        """Contract duration in years."""
        bounds = self.config.time
        days_per_year = CalculatedValue(
            name="days_per_year",
            description=f"We use a {bounds.days_per_year:g} day year.",
            set_by=type(self).__name__,
            base_amount=bounds.days_per_year,
        )
        return CalculatedValue(
            name="time_in_years",
            description="Contract duration in years",
            set_by=type(self).__name__,
            base_amount=0,
            minimum=bounds.min_time_in_years,
        ).with_adjustment("add", self.time_in_days).with_adjustment("divide", days_per_year)

    def is_atm_bet(self) -> bool:
        """
        Whether the contract was bought at the money.

        Fixed for the lifetime of the contract since ATM and non-ATM
        contracts are offered differently.
        """
        if self.two_barriers:
            return False
        if self.supplied_barrier is None:
            return False
        return self.supplied_barrier == self.config.shortcode.atm_barrier

    def barrier_category(self) -> Optional[str]:
        """Barrier category: american, asian, euro_atm, euro_non_atm or non_financial."""
        category_code = self.category_code
        if category_code == "callput":
            return "euro_atm" if self.is_atm_bet() else "euro_non_atm"
        barrier_categories = BARRIER_CATEGORIES.get(category_code)
        return barrier_categories[0] if barrier_categories else None

    def ticks_to_expiry(self) -> int:
        """Number of ticks until expiry, one more than tick_count."""
        if self.tick_count is None:
            raise InvalidContractError("Contract has no tick_count", field="tick_count")
        return self.tick_count + 1

    def _require_expiry(self) -> datetime:
        if self.date_expiry is None:
            raise InvalidContractError(
                f"Contract {self.contract_type_code} has no expiry", field="date_expiry")
        return self.date_expiry
