"""
Shortcode encoding and decoding.

decode turns a shortcode and currency into ContractParams, falling back to
a legacy placeholder record for unknown contract types and retired formats.
encode writes a contract back out in canonical, upper-cased form.
"""

from typing import TYPE_CHECKING, Optional, Union

from ..catalog import ContractTypeCatalog, get_default_catalog
from ..config.defaults import DefaultConfig, get_default_config
from ..errors import (
    InvalidContractError,
    MalformedNumberError,
    MissingBarrierError,
    MissingCurrencyError,
)
from ..logging import get_codec_logger, log_decode_outcome
from ..utils.time import epoch
from .barrier import barrier_for_shortcode_string, barrier_from_shortcode_string, format_number
from .grammar import BarrieredMatch, BarrierlessMatch, LegacyMatch, is_legacy_format, match_shortcode
from .models import ContractParams

if TYPE_CHECKING:
    from ..contract.contract import Contract

logger = get_codec_logger(__name__)

_DEFAULT_CONFIG = get_default_config()


def decode(shortcode: str, currency: Optional[str],
           catalog: Optional[ContractTypeCatalog] = None,
           config: Optional[DefaultConfig] = None) -> ContractParams:
    """
    Convert a shortcode and currency pair into contract construction parameters.

    Args:
        shortcode: Shortcode string, e.g. "CALL_FRXUSDJPY_100_1000F_2000_S0P_0"
        currency: Currency the contract is denominated in
        catalog: Contract type catalog, defaults to the packaged one
        config: Library configuration, defaults to get_default_config()

    Returns:
        Decoded parameters, or the legacy placeholder record when the
        contract type is unknown or the shortcode matches no grammar

    Raises:
        MissingCurrencyError: If currency is empty
        MalformedNumberError: If the payout field cannot be parsed
    """
    if not currency:
        raise MissingCurrencyError(shortcode=shortcode)

    catalog = catalog or get_default_catalog()
    config = config or _DEFAULT_CONFIG
    shortcode_params = config.shortcode

    candidate = shortcode.split("_", 1)[0]
    code = shortcode_params.legacy_aliases.get(candidate, candidate)

    if code not in catalog:
        log_decode_outcome(logger, shortcode, "legacy", reason="unknown contract type",
                           context={"contract_type": code})
        return ContractParams.legacy(currency, shortcode_params, shortcode=shortcode)

    if is_legacy_format(shortcode):
        log_decode_outcome(logger, shortcode, "legacy", reason="hour-based format")
        return ContractParams.legacy(currency, shortcode_params, shortcode=shortcode)

    match = match_shortcode(shortcode)
    if isinstance(match, LegacyMatch):
        log_decode_outcome(logger, shortcode, "legacy", reason=match.reason)
        return ContractParams.legacy(currency, shortcode_params, shortcode=shortcode)

    params = _params_from_match(match, code, currency, shortcode, config)
    log_decode_outcome(logger, shortcode, match.grammar)
    return params


def _params_from_match(match: Union[BarrieredMatch, BarrierlessMatch], code: str,
                       currency: str, shortcode: str,
                       config: DefaultConfig) -> ContractParams:
    barriers = [barrier_from_shortcode_string(token, code, config.barrier)
                for token in match.barrier_tokens]

    barrier_fields = {}
    if len(barriers) == 2 and barriers[0] and barriers[1]:
        barrier_fields = {"high_barrier": barriers[0], "low_barrier": barriers[1]}
    elif barriers and barriers[0] is not None:
        barrier_fields = {"barrier": barriers[0]}

    return ContractParams(
        code=code,
        underlying_symbol=match.underlying_symbol,
        currency=currency,
        amount_type="payout",
        amount=_parse_payout(match.payout, shortcode),
        date_start=int(match.date_start),
        date_expiry=match.date_expiry,
        tick_count=match.tick_count,
        tick_expiry=match.tick_expiry,
        fixed_expiry=match.fixed_expiry,
        starts_as_forward_starting=match.forward_start,
        shortcode=shortcode,
        **barrier_fields,
    )


def _parse_payout(raw: str, shortcode: str) -> Optional[float]:
    if raw == "":
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise MalformedNumberError(
            f"Invalid payout '{raw}' in shortcode {shortcode}: {e}",
            raw_value=raw, field="payout", shortcode=shortcode,
        ) from e


def encode(contract: "Contract") -> str:
    """
    Build the canonical shortcode for a contract.

    The shortcode holds everything needed to rebuild the contract except
    its currency.

    Raises:
        InvalidContractError: If the contract is a legacy placeholder
        MissingBarrierError: If a two-barrier contract lacks a barrier
    """
    if contract.is_legacy:
        raise InvalidContractError("Cannot encode a legacy placeholder contract",
                                   field="contract_type_code")

    code = contract.contract_type_code
    barrier_params = contract.config.barrier

    date_start = str(epoch(contract.date_start))
    if contract.is_forward_starting or contract.starts_as_forward_starting:
        date_start += "F"

    if contract.tick_expiry:
        date_expiry = f"{contract.tick_count}T"
    elif contract.fixed_expiry:
        date_expiry = f"{epoch(contract.date_expiry)}F"
    else:
        date_expiry = str(epoch(contract.date_expiry))

    payout = "" if contract.payout is None else format_number(contract.payout)

    elements = [code, contract.underlying_symbol, payout, date_start, date_expiry]

    if contract.two_barriers:
        missing = [name for name in ("supplied_high_barrier", "supplied_low_barrier")
                   if getattr(contract, name) is None]
        if missing:
            raise MissingBarrierError(
                f"Two-barrier contract {code} needs both barriers to be encoded",
                missing=missing,
            )
        elements.extend(
            barrier_for_shortcode_string(barrier, code, barrier_params)
            for barrier in (contract.supplied_high_barrier, contract.supplied_low_barrier)
        )
    elif contract.supplied_barrier and contract.barrier_at_start:
        elements.extend(
            barrier_for_shortcode_string(barrier, code, barrier_params)
            for barrier in (contract.supplied_barrier, 0)
        )

    return "_".join(str(element) for element in elements).upper()
