"""
Barrier scaling between shortcode strings and numeric barriers.

Forex barriers carry decimals that a shortcode cannot hold, so numeric
barriers are multiplied by a fixed factor when written into a shortcode and
divided again when read back. Digit contracts use plain digits as barriers
and are never scaled. Relative barriers such as "S10P" are opaque strings
and pass through both directions untouched.
"""

import re
from typing import Optional, Union

from ..config.defaults import BarrierParams

BarrierValue = Union[str, int, float, None]

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_RE = re.compile(r"[+-]?\d+")

_DEFAULT_PARAMS = BarrierParams()


def looks_like_number(value: object) -> bool:
    """True for numbers and for strings holding a plain decimal number."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and _NUMBER_RE.fullmatch(value.strip()) is not None


def parse_number(text: str) -> Union[int, float]:
    """Parse a numeric string, keeping integers as int."""
    text = text.strip()
    if _INTEGER_RE.fullmatch(text):
        return int(text)
    return float(text)


def format_number(value: Union[int, float]) -> str:
    """
    Render a number the way it appears in a shortcode.

    Integral values lose their fractional part and floats are limited to 15
    significant digits, which absorbs the representation error introduced
    by scaling (1.23456 * 1e6 is 1234560.0000000002).
    """
    if isinstance(value, bool):
        raise TypeError(f"Cannot format boolean {value!r} as a number")
    if isinstance(value, int):
        return str(value)
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return "%.15g" % value


def is_scaled_contract_type(contract_type_code: str,
                            params: Optional[BarrierParams] = None) -> bool:
    """True if barriers of this contract type are scaled in shortcodes."""
    params = params or _DEFAULT_PARAMS
    return not contract_type_code.startswith(params.unscaled_prefix)


def barrier_from_shortcode_string(value: BarrierValue, contract_type_code: str,
                                  params: Optional[BarrierParams] = None) -> BarrierValue:
    """
    Convert a shortcode barrier token into the barrier used for computation.

    Args:
        value: Barrier token from the shortcode
        contract_type_code: Canonical contract type code
        params: Barrier scaling parameters

    Returns:
        Number divided by the forex multiplier for scaled contract types, the
        plain number for digit types, or the unchanged value if it is not
        numeric
    """
    if not looks_like_number(value):
        return value

    params = params or _DEFAULT_PARAMS
    number = parse_number(value) if isinstance(value, str) else value

    if is_scaled_contract_type(contract_type_code, params):
        return number / params.forex_multiplier
    return number


def barrier_for_shortcode_string(value: BarrierValue, contract_type_code: str,
                                 params: Optional[BarrierParams] = None) -> BarrierValue:
    """
    Convert a barrier into the token written into a shortcode.

    Inverse of barrier_from_shortcode_string: numeric barriers of scaled
    contract types are multiplied by the forex multiplier, numbers are
    rendered without a decimal point where possible, and non-numeric values
    pass through unchanged.
    """
    if not looks_like_number(value):
        return value

    params = params or _DEFAULT_PARAMS
    number = parse_number(value) if isinstance(value, str) else value

    if is_scaled_contract_type(contract_type_code, params):
        number = number * params.forex_multiplier
    return format_number(number)
