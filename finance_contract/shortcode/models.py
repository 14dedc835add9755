"""
Decoded shortcode record.

ContractParams is what the decoder hands to contract construction. It is
not a contract: fields stay in their shortcode form (epoch seconds, tick
counts, barriers after scaling) until Contract resolves them.
"""

from dataclasses import asdict, dataclass
from typing import Any, Optional, Union

from ..config.defaults import ShortcodeParams

BarrierValue = Union[str, int, float, None]


@dataclass(frozen=True)
class ContractParams:
    """Construction parameters decoded from a shortcode."""
    code: str
    underlying_symbol: str
    currency: str
    amount_type: Optional[str] = None
    amount: Optional[float] = None
    date_start: Optional[int] = None                 # epoch seconds
    date_expiry: Optional[int] = None                # epoch seconds, None for tick expiry
    tick_count: Optional[int] = None
    tick_expiry: bool = False
    fixed_expiry: bool = False
    starts_as_forward_starting: bool = False
    barrier: BarrierValue = None
    high_barrier: BarrierValue = None
    low_barrier: BarrierValue = None
    prediction: Optional[float] = None
    shortcode: Optional[str] = None
    is_legacy: bool = False

    @classmethod
    def legacy(cls, currency: str, params: Optional[ShortcodeParams] = None,
               shortcode: Optional[str] = None) -> "ContractParams":
        """Placeholder record for shortcodes that cannot be decoded."""
        params = params or ShortcodeParams()
        return cls(
            code=params.legacy_code,
            underlying_symbol=params.legacy_underlying,
            currency=currency,
            shortcode=shortcode,
            is_legacy=True,
        )

    def to_dict(self) -> dict[str, Any]:
        """Fields that carry a value, in the shape callers pass around."""
        if self.is_legacy:
            return {
                "code": self.code,
                "underlying_symbol": self.underlying_symbol,
                "currency": self.currency,
            }

        result = {k: v for k, v in asdict(self).items()
                  if v is not None and k not in ("is_legacy", "shortcode")}
        if not self.starts_as_forward_starting:
            result.pop("starts_as_forward_starting")
        return result
