"""
Catalog data models.

Immutable records for contract categories and contract types. All
category-specific contract behaviour reduces to the flags held here plus
the BARRIER_CATEGORIES table.
"""

from dataclasses import dataclass
from typing import Any, Optional


# Barrier categories per contract category; callput picks between its two
# entries depending on whether the contract is at the money.
BARRIER_CATEGORIES: dict[str, tuple[str, ...]] = {
    "callput": ("euro_atm", "euro_non_atm"),
    "endsinout": ("euro_non_atm",),
    "touchnotouch": ("american",),
    "staysinout": ("american",),
    "digits": ("non_financial",),
    "asian": ("asian",),
}


@dataclass(frozen=True)
class ContractCategory:
    """Contract category flags."""
    code: str
    display_name: Optional[str] = None
    allow_forward_starting: bool = False
    barrier_at_start: bool = False           # False when the barrier is only known at expiry (Asians)
    is_path_dependent: bool = False
    two_barriers: bool = False
    supported_expiries: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, code: str, data: dict[str, Any]) -> "ContractCategory":
        """Build a category from its YAML record."""
        return cls(
            code=code,
            display_name=data.get("display_name"),
            allow_forward_starting=bool(data.get("allow_forward_starting", False)),
            barrier_at_start=bool(data.get("barrier_at_start", False)),
            is_path_dependent=bool(data.get("is_path_dependent", False)),
            two_barriers=bool(data.get("two_barriers", False)),
            supported_expiries=tuple(data.get("supported_expiries") or ()),
        )

    @property
    def barrier_categories(self) -> tuple[str, ...]:
        """Possible barrier categories for contracts in this category."""
        return BARRIER_CATEGORIES.get(self.code, ())


@dataclass(frozen=True)
class ContractTypeMetadata:
    """Static description of one contract type."""
    code: str
    category: ContractCategory
    id: Optional[int] = None
    pricing_code: Optional[str] = None
    display_name: Optional[str] = None
    sentiment: Optional[str] = None
    other_side_code: Optional[str] = None
    payout_type: Optional[str] = None        # 'binary' or 'non-binary'
    payouttime: Optional[str] = None         # 'end' or 'hit'

    @classmethod
    def from_dict(cls, code: str, data: dict[str, Any],
                  category: ContractCategory) -> "ContractTypeMetadata":
        """Build contract type metadata from its YAML record."""
        return cls(
            code=code,
            category=category,
            id=data.get("id"),
            pricing_code=data.get("pricing_code"),
            display_name=data.get("display_name"),
            sentiment=data.get("sentiment"),
            other_side_code=data.get("other_side_code"),
            payout_type=data.get("payout_type"),
            payouttime=data.get("payouttime"),
        )
