"""Default configuration parameters for the contract library."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BarrierParams:
    """Barrier scaling parameters for shortcode strings."""
    forex_multiplier: float = 1e6                    # Removes the decimal point from forex barriers
    unscaled_prefix: str = "DIGIT"                   # Contract types whose barriers are never scaled


@dataclass(frozen=True)
class TimeParams:
    """Contract duration bounds and calendar constants."""
    days_per_year: float = 365.0                     # We use a 365 day year
    min_time_in_days: float = 0.000001
    max_time_in_days: float = 730.0
    min_time_in_years: float = 0.000000001
    seconds_per_tick: int = 2                        # Nominal tick spacing for tick-expiry contracts


@dataclass(frozen=True)
class ShortcodeParams:
    """Shortcode decoding parameters."""
    legacy_aliases: dict[str, str] = field(default_factory=lambda: {
        "INTRADU": "CALL",
        "INTRADD": "PUT",
        "FLASHU": "CALL",
        "FLASHD": "PUT",
        "DOUBLEUP": "CALL",
        "DOUBLEDOWN": "PUT",
    })
    legacy_code: str = "Invalid"                     # Placeholder code for unrecognised shortcodes
    legacy_underlying: str = "config"
    atm_barrier: str = "S0P"                         # Relative barrier at the spot


@dataclass(frozen=True)
class CatalogParams:
    """Packaged contract type catalog files."""
    contract_types_file: str = "contract_types.yml"
    contract_categories_file: str = "contract_categories.yml"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    barrier: BarrierParams
    time: TimeParams
    shortcode: ShortcodeParams
    catalog: CatalogParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        barrier=BarrierParams(),
        time=TimeParams(),
        shortcode=ShortcodeParams(),
        catalog=CatalogParams(),
    )
