"""
Error classification for contract construction and shortcode handling.

Construction and encoding failures are ContractError subclasses; decode
failures on malformed fields are ShortcodeParseError subclasses. Unknown or
legacy shortcodes are not errors at all, they decode to a placeholder record.
"""

from .contract import (
    ContractError,
    MissingCurrencyError,
    UnknownContractTypeError,
    InvalidContractError,
    MissingBarrierError,
    CatalogError,
)
from .parsing import (
    ShortcodeParseError,
    MalformedNumberError,
    InvalidDurationError,
)

__all__ = [
    # Contract Errors
    "ContractError",
    "MissingCurrencyError",
    "UnknownContractTypeError",
    "InvalidContractError",
    "MissingBarrierError",
    "CatalogError",
    # Parsing Errors
    "ShortcodeParseError",
    "MalformedNumberError",
    "InvalidDurationError",
]
