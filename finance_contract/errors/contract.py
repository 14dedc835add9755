"""
Contract construction and encoding errors.

These exceptions are fatal for the contract being built: a contract is
never partially constructed, so the caller has to fix the input.
"""

from typing import Optional, Dict, Any


class ContractError(Exception):
    """Base class for contract construction and encoding failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class MissingCurrencyError(ContractError):
    """A shortcode was decoded without the currency it is denominated in."""

    def __init__(self, message: str = "Needs a currency",
                 shortcode: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.shortcode = shortcode


class UnknownContractTypeError(ContractError):
    """Contract type code is not present in the contract type catalog."""

    def __init__(self, message: str, contract_type_code: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.contract_type_code = contract_type_code


class InvalidContractError(ContractError):
    """Contract fields are missing or inconsistent."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class MissingBarrierError(ContractError):
    """Two-barrier contract lacks its high or low barrier."""

    def __init__(self, message: str, missing: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.missing = missing or []


class CatalogError(ContractError):
    """Contract type catalog data is invalid."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
