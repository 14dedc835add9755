"""
Contract type catalog module.

Static metadata for contract types and their categories, looked up by
contract type code.
"""
from .models import BARRIER_CATEGORIES, ContractCategory, ContractTypeMetadata
from .store import ContractTypeCatalog, get_default_catalog, load_catalog

__all__ = [
    "BARRIER_CATEGORIES",
    "ContractCategory",
    "ContractTypeMetadata",
    "ContractTypeCatalog",
    "get_default_catalog",
    "load_catalog",
]
