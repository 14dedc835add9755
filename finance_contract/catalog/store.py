"""
Contract type catalog lookups.

The catalog is built once from the packaged YAML files (or any directory
with the same layout) and is read-only afterwards.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from ..config.loader import ConfigLoader
from ..config.validation import ConfigValidator
from ..errors import CatalogError
from ..logging import get_logger
from .models import ContractCategory, ContractTypeMetadata

logger = get_logger(__name__)


@dataclass(frozen=True)
class ContractTypeCatalog:
    """Contract type and category metadata keyed by code."""

    types: dict[str, ContractTypeMetadata]
    categories: dict[str, ContractCategory]

    def lookup_type(self, code: Optional[str]) -> Optional[ContractTypeMetadata]:
        """Metadata for a contract type code, None if unknown."""
        if code is None:
            return None
        return self.types.get(code)

    def lookup_category(self, code: str) -> Optional[ContractCategory]:
        """Category for a category code, None if unknown."""
        return self.categories.get(code)

    def all_type_codes(self) -> frozenset[str]:
        """All known contract type codes."""
        return frozenset(self.types)

    def types_in_category(self, category_code: str) -> list[ContractTypeMetadata]:
        """Contract types belonging to a category, ordered by id."""
        found = [t for t in self.types.values() if t.category.code == category_code]
        return sorted(found, key=lambda t: (t.id is None, t.id or 0, t.code))

    def __contains__(self, code: object) -> bool:
        return code in self.types


def load_catalog(loader: Optional[ConfigLoader] = None, validate: bool = True) -> ContractTypeCatalog:
    """
    Build a catalog from YAML category and contract type files.

    Args:
        loader: ConfigLoader pointing at the catalog directory; defaults to
            the packaged data
        validate: Run ConfigValidator over the raw data first

    Returns:
        Populated ContractTypeCatalog

    Raises:
        CatalogError: If validation finds errors
    """
    loader = loader or ConfigLoader.create()
    data = loader.load_catalog_data()

    if validate:
        errors = ConfigValidator.validate_catalog(data)
        if errors:
            logger.error("Contract type catalog failed validation",
                         error_count=len(errors),
                         catalog_dir=str(loader.catalog_dir))
            raise CatalogError(
                f"Contract type catalog has {len(errors)} validation errors",
                errors=errors,
            )

    categories = {
        code: ContractCategory.from_dict(code, params or {})
        for code, params in data["categories"].items()
    }

    types = {}
    for code, params in data["contract_types"].items():
        params = params or {}
        category = categories.get(params.get("category"))
        if category is None:
            raise CatalogError(
                f"Contract type {code} references unknown category {params.get('category')!r}",
                context={"contract_type": code},
            )
        types[code] = ContractTypeMetadata.from_dict(code, params, category)

    logger.debug("Contract type catalog loaded",
                 categories=len(categories), contract_types=len(types))

    return ContractTypeCatalog(types=types, categories=categories)


@lru_cache(maxsize=1)
def get_default_catalog() -> ContractTypeCatalog:
    """The catalog built from the packaged YAML files."""
    return load_catalog()
