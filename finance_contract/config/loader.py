"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import (
    BarrierParams,
    CatalogParams,
    DefaultConfig,
    ShortcodeParams,
    TimeParams,
    get_default_config,
)

CATALOG_DATA_DIR = Path(__file__).parent.parent / "catalog" / "data"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    catalog_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None,
               catalog_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"
        if catalog_dir is None:
            catalog_dir = CATALOG_DATA_DIR

        return cls(
            config_dir=config_dir,
            catalog_dir=catalog_dir,
            defaults=get_default_config(),
        )

    def load_settings(self) -> dict[str, Any]:
        """Load deployment overrides from settings.yaml, if present."""
        settings_file = self.config_dir / "settings.yaml"

        if not settings_file.exists():
            return {}

        with open(settings_file) as f:
            settings = yaml.safe_load(f)

        return settings or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. settings.yaml in the configuration directory
        3. Dataclass defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_settings())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge configuration and rebuild the typed dataclasses from it."""
        merged = self.merge_config(overrides)
        return DefaultConfig(
            barrier=BarrierParams(**merged["barrier"]),
            time=TimeParams(**merged["time"]),
            shortcode=ShortcodeParams(**merged["shortcode"]),
            catalog=CatalogParams(**merged["catalog"]),
        )

    def load_catalog_data(self, catalog: Optional[CatalogParams] = None) -> dict[str, Any]:
        """
        Read the contract categories and contract types YAML files.

        Returns:
            Dict with "categories" and "contract_types" mappings keyed by code
        """
        catalog = catalog or self.defaults.catalog

        return {
            "categories": self._load_yaml(self.catalog_dir / catalog.contract_categories_file),
            "contract_types": self._load_yaml(self.catalog_dir / catalog.contract_types_file),
        }

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        with open(path) as f:
            data = yaml.safe_load(f)
        return data or {}

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                elif isinstance(value, dict):
                    result[field_name] = dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
