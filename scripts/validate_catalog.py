#!/usr/bin/env python3
"""Contract type catalog validation script."""

import sys
from pathlib import Path
from typing import List, Optional

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from finance_contract.config.loader import ConfigLoader
from finance_contract.config.validation import ConfigValidator, ValidationError


def validate_catalog_dir(catalog_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the catalog files in a directory (packaged data by default)."""
    loader = ConfigLoader.create(catalog_dir=catalog_dir)
    errors = ConfigValidator.validate_catalog(loader.load_catalog_data())
    errors.extend(ConfigValidator.validate_config(loader.merge_config()))
    return errors


def main():
    """Main validation function."""
    catalog_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    print(f"Validating contract type catalog in {catalog_dir or 'packaged data'}...")

    try:
        errors = validate_catalog_dir(catalog_dir)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading catalog: {e}")
        sys.exit(1)

    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    print("Catalog is valid")
    sys.exit(0)


if __name__ == "__main__":
    main()
