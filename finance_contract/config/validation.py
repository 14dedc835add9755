"""Configuration and catalog validation utilities."""

from dataclasses import dataclass
from typing import Any

SUPPORTED_EXPIRIES = frozenset({"intraday", "daily", "tick"})

CATEGORY_FLAGS = (
    "allow_forward_starting",
    "barrier_at_start",
    "is_path_dependent",
    "two_barriers",
)

PAYOUT_TYPES = frozenset({"binary", "non-binary"})
PAYOUT_TIMES = frozenset({"end", "hit"})


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters and catalog records."""

    @staticmethod
    def validate_category(code: str, params: dict[str, Any]) -> list[ValidationError]:
        """Validate a single contract category record."""
        errors = []

        for flag in CATEGORY_FLAGS:
            value = params.get(flag, False)
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field=f"categories.{code}.{flag}",
                    message="Must be a boolean",
                    value=value
                ))

        expiries = params.get("supported_expiries", [])
        if not isinstance(expiries, list):
            errors.append(ValidationError(
                field=f"categories.{code}.supported_expiries",
                message="Must be a list",
                value=expiries
            ))
        else:
            unknown = [e for e in expiries if e not in SUPPORTED_EXPIRIES]
            if unknown:
                errors.append(ValidationError(
                    field=f"categories.{code}.supported_expiries",
                    message=f"Must be drawn from {sorted(SUPPORTED_EXPIRIES)}",
                    value=unknown
                ))

        return errors

    @staticmethod
    def validate_contract_type(code: str, params: dict[str, Any],
                               category_codes: set[str]) -> list[ValidationError]:
        """Validate a single contract type record against known categories."""
        errors = []

        category = params.get("category")
        if category not in category_codes:
            errors.append(ValidationError(
                field=f"contract_types.{code}.category",
                message="Must reference a known category",
                value=category
            ))

        type_id = params.get("id")
        if type_id is not None and (isinstance(type_id, bool) or not isinstance(type_id, int)
                                    or type_id <= 0):
            errors.append(ValidationError(
                field=f"contract_types.{code}.id",
                message="Must be a positive integer",
                value=type_id
            ))

        payout_type = params.get("payout_type")
        if payout_type is not None and payout_type not in PAYOUT_TYPES:
            errors.append(ValidationError(
                field=f"contract_types.{code}.payout_type",
                message=f"Must be one of {sorted(PAYOUT_TYPES)}",
                value=payout_type
            ))

        payouttime = params.get("payouttime")
        if payouttime is not None and payouttime not in PAYOUT_TIMES:
            errors.append(ValidationError(
                field=f"contract_types.{code}.payouttime",
                message=f"Must be one of {sorted(PAYOUT_TIMES)}",
                value=payouttime
            ))

        if code != code.upper():
            errors.append(ValidationError(
                field=f"contract_types.{code}",
                message="Contract type codes must be upper case",
                value=code
            ))

        return errors

    @staticmethod
    def validate_catalog(data: dict[str, Any]) -> list[ValidationError]:
        """Validate raw catalog data as read by ConfigLoader.load_catalog_data."""
        errors = []

        categories = data.get("categories", {})
        contract_types = data.get("contract_types", {})

        for code, params in categories.items():
            errors.extend(ConfigValidator.validate_category(code, params or {}))

        category_codes = set(categories)
        ids_seen: dict[int, str] = {}
        for code, params in contract_types.items():
            params = params or {}
            errors.extend(ConfigValidator.validate_contract_type(code, params, category_codes))

            type_id = params.get("id")
            if type_id is not None and type_id in ids_seen:
                errors.append(ValidationError(
                    field=f"contract_types.{code}.id",
                    message=f"Duplicate id, already used by {ids_seen[type_id]}",
                    value=type_id
                ))
            elif type_id is not None:
                ids_seen[type_id] = code

            other_side = params.get("other_side_code")
            if other_side is not None and other_side not in contract_types:
                errors.append(ValidationError(
                    field=f"contract_types.{code}.other_side_code",
                    message="Must reference a known contract type",
                    value=other_side
                ))

        return errors

    @staticmethod
    def validate_time_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate time parameters."""
        errors = []

        for name in ("days_per_year", "min_time_in_days", "max_time_in_days", "min_time_in_years"):
            if name in params:
                value = params[name]
                if not isinstance(value, (int, float)) or value <= 0:
                    errors.append(ValidationError(
                        field=f"time.{name}",
                        message="Must be a positive number",
                        value=value
                    ))

        low = params.get("min_time_in_days")
        high = params.get("max_time_in_days")
        if isinstance(low, (int, float)) and isinstance(high, (int, float)) and low >= high:
            errors.append(ValidationError(
                field="time.max_time_in_days",
                message="Must be greater than min_time_in_days",
                value=high
            ))

        if "seconds_per_tick" in params:
            value = params["seconds_per_tick"]
            if not isinstance(value, int) or value <= 0:
                errors.append(ValidationError(
                    field="time.seconds_per_tick",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_barrier_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate barrier scaling parameters."""
        errors = []

        if "forex_multiplier" in params:
            value = params["forex_multiplier"]
            if not isinstance(value, (int, float)) or value <= 0:
                errors.append(ValidationError(
                    field="barrier.forex_multiplier",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete merged configuration."""
        errors = []

        if "time" in config:
            errors.extend(ConfigValidator.validate_time_params(config["time"]))

        if "barrier" in config:
            errors.extend(ConfigValidator.validate_barrier_params(config["barrier"]))

        return errors
