"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timezone
from unittest.mock import patch

from finance_contract.catalog import get_default_catalog

# 2023-01-01T12:00:00Z
START_EPOCH = 1672574400


@pytest.fixture
def catalog():
    """The packaged contract type catalog."""
    return get_default_catalog()


@pytest.fixture
def start_time() -> datetime:
    """Fixed contract start time."""
    return datetime.fromtimestamp(START_EPOCH, tz=timezone.utc)


@pytest.fixture
def frozen_now(start_time):
    """Pin the library clock to start_time."""
    with patch("finance_contract.utils.time.utc_now", return_value=start_time):
        yield start_time


@pytest.fixture
def sample_contract_fields(start_time):
    """Fields for an at-the-money tick CALL priced at its start."""
    return {
        "currency": "USD",
        "contract_type_code": "CALL",
        "underlying_symbol": "frxUSDJPY",
        "payout": 100,
        "duration": "5t",
        "supplied_barrier": "S0P",
        "date_start": start_time,
        "date_pricing": start_time,
    }
