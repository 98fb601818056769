"""Pytest configuration for the pricepixel test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from pricepixel.core.models import PriceRecord

CET = timezone(timedelta(hours=1))


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line options for controlling integration tests."""

    parser.addoption(
        "--pricepixel-run-integration",
        action="store_true",
        default=False,
        help="Run pricepixel integration tests that require the Tibber API.",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the integration marker."""

    config.addinivalue_line(
        "markers",
        "integration: marks tests requiring network or external services",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly requested."""

    if config.getoption("--pricepixel-run-integration"):
        return

    skip_integration = pytest.mark.skip(
        reason="integration tests require --pricepixel-run-integration",
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def now() -> datetime:
    """A fixed wall-clock instant in the middle of an hour."""

    return datetime(2024, 3, 15, 13, 25, 12, tzinfo=CET)


@pytest.fixture
def make_prices() -> Callable[..., list[PriceRecord]]:
    """Build consecutive hourly records starting at ``start``."""

    def _make(start: datetime, totals: Sequence[str | float]) -> list[PriceRecord]:
        return [
            PriceRecord(starts_at=start + timedelta(hours=index), total=Decimal(str(total)))
            for index, total in enumerate(totals)
        ]

    return _make
