"""
Shared fixtures: small rate tables and an in-memory history storage.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from domain.catalog import make_entry
from domain.exceptions.currency import CacheError
from domain.models.currency import ConversionRecord, RateTable


class InMemoryHistoryStorage:
    """Stands in for Redis; can be told to fail reads or writes."""

    def __init__(self, records=None):
        self.records = list(records) if records is not None else None
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    async def get_history(self):
        if self.fail_reads:
            raise CacheError("Invalid json data under currencyHistory")
        return list(self.records) if self.records is not None else None

    async def set_history(self, records):
        if self.fail_writes:
            raise CacheError("Failed to write currencyHistory: quota exceeded")
        self.writes += 1
        self.records = list(records)


@pytest.fixture
def rate_table():
    return RateTable(
        base="USD",
        last_update="2025-09-27",
        currencies={
            "USD": make_entry("USD", Decimal("1.0")),
            "EUR": make_entry("EUR", Decimal("0.92")),
            "ARS": make_entry("ARS", Decimal("850.0")),
        },
    )


@pytest.fixture
def history_storage():
    return InMemoryHistoryStorage()


@pytest.fixture
def make_record():
    def _make(record_id: int, amount: str = "100", from_code: str = "USD", to_code: str = "EUR"):
        return ConversionRecord(
            id=record_id,
            timestamp=datetime(2025, 9, 27, 10, 30).strftime("%d/%m/%Y %H:%M:%S"),
            amount=Decimal(amount),
            from_code=from_code,
            to_code=to_code,
            result=Decimal(amount) * Decimal("0.92"),
            rate=Decimal("0.92"),
        )

    return _make
