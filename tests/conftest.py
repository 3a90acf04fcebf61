from datetime import date

import pytest

from core.history.record import ValuationRecord
from core.history.store import HistoryStore


@pytest.fixture
def store(tmp_path) -> HistoryStore:
    """HistoryStore writing to a temporary directory."""
    return HistoryStore(tmp_path / "profile" / "storage.json")


@pytest.fixture
def sample_records() -> list[ValuationRecord]:
    """Three months of valuations, in insertion order."""
    return [
        ValuationRecord(date=date(2024, 1, 15), value=4500.0),
        ValuationRecord(date=date(2024, 3, 10), value=5300.0),
        ValuationRecord(date=date(2024, 4, 2), value=6100.5),
    ]
