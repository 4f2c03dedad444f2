"""Shared test fixtures."""

import pytest

from src.pe_ledger.engine.ledger import Ledger


@pytest.fixture
def ledger() -> Ledger:
    return Ledger()
