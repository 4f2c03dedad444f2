"""Domain models for pe_ledger: pure dataclasses, mutated only by the Ledger."""

from dataclasses import dataclass

from src.pe_common.enums import TransactionKind
from src.pe_common.errors import AppError


@dataclass
class Account:
    client: int
    available: int = 0   # units
    held: int = 0        # units, locked by open disputes
    locked: bool = False  # set by a chargeback, never cleared

    @property
    def total(self) -> int:
        return self.available + self.held


@dataclass
class HistoricalTransaction:
    """A deposit kept for later dispute / resolve / chargeback lookups."""

    client: int
    amount: int  # units, > 0
    disputed: bool = False


@dataclass(frozen=True)
class TransactionRecord:
    """One parsed input record."""

    kind: TransactionKind
    client: int
    tx_id: int
    amount: int | None = None  # units; only meaningful for deposit/withdrawal


@dataclass(frozen=True)
class AccountSnapshot:
    client: int
    available: int
    held: int
    total: int
    locked: bool


@dataclass(frozen=True)
class ApplyResult:
    """Outcome of Ledger.apply: error is None when the record was applied."""

    record: TransactionRecord
    error: AppError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
