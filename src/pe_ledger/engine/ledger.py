"""Ledger: stateful owner of client accounts and deposit history."""
import logging
from collections.abc import Callable, Iterator

from src.pe_common.enums import TransactionKind
from src.pe_common.errors import (
    AccountFrozenError,
    AlreadyDisputedError,
    AppError,
    DuplicateTransactionIdError,
    InsufficientFundsError,
    InsufficientFundsToDisputeError,
    InvalidAmountError,
    NotDisputedError,
    TransactionNotOwnedByClientError,
    UnknownTransactionError,
)
from src.pe_ledger.domain.invariants import verify_account_invariants
from src.pe_ledger.domain.models import (
    Account,
    AccountSnapshot,
    ApplyResult,
    HistoricalTransaction,
    TransactionRecord,
)

logger = logging.getLogger(__name__)


class Ledger:
    """Applies transaction records one at a time.

    Each handler checks every precondition before touching state, so a
    rejected record leaves balances and history exactly as they were.
    """

    def __init__(self, verify_invariants: bool = True) -> None:
        self._accounts: dict[int, Account] = {}
        self._history: dict[int, HistoricalTransaction] = {}
        self._verify_invariants = verify_invariants
        self._handlers: dict[TransactionKind, Callable[[Account, TransactionRecord], None]] = {
            TransactionKind.DEPOSIT: self._deposit,
            TransactionKind.WITHDRAWAL: self._withdraw,
            TransactionKind.DISPUTE: self._dispute,
            TransactionKind.RESOLVE: self._resolve,
            TransactionKind.CHARGEBACK: self._chargeback,
        }

    def _get_or_create_account(self, client: int) -> Account:
        if client not in self._accounts:
            self._accounts[client] = Account(client=client)
        return self._accounts[client]

    def apply(self, record: TransactionRecord) -> ApplyResult:
        """Main entry point. Never raises for a rejected record."""
        account = self._get_or_create_account(record.client)
        try:
            self._apply_inner(account, record)
        except AppError as exc:
            logger.debug(
                "Rejected %s client=%d tx=%d: [%d] %s",
                record.kind.value,
                record.client,
                record.tx_id,
                exc.code,
                exc.message,
            )
            return ApplyResult(record=record, error=exc)
        if self._verify_invariants:
            verify_account_invariants(account)
        return ApplyResult(record=record)

    def _apply_inner(self, account: Account, record: TransactionRecord) -> None:
        if account.locked:
            raise AccountFrozenError(account.client)
        self._handlers[record.kind](account, record)

    # ------------------------------------------------------------------
    # Amount-carrying records
    # ------------------------------------------------------------------

    def _deposit(self, account: Account, record: TransactionRecord) -> None:
        amount = _require_positive(record.amount)
        if record.tx_id in self._history:
            raise DuplicateTransactionIdError(record.tx_id)
        account.available += amount
        self._history[record.tx_id] = HistoricalTransaction(client=account.client, amount=amount)

    def _withdraw(self, account: Account, record: TransactionRecord) -> None:
        amount = _require_positive(record.amount)
        if account.available < amount:
            raise InsufficientFundsError(amount, account.available)
        account.available -= amount

    # ------------------------------------------------------------------
    # Dispute lifecycle (references a prior deposit by tx_id)
    # ------------------------------------------------------------------

    def _lookup(self, account: Account, tx_id: int) -> HistoricalTransaction:
        historical = self._history.get(tx_id)
        if historical is None:
            raise UnknownTransactionError(tx_id)
        if historical.client != account.client:
            raise TransactionNotOwnedByClientError(tx_id, account.client)
        return historical

    def _lookup_disputed(self, account: Account, tx_id: int) -> HistoricalTransaction:
        historical = self._lookup(account, tx_id)
        if not historical.disputed:
            raise NotDisputedError(tx_id)
        return historical

    def _dispute(self, account: Account, record: TransactionRecord) -> None:
        historical = self._lookup(account, record.tx_id)
        if historical.disputed:
            raise AlreadyDisputedError(record.tx_id)
        if account.available < historical.amount:
            raise InsufficientFundsToDisputeError(record.tx_id, historical.amount, account.available)
        account.available -= historical.amount
        account.held += historical.amount
        historical.disputed = True

    def _resolve(self, account: Account, record: TransactionRecord) -> None:
        historical = self._lookup_disputed(account, record.tx_id)
        account.held -= historical.amount
        account.available += historical.amount
        historical.disputed = False

    def _chargeback(self, account: Account, record: TransactionRecord) -> None:
        historical = self._lookup_disputed(account, record.tx_id)
        account.held -= historical.amount
        account.locked = True
        historical.disputed = False
        logger.info("Client %d locked by chargeback of tx %d", account.client, record.tx_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def export(self) -> list[AccountSnapshot]:
        """Snapshot every observed client, ascending by client id."""
        return list(self._iter_snapshots())

    def _iter_snapshots(self) -> Iterator[AccountSnapshot]:
        for client in sorted(self._accounts):
            account = self._accounts[client]
            yield AccountSnapshot(
                client=client,
                available=account.available,
                held=account.held,
                total=account.total,
                locked=account.locked,
            )


def _require_positive(amount: int | None) -> int:
    if amount is None or amount <= 0:
        raise InvalidAmountError(amount)
    return amount
