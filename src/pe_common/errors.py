"""Unified error codes and ledger rejection exceptions.

Every rejection is per-record and recoverable: the ledger state is untouched
and the caller decides whether to log and continue.

Error code ranges:
  1xxx: Account
  2xxx: Transaction
  3xxx: Dispute lifecycle
  9xxx: Input
"""


class AppError(Exception):
    """Base application error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)

    @property
    def kind(self) -> str:
        """Taxonomy tag, e.g. 'AccountFrozen'."""
        return type(self).__name__.removesuffix("Error")


# --- 1xxx: Account ---

class AccountFrozenError(AppError):
    def __init__(self, client: int) -> None:
        super().__init__(1001, f"Account {client} is locked")


class InsufficientFundsError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            1002,
            f"Insufficient funds: required {required} units, available {available} units",
        )


# --- 2xxx: Transaction ---

class DuplicateTransactionIdError(AppError):
    def __init__(self, tx_id: int) -> None:
        super().__init__(2001, f"Duplicate transaction id: {tx_id}")


class UnknownTransactionError(AppError):
    def __init__(self, tx_id: int) -> None:
        super().__init__(2002, f"Transaction not found: {tx_id}")


class TransactionNotOwnedByClientError(AppError):
    def __init__(self, tx_id: int, client: int) -> None:
        super().__init__(2003, f"Transaction {tx_id} does not belong to client {client}")


# --- 3xxx: Dispute lifecycle ---

class AlreadyDisputedError(AppError):
    def __init__(self, tx_id: int) -> None:
        super().__init__(3001, f"Transaction {tx_id} is already disputed")


class NotDisputedError(AppError):
    def __init__(self, tx_id: int) -> None:
        super().__init__(3002, f"Transaction {tx_id} is not under dispute")


class InsufficientFundsToDisputeError(AppError):
    def __init__(self, tx_id: int, required: int, available: int) -> None:
        super().__init__(
            3003,
            f"Cannot dispute transaction {tx_id}: required {required} units, "
            f"available {available} units",
        )


# --- 9xxx: Input ---

class InvalidAmountError(AppError):
    def __init__(self, amount: int | None) -> None:
        detail = "missing" if amount is None else f"{amount} units"
        super().__init__(9001, f"Invalid amount: {detail}")
