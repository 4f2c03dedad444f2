"""Global enums: values match the `type` column of the input CSV."""

from enum import Enum


class TransactionKind(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"

    @property
    def carries_amount(self) -> bool:
        """Deposits and withdrawals carry an amount; the rest reference a prior deposit."""
        return self in (TransactionKind.DEPOSIT, TransactionKind.WITHDRAWAL)
