"""Pydantic schemas for CSV rows in and out of the ledger."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.pe_common.enums import TransactionKind
from src.pe_common.units import to_units, units_to_display
from src.pe_ledger.domain.models import AccountSnapshot, TransactionRecord

CLIENT_ID_MAX: int = 2**16 - 1
TX_ID_MAX: int = 2**32 - 1

# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class TransactionRow(BaseModel):
    """One `type,client,tx,amount` row."""

    model_config = ConfigDict(str_strip_whitespace=True)

    type: TransactionKind
    client: int = Field(..., ge=0, le=CLIENT_ID_MAX)
    tx: int = Field(..., ge=0, le=TX_ID_MAX)
    amount: Decimal | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _lower_type(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("amount", mode="before")
    @classmethod
    def _blank_amount_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("amount")
    @classmethod
    def _amount_fits_units(cls, value: Decimal | None) -> Decimal | None:
        if value is not None:
            to_units(value)  # raises ValueError if not representable
        return value

    def to_record(self) -> TransactionRecord:
        # Amounts on dispute/resolve/chargeback rows are ignored.
        amount = None
        if self.type.carries_amount and self.amount is not None:
            amount = to_units(self.amount)
        return TransactionRecord(kind=self.type, client=self.client, tx_id=self.tx, amount=amount)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class AccountRow(BaseModel):
    client: int
    available: str
    held: str
    total: str
    locked: str

    @classmethod
    def from_snapshot(cls, snapshot: AccountSnapshot) -> "AccountRow":
        return cls(
            client=snapshot.client,
            available=units_to_display(snapshot.available),
            held=units_to_display(snapshot.held),
            total=units_to_display(snapshot.total),
            locked="true" if snapshot.locked else "false",
        )
