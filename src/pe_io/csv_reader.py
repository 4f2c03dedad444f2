"""Streaming CSV source of transaction records.

Expected header: ``type,client,tx,amount``. Whitespace around every field is
ignored and the amount column may be blank or missing for rows that reference
an earlier deposit. Rows that fail validation are logged and skipped.
"""

import csv
import logging
from collections.abc import Iterator
from typing import TextIO

from pydantic import ValidationError

from src.pe_io.schemas import TransactionRow
from src.pe_ledger.domain.models import TransactionRecord

logger = logging.getLogger(__name__)

EXPECTED_COLUMNS: tuple[str, ...] = ("type", "client", "tx", "amount")
_REQUIRED_COLUMNS = frozenset(("type", "client", "tx"))


class CsvHeaderError(ValueError):
    """The input has no header row or is missing a required column."""


class CsvTransactionReader:
    """Yields TransactionRecord values one row at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.rows_read = 0
        self.rows_skipped = 0

    def __iter__(self) -> Iterator[TransactionRecord]:
        reader = csv.reader(self._stream)
        header = self._read_header(reader)
        for fields in reader:
            if not any(f.strip() for f in fields):
                continue
            self.rows_read += 1
            if len(fields) > len(header):
                self.rows_skipped += 1
                logger.warning(
                    "Skipping invalid record on line %d: expected at most %d fields, got %d",
                    reader.line_num,
                    len(header),
                    len(fields),
                )
                continue
            raw = {name: value.strip() for name, value in zip(header, fields) if name in EXPECTED_COLUMNS}
            try:
                row = TransactionRow.model_validate(raw)
            except ValidationError as exc:
                self.rows_skipped += 1
                logger.warning(
                    "Skipping invalid record on line %d: %s",
                    reader.line_num,
                    "; ".join(_describe(err) for err in exc.errors()),
                )
                continue
            yield row.to_record()

    @staticmethod
    def _read_header(reader: Iterator[list[str]]) -> list[str]:
        for fields in reader:
            if any(f.strip() for f in fields):
                header = [f.strip().lower() for f in fields]
                missing = _REQUIRED_COLUMNS.difference(header)
                if missing:
                    raise CsvHeaderError(f"CSV header missing columns: {', '.join(sorted(missing))}")
                return header
        raise CsvHeaderError("CSV input is empty")


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error.get('msg', 'invalid')}" if location else str(error.get("msg", "invalid"))
