"""Render account snapshots as CSV."""

import csv
from collections.abc import Iterable
from typing import TextIO

from src.pe_io.schemas import AccountRow
from src.pe_ledger.domain.models import AccountSnapshot

OUTPUT_COLUMNS: tuple[str, ...] = ("client", "available", "held", "total", "locked")


def write_accounts_csv(snapshots: Iterable[AccountSnapshot], stream: TextIO) -> int:
    """Write header plus one row per snapshot. Returns the number of rows written."""
    writer = csv.DictWriter(stream, fieldnames=OUTPUT_COLUMNS, lineterminator="\n")
    writer.writeheader()
    count = 0
    for snapshot in snapshots:
        writer.writerow(AccountRow.from_snapshot(snapshot).model_dump())
        count += 1
    return count
