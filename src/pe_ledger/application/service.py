"""Stream processing: thin composition layer between a record source and the Ledger.

Each record is fully applied before the next one is pulled from the source.
Rejections are logged and counted; none of them stops the stream.
"""

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from src.pe_ledger.domain.models import TransactionRecord
from src.pe_ledger.engine.ledger import Ledger

logger = logging.getLogger(__name__)


@dataclass
class ProcessingSummary:
    applied: int = 0
    rejected: Counter[str] = field(default_factory=Counter)  # keyed by error kind

    @property
    def rejected_total(self) -> int:
        return sum(self.rejected.values())


def process_transactions(records: Iterable[TransactionRecord], ledger: Ledger) -> ProcessingSummary:
    summary = ProcessingSummary()
    for record in records:
        result = ledger.apply(record)
        if result.error is None:
            summary.applied += 1
            continue
        summary.rejected[result.error.kind] += 1
        logger.info(
            "Rejected %s client=%d tx=%d: [%d] %s",
            record.kind.value,
            record.client,
            record.tx_id,
            result.error.code,
            result.error.message,
        )
    logger.info(
        "Processed %d records: %d applied, %d rejected",
        summary.applied + summary.rejected_total,
        summary.applied,
        summary.rejected_total,
    )
    return summary
