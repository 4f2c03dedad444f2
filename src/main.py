"""Command-line entry point.

Run with: python -m src.main transactions.csv > accounts.csv
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from config.settings import settings
from src.pe_common.logging_config import configure_logging, parse_level
from src.pe_io.csv_reader import CsvHeaderError, CsvTransactionReader
from src.pe_io.csv_writer import write_accounts_csv
from src.pe_ledger.application.service import process_transactions
from src.pe_ledger.engine.ledger import Ledger

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payments-engine",
        description=(
            f"{settings.APP_NAME}: apply a CSV stream of deposits, withdrawals, disputes, resolves and "
            "chargebacks, then print the final state of every client account."
        ),
    )
    parser.add_argument("input", help="Path to the transactions CSV (type,client,tx,amount)")
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Diagnostics level on stderr (default: {settings.LOG_LEVEL})",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI. Returns the process exit code."""
    args = _build_parser().parse_args(argv)

    try:
        level = parse_level(args.log_level or settings.LOG_LEVEL)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    configure_logging(level, debug=settings.DEBUG)

    ledger = Ledger(verify_invariants=settings.VERIFY_INVARIANTS)
    try:
        with open(args.input, newline="", encoding="utf-8-sig", errors="replace") as stream:
            reader = CsvTransactionReader(stream)
            summary = process_transactions(reader, ledger)
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.input, exc)
        return 1
    except CsvHeaderError as exc:
        logger.error("Cannot process %s: %s", args.input, exc)
        return 1

    if reader.rows_skipped:
        logger.warning("Skipped %d malformed rows of %d", reader.rows_skipped, reader.rows_read)
    if summary.rejected:
        logger.info(
            "Rejected records by kind: %s",
            ", ".join(f"{kind}={count}" for kind, count in sorted(summary.rejected.items())),
        )

    write_accounts_csv(ledger.export(), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
