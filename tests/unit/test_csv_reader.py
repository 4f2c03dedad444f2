"""Tests for pe_io.csv_reader: streaming CSV parsing with row validation."""

import io
import logging

import pytest

from src.pe_common.enums import TransactionKind
from src.pe_io.csv_reader import CsvHeaderError, CsvTransactionReader
from src.pe_ledger.domain.models import TransactionRecord


def _read(text: str) -> tuple[list[TransactionRecord], CsvTransactionReader]:
    reader = CsvTransactionReader(io.StringIO(text))
    return list(reader), reader


class TestValidRows:
    def test_basic_rows(self) -> None:
        records, reader = _read("type,client,tx,amount\ndeposit,1,1,1.0\nwithdrawal,1,2,0.5\n")
        assert records == [
            TransactionRecord(TransactionKind.DEPOSIT, 1, 1, 10000),
            TransactionRecord(TransactionKind.WITHDRAWAL, 1, 2, 5000),
        ]
        assert reader.rows_read == 2
        assert reader.rows_skipped == 0

    def test_whitespace_is_trimmed(self) -> None:
        records, _ = _read("type, client, tx, amount\n  deposit ,  2 , 5 ,  3.25  \n")
        assert records == [TransactionRecord(TransactionKind.DEPOSIT, 2, 5, 32500)]

    def test_blank_amount_for_dispute(self) -> None:
        records, _ = _read("type,client,tx,amount\ndispute,1,1,\n")
        assert records == [TransactionRecord(TransactionKind.DISPUTE, 1, 1, None)]

    def test_missing_amount_column_in_row(self) -> None:
        records, _ = _read("type,client,tx,amount\nresolve,1,1\n")
        assert records == [TransactionRecord(TransactionKind.RESOLVE, 1, 1, None)]

    def test_amount_on_chargeback_is_ignored(self) -> None:
        records, _ = _read("type,client,tx,amount\nchargeback,1,1,9.99\n")
        assert records[0].amount is None

    def test_type_is_case_insensitive(self) -> None:
        records, _ = _read("type,client,tx,amount\nDeposit,1,1,1\n")
        assert records[0].kind is TransactionKind.DEPOSIT

    def test_non_positive_amount_passed_through(self) -> None:
        records, _ = _read("type,client,tx,amount\ndeposit,1,1,-3\nwithdrawal,1,2,0\n")
        assert [r.amount for r in records] == [-30000, 0]

    def test_blank_lines_skipped(self) -> None:
        records, reader = _read("\ntype,client,tx,amount\n\ndeposit,1,1,1\n\n")
        assert len(records) == 1
        assert reader.rows_read == 1

    def test_amount_rounded_to_four_places(self) -> None:
        records, _ = _read("type,client,tx,amount\ndeposit,1,1,0.12345\n")
        assert records[0].amount == 1235

    def test_boundary_ids(self) -> None:
        records, _ = _read("type,client,tx,amount\ndeposit,65535,4294967295,1\n")
        assert (records[0].client, records[0].tx_id) == (65535, 4294967295)


class TestInvalidRows:
    @pytest.mark.parametrize(
        "row",
        [
            "transfer,1,1,1.0",
            "deposit,70000,1,1.0",
            "deposit,-1,1,1.0",
            "deposit,1,4294967296,1.0",
            "deposit,x,1,1.0",
            "deposit,1,1,abc",
            "deposit,1,1,NaN",
            "deposit,1",
            "deposit,1,1,1,000.50",
        ],
    )
    def test_invalid_row_skipped(self, row: str) -> None:
        records, reader = _read(f"type,client,tx,amount\n{row}\ndeposit,2,2,1\n")
        assert records == [TransactionRecord(TransactionKind.DEPOSIT, 2, 2, 10000)]
        assert reader.rows_skipped == 1

    def test_invalid_row_logged_with_line(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="src.pe_io.csv_reader"):
            _read("type,client,tx,amount\ndeposit,1,1,1\nbogus,1,2,1\n")
        assert "line 3" in caplog.text

    def test_extra_fields_not_truncated(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="src.pe_io.csv_reader"):
            records, reader = _read("type,client,tx,amount\ndeposit,1,1,1,000.50\n")
        assert records == []
        assert reader.rows_read == 1
        assert reader.rows_skipped == 1
        assert "line 2: expected at most 4 fields, got 5" in caplog.text


class TestHeader:
    def test_empty_input_raises(self) -> None:
        with pytest.raises(CsvHeaderError, match="empty"):
            _read("")

    def test_missing_column_raises(self) -> None:
        with pytest.raises(CsvHeaderError, match="tx"):
            _read("type,client,amount\ndeposit,1,1\n")

    def test_column_order_follows_header(self) -> None:
        records, _ = _read("client,tx,type,amount\n4,9,deposit,2\n")
        assert records == [TransactionRecord(TransactionKind.DEPOSIT, 4, 9, 20000)]

    def test_header_without_amount_column(self) -> None:
        records, _ = _read("type,client,tx\ndispute,1,1\n")
        assert records == [TransactionRecord(TransactionKind.DISPUTE, 1, 1, None)]
