"""
Salmon Supply Chain Tests — In-Memory Ledger
==============================================
Point reads, writes and ordered full-range scans.
"""

from __future__ import annotations

import pytest

from core.ledger import (
    InMemoryLedger,
    LedgerAccessor,
    LedgerEntry,
    LedgerWriteError,
)


class TestLedgerEntry:
    def test_is_frozen(self):
        entry = LedgerEntry(key="1", value=b"{}")
        with pytest.raises(AttributeError):
            entry.key = "2"

    def test_value_must_be_bytes(self):
        with pytest.raises(TypeError):
            LedgerEntry(key="1", value="{}")


class TestInMemoryLedger:
    def test_implements_accessor_protocol(self):
        assert isinstance(InMemoryLedger(), LedgerAccessor)

    def test_absent_key_reads_none(self):
        assert InMemoryLedger().get("missing") is None

    def test_put_then_get_returns_same_bytes(self):
        ledger = InMemoryLedger()
        ledger.put("1", b'{"id":"1"}')
        assert ledger.get("1") == b'{"id":"1"}'

    def test_put_overwrites(self):
        ledger = InMemoryLedger()
        ledger.put("1", b"old")
        ledger.put("1", b"new")
        assert ledger.get("1") == b"new"
        assert len(ledger) == 1

    def test_put_rejects_non_bytes(self):
        with pytest.raises(LedgerWriteError):
            InMemoryLedger().put("1", "text")

    def test_put_rejects_empty_key(self):
        with pytest.raises(LedgerWriteError):
            InMemoryLedger().put("", b"x")

    def test_bytearray_is_stored_as_bytes(self):
        ledger = InMemoryLedger()
        ledger.put("1", bytearray(b"abc"))
        assert isinstance(ledger.get("1"), bytes)

    def test_scan_all_on_empty_ledger_yields_nothing(self):
        assert list(InMemoryLedger().scan_all()) == []

    def test_scan_all_is_lexical_by_key(self):
        ledger = InMemoryLedger({"b": b"2", "a": b"1", "10": b"3"})
        assert [entry.key for entry in ledger.scan_all()] == ["10", "a", "b"]

    def test_scan_all_is_lazy_and_single_pass(self):
        ledger = InMemoryLedger({"1": b"x", "2": b"y"})
        scan = ledger.scan_all()
        assert next(scan) == LedgerEntry(key="1", value=b"x")
        assert list(scan) == [LedgerEntry(key="2", value=b"y")]
        assert list(scan) == []

    def test_scan_snapshot_ignores_later_writes(self):
        ledger = InMemoryLedger({"1": b"x"})
        scan = ledger.scan_all()
        ledger.put("2", b"y")
        assert [entry.key for entry in scan] == ["1"]

    def test_contains_and_keys(self):
        ledger = InMemoryLedger({"2": b"y", "1": b"x"})
        assert "1" in ledger
        assert "3" not in ledger
        assert ledger.keys() == ("1", "2")
