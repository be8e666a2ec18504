"""
Salmon Supply Chain Tests — Salmon Chaincode Operations
=========================================================
recordSalmon, changeSalmonHolder, querySalmon, queryAllSalmon and
initLedger through the dispatcher, over an in-memory ledger.

Required scenarios:
1. Uniqueness: second record of an id conflicts, first record kept
2. Validation: arity and empty fields, first failing field reported
3. Transfer requires existence and rewrites only the holder
4. Query returns exactly the stored bytes
5. Query-all covers every key once, in scan order
6. Ledger failures surface with context, no partial results
7. Seeding stops at the first failure without rollback
8. End-to-end scenarios A, B, C
"""

from __future__ import annotations

import json
import logging
from typing import Iterator, Optional

import pytest

from core.chaincode import ErrorKind
from core.ledger import (
    InMemoryLedger,
    LedgerEntry,
    LedgerReadError,
    LedgerScanError,
    LedgerWriteError,
)
from engines.salmon import SAMPLE_SALMON, decode_salmon, encode_salmon
from engines.salmon.services import SALMON_HANDLERS, build_salmon_dispatcher

SALMON_1 = ["1", "Vessel #1", "2014-01-01", "Viet Nam", "Nha Hoang"]


# ══════════════════════════════════════════════════════════════
# TEST INFRASTRUCTURE — FAULTY LEDGER
# ══════════════════════════════════════════════════════════════

class FaultyLedger(InMemoryLedger):
    """In-memory ledger with switchable failures and a put counter."""

    def __init__(self):
        super().__init__()
        self.fail_get = False
        self.fail_put = False
        self.fail_scan_open = False
        self.fail_scan_after: Optional[int] = None
        self.put_calls = 0

    def get(self, key: str) -> Optional[bytes]:
        if self.fail_get:
            raise LedgerReadError("peer unavailable", key=key)
        return super().get(key)

    def put(self, key: str, value: bytes) -> None:
        self.put_calls += 1
        if self.fail_put:
            raise LedgerWriteError("endorsement failed", key=key)
        super().put(key, value)

    def scan_all(self) -> Iterator[LedgerEntry]:
        if self.fail_scan_open:
            raise LedgerScanError("range query refused")
        entries = super().scan_all()
        if self.fail_scan_after is None:
            return entries
        return self._break_after(entries, self.fail_scan_after)

    @staticmethod
    def _break_after(entries, count):
        for index, entry in enumerate(entries):
            if index == count:
                raise LedgerReadError("iterator closed")
            yield entry


# ══════════════════════════════════════════════════════════════
# FIXTURES
# ══════════════════════════════════════════════════════════════

@pytest.fixture
def ledger():
    return FaultyLedger()


@pytest.fixture
def dispatcher(ledger):
    return build_salmon_dispatcher(ledger, base_logger=logging.getLogger("tests.salmon"))


def _stored(ledger, key) -> dict:
    return json.loads(ledger.get(key))


# ══════════════════════════════════════════════════════════════
# recordSalmon
# ══════════════════════════════════════════════════════════════

class TestRecordSalmon:
    def test_records_new_salmon(self, dispatcher, ledger):
        response = dispatcher.invoke("recordSalmon", SALMON_1)

        assert response.is_ok
        assert response.payload == b""
        assert _stored(ledger, "1") == {
            "docType": "salmon",
            "id": "1",
            "vessel": "Vessel #1",
            "datetime": "2014-01-01",
            "location": "Viet Nam",
            "holder": "Nha Hoang",
        }

    def test_second_record_conflicts_and_keeps_first(self, dispatcher, ledger):
        dispatcher.invoke("recordSalmon", SALMON_1)
        first = ledger.get("1")

        response = dispatcher.invoke(
            "recordSalmon", ["1", "Vessel #9", "2020-02-02", "Chile", "Someone"]
        )

        assert response.error_kind == ErrorKind.CONFLICT
        assert response.message == "Salmon 1 already exists"
        assert ledger.get("1") == first

    @pytest.mark.parametrize("count", [0, 4, 6])
    def test_wrong_arity(self, dispatcher, ledger, count):
        response = dispatcher.invoke("recordSalmon", (SALMON_1 * 2)[:count])
        assert response.error_kind == ErrorKind.ARITY
        assert response.message == "Incorrect number of arguments. Expecting 5"
        assert ledger.put_calls == 0

    @pytest.mark.parametrize(
        "index, message",
        [
            (0, "Id must be a non-empty string"),
            (1, "Vessel must be a non-empty string"),
            (2, "Datetime must be a non-empty string"),
            (3, "Location must be a non-empty string"),
            (4, "Holder must be a non-empty string"),
        ],
    )
    def test_empty_field_named(self, dispatcher, ledger, index, message):
        args = list(SALMON_1)
        args[index] = ""
        response = dispatcher.invoke("recordSalmon", args)
        assert response.error_kind == ErrorKind.VALIDATION
        assert response.message == message
        assert ledger.put_calls == 0

    def test_first_empty_field_wins(self, dispatcher):
        response = dispatcher.invoke("recordSalmon", ["1", "", "", "", ""])
        assert response.details["field"] == "vessel"

    def test_validation_precedes_ledger_read(self, dispatcher, ledger):
        ledger.fail_get = True
        response = dispatcher.invoke("recordSalmon", ["", "v", "t", "l", "h"])
        assert response.error_kind == ErrorKind.VALIDATION

    def test_read_failure_surfaces_with_id(self, dispatcher, ledger):
        ledger.fail_get = True
        response = dispatcher.invoke("recordSalmon", SALMON_1)
        assert response.error_kind == ErrorKind.READ
        assert response.message == "Cannot get salmon 1. Error: peer unavailable"
        assert ledger.put_calls == 0

    def test_write_failure_surfaces(self, dispatcher, ledger):
        ledger.fail_put = True
        response = dispatcher.invoke("recordSalmon", SALMON_1)
        assert response.error_kind == ErrorKind.WRITE
        assert "endorsement failed" in response.message
        assert ledger.get("1") is None


# ══════════════════════════════════════════════════════════════
# changeSalmonHolder
# ══════════════════════════════════════════════════════════════

class TestChangeSalmonHolder:
    def test_transfer_rewrites_only_holder(self, dispatcher, ledger):
        dispatcher.invoke("recordSalmon", SALMON_1)
        before = _stored(ledger, "1")

        response = dispatcher.invoke("changeSalmonHolder", ["1", "Thanh Dong"])

        after = _stored(ledger, "1")
        assert response.is_ok
        assert after["holder"] == "Thanh Dong"
        assert {k: v for k, v in after.items() if k != "holder"} == {
            k: v for k, v in before.items() if k != "holder"
        }

    def test_transfer_of_missing_salmon_does_not_write(self, dispatcher, ledger):
        response = dispatcher.invoke("changeSalmonHolder", ["404", "Thanh Dong"])
        assert response.error_kind == ErrorKind.NOT_FOUND
        assert response.message == "Salmon 404 doesn't exist"
        assert ledger.put_calls == 0

    @pytest.mark.parametrize("args", [[], ["1"], ["1", "a", "b"]])
    def test_wrong_arity(self, dispatcher, args):
        response = dispatcher.invoke("changeSalmonHolder", args)
        assert response.error_kind == ErrorKind.ARITY
        assert response.message == "Incorrect number of arguments. Expecting 2"

    def test_empty_holder_rejected(self, dispatcher, ledger):
        dispatcher.invoke("recordSalmon", SALMON_1)
        response = dispatcher.invoke("changeSalmonHolder", ["1", ""])
        assert response.error_kind == ErrorKind.VALIDATION
        assert response.message == "Holder must be a non-empty string"
        assert _stored(ledger, "1")["holder"] == "Nha Hoang"

    def test_malformed_stored_record_is_decode_error(self, dispatcher, ledger):
        ledger.put("1", b"{broken")
        response = dispatcher.invoke("changeSalmonHolder", ["1", "Thanh Dong"])
        assert response.error_kind == ErrorKind.DECODE
        assert response.details["id"] == "1"
        assert ledger.get("1") == b"{broken"

    def test_read_failure_surfaces(self, dispatcher, ledger):
        dispatcher.invoke("recordSalmon", SALMON_1)
        ledger.fail_get = True
        response = dispatcher.invoke("changeSalmonHolder", ["1", "Thanh Dong"])
        assert response.error_kind == ErrorKind.READ

    def test_write_failure_leaves_record_unchanged(self, dispatcher, ledger):
        dispatcher.invoke("recordSalmon", SALMON_1)
        ledger.fail_put = True
        response = dispatcher.invoke("changeSalmonHolder", ["1", "Thanh Dong"])
        assert response.error_kind == ErrorKind.WRITE
        assert _stored(ledger, "1")["holder"] == "Nha Hoang"

    def test_unknown_stored_fields_are_dropped_on_rewrite(self, dispatcher, ledger):
        document = json.loads(encode_salmon(decode_salmon(
            b'{"docType":"salmon","id":"1","vessel":"V","datetime":"T",'
            b'"location":"L","holder":"H"}'
        )))
        document["grade"] = "A"
        ledger.put("1", json.dumps(document).encode())

        dispatcher.invoke("changeSalmonHolder", ["1", "New"])

        assert "grade" not in _stored(ledger, "1")


# ══════════════════════════════════════════════════════════════
# querySalmon
# ══════════════════════════════════════════════════════════════

class TestQuerySalmon:
    def test_returns_exact_stored_bytes(self, dispatcher, ledger):
        raw = b'{"docType":"salmon","id":"1","holder":"H","extra":  true}'
        ledger.put("1", raw)
        response = dispatcher.invoke("querySalmon", ["1"])
        assert response.is_ok
        assert response.payload == raw

    def test_missing_salmon(self, dispatcher):
        response = dispatcher.invoke("querySalmon", ["1"])
        assert response.error_kind == ErrorKind.NOT_FOUND

    @pytest.mark.parametrize("args", [[], ["1", "2"]])
    def test_wrong_arity(self, dispatcher, args):
        response = dispatcher.invoke("querySalmon", args)
        assert response.message == "Incorrect number of arguments. Expecting 1"

    def test_read_failure(self, dispatcher, ledger):
        ledger.fail_get = True
        response = dispatcher.invoke("querySalmon", ["1"])
        assert response.error_kind == ErrorKind.READ
        assert response.details == {"id": "1", "cause": "peer unavailable"}

    def test_query_has_no_side_effects(self, dispatcher, ledger):
        dispatcher.invoke("recordSalmon", SALMON_1)
        calls = ledger.put_calls
        first = dispatcher.invoke("querySalmon", ["1"])
        second = dispatcher.invoke("querySalmon", ["1"])
        assert first.payload == second.payload
        assert ledger.put_calls == calls


# ══════════════════════════════════════════════════════════════
# queryAllSalmon
# ══════════════════════════════════════════════════════════════

class TestQueryAllSalmon:
    def test_empty_ledger(self, dispatcher):
        response = dispatcher.invoke("queryAllSalmon", [])
        assert response.is_ok
        assert response.payload == b"[]"

    def test_every_key_once_in_scan_order(self, dispatcher, ledger):
        for key in ["3", "1", "2"]:
            dispatcher.invoke("recordSalmon", [key, "V", "T", "L", f"holder-{key}"])

        items = json.loads(dispatcher.invoke("queryAllSalmon", []).payload)

        assert [item["Key"] for item in items] == ["1", "2", "3"]
        assert [item["Record"]["holder"] for item in items] == [
            "holder-1", "holder-2", "holder-3",
        ]

    def test_records_are_spliced_verbatim(self, dispatcher, ledger):
        dispatcher.invoke("recordSalmon", SALMON_1)
        payload = dispatcher.invoke("queryAllSalmon", []).payload
        assert ledger.get("1") in payload

    def test_extra_args_ignored(self, dispatcher):
        assert dispatcher.invoke("queryAllSalmon", ["ignored"]).is_ok

    def test_scan_open_failure(self, dispatcher, ledger):
        ledger.fail_scan_open = True
        response = dispatcher.invoke("queryAllSalmon", [])
        assert response.error_kind == ErrorKind.SCAN
        assert response.message == "Cannot open ledger scan. Error: range query refused"

    def test_scan_advance_failure_discards_partial_results(self, dispatcher, ledger):
        dispatcher.invoke("initLedger", [])
        ledger.fail_scan_after = 2
        response = dispatcher.invoke("queryAllSalmon", [])
        assert response.error_kind == ErrorKind.READ
        assert response.payload == b""

    def test_query_all_has_no_side_effects(self, dispatcher, ledger):
        dispatcher.invoke("initLedger", [])
        calls = ledger.put_calls
        first = dispatcher.invoke("queryAllSalmon", []).payload
        second = dispatcher.invoke("queryAllSalmon", []).payload
        assert first == second
        assert ledger.put_calls == calls


# ══════════════════════════════════════════════════════════════
# initLedger
# ══════════════════════════════════════════════════════════════

class TestInitLedger:
    def test_seeds_three_samples(self, dispatcher, ledger):
        response = dispatcher.invoke("initLedger", [])
        assert response.is_ok
        assert ledger.keys() == ("1", "2", "3")

    def test_sample_data(self):
        assert [sample[0] for sample in SAMPLE_SALMON] == ["1", "2", "3"]
        assert [sample[4] for sample in SAMPLE_SALMON] == [
            "Nha Hoang", "Thanh Dong", "Duy Nguyen",
        ]

    def test_stops_at_first_failure_without_rollback(self, dispatcher, ledger):
        dispatcher.invoke("recordSalmon", ["2", "Other", "T", "L", "Someone"])

        response = dispatcher.invoke("initLedger", [])

        assert response.error_kind == ErrorKind.CONFLICT
        assert response.message == "Salmon 2 already exists"
        assert "1" in ledger
        assert "3" not in ledger
        assert _stored(ledger, "2")["holder"] == "Someone"

    def test_second_run_conflicts_on_first_sample(self, dispatcher):
        dispatcher.invoke("initLedger", [])
        response = dispatcher.invoke("initLedger", [])
        assert response.message == "Salmon 1 already exists"


# ══════════════════════════════════════════════════════════════
# END-TO-END SCENARIOS
# ══════════════════════════════════════════════════════════════

class TestScenarios:
    def test_scenario_a_record_then_query(self, dispatcher):
        assert dispatcher.invoke("recordSalmon", SALMON_1).is_ok
        record = json.loads(dispatcher.invoke("querySalmon", ["1"]).payload)
        assert record["holder"] == "Nha Hoang"

    def test_scenario_b_transfer_then_query(self, dispatcher):
        dispatcher.invoke("recordSalmon", SALMON_1)
        assert dispatcher.invoke("changeSalmonHolder", ["1", "Thanh Dong"]).is_ok

        record = json.loads(dispatcher.invoke("querySalmon", ["1"]).payload)
        assert record["holder"] == "Thanh Dong"
        assert record["vessel"] == "Vessel #1"

    def test_scenario_c_seed_then_query_all(self, dispatcher):
        assert dispatcher.invoke("initLedger", []).is_ok

        items = json.loads(dispatcher.invoke("queryAllSalmon", []).payload)

        assert len(items) == 3
        assert [(item["Key"], item["Record"]["id"], item["Record"]["holder"])
                for item in items] == [
            ("1", "1", "Nha Hoang"),
            ("2", "2", "Thanh Dong"),
            ("3", "3", "Duy Nguyen"),
        ]


def test_handler_table_covers_every_function():
    from core.chaincode import ChaincodeFunction

    assert set(SALMON_HANDLERS) == set(ChaincodeFunction)
