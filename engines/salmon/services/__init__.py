"""
Salmon Supply Chain — Salmon Chaincode Service
================================================
The chaincode operations over the shared ledger.

    recordSalmon        validate → read (must be absent) → encode → write
    changeSalmonHolder  validate → read (must exist) → decode → set holder
                        → encode → write
    querySalmon         read → return stored bytes unchanged
    queryAllSalmon      full range scan → JSON array of {Key, Record}
    initLedger          recordSalmon × SAMPLE_SALMON, stop at first failure

Every operation is one synchronous pass. Failures are raised as
ChaincodeError subclasses and never recovered here. Earlier writes of
a failing call are not rolled back.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

from core.chaincode.context import InvocationContext
from core.chaincode.dispatcher import ChaincodeDispatcher, ChaincodeHandler
from core.chaincode.errors import (
    ConflictError,
    NotFoundError,
    ReadError,
    ScanError,
    WriteError,
)
from core.chaincode.functions import ChaincodeFunction
from core.ledger.contracts import LedgerAccessor, LedgerEntry
from core.ledger.errors import LedgerReadError, LedgerScanError, LedgerWriteError
from engines.salmon.codec import (
    Salmon,
    decode_salmon,
    encode_salmon,
    render_ledger_entries,
)
from engines.salmon.commands import (
    ChangeSalmonHolderRequest,
    QuerySalmonRequest,
    RecordSalmonRequest,
)
from engines.salmon.seed import SAMPLE_SALMON


# ══════════════════════════════════════════════════════════════
# LEDGER HELPERS
# ══════════════════════════════════════════════════════════════

def _read(context: InvocationContext, key: str) -> Optional[bytes]:
    try:
        return context.ledger.get(key)
    except LedgerReadError as exc:
        raise ReadError(exc.message, key=key) from exc


def _write(context: InvocationContext, key: str, value: bytes) -> None:
    try:
        context.ledger.put(key, value)
    except LedgerWriteError as exc:
        raise WriteError(exc.message, key=key) from exc


def _scan(context: InvocationContext) -> list[LedgerEntry]:
    try:
        entries = context.ledger.scan_all()
    except LedgerScanError as exc:
        raise ScanError(exc.message) from exc

    # Drain fully before rendering: a failure mid-scan discards
    # everything read so far.
    collected = []
    try:
        for entry in entries:
            collected.append(entry)
    except LedgerReadError as exc:
        raise ReadError(exc.message, key=exc.key) from exc
    return collected


# ══════════════════════════════════════════════════════════════
# OPERATIONS
# ══════════════════════════════════════════════════════════════

def record_salmon(context: InvocationContext, args: Sequence[str]) -> bytes:
    request = RecordSalmonRequest.from_args(args)

    if _read(context, request.salmon_id) is not None:
        raise ConflictError(request.salmon_id)

    salmon = Salmon(
        salmon_id=request.salmon_id,
        vessel=request.vessel,
        timestamp=request.timestamp,
        location=request.location,
        holder=request.holder,
    )
    _write(context, salmon.salmon_id, encode_salmon(salmon))

    context.logger.info(f"Salmon {salmon.salmon_id} recorded")
    return b""


def change_salmon_holder(context: InvocationContext, args: Sequence[str]) -> bytes:
    request = ChangeSalmonHolderRequest.from_args(args)

    stored = _read(context, request.salmon_id)
    if stored is None:
        raise NotFoundError(request.salmon_id)

    salmon = decode_salmon(stored, salmon_id=request.salmon_id)
    updated = salmon.with_holder(request.new_holder)
    _write(context, updated.salmon_id, encode_salmon(updated))

    context.logger.info(
        f"Salmon {request.salmon_id} has transferred to "
        f"{request.new_holder} successfully"
    )
    return b""


def query_salmon(context: InvocationContext, args: Sequence[str]) -> bytes:
    request = QuerySalmonRequest.from_args(args)

    stored = _read(context, request.salmon_id)
    if stored is None:
        raise NotFoundError(request.salmon_id)
    return stored


def query_all_salmon(context: InvocationContext, args: Sequence[str]) -> bytes:
    entries = _scan(context)
    context.logger.debug(f"Scanned {len(entries)} ledger entries")
    return render_ledger_entries(entries)


def init_ledger(context: InvocationContext, args: Sequence[str]) -> bytes:
    for sample in SAMPLE_SALMON:
        record_salmon(context, list(sample))

    context.logger.info(f"Ledger seeded with {len(SAMPLE_SALMON)} salmon")
    return b""


# ══════════════════════════════════════════════════════════════
# DISPATCH TABLE
# ══════════════════════════════════════════════════════════════

SALMON_HANDLERS: Dict[ChaincodeFunction, ChaincodeHandler] = {
    ChaincodeFunction.RECORD_SALMON: record_salmon,
    ChaincodeFunction.CHANGE_SALMON_HOLDER: change_salmon_holder,
    ChaincodeFunction.QUERY_SALMON: query_salmon,
    ChaincodeFunction.QUERY_ALL_SALMON: query_all_salmon,
    ChaincodeFunction.INIT_LEDGER: init_ledger,
}


def build_salmon_dispatcher(
    ledger: LedgerAccessor,
    base_logger: Optional[logging.Logger] = None,
) -> ChaincodeDispatcher:
    return ChaincodeDispatcher(
        ledger=ledger,
        handlers=SALMON_HANDLERS,
        base_logger=base_logger,
    )
