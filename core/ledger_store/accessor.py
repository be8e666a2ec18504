"""
Salmon Supply Chain — Django Ledger Accessor
==============================================
LedgerAccessor implementation over the Django ORM.

Database failures are mapped onto the ledger failure contract:
    get       → LedgerReadError
    put       → LedgerWriteError
    scan_all  → LedgerScanError (open), LedgerReadError (advance)

The caller owns any transaction boundary. Each put is durable once
the surrounding transaction (autocommit by default) completes.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from django.db import DatabaseError

from core.ledger.contracts import LedgerEntry
from core.ledger.errors import LedgerReadError, LedgerScanError, LedgerWriteError
from core.ledger_store.models import LedgerRecord

logger = logging.getLogger("salmon.ledger")


def _as_bytes(value) -> bytes:
    # BinaryField may come back as memoryview depending on the backend.
    if isinstance(value, memoryview):
        return value.tobytes()
    return bytes(value)


class DjangoLedgerAccessor:
    """Ledger accessor persisting to the salmon_ledger_records table."""

    def get(self, key: str) -> Optional[bytes]:
        try:
            row = (
                LedgerRecord.objects.filter(key=key)
                .values_list("value", flat=True)
                .first()
            )
        except DatabaseError as exc:
            raise LedgerReadError(str(exc), key=key) from exc
        if row is None:
            return None
        return _as_bytes(row)

    def put(self, key: str, value: bytes) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise LedgerWriteError(
                f"value must be bytes, got {type(value).__name__}.", key=key
            )
        try:
            LedgerRecord.objects.update_or_create(
                key=key,
                defaults={"value": bytes(value)},
            )
        except DatabaseError as exc:
            raise LedgerWriteError(str(exc), key=key) from exc
        logger.debug(f"Ledger put: {key} ({len(value)} bytes)")

    def scan_all(self) -> Iterator[LedgerEntry]:
        try:
            queryset = LedgerRecord.objects.order_by("key").values_list("key", "value")
            # Touch the table now so an unusable store fails at open time.
            queryset.exists()
        except DatabaseError as exc:
            raise LedgerScanError(str(exc)) from exc
        return self._iterate(queryset)

    @staticmethod
    def _iterate(queryset) -> Iterator[LedgerEntry]:
        rows = iter(queryset.iterator())
        while True:
            try:
                row = next(rows)
            except StopIteration:
                return
            except DatabaseError as exc:
                raise LedgerReadError(str(exc)) from exc
            key, value = row
            yield LedgerEntry(key=key, value=_as_bytes(value))
