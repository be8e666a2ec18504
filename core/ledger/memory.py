"""
Salmon Supply Chain — In-Memory Ledger
========================================
Reference LedgerAccessor used by tests and the `memory` backend.

Scan order is lexical by key, the order a range scan over a sorted
key-value store delivers.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Iterator, Mapping, Optional

from core.ledger.contracts import LedgerEntry
from core.ledger.errors import LedgerWriteError

logger = logging.getLogger("salmon.ledger")


class InMemoryLedger:
    """
    Dict-backed ledger.

    Usage:
        ledger = InMemoryLedger()
        ledger.put("1", b"{...}")
        ledger.get("1")        # b"{...}"
        list(ledger.scan_all())
    """

    def __init__(self, initial: Optional[Mapping[str, bytes]] = None):
        self._state: Dict[str, bytes] = {}
        self._lock = threading.Lock()
        for key, value in (initial or {}).items():
            self.put(key, value)

    def get(self, key: str) -> Optional[bytes]:
        with self._lock:
            return self._state.get(key)

    def put(self, key: str, value: bytes) -> None:
        if not isinstance(key, str) or not key:
            raise LedgerWriteError("key must be a non-empty string.", key=key)
        if not isinstance(value, (bytes, bytearray)):
            raise LedgerWriteError(
                f"value must be bytes, got {type(value).__name__}.", key=key
            )
        with self._lock:
            self._state[key] = bytes(value)
        logger.debug(f"Ledger put: {key} ({len(value)} bytes)")

    def scan_all(self) -> Iterator[LedgerEntry]:
        # Snapshot at open time; later puts are not seen by this scan.
        with self._lock:
            snapshot = sorted(self._state.items())
        return (LedgerEntry(key=key, value=value) for key, value in snapshot)

    def keys(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(sorted(self._state))

    def __len__(self) -> int:
        with self._lock:
            return len(self._state)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._state
