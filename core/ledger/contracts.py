"""
Salmon Supply Chain — Ledger Accessor Contract
================================================
Narrow interface to the shared key-value ledger.

The ledger itself (consensus, persistence, distribution) is external.
Chaincode operations only ever see this protocol:

    get(key)       → bytes, or None when the key is absent
    put(key, value)
    scan_all()     → lazy iterator of LedgerEntry over every key

Failure contract:
    get       → LedgerReadError
    put       → LedgerWriteError
    scan_all  → LedgerScanError when the scan cannot be opened
                (raised by the call itself, not on first iteration);
                LedgerReadError while advancing the iterator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Protocol, runtime_checkable


# ══════════════════════════════════════════════════════════════
# LEDGER ENTRY
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class LedgerEntry:
    """One (key, raw value) pair delivered by a range scan."""

    key: str
    value: bytes

    def __post_init__(self):
        if not isinstance(self.key, str):
            raise TypeError("key must be a string.")
        if not isinstance(self.value, bytes):
            raise TypeError("value must be bytes.")


# ══════════════════════════════════════════════════════════════
# LEDGER ACCESSOR PROTOCOL (dependency injection)
# ══════════════════════════════════════════════════════════════

@runtime_checkable
class LedgerAccessor(Protocol):
    """Key-value ledger interface consumed by chaincode operations."""

    def get(self, key: str) -> Optional[bytes]:
        """Return stored bytes for key, or None if absent."""
        ...

    def put(self, key: str, value: bytes) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def scan_all(self) -> Iterator[LedgerEntry]:
        """Open an unbounded range scan over every key."""
        ...
