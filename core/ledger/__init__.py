"""
Salmon Supply Chain — Ledger Access
=====================================
The shared key-value ledger as seen by chaincode operations.
"""

from core.ledger.contracts import LedgerAccessor, LedgerEntry
from core.ledger.errors import (
    LedgerError,
    LedgerReadError,
    LedgerScanError,
    LedgerWriteError,
)
from core.ledger.memory import InMemoryLedger

__all__ = [
    "LedgerAccessor",
    "LedgerEntry",
    "LedgerError",
    "LedgerReadError",
    "LedgerScanError",
    "LedgerWriteError",
    "InMemoryLedger",
]
