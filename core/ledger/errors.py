"""
Salmon Supply Chain — Ledger Errors
=====================================
Failure types raised by Ledger Accessor implementations.

These are collaborator failures. Chaincode operations never recover
from them; they wrap them with key context and surface them.
"""

from __future__ import annotations

from typing import Optional


class LedgerError(Exception):
    """Base error for ledger accessor failures."""

    def __init__(self, message: str, key: Optional[str] = None):
        self.message = message
        self.key = key
        super().__init__(message)


class LedgerReadError(LedgerError):
    """Reading a key, or advancing a scan, failed."""
    pass


class LedgerWriteError(LedgerError):
    """Writing a key failed."""
    pass


class LedgerScanError(LedgerError):
    """A range scan could not be opened."""
    pass
