"""
Salmon Supply Chain — Ledger Backend Selection
================================================
Maps the SALMON_LEDGER_BACKEND setting to a LedgerAccessor factory.

    django  → DjangoLedgerAccessor (salmon_ledger_records table)
    memory  → InMemoryLedger (process-local, lost on restart)
"""

from __future__ import annotations

from typing import Callable, Dict

from core.ledger.contracts import LedgerAccessor
from core.ledger.memory import InMemoryLedger


def _django_ledger() -> LedgerAccessor:
    from core.ledger_store.accessor import DjangoLedgerAccessor
    return DjangoLedgerAccessor()


LEDGER_BACKENDS: Dict[str, Callable[[], LedgerAccessor]] = {
    "django": _django_ledger,
    "memory": InMemoryLedger,
}


def build_ledger(backend: str) -> LedgerAccessor:
    try:
        factory = LEDGER_BACKENDS[backend]
    except KeyError:
        raise ValueError(
            f"Unknown ledger backend '{backend}'. "
            f"Must be one of: {sorted(LEDGER_BACKENDS)}"
        ) from None
    return factory()
