"""
Salmon Supply Chain Django Adapter Wiring
===========================================
Constructs the process-wide chaincode dispatcher for HTTP serving.

Adapter-only glue:
- ledger backend chosen from settings.SALMON_LEDGER_BACKEND
- one dispatcher per process, built lazily on first request
"""

from __future__ import annotations

import logging
import threading

from django.conf import settings

from core.chaincode.dispatcher import ChaincodeDispatcher
from core.ledger_store.backends import build_ledger
from engines.salmon.services import build_salmon_dispatcher

logger = logging.getLogger("salmon.http")

_DEPENDENCIES_LOCK = threading.Lock()
_DISPATCHER: ChaincodeDispatcher | None = None


def build_dependencies() -> ChaincodeDispatcher:
    global _DISPATCHER
    with _DEPENDENCIES_LOCK:
        if _DISPATCHER is None:
            backend = getattr(settings, "SALMON_LEDGER_BACKEND", "django")
            _DISPATCHER = build_salmon_dispatcher(build_ledger(backend))
            logger.info(f"Chaincode dispatcher built (ledger backend: {backend})")
        return _DISPATCHER


def reset_dependencies() -> None:
    """Drop the cached dispatcher. The next request rebuilds it."""
    global _DISPATCHER
    with _DEPENDENCIES_LOCK:
        _DISPATCHER = None
