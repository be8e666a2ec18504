"""
Salmon Supply Chain — Bootstrap Invariant Checks
==================================================
Each function verifies one system law.
If any check fails → SystemBootstrapError is raised.

These checks do NOT:
- Auto-fix anything
- Run migrations
- Create tables
"""

import logging

from django.conf import settings
from django.db import connection

from core.bootstrap.errors import SystemBootstrapError

logger = logging.getLogger("salmon.bootstrap")

LEDGER_TABLE = "salmon_ledger_records"


# ══════════════════════════════════════════════════════════════
# CHECK 1: Ledger Table Exists
# ══════════════════════════════════════════════════════════════

def check_ledger_table():
    """
    Verify the ledger table exists when the Django backend is active.
    If missing → refuse start. No auto-migration.
    """
    backend = getattr(settings, "SALMON_LEDGER_BACKEND", "django")
    if backend != "django":
        logger.info(f"Ledger table check skipped (backend: {backend}).")
        return

    table_names = connection.introspection.table_names()
    if LEDGER_TABLE not in table_names:
        raise SystemBootstrapError(
            invariant="LEDGER_TABLE",
            detail=(
                f"Table '{LEDGER_TABLE}' does not exist. "
                f"Run migrations before starting. "
                f"Bootstrap will not auto-create tables."
            ),
        )

    logger.info("✓ Ledger table exists.")


# ══════════════════════════════════════════════════════════════
# CHECK 2: Dispatch Table Complete
# ══════════════════════════════════════════════════════════════

def check_dispatch_table():
    """
    Verify every chaincode function has a callable handler.
    """
    from core.chaincode.dispatcher import validate_dispatch_table
    from engines.salmon.services import SALMON_HANDLERS

    validate_dispatch_table(SALMON_HANDLERS)
    logger.info(f"✓ Dispatch table complete ({len(SALMON_HANDLERS)} functions).")


# ══════════════════════════════════════════════════════════════
# CHECK 3: Ledger Backend Known
# ══════════════════════════════════════════════════════════════

def check_ledger_backend():
    from core.ledger_store.backends import LEDGER_BACKENDS

    backend = getattr(settings, "SALMON_LEDGER_BACKEND", "django")
    if backend not in LEDGER_BACKENDS:
        raise SystemBootstrapError(
            invariant="LEDGER_BACKEND",
            detail=(
                f"SALMON_LEDGER_BACKEND '{backend}' not valid. "
                f"Must be one of: {sorted(LEDGER_BACKENDS)}"
            ),
        )

    logger.info(f"✓ Ledger backend '{backend}' configured.")
