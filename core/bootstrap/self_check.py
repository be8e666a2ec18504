"""
Salmon Supply Chain — Bootstrap Self-Check Orchestrator
=========================================================
Runs all invariant checks at system startup.
If any check fails → SystemBootstrapError propagates → system refuses to start.

Check order:
1. Ledger backend known
2. Ledger table exists
3. Dispatch table complete
"""

import logging

from core.bootstrap.invariants import (
    check_dispatch_table,
    check_ledger_backend,
    check_ledger_table,
)

logger = logging.getLogger("salmon.bootstrap")


def run_bootstrap_checks():
    """
    Execute all system invariant checks.
    Called once at startup via AppConfig.ready().
    """
    logger.info("═══ Salmon Bootstrap Self-Check Starting ═══")

    check_ledger_backend()
    check_ledger_table()
    check_dispatch_table()

    logger.info("═══ Salmon Bootstrap Self-Check PASSED ═══")
