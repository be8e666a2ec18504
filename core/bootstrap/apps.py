"""
Salmon Supply Chain — Bootstrap App Configuration
===================================================
Runs the startup self-check once Django has loaded every app.

Skipped while the schema is being managed (migrate and friends) and
under pytest, where tests build their own dispatchers and tables.
"""

import logging
import os
import sys

from django.apps import AppConfig

logger = logging.getLogger("salmon.bootstrap")

# Management commands that run before the ledger table can exist.
SKIP_COMMANDS = frozenset({
    "migrate",
    "makemigrations",
    "showmigrations",
    "sqlmigrate",
    "flush",
    "shell",
    "dbshell",
    "test",
    "check",
})


def _is_management_command_skip() -> bool:
    return len(sys.argv) >= 2 and sys.argv[1] in SKIP_COMMANDS


def _is_pytest_context() -> bool:
    return "PYTEST_CURRENT_TEST" in os.environ or "pytest" in sys.modules


class BootstrapConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "core.bootstrap"
    label = "salmon_bootstrap"
    verbose_name = "Salmon Bootstrap"

    def ready(self):
        if _is_management_command_skip() or _is_pytest_context():
            logger.info("Bootstrap self-check skipped for management/test context.")
            return

        from core.bootstrap.self_check import run_bootstrap_checks
        run_bootstrap_checks()
