"""
Salmon Supply Chain Tests — Bootstrap Self-Check
==================================================
The system refuses to start with an unknown ledger backend, a missing
ledger table, or an incomplete dispatch table.
"""

from __future__ import annotations

import pytest

from core.bootstrap import SystemBootstrapError
from core.bootstrap.apps import SKIP_COMMANDS
from core.bootstrap.invariants import (
    check_dispatch_table,
    check_ledger_backend,
    check_ledger_table,
)
from core.bootstrap.self_check import run_bootstrap_checks
from core.chaincode.functions import ChaincodeFunction


def test_error_message_names_invariant():
    error = SystemBootstrapError(invariant="LEDGER_TABLE", detail="missing")
    assert error.invariant == "LEDGER_TABLE"
    assert "LEDGER_TABLE: missing" in str(error)


def test_unknown_backend_refused(settings):
    settings.SALMON_LEDGER_BACKEND = "couchdb"
    with pytest.raises(SystemBootstrapError) as exc_info:
        check_ledger_backend()
    assert exc_info.value.invariant == "LEDGER_BACKEND"


def test_memory_backend_skips_table_check(settings):
    settings.SALMON_LEDGER_BACKEND = "memory"
    check_ledger_table()


@pytest.mark.django_db
def test_ledger_table_present_after_migrations(settings):
    settings.SALMON_LEDGER_BACKEND = "django"
    check_ledger_table()


@pytest.mark.django_db
def test_missing_ledger_table_refused(settings, monkeypatch):
    settings.SALMON_LEDGER_BACKEND = "django"
    monkeypatch.setattr("core.bootstrap.invariants.LEDGER_TABLE", "no_such_table")
    with pytest.raises(SystemBootstrapError) as exc_info:
        check_ledger_table()
    assert exc_info.value.invariant == "LEDGER_TABLE"


def test_dispatch_table_check_passes():
    check_dispatch_table()


def test_dispatch_table_check_catches_missing_handler(monkeypatch):
    from engines.salmon import services

    handlers = dict(services.SALMON_HANDLERS)
    del handlers[ChaincodeFunction.QUERY_ALL_SALMON]
    monkeypatch.setattr(services, "SALMON_HANDLERS", handlers)

    with pytest.raises(SystemBootstrapError) as exc_info:
        check_dispatch_table()
    assert "queryAllSalmon" in exc_info.value.detail


@pytest.mark.django_db
def test_full_self_check_passes(settings):
    settings.SALMON_LEDGER_BACKEND = "django"
    run_bootstrap_checks()


def test_schema_commands_skip_self_check():
    assert {"migrate", "makemigrations", "test"} <= SKIP_COMMANDS


def test_full_self_check_refuses_unknown_backend(settings):
    settings.SALMON_LEDGER_BACKEND = "couchdb"
    with pytest.raises(SystemBootstrapError) as exc_info:
        run_bootstrap_checks()
    assert exc_info.value.invariant == "LEDGER_BACKEND"
