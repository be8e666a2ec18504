"""
Salmon Supply Chain — Ledger Store App Configuration
======================================================
Django-backed persistence for the shared key-value ledger.

This app:
- Stores raw record bytes keyed by id
- Serves point reads and ordered full-range scans

This app does NOT:
- Interpret record contents
- Validate salmon fields
- Decide anything
"""

from django.apps import AppConfig


class LedgerStoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "core.ledger_store"
    label = "ledger_store"
    verbose_name = "Salmon Ledger Store"
