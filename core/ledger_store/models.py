"""
Salmon Supply Chain — Ledger Record Model
===========================================
One row per ledger key. The value column holds the bytes exactly as
written by the chaincode; the store never parses them.

Rows are never deleted by the chaincode. A put on an existing key
replaces the value in place.
"""

from django.db import models


class LedgerRecord(models.Model):
    key = models.CharField(
        primary_key=True,
        max_length=255,
        help_text="Ledger key. For salmon records this is the salmon id.",
    )

    value = models.BinaryField(
        help_text="Raw stored document bytes.",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "salmon_ledger_records"
        ordering = ["key"]

    def __str__(self) -> str:
        return self.key
