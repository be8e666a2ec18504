"""
Salmon Supply Chain — Salmon Engine
=====================================
Custody tracking for fish lots: record, transfer, query.
"""

from engines.salmon.codec import (
    SALMON_DOC_TYPE,
    Salmon,
    decode_salmon,
    encode_salmon,
    render_ledger_entries,
)
from engines.salmon.seed import SAMPLE_SALMON

__all__ = [
    "SALMON_DOC_TYPE",
    "SAMPLE_SALMON",
    "Salmon",
    "decode_salmon",
    "encode_salmon",
    "render_ledger_entries",
]
