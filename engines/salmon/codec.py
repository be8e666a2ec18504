"""
Salmon Supply Chain — Salmon Record Codec
===========================================
Salmon record ↔ stored bytes.

Stored document (UTF-8 JSON, fixed key order, compact):
    {"docType":"salmon","id":"1","vessel":"Vessel #1",
     "datetime":"2014-01-01","location":"Viet Nam","holder":"Nha Hoang"}

Decoding is forward-compatible: unknown keys are ignored.
decode_salmon(encode_salmon(s)) == s for every valid Salmon.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from core.chaincode.errors import DecodeError
from core.ledger.contracts import LedgerEntry

SALMON_DOC_TYPE = "salmon"

# Python attribute → document key, in document order.
_DOCUMENT_FIELDS = (
    ("doc_type", "docType"),
    ("salmon_id", "id"),
    ("vessel", "vessel"),
    ("timestamp", "datetime"),
    ("location", "location"),
    ("holder", "holder"),
)


# ══════════════════════════════════════════════════════════════
# SALMON RECORD
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Salmon:
    """
    One tracked fish lot.

    Fields:
        salmon_id:  Ledger key. Immutable.
        vessel:     Origin vessel. Immutable.
        timestamp:  Catch event time, opaque text. Immutable.
        location:   Origin location. Immutable.
        holder:     Current custodian. The only mutable field.
        doc_type:   Constant record kind tag.
    """

    salmon_id: str
    vessel: str
    timestamp: str
    location: str
    holder: str
    doc_type: str = SALMON_DOC_TYPE

    def __post_init__(self):
        for attribute, document_key in _DOCUMENT_FIELDS:
            value = getattr(self, attribute)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{document_key} must be a non-empty string.")

        if self.doc_type != SALMON_DOC_TYPE:
            raise ValueError(
                f"docType must be '{SALMON_DOC_TYPE}', got '{self.doc_type}'."
            )

    def with_holder(self, holder: str) -> "Salmon":
        """Same salmon, new custodian. Identity fields carry forward."""
        return replace(self, holder=holder)

    def to_document(self) -> dict:
        return {
            document_key: getattr(self, attribute)
            for attribute, document_key in _DOCUMENT_FIELDS
        }


# ══════════════════════════════════════════════════════════════
# ENCODE / DECODE
# ══════════════════════════════════════════════════════════════

def encode_salmon(salmon: Salmon) -> bytes:
    return json.dumps(
        salmon.to_document(),
        ensure_ascii=False,
        separators=(",", ":"),
    ).encode("utf-8")


def decode_salmon(raw: bytes, *, salmon_id: Optional[str] = None) -> Salmon:
    """
    Parse stored bytes into a Salmon.

    Raises:
        DecodeError: bytes are not a JSON object with six non-empty
                     string fields and docType 'salmon'.
    """
    try:
        document = json.loads(bytes(raw).decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise DecodeError(f"invalid JSON document: {exc}", salmon_id) from exc

    if not isinstance(document, dict):
        raise DecodeError(
            f"expected a JSON object, got {type(document).__name__}",
            salmon_id,
        )

    values = {}
    for attribute, document_key in _DOCUMENT_FIELDS:
        if document_key not in document:
            raise DecodeError(f"missing field '{document_key}'", salmon_id)
        values[attribute] = document[document_key]

    try:
        return Salmon(**values)
    except ValueError as exc:
        raise DecodeError(str(exc), salmon_id) from exc


# ══════════════════════════════════════════════════════════════
# QUERY RESULT RENDERING
# ══════════════════════════════════════════════════════════════

def render_ledger_entries(entries: Iterable[LedgerEntry]) -> bytes:
    """
    Render scanned entries as a JSON array:

        [{"Key": "1", "Record": {...}}, {"Key": "2", "Record": {...}}]

    Each stored value is spliced in as-is (not re-encoded, not
    string-escaped). Entries keep scan-delivery order.
    """
    parts = []
    for entry in entries:
        try:
            record_text = entry.value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"record is not UTF-8 text: {exc}", entry.key) from exc
        key_text = json.dumps(entry.key, ensure_ascii=False)
        parts.append('{"Key": ' + key_text + ', "Record": ' + record_text + "}")

    return ("[" + ", ".join(parts) + "]").encode("utf-8")
