"""
Salmon Supply Chain — Chaincode Error Taxonomy
================================================
Every chaincode failure is a typed error carrying structured context.

Human-readable text is produced by describe() and only rendered at the
boundary (dispatcher response, HTTP adapter). Inside operations errors
travel as objects, never as preformatted strings.

Kinds:
    ARITY           wrong argument count
    VALIDATION      empty / invalid field
    CONFLICT        id already recorded
    NOT_FOUND       id not recorded
    DECODE          stored document is malformed
    READ            ledger read (or scan advance) failed
    WRITE           ledger write failed
    SCAN            ledger scan could not be opened
    UNKNOWN_FUNCTION
                    function name not in the dispatch table
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    ARITY = "ARITY"
    VALIDATION = "VALIDATION"
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    DECODE = "DECODE"
    READ = "READ"
    WRITE = "WRITE"
    SCAN = "SCAN"
    UNKNOWN_FUNCTION = "UNKNOWN_FUNCTION"


# ══════════════════════════════════════════════════════════════
# BASE
# ══════════════════════════════════════════════════════════════

class ChaincodeError(Exception):
    """Base for all chaincode failures."""

    kind: ErrorKind

    def describe(self) -> str:
        raise NotImplementedError

    def context(self) -> dict[str, Any]:
        """Structured context fields, serializable for transport."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.describe(),
            "context": self.context(),
        }

    def __str__(self) -> str:
        return self.describe()


# ══════════════════════════════════════════════════════════════
# INPUT ERRORS
# ══════════════════════════════════════════════════════════════

class ArityError(ChaincodeError):
    kind = ErrorKind.ARITY

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(expected, received)

    def describe(self) -> str:
        return f"Incorrect number of arguments. Expecting {self.expected}"

    def context(self) -> dict[str, Any]:
        return {"expected": self.expected, "received": self.received}


class ValidationError(ChaincodeError):
    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, reason: str = "must be a non-empty string"):
        self.field = field
        self.reason = reason
        super().__init__(field, reason)

    def describe(self) -> str:
        return f"{self.field.capitalize()} {self.reason}"

    def context(self) -> dict[str, Any]:
        return {"field": self.field, "reason": self.reason}


class UnknownFunctionError(ChaincodeError):
    kind = ErrorKind.UNKNOWN_FUNCTION

    def __init__(self, function_name: str):
        self.function_name = function_name
        super().__init__(function_name)

    def describe(self) -> str:
        return f"No such {self.function_name} function"

    def context(self) -> dict[str, Any]:
        return {"function": self.function_name}


# ══════════════════════════════════════════════════════════════
# STATE ERRORS
# ══════════════════════════════════════════════════════════════

class ConflictError(ChaincodeError):
    kind = ErrorKind.CONFLICT

    def __init__(self, salmon_id: str):
        self.salmon_id = salmon_id
        super().__init__(salmon_id)

    def describe(self) -> str:
        return f"Salmon {self.salmon_id} already exists"

    def context(self) -> dict[str, Any]:
        return {"id": self.salmon_id}


class NotFoundError(ChaincodeError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, salmon_id: str):
        self.salmon_id = salmon_id
        super().__init__(salmon_id)

    def describe(self) -> str:
        return f"Salmon {self.salmon_id} doesn't exist"

    def context(self) -> dict[str, Any]:
        return {"id": self.salmon_id}


class DecodeError(ChaincodeError):
    kind = ErrorKind.DECODE

    def __init__(self, reason: str, salmon_id: Optional[str] = None):
        self.reason = reason
        self.salmon_id = salmon_id
        super().__init__(reason, salmon_id)

    def describe(self) -> str:
        if self.salmon_id is None:
            return f"Cannot decode salmon record. Error: {self.reason}"
        return f"Cannot decode salmon {self.salmon_id}. Error: {self.reason}"

    def context(self) -> dict[str, Any]:
        return {"id": self.salmon_id, "reason": self.reason}


# ══════════════════════════════════════════════════════════════
# LEDGER PASSTHROUGH ERRORS
# ══════════════════════════════════════════════════════════════

class ReadError(ChaincodeError):
    """Ledger read failed. key is None when a scan failed to advance."""

    kind = ErrorKind.READ

    def __init__(self, cause: str, key: Optional[str] = None):
        self.cause = cause
        self.key = key
        super().__init__(cause, key)

    def describe(self) -> str:
        if self.key is None:
            return f"Cannot read next ledger entry. Error: {self.cause}"
        return f"Cannot get salmon {self.key}. Error: {self.cause}"

    def context(self) -> dict[str, Any]:
        return {"id": self.key, "cause": self.cause}


class WriteError(ChaincodeError):
    kind = ErrorKind.WRITE

    def __init__(self, cause: str, key: str):
        self.cause = cause
        self.key = key
        super().__init__(cause, key)

    def describe(self) -> str:
        return f"Cannot put salmon {self.key}. Error: {self.cause}"

    def context(self) -> dict[str, Any]:
        return {"id": self.key, "cause": self.cause}


class ScanError(ChaincodeError):
    kind = ErrorKind.SCAN

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(cause)

    def describe(self) -> str:
        return f"Cannot open ledger scan. Error: {self.cause}"

    def context(self) -> dict[str, Any]:
        return {"cause": self.cause}
