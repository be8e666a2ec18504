"""
Salmon Supply Chain — Chaincode Layer
=======================================
Every external call is (function name, string args).
Every call produces exactly one ChaincodeResponse.
"""

from core.chaincode.context import InvocationContext, build_invocation_logger
from core.chaincode.dispatcher import (
    ChaincodeDispatcher,
    ChaincodeHandler,
    validate_dispatch_table,
)
from core.chaincode.errors import (
    ArityError,
    ChaincodeError,
    ConflictError,
    DecodeError,
    ErrorKind,
    NotFoundError,
    ReadError,
    ScanError,
    UnknownFunctionError,
    ValidationError,
    WriteError,
)
from core.chaincode.functions import ChaincodeFunction, READ_ONLY_FUNCTIONS
from core.chaincode.response import ChaincodeResponse, ChaincodeStatus

__all__ = [
    # ── Context ───────────────────────────────────────────────
    "InvocationContext",
    "build_invocation_logger",
    # ── Dispatcher ────────────────────────────────────────────
    "ChaincodeDispatcher",
    "ChaincodeHandler",
    "validate_dispatch_table",
    # ── Errors ────────────────────────────────────────────────
    "ArityError",
    "ChaincodeError",
    "ConflictError",
    "DecodeError",
    "ErrorKind",
    "NotFoundError",
    "ReadError",
    "ScanError",
    "UnknownFunctionError",
    "ValidationError",
    "WriteError",
    # ── Functions ─────────────────────────────────────────────
    "ChaincodeFunction",
    "READ_ONLY_FUNCTIONS",
    # ── Response ──────────────────────────────────────────────
    "ChaincodeResponse",
    "ChaincodeStatus",
]
