"""
Salmon Supply Chain HTTP Adapter - Response Mapping
=====================================================
Turns chaincode responses into the transport envelope.

    success → {"ok": true, "data": ...}
    failure → {"ok": false, "error": {"code", "message", "details"}}

Error kinds map onto HTTP statuses; anything unmapped is a 500.
"""

from __future__ import annotations

from typing import Any, Optional

from core.chaincode.errors import ErrorKind
from core.chaincode.response import ChaincodeResponse

ERROR_HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.ARITY: 400,
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNKNOWN_FUNCTION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.DECODE: 500,
    ErrorKind.READ: 500,
    ErrorKind.WRITE: 500,
    ErrorKind.SCAN: 500,
}


def error_envelope(
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return {
        "ok": False,
        "error": {"code": code, "message": message, "details": dict(details or {})},
    }


def chaincode_envelope(
    response: ChaincodeResponse,
    data: Any = None,
) -> tuple[dict[str, Any], int]:
    """
    Envelope and HTTP status for a dispatcher response.

    `data` is what the view rendered from the payload; it is only used
    for OK responses.
    """
    if response.is_ok:
        return {"ok": True, "data": data}, 200
    body = error_envelope(
        response.error_kind.value,
        response.message,
        response.details,
    )
    return body, ERROR_HTTP_STATUS.get(response.error_kind, 500)
