"""
Salmon Supply Chain — Chaincode Response Contract
===================================================
Every invocation yields exactly one response.

OK    → payload bytes (possibly empty), no message.
ERROR → human-readable message, error kind and context, empty payload.

Status values follow the peer response convention (200 / 500).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from core.chaincode.errors import ChaincodeError, ErrorKind


class ChaincodeStatus(Enum):
    OK = 200
    ERROR = 500


@dataclass(frozen=True)
class ChaincodeResponse:
    """
    Result of one chaincode invocation.

    Invariants:
        - OK carries no message and no error kind
        - ERROR carries a non-empty message and an error kind
    """

    status: ChaincodeStatus
    payload: bytes = b""
    message: str = ""
    error_kind: Optional[ErrorKind] = None
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.status, ChaincodeStatus):
            raise ValueError(
                f"status must be ChaincodeStatus, got {type(self.status).__name__}."
            )

        if not isinstance(self.payload, bytes):
            raise TypeError("payload must be bytes.")

        if self.status == ChaincodeStatus.OK:
            if self.message or self.error_kind is not None:
                raise ValueError("OK response must NOT carry an error.")
        else:
            if not self.message or self.error_kind is None:
                raise ValueError(
                    "ERROR response must carry a message and an error kind."
                )

    @classmethod
    def success(cls, payload: bytes = b"") -> "ChaincodeResponse":
        return cls(status=ChaincodeStatus.OK, payload=payload)

    @classmethod
    def error(cls, exc: ChaincodeError) -> "ChaincodeResponse":
        return cls(
            status=ChaincodeStatus.ERROR,
            message=exc.describe(),
            error_kind=exc.kind,
            details=exc.context(),
        )

    @property
    def is_ok(self) -> bool:
        return self.status == ChaincodeStatus.OK

    @property
    def is_error(self) -> bool:
        return self.status == ChaincodeStatus.ERROR
