"""
Salmon Supply Chain — Invocation Context
==========================================
Per-invocation capabilities handed to every chaincode operation:
the ledger and a logger scoped to this one call.

Operations do not reach for module-level loggers or globals.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Optional

from core.ledger.contracts import LedgerAccessor


def build_invocation_logger(
    base: logging.Logger,
    *,
    invocation_id: str,
    function: str,
) -> logging.LoggerAdapter:
    return logging.LoggerAdapter(
        base,
        {"invocation_id": invocation_id, "function": function},
    )


@dataclass(frozen=True)
class InvocationContext:
    """
    Fields:
        ledger:        Ledger accessor for this call.
        logger:        Logger adapter tagged with invocation id + function.
        function:      Resolved function name.
        invocation_id: Unique id of this call.
    """

    ledger: LedgerAccessor
    logger: logging.LoggerAdapter
    function: str
    invocation_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @classmethod
    def create(
        cls,
        ledger: LedgerAccessor,
        function: str,
        *,
        base_logger: Optional[logging.Logger] = None,
        invocation_id: Optional[str] = None,
    ) -> "InvocationContext":
        invocation_id = invocation_id or uuid.uuid4().hex
        base_logger = base_logger or logging.getLogger("salmon.chaincode")
        return cls(
            ledger=ledger,
            logger=build_invocation_logger(
                base_logger,
                invocation_id=invocation_id,
                function=function,
            ),
            function=function,
            invocation_id=invocation_id,
        )


class InvocationDefaultsFilter(logging.Filter):
    """
    Fills invocation_id / function on records logged outside an
    InvocationContext, so the invocation log format never fails.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "invocation_id"):
            record.invocation_id = "-"
        if not hasattr(record, "function"):
            record.function = "-"
        return True
