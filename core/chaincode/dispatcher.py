"""
Salmon Supply Chain — Chaincode Dispatcher
============================================
Receive (function name, args) → resolve → run handler → respond.

The dispatch table is explicit: one handler per ChaincodeFunction,
checked exhaustively when the dispatcher is built. A missing or
non-callable handler is a startup failure, not a runtime surprise.

The Dispatcher:
- Builds one InvocationContext per call
- Converts ChaincodeError into an ERROR response (boundary formatting)
- Never retries

The Dispatcher does NOT:
- Validate arguments (handlers do)
- Touch the ledger itself
- Swallow programming errors (anything not a ChaincodeError propagates)
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable, Mapping, Optional, Sequence

from core.bootstrap.errors import SystemBootstrapError
from core.chaincode.context import InvocationContext
from core.chaincode.errors import ChaincodeError
from core.chaincode.functions import ChaincodeFunction
from core.chaincode.response import ChaincodeResponse
from core.ledger.contracts import LedgerAccessor

logger = logging.getLogger("salmon.chaincode")


# A handler is a callable:
#   (InvocationContext, args) → payload bytes
#   Raises ChaincodeError on any failure.
ChaincodeHandler = Callable[[InvocationContext, Sequence[str]], bytes]


def validate_dispatch_table(
    handlers: Mapping[ChaincodeFunction, ChaincodeHandler],
) -> None:
    """
    Every ChaincodeFunction must map to a callable handler, and
    nothing else may be in the table.

    Raises:
        SystemBootstrapError: table is incomplete or malformed.
    """
    unknown = [key for key in handlers if not isinstance(key, ChaincodeFunction)]
    if unknown:
        raise SystemBootstrapError(
            invariant="DISPATCH_TABLE_KEYS",
            detail=f"Dispatch table keys must be ChaincodeFunction, got {unknown!r}.",
        )

    missing = [fn.value for fn in ChaincodeFunction if fn not in handlers]
    if missing:
        raise SystemBootstrapError(
            invariant="DISPATCH_TABLE_COMPLETE",
            detail=f"No handler registered for: {', '.join(missing)}.",
        )

    not_callable = [fn.value for fn, handler in handlers.items() if not callable(handler)]
    if not_callable:
        raise SystemBootstrapError(
            invariant="DISPATCH_TABLE_CALLABLE",
            detail=f"Handlers are not callable for: {', '.join(not_callable)}.",
        )


class ChaincodeDispatcher:
    """
    Usage:
        dispatcher = ChaincodeDispatcher(
            ledger=InMemoryLedger(),
            handlers={ChaincodeFunction.QUERY_SALMON: query_salmon, ...},
        )
        response = dispatcher.invoke("querySalmon", ["1"])
        # response.is_ok, response.payload, response.message
    """

    def __init__(
        self,
        ledger: LedgerAccessor,
        handlers: Mapping[ChaincodeFunction, ChaincodeHandler],
        base_logger: Optional[logging.Logger] = None,
    ):
        if not isinstance(ledger, LedgerAccessor):
            raise TypeError(
                f"ledger must implement LedgerAccessor, got {type(ledger).__name__}."
            )
        validate_dispatch_table(handlers)

        self._ledger = ledger
        self._handlers = dict(handlers)
        self._base_logger = base_logger or logger

    @property
    def ledger(self) -> LedgerAccessor:
        return self._ledger

    def init(self) -> ChaincodeResponse:
        """Chaincode instantiation hook. Holds no state, always succeeds."""
        self._base_logger.info("Chaincode initialised")
        return ChaincodeResponse.success()

    def invoke(
        self,
        function_name: str,
        args: Sequence[str],
        *,
        invocation_id: Optional[str] = None,
    ) -> ChaincodeResponse:
        """
        Run one chaincode call.

        Returns:
            ChaincodeResponse: OK with payload, or ERROR with message.
        """
        invocation_id = invocation_id or uuid.uuid4().hex

        try:
            function = ChaincodeFunction.resolve(function_name)
        except ChaincodeError as exc:
            self._base_logger.warning(
                f"Invocation {invocation_id} rejected: [{exc.kind.value}] "
                f"{exc.describe()}"
            )
            return ChaincodeResponse.error(exc)

        context = InvocationContext.create(
            self._ledger,
            function.value,
            base_logger=self._base_logger,
            invocation_id=invocation_id,
        )
        handler = self._handlers[function]

        try:
            payload = handler(context, list(args))
        except ChaincodeError as exc:
            context.logger.warning(
                f"{function.value} failed: [{exc.kind.value}] {exc.describe()}"
            )
            return ChaincodeResponse.error(exc)

        context.logger.debug(
            f"{function.value} succeeded ({len(payload or b'')} bytes)"
        )
        return ChaincodeResponse.success(payload or b"")
