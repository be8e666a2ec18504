"""
Salmon Supply Chain — Chaincode Function Names
================================================
The closed set of callable chaincode functions.

Each function is either read-only (query) or state-changing (invoke).
The dispatcher refuses to start unless every member has a handler.
"""

from __future__ import annotations

from enum import Enum

from core.chaincode.errors import UnknownFunctionError


class ChaincodeFunction(Enum):
    RECORD_SALMON = "recordSalmon"
    CHANGE_SALMON_HOLDER = "changeSalmonHolder"
    QUERY_SALMON = "querySalmon"
    QUERY_ALL_SALMON = "queryAllSalmon"
    INIT_LEDGER = "initLedger"

    @property
    def read_only(self) -> bool:
        return self in READ_ONLY_FUNCTIONS

    @classmethod
    def resolve(cls, name: str) -> "ChaincodeFunction":
        """
        Map an external function name to a member.

        Raises:
            UnknownFunctionError: name is not a chaincode function.
        """
        try:
            return cls(name)
        except ValueError:
            raise UnknownFunctionError(str(name)) from None


READ_ONLY_FUNCTIONS = frozenset({
    ChaincodeFunction.QUERY_SALMON,
    ChaincodeFunction.QUERY_ALL_SALMON,
})
