"""
Salmon Supply Chain — Bootstrap Errors
========================================
Startup failures. A chaincode that cannot reach its ledger table or
route every function refuses to serve.
"""


class SystemBootstrapError(Exception):
    """
    Raised by the startup self-check when the process cannot serve.

    `invariant` names the failed check (e.g. LEDGER_TABLE),
    `detail` says what was found instead.
    """

    def __init__(self, invariant: str, detail: str):
        self.invariant = invariant
        self.detail = detail
        super().__init__(
            f"SALMON BOOTSTRAP FAILURE — {invariant}: {detail}"
        )
