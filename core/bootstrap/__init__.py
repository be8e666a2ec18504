"""
Salmon Supply Chain — Bootstrap Self-Defense
==============================================
Ensures the chaincode never starts in an unsafe state.
"""

from core.bootstrap.errors import SystemBootstrapError

__all__ = [
    "SystemBootstrapError",
]
