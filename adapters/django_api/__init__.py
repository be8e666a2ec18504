"""
Salmon Supply Chain Django HTTP adapter.
Thin framework glue over the chaincode dispatcher.
"""

from adapters.django_api.wiring import build_dependencies, reset_dependencies

__all__ = [
    "build_dependencies",
    "reset_dependencies",
]
