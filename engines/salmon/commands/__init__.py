"""
Salmon Supply Chain — Salmon Requests
=======================================
Positional string arguments → validated request objects.

Each request checks its own arity first, then its fields in
declaration order; the first failure wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Sequence

from core.chaincode.errors import ArityError, ValidationError


def _check_arity(args: Sequence[str], expected: int) -> None:
    if len(args) != expected:
        raise ArityError(expected=expected, received=len(args))


def _require_non_empty(value: str, field: str) -> None:
    if not isinstance(value, str) or len(value) == 0:
        raise ValidationError(field)


@dataclass(frozen=True)
class RecordSalmonRequest:
    """recordSalmon(id, vessel, datetime, location, holder)"""

    ARITY: ClassVar[int] = 5

    salmon_id: str
    vessel: str
    timestamp: str
    location: str
    holder: str

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "RecordSalmonRequest":
        _check_arity(args, cls.ARITY)
        salmon_id, vessel, timestamp, location, holder = args

        _require_non_empty(salmon_id, "id")
        _require_non_empty(vessel, "vessel")
        _require_non_empty(timestamp, "datetime")
        _require_non_empty(location, "location")
        _require_non_empty(holder, "holder")

        return cls(
            salmon_id=salmon_id,
            vessel=vessel,
            timestamp=timestamp,
            location=location,
            holder=holder,
        )


@dataclass(frozen=True)
class ChangeSalmonHolderRequest:
    """changeSalmonHolder(id, newHolder)"""

    ARITY: ClassVar[int] = 2

    salmon_id: str
    new_holder: str

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "ChangeSalmonHolderRequest":
        _check_arity(args, cls.ARITY)
        salmon_id, new_holder = args
        _require_non_empty(new_holder, "holder")
        return cls(salmon_id=salmon_id, new_holder=new_holder)


@dataclass(frozen=True)
class QuerySalmonRequest:
    """querySalmon(id)"""

    ARITY: ClassVar[int] = 1

    salmon_id: str

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "QuerySalmonRequest":
        _check_arity(args, cls.ARITY)
        return cls(salmon_id=args[0])


__all__ = [
    "RecordSalmonRequest",
    "ChangeSalmonHolderRequest",
    "QuerySalmonRequest",
]
