# src/cast_scheduler/models/types.py
"""Column types shared by the ORM models."""

from __future__ import annotations

from typing import Any

from sqlalchemy import BigInteger, Numeric
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator, TypeEngine

U64_MAX = 2**64 - 1

# Shift applied on dialects without an unsigned 64-bit column type.
SIGNED_OFFSET = 2**63


def _is_postgres(dialect: Dialect) -> bool:
    return dialect.name == "postgresql"


class UnsignedBigInteger(TypeDecorator[int]):
    """Unsigned 64-bit integer surfaced as a Python ``int``.

    PostgreSQL stores the value as NUMERIC(20, 0). Other dialects store
    ``value - 2**63`` in a signed BIGINT, which keeps the full range and the
    ordering, so comparisons and indexes on the column behave as expected.
    """

    impl = BigInteger
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if _is_postgres(dialect):
            return dialect.type_descriptor(Numeric(20, 0))
        return dialect.type_descriptor(BigInteger())

    def process_bind_param(self, value: int | None, dialect: Dialect) -> int | None:
        if value is None:
            return None
        value = int(value)
        if value < 0 or value > U64_MAX:
            raise ValueError(f"value {value} is outside the unsigned 64-bit range")
        if _is_postgres(dialect):
            return value
        return value - SIGNED_OFFSET

    def process_result_value(self, value: Any, dialect: Dialect) -> int | None:
        if value is None:
            return None
        if _is_postgres(dialect):
            return int(value)
        return int(value) + SIGNED_OFFSET
