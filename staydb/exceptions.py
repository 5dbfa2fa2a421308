"""Typed errors raised by the service layer.

Relational constraints are enforced by the database. When a flush trips one,
SQLAlchemy raises a generic ``IntegrityError``; ``translate_integrity_error``
maps it to one of the classes below so callers can react without parsing
driver messages themselves.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE codes (class 23: integrity constraint violation)
_PG_UNIQUE_VIOLATION = "23505"
_PG_FOREIGN_KEY_VIOLATION = "23503"
_PG_CHECK_VIOLATION = "23514"
_PG_NOT_NULL_VIOLATION = "23502"


class StayDBError(Exception):
    """Base class for all StayDB errors."""


class NotFoundError(StayDBError):
    """A row looked up by key does not exist."""

    def __init__(self, entity: str, key: object) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}")


class IntegrityViolationError(StayDBError):
    """A write was rejected by a database constraint."""

    def __init__(self, message: str, constraint: str | None = None) -> None:
        self.constraint = constraint
        super().__init__(message)


class DuplicateError(IntegrityViolationError):
    """A uniqueness constraint was violated."""


class ReferenceViolationError(IntegrityViolationError):
    """A foreign key points at a missing row, or a referenced row cannot be deleted."""


class ConstraintViolationError(IntegrityViolationError):
    """A CHECK or NOT NULL constraint was violated."""


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def translate_integrity_error(exc: IntegrityError) -> IntegrityViolationError:
    """Classify an ``IntegrityError`` from PostgreSQL or SQLite."""
    message = str(exc.orig)
    lowered = message.lower()
    constraint = getattr(getattr(exc.orig, "__cause__", None), "constraint_name", None)
    code = _sqlstate(exc)

    if code == _PG_UNIQUE_VIOLATION or "unique constraint" in lowered:
        return DuplicateError(message, constraint)
    if code == _PG_FOREIGN_KEY_VIOLATION or "foreign key constraint" in lowered:
        return ReferenceViolationError(message, constraint)
    if (
        code in (_PG_CHECK_VIOLATION, _PG_NOT_NULL_VIOLATION)
        or "check constraint" in lowered
        or "not null" in lowered
        or "not-null" in lowered
    ):
        return ConstraintViolationError(message, constraint)
    return IntegrityViolationError(message, constraint)


async def flush_or_raise(session: AsyncSession) -> None:
    """Flush pending changes, re-raising constraint failures as typed errors.

    The session is left as-is; the caller owns the transaction and must roll it back.
    """
    try:
        await session.flush()
    except IntegrityError as exc:
        error = translate_integrity_error(exc)
        logger.warning("Write rejected (%s): %s", type(error).__name__, error)
        raise error from exc
