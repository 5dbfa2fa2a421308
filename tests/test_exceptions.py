"""Tests for IntegrityError classification (no database)."""

import pytest
from sqlalchemy.exc import IntegrityError

from staydb.exceptions import (
    ConstraintViolationError,
    DuplicateError,
    IntegrityViolationError,
    NotFoundError,
    ReferenceViolationError,
    translate_integrity_error,
)


class _DriverError(Exception):
    """Stand-in for a DBAPI exception, optionally carrying a SQLSTATE."""

    def __init__(self, message: str, sqlstate: str | None = None) -> None:
        super().__init__(message)
        if sqlstate is not None:
            self.sqlstate = sqlstate


def _integrity_error(message: str, sqlstate: str | None = None) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, _DriverError(message, sqlstate))


class TestSQLiteMessages:
    """SQLite reports the violated constraint kind only in the message text."""

    @pytest.mark.parametrize(
        "message, expected",
        [
            ("UNIQUE constraint failed: states.country_id, states.state_name", DuplicateError),
            ("FOREIGN KEY constraint failed", ReferenceViolationError),
            ("CHECK constraint failed: ck_amenities_amenity_category_valid", ConstraintViolationError),
            ("NOT NULL constraint failed: properties.name", ConstraintViolationError),
        ],
    )
    def test_classification(self, message: str, expected: type) -> None:
        error = translate_integrity_error(_integrity_error(message))
        assert type(error) is expected
        assert message in str(error)


class TestPostgresSQLState:
    """PostgreSQL errors are classified by SQLSTATE before the message is consulted."""

    @pytest.mark.parametrize(
        "sqlstate, expected",
        [
            ("23505", DuplicateError),
            ("23503", ReferenceViolationError),
            ("23514", ConstraintViolationError),
            ("23502", ConstraintViolationError),
        ],
    )
    def test_classification(self, sqlstate: str, expected: type) -> None:
        error = translate_integrity_error(_integrity_error("constraint violated", sqlstate))
        assert type(error) is expected

    def test_postgres_message_without_code(self) -> None:
        message = 'duplicate key value violates unique constraint "uq_countries_country_code"'
        assert isinstance(translate_integrity_error(_integrity_error(message)), DuplicateError)


class TestFallbacks:
    def test_unknown_violation_is_generic(self) -> None:
        error = translate_integrity_error(_integrity_error("exclusion constraint violated", "23P01"))
        assert type(error) is IntegrityViolationError

    def test_all_violations_share_a_base(self) -> None:
        for cls in (DuplicateError, ReferenceViolationError, ConstraintViolationError):
            assert issubclass(cls, IntegrityViolationError)

    def test_not_found_message(self) -> None:
        error = NotFoundError("Amenity", "Sauna")
        assert error.entity == "Amenity"
        assert error.key == "Sauna"
        assert str(error) == "Amenity not found: Sauna"
