"""
db/errors.py
- Purpose: Tell which kind of constraint an IntegrityError came from, so
  services can pick the right AppError.
- PostgreSQL drivers expose the SQLSTATE (`pgcode` / `sqlstate`); SQLite only
  has the message text.
"""

from enum import Enum

from sqlalchemy.exc import IntegrityError


class Violation(str, Enum):
    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    CHECK = "check"
    NOT_NULL = "not_null"
    OTHER = "other"


_SQLSTATES = {
    "23505": Violation.UNIQUE,
    "23503": Violation.FOREIGN_KEY,
    "23514": Violation.CHECK,
    "23502": Violation.NOT_NULL,
}

_SQLITE_MESSAGES = (
    ("UNIQUE constraint failed", Violation.UNIQUE),
    ("FOREIGN KEY constraint failed", Violation.FOREIGN_KEY),
    ("CHECK constraint failed", Violation.CHECK),
    ("NOT NULL constraint failed", Violation.NOT_NULL),
)


def classify_integrity_error(exc: IntegrityError) -> Violation:
    orig = exc.orig
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if sqlstate in _SQLSTATES:
        return _SQLSTATES[sqlstate]

    message = str(orig)
    for marker, violation in _SQLITE_MESSAGES:
        if marker in message:
            return violation
    return Violation.OTHER
