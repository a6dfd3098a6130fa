"""
client.py
- Purpose: Thin query layer over a SQLAlchemy Session for hand-written SQL.
- Statements use ``$n`` positional placeholders (see jobly.db.sql); they are
  rewritten to named binds and executed through ``text()``.
- Rows come back as plain dicts keyed by the column labels in the statement.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from sqlalchemy import text
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import TextClause

_PLACEHOLDER = re.compile(r"\$(\d+)")


def bind(sql: str, values: Sequence[Any] = ()) -> tuple[TextClause, dict[str, Any]]:
    """Turn ``$n`` placeholders into ``:pn`` binds with a matching params dict."""
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}

    def _named(match: re.Match) -> str:
        name = f"p{match.group(1)}"
        if name not in params:
            raise ValueError(f"placeholder ${match.group(1)} has no value ({len(params)} given)")
        return f":{name}"

    return text(_PLACEHOLDER.sub(_named, sql)), params


def fetch_all(db: Session, sql: str, values: Sequence[Any] = ()) -> list[dict[str, Any]]:
    clause, params = bind(sql, values)
    return [dict(row) for row in db.execute(clause, params).mappings().all()]


def fetch_one(db: Session, sql: str, values: Sequence[Any] = ()) -> dict[str, Any] | None:
    """First row of the result, or None when the statement matched nothing."""
    clause, params = bind(sql, values)
    row = db.execute(clause, params).mappings().first()
    return dict(row) if row is not None else None
