"""
job/columns.py
- Purpose: Fixed SQL vocabulary for the jobs table, plus equity formatting.
"""

from decimal import Decimal
from typing import Any

from jobly.db.sql import FilterSpec, contains

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

JOB_FIELD_TO_COLUMN = {
    "companyHandle": "company_handle",
}

# id and companyHandle are fixed at creation
JOB_MUTABLE_FIELDS = frozenset({"title", "salary", "equity"})

JOB_FILTERS = (
    FilterSpec("title", "lower(title) LIKE lower({})", contains),
    FilterSpec("minSalary", "salary >= {}"),
    FilterSpec("hasEquity", "equity > 0"),
)


def equity_to_str(value: Any) -> str | None:
    """Render equity as a plain decimal string ("0.0004", never "4E-4")."""
    if value is None:
        return None
    return format(Decimal(str(value)), "f")


def to_job(row: dict | None) -> dict | None:
    # NUMERIC comes back as Decimal (postgres) or float (sqlite)
    if row is not None:
        row["equity"] = equity_to_str(row.get("equity"))
    return row
