"""
company/read.py
- Purpose: Read-side DB operations for Company.
- Design: Keep query logic here for reuse and testability.
"""

from sqlalchemy.orm import Session

from jobly.db.client import fetch_all, fetch_one
from jobly.db.sql import SqlFragment
from jobly.repos.company.columns import COMPANY_COLUMNS


class CompanyReadRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_by_handle(self, handle: str) -> dict | None:
        return fetch_one(
            self.db,
            f"""SELECT {COMPANY_COLUMNS}
                FROM companies
                WHERE handle = $1""",
            [handle],
        )

    def exists(self, handle: str) -> bool:
        row = fetch_one(self.db, "SELECT handle FROM companies WHERE handle = $1", [handle])
        return row is not None

    def find_all(self, where: SqlFragment | None = None) -> list[dict]:
        where = where or SqlFragment()
        return fetch_all(
            self.db,
            f"""SELECT {COMPANY_COLUMNS}
                FROM companies
                {where.sql}
                ORDER BY name""",
            where.values,
        )
