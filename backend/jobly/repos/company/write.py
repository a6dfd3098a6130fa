"""
company/write.py
- Purpose: Write-side DB operations for Company.
- Design: No business logic. Only persistence and minimal mapping.
  Every method commits; None means no row matched.
"""

from sqlalchemy.orm import Session

from jobly.db.client import fetch_one
from jobly.db.sql import SqlFragment
from jobly.repos.company.columns import COMPANY_COLUMNS


class CompanyWriteRepo:
    def __init__(self, db: Session):
        self.db = db

    def insert(
        self,
        *,
        handle: str,
        name: str,
        description: str,
        num_employees: int | None = None,
        logo_url: str | None = None,
    ) -> dict:
        company = fetch_one(
            self.db,
            f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {COMPANY_COLUMNS}""",
            [handle, name, description, num_employees, logo_url],
        )
        self.db.commit()
        return company

    def update(self, handle: str, set_cols: SqlFragment) -> dict | None:
        company = fetch_one(
            self.db,
            f"""UPDATE companies
                SET {set_cols.sql}
                WHERE handle = {set_cols.placeholder()}
                RETURNING {COMPANY_COLUMNS}""",
            [*set_cols.values, handle],
        )
        self.db.commit()
        return company

    def delete(self, handle: str) -> dict | None:
        deleted = fetch_one(
            self.db,
            "DELETE FROM companies WHERE handle = $1 RETURNING handle",
            [handle],
        )
        self.db.commit()
        return deleted
