"""
job/write.py
- Purpose: Write-side DB operations for Job.
- Design: No business logic. Equity is bound as a decimal string so every
  driver stores it exactly.
"""

from sqlalchemy.orm import Session

from jobly.db.client import fetch_one
from jobly.db.sql import SqlFragment
from jobly.repos.job.columns import JOB_COLUMNS, equity_to_str, to_job


class JobWriteRepo:
    def __init__(self, db: Session):
        self.db = db

    def insert(
        self,
        *,
        title: str,
        company_handle: str,
        salary: int | None = None,
        equity=None,
    ) -> dict:
        job = fetch_one(
            self.db,
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS}""",
            [title, salary, equity_to_str(equity), company_handle],
        )
        self.db.commit()
        return to_job(job)

    def update(self, job_id: int, set_cols: SqlFragment) -> dict | None:
        job = fetch_one(
            self.db,
            f"""UPDATE jobs
                SET {set_cols.sql}
                WHERE id = {set_cols.placeholder()}
                RETURNING {JOB_COLUMNS}""",
            [*set_cols.values, job_id],
        )
        self.db.commit()
        return to_job(job)

    def delete(self, job_id: int) -> dict | None:
        deleted = fetch_one(self.db, "DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
        self.db.commit()
        return deleted
