"""
job/read.py
- Purpose: Read-side DB operations for Job.
"""

from sqlalchemy.orm import Session

from jobly.db.client import fetch_all, fetch_one
from jobly.db.sql import SqlFragment
from jobly.repos.job.columns import JOB_COLUMNS, to_job


class JobReadRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, job_id: int) -> dict | None:
        return to_job(
            fetch_one(
                self.db,
                f"""SELECT {JOB_COLUMNS}
                    FROM jobs
                    WHERE id = $1""",
                [job_id],
            )
        )

    def find_all(self, where: SqlFragment | None = None) -> list[dict]:
        where = where or SqlFragment()
        rows = fetch_all(
            self.db,
            f"""SELECT {JOB_COLUMNS}
                FROM jobs
                {where.sql}
                ORDER BY title, id""",
            where.values,
        )
        return [to_job(row) for row in rows]

