"""
job.py
- Purpose: A job posting owned by a company.
"""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column

from jobly.models.base import Base


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity >= 0 AND equity <= 1", name="ck_jobs_equity"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    salary: Mapped[int | None] = mapped_column(Integer, nullable=True)
    equity: Mapped[Decimal | None] = mapped_column(Numeric, nullable=True)
    company_handle: Mapped[str] = mapped_column(
        String(25), ForeignKey("companies.handle", ondelete="CASCADE"), nullable=False
    )

    company: Mapped["Company"] = relationship(back_populates="jobs")
