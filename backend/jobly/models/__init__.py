"""
models package
- Purpose: Import all ORM models so Base.metadata knows every table.
"""

from jobly.models.base import Base
from jobly.models.company import Company
from jobly.models.job import Job

__all__ = [
    "Base",
    "Company",
    "Job",
]
