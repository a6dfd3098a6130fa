"""
base.py
- Purpose: Declarative base shared by every table definition.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
