"""
company/columns.py
- Purpose: Fixed SQL vocabulary for the companies table.
- These tables are the only source of identifiers in company SQL.
"""

from jobly.db.sql import FilterSpec, contains

COMPANY_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'

# API field -> column, for fields whose names differ
COMPANY_FIELD_TO_COLUMN = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

COMPANY_MUTABLE_FIELDS = frozenset({"name", "description", "numEmployees", "logoUrl"})

# Order here is the order of clauses in the generated WHERE
COMPANY_FILTERS = (
    FilterSpec("name", "lower(name) LIKE lower({})", contains),
    FilterSpec("minEmployees", "num_employees >= {}"),
    FilterSpec("maxEmployees", "num_employees <= {}"),
)
