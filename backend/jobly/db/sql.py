"""SQL fragment builders.

Helpers that assemble the dynamic parts of a statement (the SET list of a
partial update, the WHERE clause of a filtered search) together with their
positional parameters. Placeholders are written as ``$1, $2, ...`` and the
database client binds them; see ``jobly.db.client``.

Identifiers never come from request input: column names are taken from the
fixed translation tables and filter definitions each repo declares at module
level.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from jobly.core import ErrorReason
from jobly.core.errors import bad_request


@dataclass(frozen=True)
class SqlFragment:
    """A piece of SQL plus the values for its ``$n`` placeholders, in order."""

    sql: str = ""
    values: list[Any] = field(default_factory=list)

    def placeholder(self, offset: int = 1) -> str:
        """Placeholder for a parameter appended after this fragment's values."""
        return f"${len(self.values) + offset}"

    def __bool__(self) -> bool:
        return bool(self.sql)


@dataclass(frozen=True)
class FilterSpec:
    """One recognized search filter.

    ``predicate`` is a SQL expression with ``{}`` where the placeholder goes.
    A predicate without ``{}`` takes no parameter and is applied only when the
    filter value is truthy (flags such as ``hasEquity``).
    """

    name: str
    predicate: str
    transform: Callable[[Any], Any] | None = None

    @property
    def takes_param(self) -> bool:
        return "{}" in self.predicate


def contains(value: Any) -> str:
    """Wrap a value for a substring LIKE match."""
    return f"%{value}%"


def sql_for_partial_update(
    data: Mapping[str, Any] | Iterable[tuple[str, Any]],
    field_to_column: Mapping[str, str],
    *,
    allowed: Collection[str] | None = None,
) -> SqlFragment:
    """Build the SET list of an UPDATE from the fields being changed.

    Args:
        data: field -> new value, as a mapping or ordered (field, value) pairs.
        field_to_column: translation of field names to column names. Fields
            missing from it are used as the column name unchanged.
        allowed: optional set of updatable fields; anything else is rejected.

    Returns:
        SqlFragment whose sql looks like ``"first_name"=$1, "age"=$2`` and
        whose values are the new values in the same order.

    Raises:
        AppError (400) when there is nothing to update or a field is not
        updatable.

    Examples:
        >>> frag = sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        >>> frag.sql
        '"first_name"=$1, "age"=$2'
        >>> frag.values
        ['Aliya', 32]
    """
    items = list(data.items()) if isinstance(data, Mapping) else list(data)
    if not items:
        raise bad_request("No data", reason=ErrorReason.NO_DATA)

    if allowed is not None:
        rejected = [name for name, _ in items if name not in allowed]
        if rejected:
            raise bad_request(
                f"Fields not updatable: {', '.join(rejected)}",
                details={"fields": rejected},
            )

    cols = [
        f'"{field_to_column.get(name, name)}"=${idx}'
        for idx, (name, _) in enumerate(items, start=1)
    ]
    return SqlFragment(sql=", ".join(cols), values=[value for _, value in items])


def sql_for_filters(
    filters: Mapping[str, Any] | None,
    specs: Sequence[FilterSpec],
) -> SqlFragment:
    """Build a WHERE clause from the filters that are present.

    Clauses follow the order of ``specs``, not of ``filters``, and are joined
    with AND. Filters whose value is None are treated as absent; names not in
    ``specs`` are ignored (the HTTP layer rejects them earlier).

    Returns an empty fragment when no filter applies.

    Examples:
        >>> specs = [FilterSpec("name", "lower(name) LIKE lower({})", contains)]
        >>> sql_for_filters({"name": "net"}, specs)
        SqlFragment(sql='WHERE lower(name) LIKE lower($1)', values=['%net%'])
    """
    if not filters:
        return SqlFragment()

    clauses: list[str] = []
    values: list[Any] = []

    for spec in specs:
        value = filters.get(spec.name)
        if value is None:
            continue

        if not spec.takes_param:
            if value:
                clauses.append(spec.predicate)
            continue

        values.append(spec.transform(value) if spec.transform else value)
        clauses.append(spec.predicate.format(f"${len(values)}"))

    if not clauses:
        return SqlFragment()
    return SqlFragment(sql="WHERE " + " AND ".join(clauses), values=values)
