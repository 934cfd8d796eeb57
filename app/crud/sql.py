"""
SQL fragment builders shared by the CRUD layer.

Both builders emit positional ``$N`` placeholders and return the values to
bind separately. Caller-supplied values never end up inside the SQL text.
"""

from typing import Any, List, Mapping, NamedTuple, Optional

from app.core.exceptions import InvalidInputError


class PartialUpdate(NamedTuple):
    """SET clause for an UPDATE plus the values it binds, in placeholder order"""
    set_cols: str
    values: List[Any]


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Optional[Mapping[str, str]] = None
) -> PartialUpdate:
    """
    Build the SET clause for a partial update.

    Args:
        data_to_update: Field name -> new value, only the fields being changed
        js_to_sql: Field name -> column name for fields whose column is named
            differently; fields missing here use their own name

    Returns:
        PartialUpdate where set_cols looks like '"first_name"=$1, "age"=$2'
        and values holds the matching values in the same order

    Raises:
        InvalidInputError: If data_to_update is empty

    Example:
        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        PartialUpdate(set_cols='"first_name"=$1, "age"=$2', values=['Aliya', 32])
    """
    keys = list(data_to_update)
    if not keys:
        raise InvalidInputError("No data")

    column_names = js_to_sql or {}
    cols = [
        f'"{column_names.get(key, key)}"=${idx}'
        for idx, key in enumerate(keys, start=1)
    ]

    return PartialUpdate(
        set_cols=", ".join(cols),
        values=[data_to_update[key] for key in keys]
    )


class WhereClause:
    """
    Accumulates WHERE predicates and their bound values.

    Templates mark the placeholder position with ``{}``; the placeholder
    number is assigned when the predicate is added, so numbering follows the
    order of ``add`` calls. ``offset`` shifts numbering when the clause is
    appended after other bound parameters.
    """

    def __init__(self, offset: int = 0) -> None:
        self._offset = offset
        self._predicates: List[str] = []
        self._params: List[Any] = []

    def add(self, template: str, value: Any) -> "WhereClause":
        self._params.append(value)
        placeholder = f"${self._offset + len(self._params)}"
        self._predicates.append(template.format(placeholder))
        return self

    def add_literal(self, predicate: str) -> "WhereClause":
        """Add a predicate that binds no value, e.g. 'equity > 0'."""
        self._predicates.append(predicate)
        return self

    def __bool__(self) -> bool:
        return bool(self._predicates)

    @property
    def sql(self) -> str:
        if not self._predicates:
            return ""
        return " WHERE " + " AND ".join(self._predicates)

    @property
    def params(self) -> List[Any]:
        return list(self._params)
