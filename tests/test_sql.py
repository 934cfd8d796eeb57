"""
Tests for the SQL fragment builders.
"""

import re

import pytest

from app.core.exceptions import InvalidInputError
from app.crud.sql import WhereClause, sql_for_partial_update


class TestSqlForPartialUpdate:
    """Tests for sql_for_partial_update"""

    def test_maps_columns_and_orders_values(self):
        result = sql_for_partial_update(
            {"firstname": "testy", "lastname": "testerson", "age": 23},
            {"firstname": "first_name", "lastname": "last_name"}
        )

        assert result.set_cols == '"first_name"=$1, "last_name"=$2, "age"=$3'
        assert result.values == ["testy", "testerson", 23]

    def test_unpacks_as_tuple(self):
        set_cols, values = sql_for_partial_update({"title": "x"})

        assert set_cols == '"title"=$1'
        assert values == ["x"]

    def test_column_mapping_is_optional(self):
        result = sql_for_partial_update({"title": "New", "salary": 5})

        assert result.set_cols == '"title"=$1, "salary"=$2'
        assert result.values == ["New", 5]

    def test_one_fragment_per_field_with_increasing_index(self):
        data = {f"field{i}": i * 10 for i in range(7)}
        result = sql_for_partial_update(data, {})

        fragments = result.set_cols.split(", ")
        assert len(fragments) == len(data)
        indexes = [int(re.search(r"\$(\d+)$", frag).group(1)) for frag in fragments]
        assert indexes == list(range(1, len(data) + 1))
        assert result.values == list(data.values())

    def test_none_values_are_kept(self):
        result = sql_for_partial_update({"salary": None})

        assert result.set_cols == '"salary"=$1'
        assert result.values == [None]

    @pytest.mark.parametrize("js_to_sql", [None, {}, {"firstname": "first_name"}])
    def test_empty_data_is_invalid(self, js_to_sql):
        with pytest.raises(InvalidInputError):
            sql_for_partial_update({}, js_to_sql)


class TestWhereClause:
    """Tests for WhereClause"""

    def test_empty_clause_renders_nothing(self):
        where = WhereClause()

        assert not where
        assert where.sql == ""
        assert where.params == []

    def test_placeholders_follow_add_order(self):
        where = WhereClause()
        where.add("lower(title) LIKE lower({})", "%dev%")
        where.add("salary >= {}", 1000)

        assert where.sql == " WHERE lower(title) LIKE lower($1) AND salary >= $2"
        assert where.params == ["%dev%", 1000]

    def test_literal_predicates_bind_nothing(self):
        where = WhereClause()
        where.add_literal("equity > 0")
        where.add("salary >= {}", 1)

        assert where.sql == " WHERE equity > 0 AND salary >= $1"
        assert where.params == [1]

    def test_offset_shifts_numbering(self):
        where = WhereClause(offset=2).add("id = {}", 7)

        assert where.sql == " WHERE id = $3"
        assert where.params == [7]

    def test_values_never_enter_sql_text(self):
        hostile = "'; DROP TABLE jobs; --"
        where = WhereClause().add("title = {}", hostile)

        assert hostile not in where.sql
        assert where.params == [hostile]
