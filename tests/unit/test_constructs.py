"""Tests for the construct renderers."""

import re
from decimal import Decimal

import numpy as np
import pytest

from querygen.config.constants import COMPARISON_OPERATORS, Dialect, TokenType
from querygen.constructs import get_renderer, registered_token_types
from querygen.constructs.common import format_literal, get_bound, get_count
from querygen.data.table import Table
from querygen.data.types import DataType
from querygen.errors import (
    DisabledKeywordError,
    InvalidArgumentError,
    NoEligibleColumnError,
    UnsupportedConstructError,
)
from querygen.tokens.generator import TokenGenerator
from querygen.tokens.models import TokenInfo


def _render(table, catalog, token_type, rng, **params):
    tokens = TokenGenerator(table, catalog, rng).generate_token(TokenInfo(token_type, params))
    return {dialect: token.text for dialect, token in tokens.items()}


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestRegistry:
    def test_every_token_type_registered(self):
        assert registered_token_types() == frozenset(TokenType)

    def test_unknown_construct(self):
        with pytest.raises(UnsupportedConstructError):
            get_renderer("lateral_join")


# ---------------------------------------------------------------------------
# Literals and params
# ---------------------------------------------------------------------------


class TestFormatLiteral:
    def test_boolean(self):
        assert format_literal(True, DataType.BOOL) == "TRUE"
        assert format_literal(False, DataType.BOOL) == "FALSE"

    def test_integer(self):
        assert format_literal(-42, DataType.BIG_INT) == "-42"

    def test_string_quoting(self):
        assert format_literal("it's", DataType.STR) == "'it''s'"

    def test_temporal(self):
        assert format_literal("1999-01-01", DataType.DATE) == "'1999-01-01'"

    def test_decimal_has_no_exponent(self):
        assert "E" not in format_literal(Decimal("1.5E+20"), DataType.NUMERIC)

    def test_invalid_count(self):
        with pytest.raises(InvalidArgumentError):
            get_count(TokenInfo(TokenType.GROUP_EXP, {"count": 0}))

    def test_invalid_bound(self):
        with pytest.raises(InvalidArgumentError):
            get_bound(TokenInfo(TokenType.COUNT, {"bound": -1}))


# ---------------------------------------------------------------------------
# DDL
# ---------------------------------------------------------------------------


class TestDDLConstructs:
    def test_table_name(self, orders_table, catalog, rng):
        texts = _render(orders_table, catalog, TokenType.TABLE_NAME, rng)
        assert texts == {Dialect.POSTGRES: "orders", Dialect.BIGQUERY: "orders"}

    def test_table_schema(self, orders_table, catalog, rng):
        texts = _render(orders_table, catalog, TokenType.TABLE_SCHEMA, rng)
        assert texts[Dialect.POSTGRES] == "(id SERIAL, total NUMERIC, active BOOLEAN)"
        assert texts[Dialect.BIGQUERY] == "(id INT64, total BIGNUMERIC, active BOOL)"

    def test_schema_of_empty_table(self, catalog, rng):
        with pytest.raises(NoEligibleColumnError):
            _render(Table("empty"), catalog, TokenType.TABLE_SCHEMA, rng)

    def test_partition_on_timestamp(self, catalog, rng):
        table = Table("events")
        table.add_column("created_at", DataType.TIMESTAMP)
        table.add_column("label", DataType.STR)

        texts = _render(table, catalog, TokenType.PARTITION_EXP, rng)

        assert texts[Dialect.POSTGRES] == "RANGE (created_at)"
        assert texts[Dialect.BIGQUERY] == "DATE(created_at)"

    def test_partition_on_date(self, catalog, rng):
        table = Table("events")
        table.add_column("day", DataType.DATE)
        texts = _render(table, catalog, TokenType.PARTITION_EXP, rng)
        assert texts[Dialect.BIGQUERY] == "day"

    def test_partition_requires_date_column(self, orders_table, catalog, rng):
        with pytest.raises(NoEligibleColumnError):
            _render(orders_table, catalog, TokenType.PARTITION_EXP, rng)

    def test_cluster_skips_unclusterable_types(self, catalog, rng):
        table = Table("metrics")
        table.add_column("ratio", DataType.REAL)
        table.add_column("region", DataType.STR)
        for _ in range(20):
            texts = _render(table, catalog, TokenType.CLUSTER_EXP, rng)
            assert texts[Dialect.POSTGRES] == texts[Dialect.BIGQUERY] == "region"


# ---------------------------------------------------------------------------
# DML
# ---------------------------------------------------------------------------


class TestDMLConstructs:
    def test_insert_exp_has_one_literal_per_column(self, orders_table, catalog, rng):
        text = _render(orders_table, catalog, TokenType.INSERT_EXP, rng)[Dialect.POSTGRES]
        assert text.startswith("(") and text.endswith(")")
        assert len(text[1:-1].split(", ")) == 3
        assert text.endswith("TRUE)") or text.endswith("FALSE)")

    def test_update_item(self, orders_table, catalog, rng):
        text = _render(orders_table, catalog, TokenType.UPDATE_ITEM, rng, types=["bool"])
        assert re.fullmatch(r"active = (TRUE|FALSE)", text[Dialect.POSTGRES])

    def test_boolean_condition_uses_equality_only(self, orders_table, catalog):
        rng = np.random.default_rng(0)
        operators = set()
        for _ in range(200):
            text = _render(orders_table, catalog, TokenType.CONDITION, rng, types=["bool"])
            column, operator, literal = text[Dialect.POSTGRES].split(" ")
            assert column == "active"
            assert literal in ("TRUE", "FALSE")
            operators.add(operator)
        assert operators == {"=", "<>"}

    def test_numeric_condition_operators(self, orders_table, catalog):
        rng = np.random.default_rng(0)
        operators = set()
        for _ in range(300):
            text = _render(orders_table, catalog, TokenType.CONDITION, rng, types=["serial"])
            operators.add(text[Dialect.POSTGRES].split(" ")[1])
        assert operators == set(COMPARISON_OPERATORS)

    def test_condition_without_eligible_column(self, orders_table, catalog, rng):
        with pytest.raises(NoEligibleColumnError):
            _render(orders_table, catalog, TokenType.CONDITION, rng, types=["date"])


# ---------------------------------------------------------------------------
# DQL
# ---------------------------------------------------------------------------


class TestDQLConstructs:
    def test_select_star(self, orders_table, catalog, rng):
        texts = _render(orders_table, catalog, TokenType.SELECT_EXP, rng, count=0)
        assert texts[Dialect.POSTGRES] == texts[Dialect.BIGQUERY] == "*"

    def test_select_columns(self, orders_table, catalog, rng):
        text = _render(orders_table, catalog, TokenType.SELECT_EXP, rng, count=2)[Dialect.POSTGRES]
        names = text.split(", ")
        assert len(set(names)) == 2
        assert set(names) <= {"id", "total", "active"}

    def test_from_item(self, orders_table, catalog, rng):
        assert _render(orders_table, catalog, TokenType.FROM_ITEM, rng)[Dialect.BIGQUERY] == "orders"

    def test_group_exp_too_many_columns(self, orders_table, catalog, rng):
        with pytest.raises(NoEligibleColumnError):
            _render(orders_table, catalog, TokenType.GROUP_EXP, rng, count=4)

    def test_window_exp(self, orders_table, catalog, rng):
        text = _render(orders_table, catalog, TokenType.WINDOW_EXP, rng)[Dialect.POSTGRES]
        assert re.fullmatch(r"\(PARTITION BY \w+ ORDER BY \w+\)", text)

    def test_window_needs_enabled_keywords(self, orders_table, catalog_factory, rng):
        catalog = catalog_factory(
            {"DQL_PARTITION_BY": ("PARTITION BY", "PARTITION BY"), "DQL_ORDER_BY": ("ORDER BY", "ORDER BY")},
            enabled={"DQL_ORDER_BY"},
        )
        with pytest.raises(DisabledKeywordError):
            _render(orders_table, catalog, TokenType.WINDOW_EXP, rng)

    def test_asc_desc_only_enabled_directions(self, orders_table, catalog_factory):
        catalog = catalog_factory(
            {"DQL_ASC": ("ASC", "ASC"), "DQL_DESC": ("DESC", "DESC")},
            enabled={"DQL_ASC"},
        )
        rng = np.random.default_rng(3)
        for _ in range(50):
            assert _render(orders_table, catalog, TokenType.ASC_DESC, rng)[Dialect.POSTGRES] == "ASC"

    def test_asc_desc_none_enabled(self, orders_table, catalog_factory, rng):
        catalog = catalog_factory({"DQL_ASC": ("ASC", "ASC")}, enabled=set())
        with pytest.raises(DisabledKeywordError):
            _render(orders_table, catalog, TokenType.ASC_DESC, rng)

    @pytest.mark.parametrize("token_type", [TokenType.COUNT, TokenType.SKIP_ROWS])
    def test_bounded_integers(self, orders_table, catalog, token_type):
        rng = np.random.default_rng(8)
        values = {
            int(_render(orders_table, catalog, token_type, rng, bound=5)[Dialect.BIGQUERY])
            for _ in range(300)
        }
        assert values == {0, 1, 2, 3, 4, 5}

    def test_default_bound(self, orders_table, catalog, rng):
        for _ in range(100):
            value = int(_render(orders_table, catalog, TokenType.COUNT, rng)[Dialect.POSTGRES])
            assert 0 <= value <= 100
