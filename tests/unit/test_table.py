"""Tests for the table model and random table generation."""

import numpy as np
import pytest

from querygen.data.table import Column, Table, generate_random_table
from querygen.data.types import DataType
from querygen.errors import InvalidArgumentError, NoEligibleColumnError


class TestTableSchema:
    def test_add_column_keeps_order(self, orders_table):
        assert orders_table.column_names == ["id", "total", "active"]
        assert orders_table.schema[2] == Column("active", DataType.BOOL)

    def test_duplicate_column_rejected(self, orders_table):
        with pytest.raises(InvalidArgumentError):
            orders_table.add_column("id", DataType.INTEGER)

    def test_negative_row_count_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Table("t", row_count=-1)

    def test_row_count_setter_validates(self, orders_table):
        orders_table.row_count = 10
        assert orders_table.row_count == 10
        with pytest.raises(InvalidArgumentError):
            orders_table.row_count = -5

    def test_get_column(self, orders_table):
        assert orders_table.get_column("total").data_type is DataType.NUMERIC
        assert orders_table.get_column("missing") is None

    def test_columns_of_types(self, orders_table):
        columns = orders_table.columns_of_types([DataType.BOOL, DataType.SERIAL])
        assert [col.name for col in columns] == ["id", "active"]


class TestRandomColumns:
    def test_random_column_of_type(self, orders_table, rng):
        for _ in range(20):
            assert orders_table.get_random_column(DataType.BOOL, rng) == "active"

    def test_random_column_any_type(self, orders_table, rng):
        names = {orders_table.get_random_column(rng=rng) for _ in range(200)}
        assert names == {"id", "total", "active"}

    def test_no_column_of_type(self, orders_table, rng):
        with pytest.raises(NoEligibleColumnError):
            orders_table.get_random_column(DataType.DATE, rng)

    def test_random_columns_are_distinct(self, orders_table, rng):
        columns = orders_table.get_random_columns(None, 3, rng)
        assert len({col.name for col in columns}) == 3

    def test_too_few_eligible_columns(self, orders_table, rng):
        with pytest.raises(NoEligibleColumnError):
            orders_table.get_random_columns(None, 4, rng)

    def test_empty_table(self, rng):
        with pytest.raises(NoEligibleColumnError):
            Table("empty").get_random_column(rng=rng)


class TestGenerateData:
    def test_orders_example(self, orders_table, rng):
        data = orders_table.generate_data(rng=rng)

        assert len(data) == 3
        assert all(len(column) == 3 for column in data)
        ids, totals, flags = data
        assert all(v >= 0 for v in ids)
        assert all(DataType.NUMERIC.low <= v <= DataType.NUMERIC.high for v in totals)
        assert all(isinstance(v, bool) for v in flags)

    def test_explicit_row_count(self, orders_table, rng):
        data = orders_table.generate_data(row_count=7, rng=rng)
        assert [len(column) for column in data] == [7, 7, 7]

    def test_does_not_mutate_schema(self, orders_table, rng):
        before = orders_table.schema
        orders_table.generate_data(rng=rng)
        assert orders_table.schema == before

    def test_fresh_values_each_call(self, orders_table, rng):
        first = orders_table.generate_data(rng=rng)
        second = orders_table.generate_data(rng=rng)
        assert first[1] != second[1]

    def test_generate_row(self, orders_table, rng):
        row = orders_table.generate_row(rng)
        assert len(row) == 3
        assert isinstance(row[2], bool)


class TestGenerateRandomTable:
    def test_shape(self, rng):
        table = generate_random_table(6, row_count=4, rng=rng)
        assert len(table.schema) == 6
        assert table.row_count == 4
        assert len(set(table.column_names)) == 6

    def test_names_are_identifier_safe(self, rng):
        table = generate_random_table(10, rng=rng, name_length=12)
        for name in [table.name, *table.column_names]:
            assert len(name) == 12
            assert not name[0].isdigit()

    def test_explicit_name(self, rng):
        assert generate_random_table(1, rng=rng, name="t1").name == "t1"

    def test_seeded(self):
        first = generate_random_table(5, rng=np.random.default_rng(42))
        second = generate_random_table(5, rng=np.random.default_rng(42))
        assert first.name == second.name
        assert first.schema == second.schema

    def test_non_positive_column_count(self, rng):
        with pytest.raises(InvalidArgumentError):
            generate_random_table(0, rng=rng)
