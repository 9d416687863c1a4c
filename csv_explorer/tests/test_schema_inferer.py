import logging

import pytest

from csv_explorer.inference.schema_inferer import SchemaInferer
from csv_explorer.inference.csv_core import (
    ColumnDefinition,
    ColumnSchema,
    ColumnType,
    InvalidInputError,
    TableSchema,
)
from csv_explorer.inference.settings import AnalyzerSettings


@pytest.fixture
def inferer():
    return SchemaInferer()


@pytest.mark.parametrize(
    "text,expected_type,expected_size",
    [
        ("", ColumnType.EMPTY, 0),
        ("   ", ColumnType.EMPTY, 0),
        ("42", ColumnType.INTEGER, 2),
        ("-17", ColumnType.INTEGER, 3),
        ("+5", ColumnType.INTEGER, 2),
        ("0", ColumnType.STRING, 1),
        ("0.5", ColumnType.REAL, 3),
        (" 12 ", ColumnType.INTEGER, 4),
        ("007", ColumnType.STRING, 3),
        ("-007", ColumnType.INTEGER, 4),
        (" 012", ColumnType.INTEGER, 4),
        ("123456789012", ColumnType.INTEGER, 12),
        ("1234567890123", ColumnType.STRING, 13),
        ("3.14", ColumnType.REAL, 4),
        ("-0.5", ColumnType.REAL, 4),
        (".5", ColumnType.REAL, 2),
        ("1e10", ColumnType.REAL, 4),
        ("6.02E-23", ColumnType.REAL, 8),
        ("99999999999999999999", ColumnType.REAL, 20),
        ("abc", ColumnType.STRING, 3),
        ("1,5", ColumnType.STRING, 3),
        ("1_000", ColumnType.STRING, 5),
        ("nan", ColumnType.STRING, 3),
        ("inf", ColumnType.STRING, 3),
        ("12abc", ColumnType.STRING, 5),
    ],
)
def test_classify(inferer, text, expected_type, expected_size):
    result = inferer.classify(text)

    assert result.data_type == expected_type
    assert result.size == expected_size
    assert result.nullable == (expected_type == ColumnType.EMPTY)


def test_leading_zeros_allowed():
    inferer = SchemaInferer(AnalyzerSettings(allow_leading_zeros=True))

    assert inferer.classify("007").data_type == ColumnType.INTEGER
    assert inferer.classify("0").data_type == ColumnType.INTEGER


@pytest.mark.parametrize(
    "text,expected_type",
    [
        ("9223372036854775807", ColumnType.INTEGER),
        ("-9223372036854775808", ColumnType.INTEGER),
        ("9223372036854775808", ColumnType.REAL),
        ("-9223372036854775809", ColumnType.REAL),
    ],
)
def test_int64_range(text, expected_type):
    inferer = SchemaInferer(AnalyzerSettings(max_integer_length=30))

    assert inferer.classify(text).data_type == expected_type


def test_short_max_integer_length():
    inferer = SchemaInferer(AnalyzerSettings(max_integer_length=3))

    assert inferer.classify("123").data_type == ColumnType.INTEGER
    assert inferer.classify("1234").data_type == ColumnType.STRING


def test_header_detected(inferer):
    rows = [["Name", "Age"], ["Alice", "30"], ["Bob", "25"]]
    schema = inferer.infer(rows)

    assert schema.has_header is True
    assert schema.column_types == [ColumnType.STRING, ColumnType.INTEGER]
    assert schema.header_names == ("Name", "Age")
    assert schema.columns[0].size == 5
    assert schema.columns[1].size == 2


def test_no_header_detected(inferer):
    rows = [["1", "2.5"], ["3", "4.1"]]
    schema = inferer.infer(rows)

    assert schema.has_header is False
    assert schema.column_types == [ColumnType.INTEGER, ColumnType.REAL]
    assert schema.header_names == ()


def test_all_string_table_has_no_header(inferer):
    rows = [["a", "bb"], ["ccc", "d"]]
    schema = inferer.infer(rows)

    assert schema.has_header is False
    assert schema.column_types == [ColumnType.STRING, ColumnType.STRING]
    assert [c.size for c in schema.columns] == [3, 2]


def test_header_hint_true_skips_first_row(inferer):
    rows = [["1", "2"], ["3", "4"]]
    schema = inferer.infer(rows, has_header=True)

    assert schema.has_header is True
    assert schema.column_types == [ColumnType.INTEGER, ColumnType.INTEGER]
    assert schema.header_names == ("1", "2")


def test_header_hint_false_folds_first_row(inferer):
    rows = [["Name", "Age"], ["Alice", "30"]]
    schema = inferer.infer(rows, has_header=False)

    assert schema.has_header is False
    assert schema.column_types == [ColumnType.STRING, ColumnType.STRING]
    assert schema.columns[1].size == 3


def test_single_row(inferer):
    schema = inferer.infer([["x", "1"]])

    assert schema.has_header is False
    assert schema.column_types == [ColumnType.STRING, ColumnType.INTEGER]


def test_nullable_columns(inferer):
    rows = [["id", "note"], ["1", ""], ["2", "x"]]
    schema = inferer.infer(rows)

    assert schema.has_header is True
    assert schema.columns[0] == ColumnDefinition(ColumnType.INTEGER, 1, False)
    assert schema.columns[1] == ColumnDefinition(ColumnType.STRING, 1, True)


def test_all_empty_column(inferer):
    rows = [["a", ""], ["b", " "]]
    schema = inferer.infer(rows)

    assert schema.columns[1] == ColumnDefinition(ColumnType.EMPTY, 0, True)


def test_header_row_wider_than_data(inferer):
    rows = [["1", "2", "3"], ["4", "5"]]
    schema = inferer.infer(rows)

    assert schema.has_header is False
    assert len(schema.columns) == 3


def test_empty_input_fails(inferer):
    with pytest.raises(InvalidInputError):
        inferer.infer([])

    with pytest.raises(ValueError):
        inferer.infer(iter([]))


def test_ragged_rows_are_reported(inferer, caplog):
    rows = [["a", "b"], ["1", "2", "3"], ["4"]]

    with caplog.at_level(logging.WARNING):
        schema = inferer.infer(rows)

    assert schema.is_ragged
    assert schema.row_lengths == {2: 1, 3: 1, 1: 1}
    assert len(schema.columns) == 3
    assert "Column count mismatch" in caplog.text


def test_even_rows_are_not_ragged(inferer):
    schema = inferer.infer([["a", "b"], ["1", "2"]])

    assert not schema.is_ragged
    assert schema.row_lengths == {2: 2}


def test_infer_is_idempotent(inferer):
    rows = [["Name", "Score"], ["Ann", "1.5"], ["Bob", ""], ["Cy", "7"]]

    first = inferer.infer(rows)
    second = inferer.infer(rows)

    assert first == second
    assert isinstance(first, TableSchema)


def test_infer_accepts_generator(inferer):
    rows = (row for row in [["Name", "Age"], ["Alice", "30"]])

    assert inferer.infer(rows).has_header is True


@pytest.mark.parametrize(
    "values",
    [
        ["1", "2", "3"],
        ["1", "2.5", ""],
        ["", "x", "10"],
        ["007", "8", "9.0"],
        ["  ", "", "   "],
        ["long text value", "1", "2.75"],
    ],
)
def test_widening_is_monotonic(inferer, values):
    classified = [inferer.classify(v) for v in values]
    column = classified[0].copy()
    for item in classified[1:]:
        column.update(item)

    assert all(column.data_type >= c.data_type for c in classified)
    assert column.size == max(c.size for c in classified)
    assert column.nullable == any(not v.strip() for v in values)
