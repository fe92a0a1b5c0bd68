import pytest
from unittest.mock import patch

import display
from display import EMPTY_SET, format_table, render_result
from result import QueryResult


@pytest.fixture
def employees():
    return QueryResult(["id", "name"], [(1, "Alice"), (2, "Bob")])


def test_format_table(employees):
    lines = [line for _, line in format_table(employees)]
    assert lines == [
        "+----+-------+",
        "| id |  name |",
        "+----+-------+",
        "| 1  | Alice |",
        "| 2  | Bob   |",
        "+----+-------+",
        "(2 rows in set)",
    ]

def test_format_table_styles(employees):
    styles = [style for style, _ in format_table(employees)]
    assert styles[1] == "class:header"
    assert styles[-1] == "class:footer"

def test_format_table_empty():
    assert format_table(QueryResult(["id"], [])) == [("class:empty", EMPTY_SET)]

def test_format_table_pads_short_rows():
    lines = [line for _, line in format_table(QueryResult(["a", "b"], [(1,)]))]
    assert lines[3] == "| 1 |   |"

def test_render_result_prints_every_line(employees):
    with patch.object(display, "print_formatted_text") as printer:
        render_result(employees)
    assert printer.call_count == 7
    _, kwargs = printer.call_args
    assert kwargs["style"] is display.RESULT_STYLE

def test_format_table_enum_headers():
    from enum import Enum

    class Column(str, Enum):
        ID = "id"

    lines = [line for _, line in format_table(QueryResult([Column.ID], [(1,)]))]
    assert lines[1] == "| id |"
