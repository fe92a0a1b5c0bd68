from typing import List

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style

from result import QueryResult, column_key

RESULT_STYLE = Style.from_dict({
    "header": "bold ansiblue",
    "separator": "ansicyan",
    "footer": "ansimagenta",
    "empty": "ansiyellow",
    "default": "",
})

EMPTY_SET = "RESULT: (Empty set)"


def format_table(result: QueryResult) -> List[tuple]:
    """
    Lays the result out as an ASCII table.
    Returns (style class, line) pairs so the caller decides how to print them.
    """
    columns = [column_key(c) for c in result.columns]
    num_cols = len(columns)

    if result.is_empty():
        return [("class:empty", EMPTY_SET)]

    # short rows are padded, surplus values dropped
    string_rows = [
        tuple(str(row[i]) if i < len(row) else "" for i in range(num_cols))
        for row in result.rows
    ]

    max_widths = [len(header) for header in columns]
    for row in string_rows:
        for i in range(num_cols):
            max_widths[i] = max(max_widths[i], len(row[i]))

    col_widths = [w + 2 for w in max_widths]

    header_line = ""
    for i in range(num_cols):
        header_line += f"| {columns[i].center(col_widths[i] - 2)} "
    header_line += "|"

    separator = "+" + "+".join("-" * w for w in col_widths) + "+"

    lines = [
        ("class:separator", separator),
        ("class:header", header_line),
        ("class:separator", separator),
    ]
    for row in string_rows:
        row_line = ""
        for i in range(num_cols):
            # Left-align the data
            row_line += f"| {row[i].ljust(col_widths[i] - 2)} "
        row_line += "|"
        lines.append(("class:default", row_line))

    lines.append(("class:separator", separator))
    lines.append(("class:footer", f"({len(result)} rows in set)"))
    return lines


def render_result(result: QueryResult, output=None):
    """
    Prints the result as a styled ASCII table.
    """
    for style_class, line in format_table(result):
        print_formatted_text(FormattedText([(style_class, line)]), style=RESULT_STYLE, output=output)
