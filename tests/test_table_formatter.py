import pytest

from vultr_cli.core.processors import format_table


def test_columns_are_padded_to_widest_cell():
    output = format_table([("A", "BB"), ("CCC", "D")], (8, 8))

    assert output == "A  \tBB\nCCC\tD\n"


def test_cells_are_truncated_to_width_hint():
    output = format_table([("abcdef", "xy")], (3, 8))

    assert output == "abc\txy\n"


def test_values_use_their_text_representation():
    assert format_table([(1, True, 2.5)], (8, 8, 8)) == "1\tTrue\t2.5\n"


def test_custom_delimiter():
    assert format_table([("a", "b")], (4, 4), delimiter=" | ") == "a | b\n"


def test_empty_rows_render_nothing():
    assert format_table([], (4, 4)) == ""


def test_row_width_mismatch_is_an_error():
    with pytest.raises(ValueError, match="Row 1 has 1 columns, expected 2"):
        format_table([("a", "b"), ("c",)], (4, 4))


def test_trailing_empty_cells_are_stripped():
    assert format_table([("label:", "")], (24, 64)) == "label:\n"
