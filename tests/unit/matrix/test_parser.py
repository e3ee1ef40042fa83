"""Tests for matrix text validation."""

import pytest

from tsvmat.matrix import (
    BlankLineError,
    EmptyInputError,
    InvalidElementError,
    Matrix,
    ParseError,
    RaggedMatrixError,
    TrailingSeparatorError,
    parse_matrix,
)
from tsvmat.matrix.parser import split_lines


def test_parse_square_matrix():
    assert parse_matrix("1\t2\n3\t4\n") == Matrix.from_rows([[1, 2], [3, 4]])


def test_parse_negative_and_zero_values():
    matrix = parse_matrix("-1\t0\t-0\n")
    assert matrix.rows == ((-1, 0, 0),)


def test_parse_accepts_missing_final_newline():
    assert parse_matrix("5\t6").rows == ((5, 6),)


def test_parse_accepts_crlf_line_endings():
    assert parse_matrix("1\t2\r\n3\t4\r\n").rows == ((1, 2), (3, 4))


def test_parse_accepts_leading_zeros():
    assert parse_matrix("007\n").rows == ((7,),)


def test_parse_single_column():
    matrix = parse_matrix("1\n2\n3\n")
    assert matrix.dims == (3, 1)


def test_empty_input_rejected():
    with pytest.raises(EmptyInputError):
        parse_matrix("")


def test_lone_newline_is_a_blank_line():
    with pytest.raises(BlankLineError) as excinfo:
        parse_matrix("\n")
    assert excinfo.value.line == 1


def test_trailing_blank_line_rejected():
    with pytest.raises(BlankLineError) as excinfo:
        parse_matrix("1\t2\n\n")
    assert excinfo.value.line == 2


def test_whitespace_only_line_rejected():
    with pytest.raises(BlankLineError):
        parse_matrix("1\n  \n2\n")


def test_ragged_rows_rejected():
    with pytest.raises(RaggedMatrixError) as excinfo:
        parse_matrix("1\t2\n3\n")
    err = excinfo.value
    assert (err.line, err.expected, err.found) == (2, 2, 1)


def test_trailing_tab_rejected():
    with pytest.raises(TrailingSeparatorError) as excinfo:
        parse_matrix("1\t2\t\n")
    assert excinfo.value.line == 1


@pytest.mark.parametrize(
    "text",
    ["1\ta\n", "1.5\n", "+1\n", " 1\n", "1 \t2\n", "1_000\n", "1\t\t2\n", "\t1\n", "-\n", "١\n"],
)
def test_non_integer_fields_rejected(text):
    with pytest.raises(InvalidElementError):
        parse_matrix(text)


def test_invalid_element_reports_position():
    with pytest.raises(InvalidElementError) as excinfo:
        parse_matrix("1\t2\n3\tx\n", source="m.tsv")
    err = excinfo.value
    assert (err.line, err.column, err.field) == (2, 2, "x")
    assert str(err).startswith("m.tsv:2:")


def test_out_of_range_value_rejected():
    with pytest.raises(InvalidElementError):
        parse_matrix(f"{2**63}\n")
    assert parse_matrix(f"{-(2**63)}\n").rows == ((-(2**63),),)


def test_first_problem_wins():
    # line 1 is invalid before line 3 is ragged
    with pytest.raises(InvalidElementError):
        parse_matrix("a\t1\n1\t1\n1\n")


def test_parse_errors_share_base_class():
    for text in ["", "\n", "1\t\n", "x\n", "1\n1\t2\n"]:
        with pytest.raises(ParseError):
            parse_matrix(text)


def test_split_lines_keeps_interior_blank_lines():
    assert split_lines("1\n\n2\n") == ["1", "", "2"]


def test_long_field_of_leading_zeros_is_valid():
    assert parse_matrix("0" * 5000 + "1\t-" + "0" * 5000 + "2\n").rows == ((1, -2),)


def test_huge_field_is_out_of_range_not_a_crash():
    with pytest.raises(InvalidElementError) as excinfo:
        parse_matrix("9" * 5000 + "\n")
    assert "does not fit in a signed 64-bit integer" in str(excinfo.value)
    assert len(str(excinfo.value)) < 200


def test_int64_boundaries():
    assert parse_matrix(f"{2**63 - 1}\t-{2**63}\n").rows == ((2**63 - 1, -(2**63)),)
    with pytest.raises(InvalidElementError):
        parse_matrix(f"-{2**63 + 1}\n")
    with pytest.raises(InvalidElementError):
        parse_matrix("1" + "0" * 19 + "\n")


def test_importing_parser_does_not_touch_log_dir(tmp_path, monkeypatch):
    import importlib

    from tsvmat.matrix import parser

    log_dir = tmp_path / "logs"
    monkeypatch.setenv("TSVMAT_LOG_DIR", str(log_dir))
    importlib.reload(parser)
    assert not log_dir.exists()
