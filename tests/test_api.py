import logging
import textwrap

import pytest

from eq_ynab import (
    HEADER,
    InvalidFieldCountError,
    UnknownMonthError,
    convert_csv_text,
)
from eq_ynab.api import split_lines


def _dedent(s: str) -> str:
    # Keep internal newlines, but normalize indentation for readability.
    return textwrap.dedent(s).lstrip("\n")


def test_convert_csv_text_end_to_end():
    csv_text = _dedent(
        """
        Date,Description,Amount,Balance
        31 JAN 2024,Payment to CANADA LIFE,-$271.80,$500.00
        29 JAN 2024,Deposit from BK OF MONTREAL,$610,$1110.00
        """
    )

    expected = _dedent(
        """
        Date,Payee,Catergory,Memo,Outflow,Inflow
        31/01/2024,CANADA LIFE,,,271.8,
        29/01/2024,BK OF MONTREAL,,,,610
        """
    )

    assert convert_csv_text(csv_text) == expected


def test_convert_csv_text_sample_export_row():
    csv_text = (
        "Date,Description,Amount,Balance\n"
        "29 FEB 2024,Account Credited from 300605613,$1.59,$24640.45\n"
    )
    assert convert_csv_text(csv_text) == (
        "Date,Payee,Catergory,Memo,Outflow,Inflow\n29/02/2024,300605613,,,,1.59\n"
    )


def test_header_line_is_skipped_without_inspection():
    csv_text = "anything at all, even, the, wrong, width\n1 JAN 1999,CANADA LIFE,$5,$5"
    assert convert_csv_text(csv_text) == f"{HEADER}\n1/01/1999,CANADA LIFE,,,,5\n"


def test_crlf_line_endings():
    csv_text = "Date,Description,Amount,Balance\r\n1 JAN 1999,CANADA LIFE,-$5.25,$5\r\n"
    assert convert_csv_text(csv_text) == f"{HEADER}\n1/01/1999,CANADA LIFE,,,5.25,\n"


@pytest.mark.parametrize("csv_text", ["", "Date,Description,Amount,Balance\n"])
def test_header_only_or_empty_input(csv_text):
    assert convert_csv_text(csv_text) == f"{HEADER}\n"


def test_bad_field_count_aborts_whole_run():
    csv_text = _dedent(
        """
        Date,Description,Amount,Balance
        31 JAN 2024,Payment to CANADA LIFE,-$271.80,$500.00
        29 JAN 2024,Deposit from BK OF MONTREAL,$610
        """
    )
    with pytest.raises(InvalidFieldCountError) as exc:
        convert_csv_text(csv_text)
    assert exc.value.line == "29 JAN 2024,Deposit from BK OF MONTREAL,$610"


def test_blank_data_line_is_rejected():
    csv_text = "Date,Description,Amount,Balance\n\n1 JAN 1999,CANADA LIFE,$5,$5\n"
    with pytest.raises(InvalidFieldCountError):
        convert_csv_text(csv_text)


def test_unknown_month_aborts_whole_run():
    csv_text = "Date,Description,Amount,Balance\n01 XYZ 2024,CANADA LIFE,$1,$1\n"
    with pytest.raises(UnknownMonthError):
        convert_csv_text(csv_text)


def test_convert_csv_text_logs_summary(caplog):
    csv_text = _dedent(
        """
        Date,Description,Amount,Balance
        31 JAN 2024,Payment to CANADA LIFE,-$271.80,$500.00
        29 JAN 2024,Deposit from BK OF MONTREAL,$610,$1110.00
        """
    )
    with caplog.at_level(logging.DEBUG, logger="eq_ynab"):
        convert_csv_text(csv_text)

    messages = [r.getMessage() for r in caplog.records]
    assert "converted 2 transaction(s): 1 outflow, 1 inflow" in messages
    # File line numbers: the header is line 1.
    assert any(m.startswith("line 3: 29/01/2024") for m in messages)


@pytest.mark.parametrize("separator", ["\u2028", "\u2029", "\x0c", "\x0b", "\x1c", "\x85"])
def test_only_newline_ends_a_row(separator):
    csv_text = f"Date,Description,Amount,Balance\n1 JAN 2024,Payment to A{separator}B,$1,$1\n"
    assert convert_csv_text(csv_text) == f"{HEADER}\n1/01/2024,A{separator}B,,,,1\n"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("a", ["a"]),
        ("a\n", ["a"]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("a\n\nb", ["a", "", "b"]),
        ("a\r\r\n", ["a\r"]),
        ("a\u2028b\n", ["a\u2028b"]),
    ],
)
def test_split_lines(text, expected):
    assert split_lines(text) == expected
