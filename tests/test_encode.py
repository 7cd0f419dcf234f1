"""Encoder tests: per-character runs, separators and the decode inverse."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from multitap import CHAR_MAP, decode, encode, encode_char


@pytest.mark.parametrize(
    ("char", "expected"),
    [
        ("A", "2"),
        ("c", "222"),
        ("S", "7777"),
        ("z", "9999"),
        (" ", "0"),
        ("&", "1"),
        (")", "1111"),
    ],
)
def test_encode_char(char: str, expected: str) -> None:
    assert encode_char(char) == expected


@pytest.mark.parametrize("char", ["!", "1", "é", "\n"])
def test_encode_char_rejects_unsupported(char: str) -> None:
    with pytest.raises(ValueError, match="Unsupported character"):
        encode_char(char)


def test_encode_word() -> None:
    assert encode("hello") == "44 33 555 555 666#"


def test_encode_empty_text_is_terminator_only() -> None:
    assert encode("") == "#"


def test_encode_custom_separator() -> None:
    assert encode("ab", separator="-") == "2-22#"


@pytest.mark.parametrize("separator", ["", "1", "*", "#", " 0 "])
def test_encode_rejects_separator_that_changes_meaning(separator: str) -> None:
    with pytest.raises(ValueError, match="Invalid separator"):
        encode("ab", separator=separator)


_supported_text = st.text(alphabet="".join(CHAR_MAP) + "abcxyz", max_size=30)
_separator = st.text(alphabet=" -_/|.,x", min_size=1, max_size=3)


@given(text=_supported_text, separator=_separator)
@settings(max_examples=200)
def test_decode_inverts_encode(text: str, separator: str) -> None:
    """Any separator free of digits, '*' and '#' keeps runs apart."""
    assert decode(encode(text, separator=separator)) == text.upper()
