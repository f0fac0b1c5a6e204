from decimal import Decimal
import logging

import pytest

from appformat.decoder import decode, split_lines, split_pair
from appformat.errors import (
    CoercionError,
    DecodeError,
    EmptyInputError,
    MalformedLineError,
    MissingFieldError,
    UnsupportedKindError,
)
from appformat.types import ScalarKind

from records import (
    AllBasicSupportedTypes,
    AllKinds,
    Derived,
    Named,
    Nested,
    OneBool,
    Required,
    TwoBools,
)


@pytest.mark.parametrize(
    "text, lines",
    [
        ("a\nb\n", ["a", "b"]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("a\rb", ["a", "b"]),
        ("a\n\nb", ["a", "", "b"]),
        ("a\n\n", ["a", ""]),
        ("a", ["a"]),
        ("a\x0bb\x0cc", ["a\x0bb\x0cc"]),
    ],
)
def test_split_lines(text, lines):
    assert split_lines(text) == lines


@pytest.mark.parametrize(
    "line, pair",
    [
        ("Bool: true", ("Bool", "true")),
        ("Bool:true", ("Bool", "true")),
        ("Time:  12:30:00  ", ("Time", "12:30:00")),
        (" Bool :x", (" Bool ", "x")),
        (":", ("", "")),
    ],
)
def test_split_pair(line, pair):
    assert split_pair(line, 1) == pair


@pytest.mark.parametrize("line", ["", "   ", "Bool true"])
def test_split_pair_malformed(line):
    with pytest.raises(MalformedLineError) as excinfo:
        split_pair(line, 3)
    assert excinfo.value.lineno == 3
    assert excinfo.value.line == line


def test_decode_basic_supported_types():
    text = (
        "Bool: true\n"
        "Byte: 255\n"
        "Char: !\n"
        "Decimal: 1\n"
        "Double: 0.5\n"
        "Int: 10\n"
    )
    actual = decode(text, AllBasicSupportedTypes)
    assert actual == AllBasicSupportedTypes(True, 255, "!", Decimal(1), 0.5, 10)


def test_decode_without_whitespace_after_colon():
    actual = decode("Bool:true\nSecondBool:true", TwoBools)
    assert actual.Bool is True
    assert actual.SecondBool is True
    assert actual == decode("Bool: true\nSecondBool: true", TwoBools)


def test_decode_crlf():
    actual = decode("Bool: True\r\nSecondBool: False\r\n", TwoBools)
    assert actual == TwoBools(True, False)


def test_decode_case_insensitive():
    assert decode("bOoL:true", OneBool, True).Bool is True
    with pytest.raises(MissingFieldError):
        decode("bOoL:true", OneBool)


def test_decode_all_kinds():
    text = "\n".join(
        [
            "String:  a string, with: colons  ",
            "ULong: 18446744073709551615",
            "SByte: -128",
            "Decimal: 3.140",
            "Char: z",
        ]
    )
    actual = decode(text, AllKinds)
    assert actual.String == "a string, with: colons"
    assert actual.ULong == 2 ** 64 - 1
    assert actual.SByte == -128
    assert str(actual.Decimal) == "3.140"
    assert actual.Char == "z"
    # untouched fields keep their defaults
    assert actual.Int == 0
    assert actual.Bool is False


def test_decode_new_instance_per_call():
    first = decode("Bool: true", OneBool)
    second = decode("Bool: true", OneBool)
    assert first == second
    assert first is not second


def test_decode_last_write_wins(caplog):
    with caplog.at_level(logging.DEBUG, logger="appformat.decoder"):
        actual = decode("Bool: true\nBool: false\n", OneBool)
    assert actual.Bool is False
    assert "overwriting Bool" in caplog.text


def test_decode_empty_string_value():
    assert decode("Name:", Named).Name == ""


@pytest.mark.parametrize("text", [None, "", "   ", "\r\n\n", "\t"])
def test_decode_empty_input(text):
    with pytest.raises(EmptyInputError):
        decode(text, OneBool)


@pytest.mark.parametrize(
    "text, lineno",
    [
        ("Bool true", 1),
        ("Bool: true\nSecondBool", 2),
        ("Bool: true\n\nSecondBool: true", 2),
        ("Bool: true\n   \nSecondBool: true", 2),
        ("Bool: true\n\n", 2),
    ],
)
def test_decode_malformed(text, lineno):
    with pytest.raises(MalformedLineError) as excinfo:
        decode(text, TwoBools)
    assert excinfo.value.lineno == lineno


@pytest.mark.parametrize("text", ["Missing: 1", "Bool: true\n Bool: true", ": x"])
def test_decode_missing_field(text):
    with pytest.raises(MissingFieldError) as excinfo:
        decode(text, OneBool)
    assert excinfo.value.lineno == text.count("\n") + 1


def test_decode_inherited_field_is_missing():
    with pytest.raises(MissingFieldError):
        decode("Bool: true", Derived)
    assert decode("Extra: 3", Derived).Extra == 3


def test_decode_unsupported_kind():
    with pytest.raises(UnsupportedKindError) as excinfo:
        decode("Flag: true\nInner: x", Nested)
    assert excinfo.value.field == "Inner"
    assert excinfo.value.lineno == 2


@pytest.mark.parametrize(
    "text, kind",
    [
        ("Byte: 256", ScalarKind.UINT8),
        ("Char: ab", ScalarKind.CHAR),
        ("Bool: yes", ScalarKind.BOOL),
        ("Double: 0,5", ScalarKind.DOUBLE),
    ],
)
def test_decode_coercion_failure(text, kind):
    with pytest.raises(CoercionError) as excinfo:
        decode("Int: 1\n" + text, AllBasicSupportedTypes)
    assert excinfo.value.kind is kind
    assert excinfo.value.lineno == 2
    assert str(excinfo.value).startswith("line 2: ")


def test_decode_first_error_wins():
    with pytest.raises(CoercionError):
        decode("Byte: -1\nMissing: 1\nmalformed", AllBasicSupportedTypes)


def test_decode_errors_are_decode_errors():
    for text in ["", "x", "x: 1"]:
        with pytest.raises(DecodeError):
            decode(text, OneBool)


def test_decode_requires_default_constructible():
    with pytest.raises(TypeError):
        decode("Bool: true", Required)
