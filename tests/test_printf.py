import pytest

from minishell.printf import format_printf, printf


def test_plain_text_is_unchanged():
    assert format_printf("no conversions here") == "no conversions here"


def test_string_and_null_string():
    assert format_printf("[%s]", "word") == "[word]"
    assert format_printf("%s", None) == "(null)"


def test_char_from_string_and_code():
    assert format_printf("%c%c", "q", ord("z")) == "qz"


def test_pointer_null_and_value():
    assert format_printf("%p", 0) == "(nil)"
    text = format_printf("%p", 48879)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 48879


@pytest.mark.parametrize("spec", ["d", "i"])
def test_signed_decimal(spec):
    assert format_printf(f"%{spec}", -42) == "-42"
    assert format_printf(f"%{spec}", 2147483647) == "2147483647"


def test_signed_decimal_wraps_to_int():
    assert format_printf("%d", 2147483648) == "-2147483648"


def test_unsigned_of_negative_wraps():
    assert int(format_printf("%u", -1)) == 2**32 - 1
    assert format_printf("%u", 17) == "17"


@pytest.mark.parametrize("value", [0, 10, 255, 48879, 2147483647])
def test_hex_round_trip_and_case(value):
    lower = format_printf("%x", value)
    upper = format_printf("%X", value)
    assert int(lower, 16) == value
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_percent_sign():
    assert format_printf("100%%") == "100%"


def test_unknown_conversion_drops_letter():
    assert format_printf("a%qb") == "a%b"


def test_trailing_percent_is_kept():
    assert format_printf("abc%") == "abc%"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d and %d", 1)


def test_extra_arguments_are_ignored():
    assert format_printf("%s", "one", "two") == "one"


def test_printf_writes_and_returns_length(capsys):
    count = printf("%s=%d\n", "x", 5)
    out = capsys.readouterr().out
    assert out == "x=5\n"
    assert count == len(out)