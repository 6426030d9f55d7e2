import math

from scicalc.engine.formatter import format_display, parse_display


def test_whole_numbers_drop_fraction():
    assert format_display(3.0) == "3"
    assert format_display(120.0) == "120"
    assert format_display(-2.5) == "-2.5"


def test_ten_significant_digits():
    assert format_display(1 / 3) == "0.3333333333"
    assert format_display(2 / 3) == "0.6666666667"
    assert format_display(math.pi) == "3.141592654"


def test_rounding_carries_into_next_digit():
    assert format_display(9.99999999999) == "10"


def test_exponential_range():
    assert format_display(1e21) == "1e+21"
    assert format_display(123456789012.0) == "1.23456789e+11"
    assert format_display(1e10) == "1e+10"
    assert format_display(1e-7) == "1e-7"
    assert format_display(0.000001) == "0.000001"


def test_non_finite_sentinels():
    assert format_display(math.nan) == "Error"
    assert format_display(math.inf) == "Infinity"
    assert format_display(-math.inf) == "Infinity"


def test_zero_and_negative_zero():
    assert format_display(0.0) == "0"
    assert format_display(-0.0) == "0"


def test_strings_pass_through():
    assert format_display("3.000") == "3.000"
    assert format_display("Error") == "Error"


def test_parse_reads_leading_number():
    assert parse_display("42") == 42
    assert parse_display("05") == 5
    assert parse_display("1.2.3") == 1.2
    assert parse_display("-2.5") == -2.5
    assert parse_display(".5") == 0.5
    assert parse_display("1e+21") == 1e21
    assert parse_display("3.141592653589793") == math.pi


def test_parse_infinity_and_garbage():
    assert parse_display("Infinity") == math.inf
    assert parse_display("-Infinity") == -math.inf
    assert math.isnan(parse_display("Error"))
    assert math.isnan(parse_display("."))
    assert math.isnan(parse_display(""))
