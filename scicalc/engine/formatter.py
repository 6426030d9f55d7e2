"""Display formatting and parsing for calculator values."""

import math
import re

PRECISION = 10

ERROR_TEXT = "Error"
INFINITY_TEXT = "Infinity"

_NUMBER_PREFIX = re.compile(
    r"""
    ^\s*
    (?P<sign>[+-]?)
    (?:
        (?P<inf>Infinity)
      | (?P<num>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
    )
    """,
    re.VERBOSE,
)


def _strip_fraction_zeros(text: str) -> str:
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


def format_display(value: float | str) -> str:
    """Render a value for the display.

    Strings are assumed to be formatted already and pass through unchanged.
    Numbers are rendered with ``PRECISION`` significant digits, switching to
    exponential notation outside the 1e-7 .. 1e10 range, and trailing zeros
    left over from the fixed precision are removed.
    """
    if isinstance(value, str):
        return value
    if math.isnan(value):
        return ERROR_TEXT
    if math.isinf(value):
        return INFINITY_TEXT

    value = float(value)
    if value == 0:
        return "0"

    mantissa, _, exp_text = f"{value:.{PRECISION - 1}e}".partition("e")
    exponent = int(exp_text)

    if exponent < -6 or exponent >= PRECISION:
        sign = "+" if exponent >= 0 else "-"
        return f"{_strip_fraction_zeros(mantissa)}e{sign}{abs(exponent)}"

    return _strip_fraction_zeros(f"{value:.{PRECISION - 1 - exponent}f}")


def parse_display(text: str) -> float:
    """Parse the leading number of ``text``, ignoring anything after it.

    Returns NaN when the text does not start with a number, so malformed
    entries like ``"1.2.3"`` read as ``1.2`` and ``"Error"`` reads as NaN.
    """
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return math.nan

    if match.group("inf"):
        number = math.inf
    else:
        number = float(match.group("num"))
    return -number if match.group("sign") == "-" else number
