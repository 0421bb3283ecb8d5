"""
Conversions between numbers, strings, sequences and booleans.

None of these helpers raise on malformed values. Numeric parses that fail
return NaN and empty inputs return a neutral default (0, "", [] or False),
so callers that care must check for those themselves.
"""

import decimal
import math
import re
import sys
from typing import Any, List, Sequence, Union

from .logger import get_logger

logger = get_logger(__name__)

Number = Union[int, float]

NAN = float("nan")

_INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_RADIX_RE = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INFINITY_RE = re.compile(r"[+-]?Infinity")


def num_to_array(num: int) -> List[int]:
    """
    Split a number into its decimal digits.

    A negative number yields a negated first digit, e.g. ``-123`` gives
    ``[-1, 2, 3]``.

    Args:
        num: The number to split

    Returns:
        List of digits, ``[0]`` for zero
    """
    if num == 0:
        return [0]
    digits = [int(ch) if ch.isdigit() else NAN for ch in num_to_string(abs(num))]
    if num < 0:
        digits[0] = -digits[0]
    return digits


def array_to_num(digits: Sequence[Any]) -> Number:
    """
    Join digits back into a number.

    The digits are concatenated as text and the leading integer is parsed,
    so only a sign on the first element survives: ``[-1, 2, 3]`` gives
    ``-123`` while ``[1, -2, 3]`` stops at the ``-`` and gives ``1``.

    Args:
        digits: Sequence of single digits

    Returns:
        The parsed integer, 0 for an empty sequence or NaN if nothing parses
    """
    if len(digits) == 0:
        return 0
    text = "".join(num_to_string(d) if isinstance(d, float) else str(d) for d in digits)
    match = _INT_PREFIX_RE.match(text)
    if not match:
        logger.debug(f"No integer prefix in {text!r}, returning NaN")
        return NAN
    return int(match.group(1))


def num_to_string(num: Number) -> str:
    """
    Format a number as decimal text.

    Floats use the shortest digits that round-trip, written positionally
    for magnitudes in ``[1e-6, 1e21)`` and as ``1.5e+21`` / ``1e-7``
    otherwise. Integral floats have no trailing ``.0``; NaN and the
    infinities are spelled ``NaN``, ``Infinity`` and ``-Infinity``.

    Examples:
        >>> num_to_string(2.0)
        '2'
        >>> num_to_string(0.00001)
        '0.00001'
        >>> num_to_string(1e-7)
        '1e-7'
    """
    if isinstance(num, float):
        if math.isnan(num):
            return "NaN"
        if math.isinf(num):
            return "Infinity" if num > 0 else "-Infinity"
        if num == 0:
            return "0"
        text = _format_float(abs(num))
        return "-" + text if num < 0 else text
    return str(num)


def _format_float(num: float) -> str:
    """Format a positive finite float from its shortest repr digits."""
    _, digit_tuple, exponent = decimal.Decimal(repr(num)).as_tuple()
    padded = "".join(str(d) for d in digit_tuple)
    digits = padded.rstrip("0")
    exponent += len(padded) - len(digits)

    # Value is 0.<digits> * 10**point
    count = len(digits)
    point = exponent + count

    if count <= point <= 21:
        return digits + "0" * (point - count)
    if 0 < point <= 21:
        return digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return "0." + "0" * -point + digits

    mantissa = digits[0] + ("." + digits[1:] if count > 1 else "")
    power = point - 1
    return f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


def string_to_num(text: str) -> Number:
    """
    Parse a string as a number.

    Surrounding whitespace is ignored. Decimal integers come back as
    ``int``, fractions and exponents as ``float``. ``0x``/``0o``/``0b``
    literals and signed ``Infinity`` are also understood.

    Args:
        text: The string to parse

    Returns:
        The parsed number, 0 for an empty or blank string, NaN otherwise
    """
    try:
        return _parse_number(text.strip())
    except ValueError as e:
        logger.debug(f"Could not parse {text!r} as a number: {e}")
        return NAN


def _parse_number(text: str) -> Number:
    """Parse stripped text, raising ValueError if it is not a number."""
    if not text:
        return 0

    match = _DECIMAL_RE.fullmatch(text)
    if match:
        if "." in text or match.group(2):
            return float(text)
        return int(text)

    if _RADIX_RE.fullmatch(text):
        return int(text, 0)

    if _INFINITY_RE.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf

    raise ValueError(f"invalid numeric literal: {text!r}")


def string_to_array(text: str) -> List[str]:
    """Split a string into a list of its characters."""
    return list(text)


def array_to_string(chars: Sequence[str]) -> str:
    """Concatenate a sequence of characters."""
    return "".join(chars)


def num_to_bool(num: Number) -> bool:
    """Return False for zero, True for anything else (including NaN)."""
    return num != 0


def bool_to_num(flag: bool) -> int:
    return 1 if flag else 0


def string_to_bool(text: str) -> bool:
    """
    Convert a string to a boolean by emptiness.

    The content is not inspected: ``"false"`` and ``"0"`` are both True.
    """
    return len(text) > 0


def bool_to_string(flag: bool) -> str:
    return "true" if flag else "false"


def array_to_bool(items: Sequence[Any]) -> bool:
    """Return False for an empty sequence, True otherwise."""
    return len(items) > 0


def bool_to_array(flag: bool) -> List[bool]:
    return [flag]


def num_to_bool_array(num: Number) -> List[bool]:
    """
    Convert a non-negative integer to its binary digits as booleans.

    The bits come from the base-2 text of the number, so integral floats
    behave like ints, and any character that is not ``1`` (a sign, a
    binary point, or the letters of ``NaN``/``Infinity``) reads as False.

    Args:
        num: The number to convert

    Returns:
        Bits, most significant first, e.g. ``5`` gives
        ``[True, False, True]``; ``[False]`` for zero
    """
    if num == 0:
        return [False]
    return [bit == "1" for bit in _binary_text(num)]


def _binary_text(num: Number) -> str:
    if not isinstance(num, float):
        return format(num, "b")
    if not math.isfinite(num):
        logger.debug(f"Non-finite number {num!r} has no binary digits")
        return num_to_string(num)
    if num.is_integer():
        return format(int(num), "b")

    # Binary fractions terminate: abs(num) == numerator / 2**places
    numerator, denominator = abs(num).as_integer_ratio()
    places = denominator.bit_length() - 1
    bits = format(numerator, "b").zfill(places + 1)
    text = bits[:-places] + "." + bits[-places:]
    return "-" + text if num < 0 else text


def bool_array_to_num(bits: Sequence[bool]) -> int:
    """
    Read a sequence of booleans as a binary number.

    Args:
        bits: Bits, most significant first

    Returns:
        The integer value, 0 for an empty sequence
    """
    if len(bits) == 0:
        return 0
    return int("".join("1" if bit else "0" for bit in bits), 2)


def string_to_num_array(text: str) -> List[int]:
    """Return the code point of each character in a string."""
    return [ord(ch) for ch in text]


def num_array_to_string(codes: Sequence[Number]) -> str:
    """
    Build a string from a sequence of character codes.

    Codes outside the Unicode range are reduced to 16 bits, and codes
    that are not finite numbers become ``"\\x00"``.

    Args:
        codes: Character codes

    Returns:
        The decoded string, empty for an empty sequence
    """
    return "".join(_code_to_char(code) for code in codes)


def _code_to_char(code: Number) -> str:
    try:
        code = int(code)
    except (ValueError, OverflowError):
        logger.debug(f"Non-finite character code {code!r}, using NUL")
        return "\x00"
    if not 0 <= code <= sys.maxunicode:
        logger.debug(f"Character code {code} out of range, wrapping to 16 bits")
        code &= 0xFFFF
    return chr(code)
