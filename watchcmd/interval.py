"""Parsing of the update interval given on the command line."""

from decimal import Decimal

__all__ = ["parse_interval"]

_U64_MAX = 2**64 - 1
_U32_MAX = 2**32 - 1
_NANO_DIGITS = 9
_MIN_INTERVAL = Decimal("0.1")
_ASCII_DIGITS = frozenset("0123456789")


def _parse_unsigned(text: str, limit: int) -> int:
    """Parse an unsigned integer with an optional leading '+'."""
    digits = text[1:] if text.startswith("+") else text
    if not digits or not set(digits) <= _ASCII_DIGITS:
        raise ValueError(f"invalid digit found in {text!r}")
    value = int(digits)
    if value > limit:
        raise ValueError(f"number too large to fit in target type: {text!r}")
    return value


def parse_interval(text: str) -> Decimal:
    """Parse an interval in seconds, such as ``"2"``, ``"1.5"`` or ``"1,5"``.

    The fractional part keeps at most nine digits; extra digits are dropped
    once they are checked to be numeric. An interval written with a fraction
    is never shorter than 0.1 seconds. Raises ``ValueError`` on bad input.
    """
    index = next((i for i, char in enumerate(text) if char in ",."), None)
    if index is None:
        return Decimal(_parse_unsigned(text, _U64_MAX))

    seconds = _parse_unsigned(text[:index], _U64_MAX) if index > 0 else 0

    fraction = text[index + 1 :]
    if not fraction:
        nanos = 0
    elif len(fraction) <= _NANO_DIGITS:
        nanos = _parse_unsigned(fraction, _U32_MAX) * 10 ** (_NANO_DIGITS - len(fraction))
    else:
        if not all(char.isnumeric() for char in fraction):
            raise ValueError(f"invalid digit found in {fraction!r}")
        nanos = _parse_unsigned(fraction[:_NANO_DIGITS], _U32_MAX)

    duration = Decimal(f"{seconds}.{nanos:09d}")
    return max(duration, _MIN_INTERVAL)