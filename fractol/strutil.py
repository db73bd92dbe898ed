"""Lenient integer parsing and small string helpers."""

_SPACES = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _bounds(bits):
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _wrap(value, bits):
    span = 1 << bits
    half = span >> 1
    return (value + half) % span - half


def _accumulate(text, bits):
    """Parse a leading integer; return ``(sign, value)`` or ``(sign, None)`` on overflow.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. Text without digits yields zero.
    """
    low, high = _bounds(bits)
    body = text.lstrip(_SPACES)
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    value = 0
    for ch in body:
        if ch not in _DIGITS:
            break
        value = value * 10 + sign * (ord(ch) - ord("0"))
        if not low <= value <= high:
            return sign, None
    return sign, value


def atoi(text):
    """Parse a leading integer as a 32-bit ``int``.

    Values beyond the 64-bit range give -1 when positive and 0 when
    negative; values within it are wrapped to 32 bits.
    """
    sign, value = _accumulate(text, 64)
    if value is None:
        return -1 if sign > 0 else 0
    return _wrap(value, 32)


def atoll(text):
    """Parse a leading integer as a 64-bit integer.

    Out-of-range values give -1 when positive and 0 when negative.
    """
    sign, value = _accumulate(text, 64)
    if value is None:
        return -1 if sign > 0 else 0
    return value


def atoi_safe(text):
    """Parse a leading integer, raising ``OverflowError`` outside 32 bits."""
    _, value = _accumulate(text, 32)
    if value is None:
        raise OverflowError(f"integer out of 32-bit range: {text!r}")
    return value


def split(text, sep):
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character: {sep!r}")
    if sep == "\0":
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def strtrim(text, charset):
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text, start, length):
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]