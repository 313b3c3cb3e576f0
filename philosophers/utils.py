"""Number parsing and millisecond timing helpers."""

import time

INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")


def parse_number(text):
    """Parse a non-negative decimal integer the strict way the simulator expects.

    Returns -1 for a missing value (``None``). Returns 0 for anything that is
    empty, not purely digits after optional leading spaces and an optional '+',
    or larger than ``INT_MAX``.
    """
    if text is None:
        return -1
    rest = text.lstrip(" ")
    if rest.startswith("+"):
        rest = rest[1:]
    if not rest:
        return 0
    value = 0
    for char in rest:
        if char not in _DIGITS:
            return 0
        value = value * 10 + int(char)
        if value > INT_MAX:
            return 0
    return value


def now_ms():
    """Current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def sleep_ms(ms):
    """Sleep for at least ``ms`` milliseconds, polling in short steps."""
    start = now_ms()
    while now_ms() - start < ms:
        time.sleep(0.0005)