import time

import pytest

from philosophers.utils import INT_MAX, now_ms, parse_number, sleep_ms


@pytest.mark.parametrize("text", ["42", "  42", "+42", "   +42"])
def test_parse_number_accepts_plain_digits(text):
    assert parse_number(text) == 42


def test_parse_number_none_is_missing():
    assert parse_number(None) == -1


@pytest.mark.parametrize(
    "text", ["", "   ", "+", " +", "-5", "12a", "4 2", "1.5", "++1", "٣"]
)
def test_parse_number_rejects_invalid(text):
    assert parse_number(text) == 0


def test_parse_number_int_max_boundary():
    assert parse_number(str(INT_MAX)) == INT_MAX
    assert parse_number(str(INT_MAX + 1)) == 0


def test_parse_number_leading_zeros():
    assert parse_number("007") == 7


def test_now_ms_tracks_wall_clock():
    before = time.time() * 1000
    value = now_ms()
    after = time.time() * 1000
    assert before - 1 <= value <= after + 1


def test_sleep_ms_waits_at_least_requested():
    before = now_ms()
    sleep_ms(20)
    after = now_ms()
    assert after - before >= 19


def test_sleep_ms_zero_returns_quickly():
    before = now_ms()
    sleep_ms(0)
    after = now_ms()
    assert 0 <= after - before < 500