"""Tests for timestamp decoding."""

from datetime import timedelta

import pytest

from vttparse.core.timing_utils import TimeConverter
from vttparse.core.errors import (
    InvalidTimestampFormatError,
    InvalidTimestampLineError,
    MissingEndTimestampError,
    InvalidTimestampError,
    InvalidStartTimestampError,
    InvalidEndTimestampError,
)


def test_parse_full_timestamp():
    """H:MM:SS.mmm adds up hours, minutes, seconds and milliseconds."""
    assert TimeConverter.parse_timestamp("01:02:03.040") == timedelta(hours=1, minutes=2, seconds=3, milliseconds=40)


def test_parse_short_timestamp():
    """MM:SS.mmm has no hour component."""
    assert TimeConverter.parse_timestamp("02:03.500") == timedelta(minutes=2, seconds=3, milliseconds=500)


def test_hour_and_minute_forms_agree():
    """The same instant written with and without hours decodes equally."""
    assert TimeConverter.parse_timestamp("01:02:03.040") == TimeConverter.parse_timestamp("62:03.040")


def test_single_digit_and_long_hours():
    """Hours accept one or more digits."""
    assert TimeConverter.parse_timestamp("1:00:00.000") == timedelta(hours=1)
    assert TimeConverter.parse_timestamp("100:00:00.001") == timedelta(hours=100, milliseconds=1)


def test_milliseconds_optional():
    """A timestamp without a fraction has zero milliseconds."""
    assert TimeConverter.parse_timestamp("00:00:05") == timedelta(seconds=5)


def test_exact_millisecond_arithmetic():
    """No float rounding creeps into the result."""
    value = TimeConverter.parse_timestamp("00:00:00.001")
    assert TimeConverter.to_milliseconds(value) == 1
    assert TimeConverter.to_milliseconds(TimeConverter.parse_timestamp("10:59:59.999")) == 39599999


@pytest.mark.parametrize("text", [
    "1:02.5",         # one-digit minutes, one-digit fraction
    "00:00:01.5",     # fraction must be three digits
    "00:00:01.0000",  # ... and not more
    "00:0a:01.000",   # non-numeric
    "0:1:02.000",     # one-digit minutes
    "00:00:1.000",    # one-digit seconds
    "+1:00:01.000",   # sign is not a digit
    "00:00:01.",      # dot without digits
    "",
])
def test_invalid_timestamp_format(text):
    """Wrong digit counts and non-digits are rejected."""
    with pytest.raises(InvalidTimestampFormatError):
        TimeConverter.parse_timestamp(text)


@pytest.mark.parametrize("text", ["01", "1:2:3:4.000", "00:00:00:00.000"])
def test_wrong_component_count(text):
    """Only two or three colon-separated components are allowed."""
    with pytest.raises(InvalidTimestampFormatError) as exc_info:
        TimeConverter.parse_timestamp(text)
    assert exc_info.value.timestamp == text


def test_parse_timestamp_line_with_settings():
    """Tokens after the end timestamp are returned as setting tokens."""
    start, end, tokens = TimeConverter.parse_timestamp_line(
        "00:00:00.500 --> 00:00:02.000 align:center line:0")
    assert start == timedelta(milliseconds=500)
    assert end == timedelta(seconds=2)
    assert tokens == ["align:center", "line:0"]


def test_parse_timestamp_line_extra_whitespace():
    """Any whitespace may surround the arrow."""
    start, end, tokens = TimeConverter.parse_timestamp_line("00:01.000\t-->   00:02.000")
    assert start == timedelta(seconds=1)
    assert end == timedelta(seconds=2)
    assert tokens == []


def test_timestamp_line_without_arrow():
    """A line with no arrow is not a timing line."""
    with pytest.raises(InvalidTimestampLineError):
        TimeConverter.parse_timestamp_line("just some text")


def test_timestamp_line_without_end():
    """Nothing after the arrow is a missing end timestamp."""
    with pytest.raises(MissingEndTimestampError):
        TimeConverter.parse_timestamp_line("00:00:01.000 -->   ")


def test_bad_start_timestamp_is_wrapped():
    """The start side failure names its side and keeps the cause."""
    with pytest.raises(InvalidStartTimestampError) as exc_info:
        TimeConverter.parse_timestamp_line("00:00:1.000 --> 00:00:02.000")
    err = exc_info.value
    assert isinstance(err, InvalidTimestampError)
    assert err.side == "start"
    assert isinstance(err.cause, InvalidTimestampFormatError)
    assert err.__cause__ is err.cause


def test_bad_end_timestamp_is_wrapped():
    """The end side failure names its side."""
    with pytest.raises(InvalidEndTimestampError) as exc_info:
        TimeConverter.parse_timestamp_line("00:00:01.000 --> 00:00:02.5")
    assert exc_info.value.side == "end"
    assert "end timestamp" in str(exc_info.value)


def test_is_timestamp_line():
    """Pattern requires two full timestamps around a spaced arrow."""
    assert TimeConverter.is_timestamp_line("00:00:01.000 --> 00:00:04.000")
    assert TimeConverter.is_timestamp_line("00:01.000 --> 00:04.000 align:start")
    assert TimeConverter.is_timestamp_line("1:00:01.000 --> 1:00:04.000")
    assert not TimeConverter.is_timestamp_line("1")
    assert not TimeConverter.is_timestamp_line("00:00:01.000-->00:00:04.000")
    assert not TimeConverter.is_timestamp_line(" 00:00:01.000 --> 00:00:04.000")
    assert not TimeConverter.is_timestamp_line("00:00:01 --> 00:00:04")


def test_milliseconds_to_readable():
    assert TimeConverter.milliseconds_to_readable(3825678) == "01:03:45.678"
    assert TimeConverter.milliseconds_to_readable(-5) == "00:00:00.000"


def test_format_duration():
    assert TimeConverter.format_duration(timedelta(seconds=4.5)) == "4.5s"
    assert TimeConverter.format_duration(timedelta(seconds=90)) == "1m 30.0s"
    assert TimeConverter.format_duration(timedelta(seconds=3825.5)) == "1h 3m 45.5s"


def test_non_ascii_digits_are_not_a_timing_line():
    """Arabic-Indic digits and non-breaking spaces do not count as timestamps."""
    arabic = "\u0660\u0660:\u0660\u0661.\u0660\u0660\u0660 --> \u0660\u0660:\u0660\u0662.\u0660\u0660\u0660"
    assert not TimeConverter.is_timestamp_line(arabic)
    assert not TimeConverter.is_timestamp_line("00:01.000\u00a0-->\u00a000:02.000")
    with pytest.raises(InvalidTimestampFormatError):
        TimeConverter.parse_timestamp("\u0660\u0660:\u0660\u0661.\u0660\u0660\u0660")
