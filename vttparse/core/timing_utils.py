"""
Time conversion utilities for WebVTT parsing.

This module provides functions for:
- Decoding WebVTT timestamps (HH:MM:SS.mmm and MM:SS.mmm) into timedelta
- Splitting a cue timing line into start, end and setting tokens
- Formatting durations for display and serialization
"""

from datetime import timedelta
from typing import List, Tuple
from ..utils.constants import (
    TIMESTAMP_ARROW,
    TIMESTAMP_LINE_PATTERN,
    HOURS_PATTERN,
    TWO_DIGIT_PATTERN,
    MILLISECONDS_PATTERN,
)
from ..utils.logging_config import get_logger
from .errors import (
    InvalidTimestampFormatError,
    InvalidTimestampLineError,
    MissingEndTimestampError,
    InvalidStartTimestampError,
    InvalidEndTimestampError,
)

logger = get_logger(__name__)


class TimeConverter:
    """Handles WebVTT timestamp decoding and formatting."""

    @staticmethod
    def is_timestamp_line(line: str) -> bool:
        """
        Check whether a line looks like a cue timing line.

        Args:
            line: A single line of a block

        Returns:
            True if the line starts with "<timestamp> --> <timestamp>"

        Example:
            >>> TimeConverter.is_timestamp_line("00:01.000 --> 00:02.000 align:start")
            True
        """
        return TIMESTAMP_LINE_PATTERN.match(line) is not None

    @staticmethod
    def parse_timestamp(time_str: str) -> timedelta:
        """
        Convert a WebVTT timestamp to a timedelta.

        Args:
            time_str: Timestamp in H:MM:SS.mmm or MM:SS.mmm form; the
                millisecond part is optional but must be three digits

        Returns:
            Exact duration from the start of the media

        Raises:
            InvalidTimestampFormatError: On a wrong component count, wrong
                digit count or non-digit content

        Example:
            >>> TimeConverter.parse_timestamp("01:02:03.040") == TimeConverter.parse_timestamp("62:03.040")
            True
        """
        parts = time_str.split(':')
        if len(parts) == 3:
            hours_str, minutes_str, seconds_str = parts
        elif len(parts) == 2:
            hours_str = None
            minutes_str, seconds_str = parts
        else:
            raise InvalidTimestampFormatError(time_str, "invalid timestamp format")

        hours = 0
        if hours_str is not None:
            if not HOURS_PATTERN.fullmatch(hours_str):
                raise InvalidTimestampFormatError(time_str, "invalid hours")
            hours = int(hours_str)

        if not TWO_DIGIT_PATTERN.fullmatch(minutes_str):
            raise InvalidTimestampFormatError(time_str, "invalid minutes")
        minutes = int(minutes_str)

        seconds_str, dot, millis_str = seconds_str.partition('.')
        if not TWO_DIGIT_PATTERN.fullmatch(seconds_str):
            raise InvalidTimestampFormatError(time_str, "invalid seconds")
        seconds = int(seconds_str)

        milliseconds = 0
        if dot:
            if not MILLISECONDS_PATTERN.fullmatch(millis_str):
                raise InvalidTimestampFormatError(time_str, "invalid milliseconds")
            milliseconds = int(millis_str)

        return timedelta(hours=hours, minutes=minutes, seconds=seconds,
                         milliseconds=milliseconds)

    @staticmethod
    def parse_timestamp_line(line: str) -> Tuple[timedelta, timedelta, List[str]]:
        """
        Split a cue timing line into its start, end and setting tokens.

        Args:
            line: Timing line (e.g., "00:01.000 --> 00:04.000 align:start line:0")

        Returns:
            Tuple of (start, end, setting_tokens)

        Raises:
            InvalidTimestampLineError: If the line has no '-->'
            MissingEndTimestampError: If nothing follows '-->'
            InvalidStartTimestampError: If the start timestamp is malformed
            InvalidEndTimestampError: If the end timestamp is malformed
        """
        start_part, arrow, rest = line.partition(TIMESTAMP_ARROW)
        if not arrow:
            raise InvalidTimestampLineError(line)

        start_str = start_part.strip()
        rest_parts = rest.split()
        if not rest_parts:
            raise MissingEndTimestampError(line)
        end_str = rest_parts[0]

        try:
            start = TimeConverter.parse_timestamp(start_str)
        except InvalidTimestampFormatError as e:
            logger.debug(f"Bad start timestamp in line {line!r}: {e}")
            raise InvalidStartTimestampError(e) from e

        try:
            end = TimeConverter.parse_timestamp(end_str)
        except InvalidTimestampFormatError as e:
            logger.debug(f"Bad end timestamp in line {line!r}: {e}")
            raise InvalidEndTimestampError(e) from e

        return start, end, rest_parts[1:]

    @staticmethod
    def to_milliseconds(value: timedelta) -> int:
        """
        Convert a timedelta to whole milliseconds.

        Args:
            value: Duration to convert

        Returns:
            Duration in milliseconds
        """
        return value // timedelta(milliseconds=1)

    @staticmethod
    def milliseconds_to_readable(ms: int) -> str:
        """
        Convert milliseconds to readable format (HH:MM:SS.mmm).

        Args:
            ms: Time in milliseconds

        Returns:
            Readable time string

        Example:
            >>> readable = TimeConverter.milliseconds_to_readable(3825678)
            >>> print(readable)  # "01:03:45.678"
        """
        if ms < 0:
            ms = 0
        hours = ms // 3600000
        ms %= 3600000
        minutes = ms // 60000
        ms %= 60000
        seconds = ms // 1000
        milliseconds = ms % 1000
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{milliseconds:03d}"

    @staticmethod
    def format_duration(value: timedelta) -> str:
        """
        Format a duration to a human-readable string.

        Args:
            value: Duration to format

        Returns:
            Human-readable duration string

        Example:
            >>> TimeConverter.format_duration(timedelta(seconds=3825.5))
            '1h 3m 45.5s'
        """
        seconds = value.total_seconds()
        if seconds < 60:
            return f"{seconds:.1f}s"
        elif seconds < 3600:
            minutes = int(seconds // 60)
            remaining_seconds = seconds % 60
            return f"{minutes}m {remaining_seconds:.1f}s"
        else:
            hours = int(seconds // 3600)
            remaining_seconds = seconds % 3600
            minutes = int(remaining_seconds // 60)
            remaining_seconds = remaining_seconds % 60
            return f"{hours}h {minutes}m {remaining_seconds:.1f}s"
