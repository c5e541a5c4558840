"""Cue setting decoding for WebVTT timing lines."""

from datetime import timedelta
from typing import Dict, Iterable, Tuple
from ..utils.constants import CUE_SETTING_KEYS
from ..utils.logging_config import get_logger
from .blocks import CueSettings
from .timing_utils import TimeConverter

logger = get_logger(__name__)


def parse_cue_settings(tokens: Iterable[str]) -> CueSettings:
    """
    Build CueSettings from "key:value" tokens.

    Tokens without a key (no colon, or a leading colon) and unknown keys are
    ignored. When a key repeats, the last value wins.

    Args:
        tokens: Whitespace-separated setting tokens from a timing line

    Returns:
        CueSettings with the recognized values filled in

    Example:
        >>> parse_cue_settings(["align:center", "line:0"]).align
        'center'
    """
    values: Dict[str, str] = {}
    for token in tokens:
        key, sep, value = token.partition(':')
        if not sep or not key:
            continue
        if key not in CUE_SETTING_KEYS:
            logger.debug(f"Ignoring unknown cue setting: {token}")
            continue
        values[key] = value
    return CueSettings(**values)


def parse_cue_timing(line: str) -> Tuple[timedelta, timedelta, CueSettings]:
    """
    Decode a full cue timing line.

    Args:
        line: Timing line, e.g. "00:00:00.500 --> 00:00:02.000 align:center"

    Returns:
        Tuple of (start, end, settings)

    Raises:
        VTTError: Any timestamp-line error from TimeConverter.parse_timestamp_line
    """
    start, end, tokens = TimeConverter.parse_timestamp_line(line)
    return start, end, parse_cue_settings(tokens)
