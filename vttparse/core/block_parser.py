"""
Block classification and construction.

A block is a run of non-blank lines. The first line decides what it is:
- NOTE...   -> Note
- STYLE     -> Style
- REGION... -> Region
- anything else is parsed as a Cue
"""

from typing import Dict, Sequence, Tuple
from ..utils.constants import (
    NOTE_KEYWORD,
    STYLE_KEYWORD,
    REGION_KEYWORD,
    REGION_ID_KEY,
)
from ..utils.logging_config import get_logger
from .blocks import Block, Cue, Note, Region, Style, Voice
from .cue_settings import parse_cue_timing
from .errors import MissingTimestampLineError
from .timing_utils import TimeConverter
from .voices import extract_voices

logger = get_logger(__name__)


def parse_block(lines: Sequence[str]) -> Block:
    """
    Turn one group of non-blank lines into a block.

    Args:
        lines: Lines of the block without line endings; must not be empty

    Returns:
        Note, Style, Region or Cue

    Raises:
        ValueError: If lines is empty
        VTTError: If the group is cue-shaped but the cue cannot be parsed
    """
    if not lines:
        raise ValueError("cannot parse an empty block")

    first = lines[0]

    if first.startswith(NOTE_KEYWORD):
        return _parse_note(lines)

    if first == STYLE_KEYWORD:
        return Style(text='\n'.join(lines[1:]))

    if first.startswith(REGION_KEYWORD):
        return _parse_region(lines)

    return parse_cue(lines)


def _parse_note(lines: Sequence[str]) -> Note:
    """Build a Note from the text after NOTE and any following lines."""
    text = lines[0][len(NOTE_KEYWORD):].strip()
    if len(lines) > 1:
        text = text + '\n' + '\n'.join(lines[1:])
    return Note(text=text.strip())


def _parse_region(lines: Sequence[str]) -> Region:
    """
    Build a Region from "key:value" lines.

    The standard form has REGION alone on the first line. When settings
    follow REGION on the same line, that line is read as a setting line too.
    """
    start_idx = 1 if lines[0] == REGION_KEYWORD else 0

    region_id = ""
    settings: Dict[str, str] = {}
    for line in lines[start_idx:]:
        if line == REGION_KEYWORD:
            continue
        key, sep, value = line.partition(':')
        key = key.strip()
        if not sep or not key:
            logger.debug(f"Skipping region line without a key: {line!r}")
            continue
        value = value.strip()
        if key == REGION_ID_KEY:
            region_id = value
        else:
            settings[key] = value

    return Region(id=region_id, settings=settings)


def parse_cue(lines: Sequence[str]) -> Cue:
    """
    Build a Cue from its identifier, timing line and text lines.

    Args:
        lines: Lines of the cue block; the identifier line is optional

    Returns:
        Parsed Cue. A cue without text lines has no voices.

    Raises:
        MissingTimestampLineError: If an identifier is not followed by a line
        VTTError: Any error raised while decoding the timing line
    """
    idx = 0
    cue_id = ""

    # First line is the cue identifier unless it is already the timing line
    if not TimeConverter.is_timestamp_line(lines[0]):
        cue_id = lines[0]
        idx = 1

    if idx >= len(lines):
        raise MissingTimestampLineError()

    start, end, settings = parse_cue_timing(lines[idx])
    idx += 1

    voices: Tuple[Voice, ...] = ()
    if idx < len(lines):
        voices = extract_voices('\n'.join(lines[idx:]))

    return Cue(
        id=cue_id,
        start_time=start,
        end_time=end,
        settings=settings,
        voices=voices,
    )
