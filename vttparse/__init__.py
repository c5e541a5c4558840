r"""
vttparse - WebVTT subtitle parser.

Parse a document block by block:

    >>> import io
    >>> from vttparse import parse
    >>> for block, err in parse(io.StringIO("WEBVTT\n\n00:01.000 --> 00:02.000\nHi")):
    ...     print(block.block_type if err is None else err)
    BlockType.CUE

or collect every cue at once with parse_all() / parse_file().
"""

from .core import (
    BlockType,
    Block,
    Cue,
    CueSettings,
    Voice,
    Note,
    Style,
    Region,
    WebVTT,
    VTTError,
    ReadError,
    EmptyInputError,
    MissingHeaderError,
    MissingTimestampLineError,
    InvalidTimestampLineError,
    MissingEndTimestampError,
    InvalidTimestampFormatError,
    InvalidTimestampError,
    InvalidStartTimestampError,
    InvalidEndTimestampError,
    TimeConverter,
    parse_cue_settings,
    parse_cue_timing,
    extract_voices,
    parse_block,
    parse_cue,
    parse,
    parse_all,
    iter_file_blocks,
    parse_file,
    block_to_dict,
    webvtt_to_dict,
    dump_json,
)
from .utils.constants import APP_VERSION

__version__ = APP_VERSION

__all__ = [
    'BlockType',
    'Block',
    'Cue',
    'CueSettings',
    'Voice',
    'Note',
    'Style',
    'Region',
    'WebVTT',
    'VTTError',
    'ReadError',
    'EmptyInputError',
    'MissingHeaderError',
    'MissingTimestampLineError',
    'InvalidTimestampLineError',
    'MissingEndTimestampError',
    'InvalidTimestampFormatError',
    'InvalidTimestampError',
    'InvalidStartTimestampError',
    'InvalidEndTimestampError',
    'TimeConverter',
    'parse_cue_settings',
    'parse_cue_timing',
    'extract_voices',
    'parse_block',
    'parse_cue',
    'parse',
    'parse_all',
    'iter_file_blocks',
    'parse_file',
    'block_to_dict',
    'webvtt_to_dict',
    'dump_json',
]
