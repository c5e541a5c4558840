"""
Core WebVTT parsing modules.

This package contains the fundamental components for WebVTT parsing:
- Block data structures (Cue, Note, Style, Region)
- Timestamp, cue setting and voice span decoding
- Block classification and the streaming scanner
- Encoding detection and JSON export
"""

from .blocks import BlockType, Block, Cue, CueSettings, Voice, Note, Style, Region, WebVTT
from .errors import (
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
)
from .timing_utils import TimeConverter
from .cue_settings import parse_cue_settings, parse_cue_timing
from .voices import extract_voices
from .block_parser import parse_block, parse_cue
from .scanner import parse, parse_all, iter_file_blocks, parse_file
from .encoding_detection import EncodingDetector
from .serialization import block_to_dict, blocks_to_list, webvtt_to_dict, dump_json

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
    'EncodingDetector',
    'block_to_dict',
    'blocks_to_list',
    'webvtt_to_dict',
    'dump_json',
]
