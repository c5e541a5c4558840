"""
Shared constants and configurations for the WebVTT parser.

This module contains all the constants used across different modules including:
- WebVTT header and block keywords
- Timestamp line and voice tag patterns
- Recognized cue setting keys
- Encoding detection priorities
- Default configuration values
"""

import re
from typing import FrozenSet, List, Pattern, Set

# ============================================================================
# WEBVTT FORMAT CONSTANTS
# ============================================================================

# Required prefix of the first line of every document
WEBVTT_HEADER: str = "WEBVTT"

# Block keywords (checked against the first line of a block)
NOTE_KEYWORD: str = "NOTE"
STYLE_KEYWORD: str = "STYLE"
REGION_KEYWORD: str = "REGION"

# Separator between start and end timestamps
TIMESTAMP_ARROW: str = "-->"

# Matches timestamp line: "00:00:01.000 --> 00:00:04.000" with optional settings.
# ASCII digits and whitespace only
TIMESTAMP_LINE_PATTERN: Pattern[str] = re.compile(
    r'^(\d{1,2}:)?\d{2}:\d{2}\.\d{3}\s+-->\s+(\d{1,2}:)?\d{2}:\d{2}\.\d{3}',
    re.ASCII,
)

# Single timestamp component checks
HOURS_PATTERN: Pattern[str] = re.compile(r'[0-9]+', re.ASCII)
TWO_DIGIT_PATTERN: Pattern[str] = re.compile(r'[0-9]{2}', re.ASCII)
MILLISECONDS_PATTERN: Pattern[str] = re.compile(r'[0-9]{3}', re.ASCII)

# Matches voice tag: <v Name>
VOICE_START_PATTERN: Pattern[str] = re.compile(r'<v\s+([^>]+)>', re.ASCII)
VOICE_END_TAG: str = "</v>"

# Cue setting keys kept on CueSettings; anything else is dropped
CUE_SETTING_KEYS: FrozenSet[str] = frozenset({
    'vertical', 'line', 'position', 'size', 'align', 'region'
})

# Region setting key that names the region instead of configuring it
REGION_ID_KEY: str = "id"

# Supported subtitle file extensions
VTT_EXTENSIONS: Set[str] = {'.vtt', '.webvtt'}

# ============================================================================
# ENCODING DETECTION CONSTANTS
# ============================================================================

# Encoding trial order when automatic detection gives no answer
ENCODING_PRIORITY: List[str] = [
    'utf-8-sig', 'utf-8', 'utf-16', 'cp1252', 'latin-1'
]

# UTF-8 BOM marker
UTF8_BOM: bytes = b"\xef\xbb\xbf"
BOM_CHAR: str = "\ufeff"

# ============================================================================
# DEFAULT CONFIGURATION VALUES
# ============================================================================

# Environment variables read by the command-line interface
ENV_ENCODING: str = "VTTPARSE_ENCODING"
ENV_LOG_FILE: str = "VTTPARSE_LOG_FILE"

# JSON output indentation
DEFAULT_JSON_INDENT: int = 2

# Default log format
DEFAULT_LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'

# Application metadata
APP_NAME: str = "vttparse"
APP_VERSION: str = "1.0.0"
APP_DESCRIPTION: str = """
A WebVTT subtitle parser with support for:
- Cue, NOTE, STYLE and REGION blocks
- Cue settings and voice (<v Speaker>) spans
- Streaming block-by-block parsing with per-block errors
- JSON export of parsed documents
"""
