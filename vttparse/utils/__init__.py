"""
Utility modules.

This package contains shared utility functions and configurations:
- File discovery and opening with encoding detection
- Logging configuration
- Shared constants and configurations
"""

from .file_operations import FileHandler
from .logging_config import setup_logging, get_logger
from .constants import (
    WEBVTT_HEADER,
    NOTE_KEYWORD,
    STYLE_KEYWORD,
    REGION_KEYWORD,
    TIMESTAMP_ARROW,
    TIMESTAMP_LINE_PATTERN,
    VOICE_START_PATTERN,
    VOICE_END_TAG,
    CUE_SETTING_KEYS,
    VTT_EXTENSIONS,
    ENCODING_PRIORITY,
    UTF8_BOM,
    ENV_ENCODING,
    ENV_LOG_FILE,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_DATE_FORMAT,
    APP_NAME,
    APP_VERSION,
    APP_DESCRIPTION,
)

__all__ = [
    'FileHandler',
    'setup_logging',
    'get_logger',
    'WEBVTT_HEADER',
    'NOTE_KEYWORD',
    'STYLE_KEYWORD',
    'REGION_KEYWORD',
    'TIMESTAMP_ARROW',
    'TIMESTAMP_LINE_PATTERN',
    'VOICE_START_PATTERN',
    'VOICE_END_TAG',
    'CUE_SETTING_KEYS',
    'VTT_EXTENSIONS',
    'ENCODING_PRIORITY',
    'UTF8_BOM',
    'ENV_ENCODING',
    'ENV_LOG_FILE',
    'DEFAULT_LOG_FORMAT',
    'DEFAULT_LOG_DATE_FORMAT',
    'APP_NAME',
    'APP_VERSION',
    'APP_DESCRIPTION',
]
