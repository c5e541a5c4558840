"""
Encoding detection utilities for WebVTT files.

WebVTT is defined as UTF-8, but files in the wild are often saved with a BOM
or in a legacy code page. Detection order: BOM, strict UTF-8,
charset-normalizer, then a manual trial of ENCODING_PRIORITY.
"""

from pathlib import Path
from typing import Optional
from charset_normalizer import from_path
from ..utils.constants import ENCODING_PRIORITY, UTF8_BOM
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


class EncodingDetector:
    """Handles encoding detection for subtitle files."""

    @staticmethod
    def detect_encoding(file_path: Path) -> Optional[str]:
        """
        Detect the encoding of a text file using multiple methods.

        Args:
            file_path: Path to the file to analyze

        Returns:
            Detected encoding name or None if detection failed

        Example:
            >>> encoding = EncodingDetector.detect_encoding(Path("captions.vtt"))
            >>> print(f"Detected encoding: {encoding}")
        """
        if EncodingDetector.has_bom(file_path):
            logger.debug(f"UTF-8 BOM detected in {file_path.name}, using utf-8-sig")
            return 'utf-8-sig'

        if EncodingDetector._is_utf8(file_path):
            return 'utf-8'

        detected = EncodingDetector._auto_detect_encoding(file_path)
        if detected:
            logger.debug(f"Auto-detected encoding for {file_path.name}: {detected}")
            return detected.lower()

        logger.debug(f"Auto-detection failed for {file_path.name}, trying manual detection")
        return EncodingDetector._manual_detect_encoding(file_path)

    @staticmethod
    def _is_utf8(file_path: Path) -> bool:
        """Check whether the whole file decodes as UTF-8."""
        try:
            file_path.read_bytes().decode('utf-8')
        except UnicodeDecodeError:
            return False
        return True

    @staticmethod
    def _auto_detect_encoding(file_path: Path) -> Optional[str]:
        """
        Use charset-normalizer to guess the encoding.

        Args:
            file_path: Path to the file

        Returns:
            Detected encoding or None
        """
        result = from_path(file_path)
        best = result.best()
        if best is None:
            return None
        return best.encoding

    @staticmethod
    def _manual_detect_encoding(file_path: Path) -> Optional[str]:
        """
        Try each encoding from the priority list until one decodes cleanly.

        Args:
            file_path: Path to the file

        Returns:
            Detected encoding or None
        """
        raw_data = file_path.read_bytes()
        for encoding in ENCODING_PRIORITY:
            try:
                raw_data.decode(encoding)
            except UnicodeDecodeError:
                continue
            logger.debug(f"Manual detection successful for {file_path.name}: {encoding}")
            return encoding

        logger.warning(f"Could not detect encoding for {file_path}")
        return None

    @staticmethod
    def has_bom(file_path: Path) -> bool:
        """
        Check if file has UTF-8 BOM.

        Args:
            file_path: Path to the file

        Returns:
            True if file has UTF-8 BOM

        Example:
            >>> has_bom = EncodingDetector.has_bom(Path("captions.vtt"))
            >>> print(f"File has BOM: {has_bom}")
        """
        with open(file_path, 'rb') as f:
            return f.read(len(UTF8_BOM)) == UTF8_BOM
