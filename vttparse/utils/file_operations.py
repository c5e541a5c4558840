"""
File operations for WebVTT processing.

This module provides:
- Opening a WebVTT file as a decoded line stream with encoding detection
- Discovering WebVTT files in directories
"""

from pathlib import Path
from typing import List, Optional, TextIO
from .constants import VTT_EXTENSIONS
from .logging_config import get_logger
from ..core.encoding_detection import EncodingDetector
from ..core.errors import ReadError

logger = get_logger(__name__)


class FileHandler:
    """Handles file operations with proper error handling and logging."""

    @staticmethod
    def open_vtt(file_path: Path, encoding: Optional[str] = None) -> TextIO:
        """
        Open a WebVTT file for line-by-line reading.

        Args:
            file_path: Path to the VTT file
            encoding: Encoding to use; detected from the file when None

        Returns:
            Text stream positioned at the first line. The caller closes it.

        Raises:
            ReadError: If the file is missing or cannot be opened

        Example:
            >>> with FileHandler.open_vtt(Path("captions.vtt")) as stream:
            ...     header = stream.readline()
        """
        try:
            if encoding is None:
                encoding = EncodingDetector.detect_encoding(file_path)
            errors = 'strict'
            if encoding is None:
                # Last resort - decode as UTF-8 with replacement characters
                encoding = 'utf-8'
                errors = 'replace'
                logger.warning(f"Failed to detect encoding for {file_path}, using UTF-8 with error replacement")
            logger.debug(f"Opening {file_path.name} with encoding: {encoding}")
            return open(file_path, 'r', encoding=encoding, errors=errors, newline=None)
        except (OSError, LookupError) as e:
            logger.error(f"Failed to open {file_path}: {e}")
            raise ReadError(f"Cannot read VTT file {file_path}: {e}") from e

    @staticmethod
    def find_vtt_files(directory: Path, recursive: bool = False) -> List[Path]:
        """
        Find WebVTT files in a directory.

        Args:
            directory: Directory to search
            recursive: Whether to search subdirectories

        Returns:
            Sorted list of VTT file paths

        Example:
            >>> files = FileHandler.find_vtt_files(Path("/media/captions"), recursive=True)
            >>> print(f"Found {len(files)} VTT files")
        """
        if not directory.is_dir():
            logger.error(f"Not a directory: {directory}")
            return []

        pattern = '**/*' if recursive else '*'
        files = [
            path for path in directory.glob(pattern)
            if path.is_file() and FileHandler.is_vtt_file(path)
        ]
        logger.debug(f"Found {len(files)} VTT files in {directory}")
        return sorted(files)

    @staticmethod
    def is_vtt_file(file_path: Path) -> bool:
        """Check whether a path has a WebVTT extension."""
        return file_path.suffix.lower() in VTT_EXTENSIONS
