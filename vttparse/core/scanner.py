"""
Streaming WebVTT scanner.

parse() reads a document one line at a time and yields one (block, error)
pair per block. Exactly one side of each pair is set. A bad cue is reported
as that block's error and scanning carries on with the next block; a missing
header, an empty input or a read failure ends the stream.

parse_all() drives parse() to the end, keeps only the cues, and raises the
first error it sees.
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union
from ..utils.constants import BOM_CHAR, WEBVTT_HEADER
from ..utils.file_operations import FileHandler
from ..utils.logging_config import get_logger
from .block_parser import parse_block
from .blocks import Block, Cue, WebVTT
from .errors import EmptyInputError, MissingHeaderError, ReadError, VTTError

logger = get_logger(__name__)

BlockResult = Tuple[Optional[Block], Optional[VTTError]]
LineSource = Iterable[Union[str, bytes]]


def _strip_line_ending(line: Union[str, bytes]) -> str:
    """Decode a raw line and drop its '\\n' or '\\r\\n' terminator."""
    if isinstance(line, bytes):
        line = line.decode('utf-8')
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return line


def _next_line(lines: Iterator[Union[str, bytes]]) -> Optional[str]:
    """Read one line without its terminator, or None at end of stream."""
    raw = next(lines, None)
    if raw is None:
        return None
    return _strip_line_ending(raw)


def _read_error(message: str, cause: Exception) -> ReadError:
    error = ReadError(f"{message}: {cause}")
    error.__cause__ = cause
    return error


def _classify(lines: List[str]) -> BlockResult:
    """Run the block classifier and turn its failure into an error item."""
    try:
        block = parse_block(lines)
    except VTTError as e:
        logger.debug(f"Block starting with {lines[0]!r} failed: {e}")
        return None, e
    logger.debug(f"Parsed {block.block_type.value} block ({len(lines)} lines)")
    return block, None


def parse(stream: LineSource) -> Iterator[BlockResult]:
    """
    Parse a WebVTT document block by block.

    Args:
        stream: Text or binary file object, or any iterable of lines.
            Binary lines are decoded as UTF-8.

    Returns:
        Iterator of (block, None) for every parsed block and (None, error)
        for every failure. Lines are pulled only as items are requested.

    Raises:
        TypeError: If given document text (str or bytes) instead of a
            stream of lines

    Example:
        >>> for block, err in parse(io.StringIO("WEBVTT\\n\\n00:01.000 --> 00:02.000\\nHi")):
        ...     print(block or err)
    """
    if isinstance(stream, (str, bytes, bytearray)):
        raise TypeError(
            f"parse() expects a stream of lines, not {type(stream).__name__}; "
            "wrap document text in io.StringIO"
        )
    return _scan(iter(stream))


def _scan(lines: Iterator[Union[str, bytes]]) -> Iterator[BlockResult]:
    """Generator behind parse()."""
    try:
        header = _next_line(lines)
    except (OSError, UnicodeDecodeError) as e:
        yield None, _read_error("failed to read header", e)
        return

    if header is None:
        yield None, EmptyInputError()
        return

    if header.startswith(BOM_CHAR):
        header = header[len(BOM_CHAR):]
    if not header.startswith(WEBVTT_HEADER):
        logger.debug(f"First line is not a WEBVTT header: {header!r}")
        yield None, MissingHeaderError()
        return

    group: List[str] = []
    read_error: Optional[ReadError] = None
    while True:
        try:
            line = _next_line(lines)
        except (OSError, UnicodeDecodeError) as e:
            read_error = _read_error("failed to read line", e)
            break
        if line is None:
            break

        if line == "":
            # Blank line = end of block
            if group:
                yield _classify(group)
                group = []
            continue
        group.append(line)

    # Last block has no trailing blank line
    if group:
        yield _classify(group)

    if read_error is not None:
        yield None, read_error


def parse_all(stream: LineSource) -> WebVTT:
    """
    Parse a whole WebVTT document and return its cues.

    Notes, styles and regions are skipped. Parsing stops at the first error.

    Args:
        stream: Text or binary file object, or any iterable of lines

    Returns:
        WebVTT holding every cue in document order

    Raises:
        VTTError: The first error produced by parse()
    """
    vtt = WebVTT()
    for block, err in parse(stream):
        if err is not None:
            raise err
        if isinstance(block, Cue):
            vtt.cues.append(block)
    return vtt


def iter_file_blocks(file_path: Path, encoding: Optional[str] = None) -> Iterator[BlockResult]:
    """
    Stream the blocks of a WebVTT file.

    The file is opened on first iteration and closed when the generator is
    exhausted or closed.

    Args:
        file_path: Path to the VTT file
        encoding: Encoding to use; detected from the file when None

    Yields:
        Same pairs as parse()
    """
    try:
        stream = FileHandler.open_vtt(file_path, encoding)
    except ReadError as e:
        yield None, e
        return

    with stream:
        yield from parse(stream)


def parse_file(file_path: Path, encoding: Optional[str] = None) -> WebVTT:
    """
    Parse a WebVTT file and return its cues.

    Args:
        file_path: Path to the VTT file
        encoding: Encoding to use; detected from the file when None

    Returns:
        WebVTT holding every cue in document order

    Raises:
        ReadError: If the file cannot be opened or read
        VTTError: The first error found in the document
    """
    with FileHandler.open_vtt(file_path, encoding) as stream:
        vtt = parse_all(stream)
    logger.info(f"Parsed {len(vtt.cues)} cues from VTT file: {file_path.name}")
    return vtt
