"""
Plain-record export of parsed blocks.

Field names are stable so that JSON written by one release can be read by
tools built against another. Times are integer milliseconds.
"""

import json
from dataclasses import asdict
from typing import Any, Dict, Iterable, List
from ..utils.constants import DEFAULT_JSON_INDENT
from .blocks import Block, BlockType, Cue, Note, Region, Style, WebVTT
from .timing_utils import TimeConverter


def _cue_to_dict(cue: Cue) -> Dict[str, Any]:
    return {
        'type': BlockType.CUE.value,
        'id': cue.id,
        'start_time': TimeConverter.to_milliseconds(cue.start_time),
        'end_time': TimeConverter.to_milliseconds(cue.end_time),
        'settings': asdict(cue.settings),
        'voices': [asdict(voice) for voice in cue.voices],
    }


def block_to_dict(block: Block) -> Dict[str, Any]:
    """
    Convert a block to a JSON-ready dictionary.

    Args:
        block: Cue, Note, Style or Region

    Returns:
        Dictionary with a "type" key and the block's fields

    Raises:
        TypeError: If the object is not a block
    """
    if isinstance(block, Cue):
        return _cue_to_dict(block)
    if isinstance(block, Note):
        return {'type': BlockType.NOTE.value, 'text': block.text}
    if isinstance(block, Style):
        return {'type': BlockType.STYLE.value, 'text': block.text}
    if isinstance(block, Region):
        return {
            'type': BlockType.REGION.value,
            'id': block.id,
            'settings': dict(block.settings),
        }
    raise TypeError(f"Not a WebVTT block: {type(block).__name__}")


def blocks_to_list(blocks: Iterable[Block]) -> List[Dict[str, Any]]:
    """Convert a sequence of blocks to a list of dictionaries."""
    return [block_to_dict(block) for block in blocks]


def webvtt_to_dict(vtt: WebVTT) -> Dict[str, Any]:
    """Convert a parsed document to {"cues": [...]}."""
    return {'cues': blocks_to_list(vtt.cues)}


def dump_json(data: Any, indent: int = DEFAULT_JSON_INDENT) -> str:
    """
    Serialize converted records, blocks or a WebVTT document to JSON.

    Args:
        data: A WebVTT, a single block, a list of blocks, or plain records
        indent: JSON indentation

    Returns:
        JSON text (UTF-8 characters kept as-is)
    """
    if isinstance(data, WebVTT):
        data = webvtt_to_dict(data)
    elif isinstance(data, (Cue, Note, Style, Region)):
        data = block_to_dict(data)
    elif isinstance(data, list) and all(isinstance(item, (Cue, Note, Style, Region)) for item in data):
        data = blocks_to_list(data)
    return json.dumps(data, indent=indent, ensure_ascii=False)
