"""
WebVTT block data structures.

This module provides:
- The four block types a document is made of (Cue, Note, Style, Region)
- Cue settings and voice spans carried by cues
- The WebVTT container returned when a whole document is parsed
"""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Tuple, Union
from .timing_utils import TimeConverter


class BlockType(Enum):
    """Kinds of blocks found in a WebVTT document."""
    CUE = "cue"
    NOTE = "note"
    STYLE = "style"
    REGION = "region"


@dataclass(frozen=True)
class CueSettings:
    """Rendering hints from the cue timing line. Unset values are empty strings."""
    vertical: str = ""
    line: str = ""
    position: str = ""
    size: str = ""
    align: str = ""
    region: str = ""


@dataclass(frozen=True)
class Voice:
    """A run of cue text attributed to one speaker ("" when anonymous)."""
    speaker: str = ""
    text: str = ""


@dataclass(frozen=True)
class Cue:
    """Represents a single WebVTT cue."""
    id: str
    start_time: timedelta
    end_time: timedelta
    settings: CueSettings = field(default_factory=CueSettings)
    voices: Tuple[Voice, ...] = ()

    @property
    def block_type(self) -> BlockType:
        return BlockType.CUE

    def duration(self) -> timedelta:
        """Get the duration of this cue."""
        return self.end_time - self.start_time

    @property
    def text(self) -> str:
        """All voice text joined by newlines, speakers dropped."""
        return '\n'.join(voice.text for voice in self.voices)

    def format_time_range(self) -> str:
        """
        Format the time range as a string.

        Returns:
            Time range such as "00:00:01.000 --> 00:00:04.000"
        """
        start_str = TimeConverter.milliseconds_to_readable(
            TimeConverter.to_milliseconds(self.start_time))
        end_str = TimeConverter.milliseconds_to_readable(
            TimeConverter.to_milliseconds(self.end_time))
        return f"{start_str} --> {end_str}"


@dataclass(frozen=True)
class Note:
    """Represents a NOTE (comment) block."""
    text: str = ""

    @property
    def block_type(self) -> BlockType:
        return BlockType.NOTE


@dataclass(frozen=True)
class Style:
    """Represents a STYLE block. The body is kept verbatim."""
    text: str = ""

    @property
    def block_type(self) -> BlockType:
        return BlockType.STYLE


@dataclass(frozen=True)
class Region:
    """Represents a REGION definition block. Settings are read-only."""
    id: str = ""
    settings: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, 'settings', MappingProxyType(dict(self.settings)))

    @property
    def block_type(self) -> BlockType:
        return BlockType.REGION


Block = Union[Cue, Note, Style, Region]


@dataclass
class WebVTT:
    """Represents a parsed WebVTT document reduced to its cues."""
    cues: List[Cue] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cues)

    def __iter__(self):
        return iter(self.cues)

    def get_total_duration(self) -> timedelta:
        """Get the span from the earliest cue start to the latest cue end."""
        if not self.cues:
            return timedelta(0)
        earliest = min(cue.start_time for cue in self.cues)
        latest = max(cue.end_time for cue in self.cues)
        return latest - earliest

    def speakers(self) -> List[str]:
        """Named speakers in order of first appearance."""
        seen: List[str] = []
        for cue in self.cues:
            for voice in cue.voices:
                if voice.speaker and voice.speaker not in seen:
                    seen.append(voice.speaker)
        return seen
