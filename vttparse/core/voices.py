"""
Voice span extraction for cue text.

Cue text may attribute its lines to speakers with <v Name>...</v> tags. The
closing tag is optional: an unclosed voice runs up to the next <v ...> tag or
to the end of the text. Text between a closing tag and the next opening tag
is dropped. Other inline tags (<i>, <b>, <c.class>) are left in the text.
"""

from typing import List, Tuple
from ..utils.constants import VOICE_START_PATTERN, VOICE_END_TAG
from .blocks import Voice


def extract_voices(text: str) -> Tuple[Voice, ...]:
    """
    Split cue text into speaker-attributed spans.

    Args:
        text: Raw cue text (lines already joined by newlines)

    Returns:
        Voices in order of appearance; never empty

    Example:
        >>> extract_voices("<v Alice>Hi</v> <v Bob>Hello</v>")
        (Voice(speaker='Alice', text='Hi'), Voice(speaker='Bob', text='Hello'))
    """
    matches = list(VOICE_START_PATTERN.finditer(text))
    if not matches:
        # No voice tags, the whole text is one anonymous voice
        return (Voice(speaker="", text=text),)

    voices: List[Voice] = []

    # Text before the first tag
    prefix = text[:matches[0].start()].strip()
    if prefix:
        voices.append(Voice(speaker="", text=prefix))

    for i, match in enumerate(matches):
        span_end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        span = text[match.end():span_end]

        close_idx = span.find(VOICE_END_TAG)
        if close_idx >= 0:
            span = span[:close_idx]

        voices.append(Voice(speaker=match.group(1), text=span.strip()))

    return tuple(voices)
