"""Tests for voice span extraction."""

from vttparse.core.blocks import Voice
from vttparse.core.voices import extract_voices


def test_two_closed_voices():
    """Closed voice tags split into one span per speaker."""
    voices = extract_voices("<v Alice>Hi</v> <v Bob>Hello</v>")
    assert voices == (Voice(speaker="Alice", text="Hi"), Voice(speaker="Bob", text="Hello"))


def test_no_tags_is_one_anonymous_voice():
    """Text without voice tags is kept verbatim, untrimmed."""
    voices = extract_voices("  Hello world.\nSecond line ")
    assert voices == (Voice(speaker="", text="  Hello world.\nSecond line "),)


def test_empty_text_still_yields_a_voice():
    assert extract_voices("") == (Voice(speaker="", text=""),)


def test_unclosed_voices_run_to_next_tag():
    """Without </v> a voice ends where the next one starts."""
    voices = extract_voices("<v Roger Bingham>We are in New York City\n<v Neil>and we talk")
    assert voices == (
        Voice(speaker="Roger Bingham", text="We are in New York City"),
        Voice(speaker="Neil", text="and we talk"),
    )


def test_leading_text_becomes_anonymous_voice():
    """Text before the first tag is kept as an unattributed span."""
    voices = extract_voices("Narrator aside <v Alice>Back to me</v>")
    assert voices == (Voice(speaker="", text="Narrator aside"), Voice(speaker="Alice", text="Back to me"))


def test_blank_leading_text_is_skipped():
    voices = extract_voices("   \n<v Alice>Hi")
    assert voices == (Voice(speaker="Alice", text="Hi"),)


def test_text_after_closing_tag_is_dropped():
    """Stray text between a closing tag and the next tag is discarded."""
    voices = extract_voices("<v Alice>Hi</v> stray <v Bob>Hello</v> tail")
    assert voices == (Voice(speaker="Alice", text="Hi"), Voice(speaker="Bob", text="Hello"))


def test_other_markup_passes_through():
    """Only voice tags are interpreted."""
    voices = extract_voices("<v Neil>talk about <i>space</i></v>")
    assert voices == (Voice(speaker="Neil", text="talk about <i>space</i>"),)


def test_voice_text_is_trimmed():
    voices = extract_voices("<v Alice>   padded   </v>")
    assert voices[0].text == "padded"


def test_tag_requires_whitespace_after_v():
    """<vAlice> and <v.loud Alice> are not voice tags."""
    assert extract_voices("<vAlice>Hi") == (Voice(speaker="", text="<vAlice>Hi"),)
    assert extract_voices("<v.loud Alice>Hi") == (Voice(speaker="", text="<v.loud Alice>Hi"),)


def test_speaker_kept_as_written():
    voices = extract_voices("<v Dr. Who>Run</v>")
    assert voices[0].speaker == "Dr. Who"


def test_non_ascii_space_does_not_open_a_voice():
    assert extract_voices("<v\u00a0Alice>Hi") == (Voice(speaker="", text="<v\u00a0Alice>Hi"),)
