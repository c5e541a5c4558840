"""Tests for file discovery, opening and encoding detection."""

import pytest

from vttparse.core.encoding_detection import EncodingDetector
from vttparse.core.errors import ReadError
from vttparse.core.scanner import parse_file
from vttparse.utils.file_operations import FileHandler


def test_bom_file_detected(testdata_dir):
    path = testdata_dir / "bom.vtt"
    assert EncodingDetector.has_bom(path)
    assert EncodingDetector.detect_encoding(path) == "utf-8-sig"


def test_plain_utf8_detected(tmp_path):
    path = tmp_path / "plain.vtt"
    path.write_bytes("WEBVTT\n\n00:01.000 --> 00:02.000\nnaïve\n".encode("utf-8"))
    assert not EncodingDetector.has_bom(path)
    assert EncodingDetector.detect_encoding(path) == "utf-8"


def test_legacy_code_page_still_opens(tmp_path):
    """A non UTF-8 file gets some encoding that decodes it."""
    path = tmp_path / "legacy.vtt"
    path.write_bytes("WEBVTT\n\n00:01.000 --> 00:02.000\nDéjà vu, très élégant\n".encode("cp1252"))
    encoding = EncodingDetector.detect_encoding(path)
    assert encoding is not None
    assert encoding != "utf-8"
    vtt = parse_file(path)
    assert len(vtt.cues) == 1


def test_explicit_encoding_skips_detection(tmp_path):
    path = tmp_path / "latin.vtt"
    path.write_bytes("WEBVTT\n\n00:01.000 --> 00:02.000\nCafé\n".encode("latin-1"))
    vtt = parse_file(path, encoding="latin-1")
    assert vtt.cues[0].text == "Café"


def test_open_vtt_missing_file(tmp_path):
    with pytest.raises(ReadError):
        FileHandler.open_vtt(tmp_path / "missing.vtt")


def test_open_vtt_unknown_encoding(testdata_dir):
    with pytest.raises(ReadError):
        FileHandler.open_vtt(testdata_dir / "basic.vtt", encoding="no-such-codec")


def test_open_vtt_translates_crlf(testdata_dir):
    with FileHandler.open_vtt(testdata_dir / "crlf.vtt") as stream:
        assert stream.readline() == "WEBVTT\n"


def test_find_vtt_files(tmp_path):
    (tmp_path / "a.vtt").write_text("WEBVTT\n", encoding="utf-8")
    (tmp_path / "b.WEBVTT").write_text("WEBVTT\n", encoding="utf-8")
    (tmp_path / "c.srt").write_text("1\n", encoding="utf-8")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "d.vtt").write_text("WEBVTT\n", encoding="utf-8")

    flat = FileHandler.find_vtt_files(tmp_path)
    assert [p.name for p in flat] == ["a.vtt", "b.WEBVTT"]

    deep = FileHandler.find_vtt_files(tmp_path, recursive=True)
    assert sorted(p.name for p in deep) == ["a.vtt", "b.WEBVTT", "d.vtt"]


def test_find_vtt_files_not_a_directory(tmp_path):
    assert FileHandler.find_vtt_files(tmp_path / "missing") == []


def test_is_vtt_file(tmp_path):
    assert FileHandler.is_vtt_file(tmp_path / "x.vtt")
    assert FileHandler.is_vtt_file(tmp_path / "x.VTT")
    assert not FileHandler.is_vtt_file(tmp_path / "x.srt")
