import codecs

import pytest

from fs_hospitality.exceptions import EncodingDetectionError
from fs_hospitality.text.encoding import decode_text_bytes, detect_text_encoding, text_data_to_bytes

JAPANESE = "吾輩は猫である。名前はまだ無い。どこで生れたかとんと見当がつかぬ。"


def test_text_data_to_bytes_passthrough():
    assert text_data_to_bytes(b"\x00\x01") == b"\x00\x01"


def test_text_data_to_bytes_reads_file(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"raw content")
    assert text_data_to_bytes(path) == b"raw content"
    assert text_data_to_bytes(str(path)) == b"raw content"


@pytest.mark.parametrize("bad_path", ["", "does/not/exist.txt"])
def test_text_data_to_bytes_invalid_path(bad_path):
    with pytest.raises(FileNotFoundError, match="text_data is not a valid file path"):
        text_data_to_bytes(bad_path)


def test_text_data_to_bytes_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        text_data_to_bytes(tmp_path)


@pytest.mark.parametrize(
    "data,expected",
    [
        (b"The quick brown fox jumps over the lazy dog.", "ascii"),
        (codecs.BOM_UTF8 + "hello".encode("utf-8"), "UTF-8-SIG"),
        ("hello world".encode("utf-16"), "UTF-16"),
        ("hello world".encode("utf-32"), "UTF-32"),
        (JAPANESE.encode("utf-8"), "utf-8"),
    ],
)
def test_detect_text_encoding(data, expected):
    assert detect_text_encoding(data) == expected


def test_detect_text_encoding_from_file(tmp_path):
    path = tmp_path / "ja.txt"
    path.write_bytes(JAPANESE.encode("utf-8"))
    assert detect_text_encoding(path) == "utf-8"


def test_detect_text_encoding_empty():
    with pytest.raises(EncodingDetectionError):
        detect_text_encoding(b"")


def test_detect_text_encoding_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        detect_text_encoding(tmp_path / "missing.txt")


@pytest.mark.parametrize("encoding", ["utf-8", "utf-16-le", "utf-16-be", "utf-32-le", "utf-32-be"])
def test_decode_strips_bom(encoding):
    bom = {
        "utf-8": codecs.BOM_UTF8,
        "utf-16-le": codecs.BOM_UTF16_LE,
        "utf-16-be": codecs.BOM_UTF16_BE,
        "utf-32-le": codecs.BOM_UTF32_LE,
        "utf-32-be": codecs.BOM_UTF32_BE,
    }[encoding]
    assert decode_text_bytes(bom + JAPANESE.encode(encoding), encoding) == JAPANESE


def test_decode_with_aliases():
    assert decode_text_bytes(codecs.BOM_UTF8 + b"abc", "UTF8") == "abc"
    assert decode_text_bytes(JAPANESE.encode("shift_jis"), "sjis") == JAPANESE


def test_decode_detects_encoding():
    assert decode_text_bytes(JAPANESE.encode("utf-16")) == JAPANESE
    assert decode_text_bytes(codecs.BOM_UTF8 + JAPANESE.encode("utf-8")) == JAPANESE


def test_decode_unknown_encoding():
    with pytest.raises(LookupError):
        decode_text_bytes(b"abc", "no-such-encoding")


@pytest.mark.parametrize("encoding", ["shift_jis", "euc_jp"])
def test_detect_japanese_legacy_encoding(encoding):
    data = JAPANESE.encode(encoding)
    assert detect_text_encoding(data).upper() in {"SHIFT_JIS", "CP932", "EUC-JP"}
    assert decode_text_bytes(data) == JAPANESE
