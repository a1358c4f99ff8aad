"""Tests for byte serialization."""

import plistlib
from datetime import datetime, timedelta, timezone

import pytest

from plist_core import (
    CodecFailure,
    Format,
    InvalidValue,
    PlistCoreError,
    VBinary,
    VDate,
    VList,
    VMap,
    VNumber,
    VText,
    decode,
    encode,
)

SAMPLES = [
    VMap({
        "Name": "Mark",
        "Age": 47,
        "Children": [{"Name": "Nadia", "Age": 16}],
    }),
    VList(["Mammal", "Reptile", "Amphibian"]),
    VMap({}),
    VList([]),
    VText("héllo wörld"),
    VNumber(True),
    VNumber(False),
    VNumber(-(1 << 63)),
    VNumber((1 << 64) - 1),
    VNumber(3.25),
    VNumber(float("nan")),
    VNumber(float("-inf")),
    VBinary(b"\x00\xff" * 40),
    VDate(datetime(2015, 7, 18, 16, 45, 30)),
    VDate(datetime(2015, 7, 18, 16, 45, 30, tzinfo=timezone(timedelta(hours=9)))),
    VList([1, 1.0, True, {"nested": [b"", datetime(1999, 12, 31, 23, 59, 59)]}]),
]


@pytest.mark.parametrize("fmt", list(Format))
@pytest.mark.parametrize("value", SAMPLES)
def test_round_trip(value, fmt):
    assert decode(encode(value, fmt)) == value


def test_default_format_is_binary():
    assert encode(VText("x")).startswith(b"bplist00")


def test_xml_format():
    data = encode(VMap({"k": "v"}), Format.XML)
    assert data.startswith(b"<?xml")
    assert b"<key>k</key>" in data


def test_explicit_decode_format():
    data = encode(VList([1]), Format.BINARY)
    assert decode(data, Format.BINARY) == VList([1])
    with pytest.raises(CodecFailure):
        decode(data, Format.XML)


def test_readable_by_plistlib():
    data = encode(VMap({"Name": "Mark", "Age": 47}))
    assert plistlib.loads(data) == {"Name": "Mark", "Age": 47}


def test_binary_keeps_microseconds():
    value = VDate(datetime(2024, 5, 1, 12, 0, 0, 250000))
    assert decode(encode(value, Format.BINARY)) == value


def test_number_kinds_survive():
    value = decode(encode(VList([1, 1.0, True])))
    assert [type(item.number) for _, item in value] == [int, float, bool]


class TestDecodeFailure:
    def test_garbage(self):
        with pytest.raises(CodecFailure) as info:
            decode(b"definitely not a plist")
        assert info.value.operation == "decode"

    def test_empty(self):
        with pytest.raises(CodecFailure):
            decode(b"")

    def test_truncated_binary(self):
        with pytest.raises(CodecFailure):
            decode(b"bplist00" + b"\x00" * 10)

    def test_malformed_xml_date(self):
        data = (
            b'<?xml version="1.0" encoding="UTF-8"?>'
            b'<plist version="1.0"><date>not-a-date</date></plist>'
        )
        with pytest.raises(CodecFailure) as info:
            decode(data)
        assert info.value.operation == "decode"

    def test_self_referencing_array(self):
        # array object 0 whose only element is a reference to object 0
        data = (
            b"bplist00"
            + b"\xa1\x00"
            + b"\x08"
            + b"\x00" * 6 + b"\x01\x01"
            + (1).to_bytes(8, "big")
            + (0).to_bytes(8, "big")
            + (10).to_bytes(8, "big")
        )
        assert len(data) == 43
        with pytest.raises(PlistCoreError):
            decode(data)

    def test_uid_is_not_a_plist_value(self):
        data = plistlib.dumps({"$top": plistlib.UID(1)}, fmt=plistlib.FMT_BINARY)
        with pytest.raises(InvalidValue) as info:
            decode(data)
        assert info.value.path == ("$top",)


class TestEncodeFailure:
    def test_xml_rejects_control_characters(self):
        with pytest.raises(CodecFailure) as info:
            encode(VText("bell\x07"), Format.XML)
        assert info.value.operation == "encode"
        assert isinstance(info.value.__cause__, ValueError)

    def test_xml_rejects_carriage_return(self):
        with pytest.raises(CodecFailure) as info:
            encode(VText("a\rb"), Format.XML)
        assert info.value.operation == "encode"

    def test_xml_rejects_carriage_return_in_key(self):
        with pytest.raises(CodecFailure):
            encode(VMap({"a\r\nb": 1}), Format.XML)

    def test_xml_rejects_sub_second_date(self):
        with pytest.raises(CodecFailure):
            encode(VList([datetime(2024, 5, 1, 12, 0, 0, 250000)]), Format.XML)

    def test_binary_keeps_carriage_return(self):
        value = VMap({"a\r\nb": "c\rd"})
        assert decode(encode(value, Format.BINARY)) == value

    def test_binary_accepts_control_characters(self):
        value = VText("bell\x07")
        assert decode(encode(value, Format.BINARY)) == value
