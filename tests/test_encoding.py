import re

import pytest

from sigillium.encoding import decode_hex, decode_public_key, decode_signature, encode_hex
from sigillium.errors import MalformedInput


@pytest.mark.parametrize("size", [0, 1, 32, 64])
def test_encode_is_lowercase_even_length(size):
    data = bytes(range(256))[-size:] if size else b""
    text = encode_hex(data)
    assert len(text) == 2 * size
    assert re.fullmatch(r"[0-9a-f]*", text)
    assert decode_hex(text) == data


def test_encode_accepts_mutable_buffers():
    assert encode_hex(bytearray(b"\xab\xcd")) == "abcd"
    assert encode_hex(memoryview(b"\x01\xff")) == "01ff"


def test_decode_fixed_sizes():
    assert decode_public_key("00" * 32) == bytes(32)
    assert decode_signature("ff" * 64) == b"\xff" * 64


@pytest.mark.parametrize(
    "text, reason",
    [
        ("abc", "odd number"),
        ("zz", "lowercase hex"),
        ("ABCD", "lowercase hex"),
        ("0xabcd", "lowercase hex"),
        ("ab cd", "odd number"),
        ("ab:cdef", "lowercase hex"),
        (" abcd ", "lowercase hex"),
        ("ab\n", "odd number"),
    ],
)
def test_decode_rejects_malformed_text(text, reason):
    with pytest.raises(MalformedInput, match=reason):
        decode_hex(text)


@pytest.mark.parametrize("text", ["", "00" * 31, "00" * 33])
def test_decode_public_key_rejects_wrong_size(text):
    with pytest.raises(MalformedInput) as excinfo:
        decode_public_key(text)
    assert excinfo.value.field == "public key"
    assert "expected 32 bytes" in excinfo.value.reason
    assert excinfo.value.exit_code == 4


def test_decode_signature_rejects_public_key_sized_input():
    with pytest.raises(MalformedInput, match="signature: expected 64 bytes, got 32"):
        decode_signature("00" * 32)


def test_decode_rejects_non_text():
    with pytest.raises(MalformedInput):
        decode_hex(b"abcd")  # type: ignore[arg-type]
