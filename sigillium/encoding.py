"""
Hex helpers for public keys and signatures.

The display form is lowercase hexadecimal with no prefix and no separators.
Decoding accepts exactly that form; anything else is a :class:`MalformedInput`.
"""

from __future__ import annotations

import re
from typing import Optional, Union

from .errors import MalformedInput

PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64

_HEX_RE = re.compile(r"[0-9a-f]*")

__all__ = [
    "encode_hex",
    "decode_hex",
    "decode_public_key",
    "decode_signature",
]


def encode_hex(data: Union[bytes, bytearray, memoryview]) -> str:
    return data.hex()


def decode_hex(text: str, *, size: Optional[int] = None, name: str = "value") -> bytes:
    """
    Decode lowercase hex text, optionally requiring an exact decoded ``size``.

    Raises MalformedInput on odd length, non-hex characters (uppercase, a
    ``0x`` prefix and whitespace included) or a wrong decoded size.
    """
    if not isinstance(text, str):
        raise MalformedInput(name, "expected hex text")
    if len(text) % 2:
        raise MalformedInput(name, f"odd number of hex digits ({len(text)})")
    if not _HEX_RE.fullmatch(text):
        raise MalformedInput(name, "expected lowercase hex digits only (0-9, a-f)")
    data = bytes.fromhex(text)
    if size is not None and len(data) != size:
        raise MalformedInput(name, f"expected {size} bytes, got {len(data)}")
    return data


def decode_public_key(text: str) -> bytes:
    return decode_hex(text, size=PUBLIC_KEY_SIZE, name="public key")


def decode_signature(text: str) -> bytes:
    return decode_hex(text, size=SIGNATURE_SIZE, name="signature")
