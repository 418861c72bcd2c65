"""
Detached Ed25519 signatures over arbitrary messages.

Signing is RFC 8032 Ed25519 through libsodium: the nonce is derived from the
secret key and the message, so the same keypair and message always give the
same 64-byte signature. Verification only needs the 32-byte public key.
"""

from __future__ import annotations

import logging
from typing import Union

from nacl.bindings import crypto_sign
from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

from .encoding import PUBLIC_KEY_SIZE, SIGNATURE_SIZE, decode_public_key, decode_signature
from .errors import MalformedInput, VerificationFailed
from .keys import KeyPair

log = logging.getLogger(__name__)

Message = Union[bytes, bytearray, memoryview, str]

__all__ = ["Message", "sign", "verify", "verify_hex", "is_valid"]


def _as_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def sign(keypair: KeyPair, message: Message) -> bytes:
    """Return the 64-byte detached signature of ``message``."""
    signed = crypto_sign(_as_bytes(message), keypair.secret_key.bytes())
    return signed[:SIGNATURE_SIZE]


def verify(
    public_key: Union[bytes, bytearray],
    message: Message,
    signature: Union[bytes, bytearray],
) -> None:
    """
    Check a detached signature. Returns None when it is valid.

    Raises MalformedInput for wrongly sized inputs and VerificationFailed when
    the signature does not validate under the key (keys that are not valid
    curve points included).
    """
    if len(public_key) != PUBLIC_KEY_SIZE:
        raise MalformedInput("public key", f"expected {PUBLIC_KEY_SIZE} bytes, got {len(public_key)}")
    if len(signature) != SIGNATURE_SIZE:
        raise MalformedInput("signature", f"expected {SIGNATURE_SIZE} bytes, got {len(signature)}")
    try:
        VerifyKey(bytes(public_key)).verify(_as_bytes(message), bytes(signature))
    except BadSignatureError:
        log.debug("signature rejected for public key %s", bytes(public_key).hex())
        raise VerificationFailed() from None


def verify_hex(public_key_hex: str, message: Message, signature_hex: str) -> None:
    """Decode hex artifacts, then :func:`verify`. Decode errors are MalformedInput."""
    public_key = decode_public_key(public_key_hex)
    signature = decode_signature(signature_hex)
    verify(public_key, message, signature)


def is_valid(
    public_key: Union[bytes, bytearray],
    message: Message,
    signature: Union[bytes, bytearray],
) -> bool:
    """Boolean form of :func:`verify`; MalformedInput still propagates."""
    try:
        verify(public_key, message, signature)
    except VerificationFailed:
        return False
    return True
