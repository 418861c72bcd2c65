"""
Recovery phrase -> Ed25519 keypair.

Derivation (must stay bit-exact to match every other signer of the ceremony):

1. Collapse whitespace: split on any whitespace run, join with single spaces.
2. Validate the phrase against the BIP-39 English wordlist: word count,
   membership and checksum.
3. Stretch with the BIP-39 seed function (PBKDF2-HMAC-SHA512, 2048 rounds)
   and an empty passphrase -> 64 bytes.
4. Keep the first 32 bytes as the Ed25519 seed.
5. Expand the seed into a keypair (32-byte public key, 64-byte secret key).

Every intermediate secret lives in a :class:`SensitiveBuffer` and is wiped
before :func:`derive_keypair` returns or raises.
"""

from __future__ import annotations

import hmac
import logging
import re
from functools import lru_cache
from typing import FrozenSet, Union

from mnemonic import Mnemonic
from nacl.bindings import crypto_sign_seed_keypair

from .encoding import PUBLIC_KEY_SIZE, encode_hex
from .errors import InvalidMnemonic
from .sensitive import SensitiveBuffer, wipe

log = logging.getLogger(__name__)

SEED_SIZE = 32
STRETCHED_SEED_SIZE = 64
SECRET_KEY_SIZE = 64
WORD_COUNTS = (12, 15, 18, 21, 24)

# Unicode White_Space only; str.split() would also split on U+001C..U+001F
_WHITESPACE_RE = re.compile(
    "[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)

__all__ = [
    "SEED_SIZE",
    "SECRET_KEY_SIZE",
    "WORD_COUNTS",
    "KeyPair",
    "derive_keypair",
    "normalize_phrase",
    "parse_phrase",
    "phrase_to_seed",
    "truncate_seed",
]


@lru_cache(maxsize=1)
def _english() -> Mnemonic:
    return Mnemonic("english")


@lru_cache(maxsize=1)
def _wordset() -> FrozenSet[str]:
    return frozenset(_english().wordlist)


class KeyPair:
    """
    Ed25519 keypair derived from a recovery phrase.

    The public half is plain bytes; the secret half is a SensitiveBuffer that
    is wiped by :meth:`close` (or on leaving a ``with`` block). Nothing here
    ever writes the key to disk.
    """

    __slots__ = ("_public", "_secret")

    def __init__(self, public_key: bytes, secret_key: SensitiveBuffer) -> None:
        if len(public_key) != PUBLIC_KEY_SIZE:
            raise ValueError(f"public key must be {PUBLIC_KEY_SIZE} bytes")
        if len(secret_key) != SECRET_KEY_SIZE:
            raise ValueError(f"secret key must be {SECRET_KEY_SIZE} bytes")
        self._public = bytes(public_key)
        self._secret = secret_key

    @classmethod
    def from_seed(cls, seed: Union[SensitiveBuffer, bytes]) -> "KeyPair":
        """Deterministic seed -> keypair expansion, no extra entropy."""
        raw = seed.bytes() if isinstance(seed, SensitiveBuffer) else bytes(seed)
        if len(raw) != SEED_SIZE:
            raise ValueError(f"seed must be {SEED_SIZE} bytes")
        public_key, secret_key = crypto_sign_seed_keypair(raw)
        return cls(public_key, SensitiveBuffer(secret_key))

    @property
    def public_key(self) -> bytes:
        return self._public

    @property
    def public_key_hex(self) -> str:
        return encode_hex(self._public)

    @property
    def secret_key(self) -> SensitiveBuffer:
        if self._secret.released:
            raise ValueError("keypair has been closed")
        return self._secret

    @property
    def closed(self) -> bool:
        return self._secret.released

    def close(self) -> None:
        self._secret.wipe()

    def __enter__(self) -> "KeyPair":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyPair):
            return NotImplemented
        return hmac.compare_digest(self._public, other._public)

    def __hash__(self) -> int:
        return hash(self._public)

    def __repr__(self) -> str:
        state = " closed" if self.closed else ""
        return f"<KeyPair public_key={self.public_key_hex}{state}>"


# ---------- Derivation steps ----------


def normalize_phrase(phrase: str) -> SensitiveBuffer:
    """Split on whitespace runs and re-join the words with single spaces."""
    joined = bytearray()
    try:
        for word in _WHITESPACE_RE.split(phrase):
            if not word:
                continue
            if joined:
                joined += b" "
            joined += word.encode("utf-8")
        return SensitiveBuffer(joined)
    finally:
        wipe(joined)


def parse_phrase(phrase: SensitiveBuffer) -> None:
    """
    Validate a normalized phrase against the English wordlist.

    Raises InvalidMnemonic naming the first problem found. Reasons never
    include the offending word, only its position.
    """
    words = phrase.decode().split(" ") if len(phrase) else []
    if not words:
        raise InvalidMnemonic("recovery phrase is empty")
    if len(words) not in WORD_COUNTS:
        allowed = ", ".join(str(n) for n in WORD_COUNTS[:-1]) + f" or {WORD_COUNTS[-1]}"
        raise InvalidMnemonic(f"expected {allowed} words, got {len(words)}")
    wordset = _wordset()
    for position, word in enumerate(words, start=1):
        if word not in wordset:
            raise InvalidMnemonic(f"word {position} is not in the English wordlist")
    if not _english().check(" ".join(words)):
        raise InvalidMnemonic("checksum mismatch")


def phrase_to_seed(phrase: SensitiveBuffer) -> SensitiveBuffer:
    """BIP-39 seed stretch with an empty passphrase (64 bytes)."""
    return SensitiveBuffer(Mnemonic.to_seed(phrase.decode(), passphrase=""))


def truncate_seed(stretched: SensitiveBuffer) -> SensitiveBuffer:
    """Keep the first 32 bytes of the stretched seed."""
    if len(stretched) != STRETCHED_SEED_SIZE:
        raise ValueError(f"stretched seed must be {STRETCHED_SEED_SIZE} bytes")
    return SensitiveBuffer(stretched.view()[:SEED_SIZE])


def derive_keypair(phrase: str) -> KeyPair:
    """
    Derive the ceremony keypair from a recovery phrase.

    Raises InvalidMnemonic if the phrase does not validate; no partial
    keypair is ever returned.
    """
    with normalize_phrase(phrase) as normalized:
        parse_phrase(normalized)
        with phrase_to_seed(normalized) as stretched, truncate_seed(stretched) as seed:
            keypair = KeyPair.from_seed(seed)
    log.debug("derived keypair, public key %s", keypair.public_key_hex)
    return keypair
