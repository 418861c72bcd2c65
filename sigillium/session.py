"""
A signing session: one derived keypair, owned by the front end for one run.

The session is an ordinary object passed to whatever needs it, never module
state, so several sessions (tests, for one) do not interfere. Closing it
wipes the secret key.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .encoding import encode_hex
from .errors import InvalidMnemonic
from .keys import KeyPair, derive_keypair
from .signing import Message, sign, verify_hex
from .sources import PhraseSource

log = logging.getLogger(__name__)

__all__ = ["Session"]


class Session:
    def __init__(self, keypair: KeyPair) -> None:
        self._keypair = keypair

    @classmethod
    def open(
        cls,
        source: PhraseSource,
        *,
        attempts: int = 1,
        on_rejected: Optional[Callable[[InvalidMnemonic], None]] = None,
    ) -> "Session":
        """
        Read a phrase from ``source`` and derive the session keypair.

        A rejected phrase is read again while ``attempts`` remain; the last
        InvalidMnemonic is re-raised once they run out. ``on_rejected`` is
        told about each rejection that will be retried.
        """
        if attempts < 1:
            raise ValueError("attempts must be at least 1")
        for attempt in range(1, attempts + 1):
            try:
                keypair = derive_keypair(source.read_phrase())
            except InvalidMnemonic as exc:
                log.info("recovery phrase rejected (attempt %d/%d): %s", attempt, attempts, exc.reason)
                if attempt == attempts:
                    raise
                if on_rejected is not None:
                    on_rejected(exc)
                continue
            log.info("session opened for public key %s", keypair.public_key_hex)
            return cls(keypair)
        raise AssertionError("unreachable")  # pragma: no cover

    @property
    def keypair(self) -> KeyPair:
        if self._keypair.closed:
            raise ValueError("session has been closed")
        return self._keypair

    @property
    def closed(self) -> bool:
        return self._keypair.closed

    def public_key_hex(self) -> str:
        return self.keypair.public_key_hex

    def sign_message(self, message: Message) -> str:
        """Sign and return the hex-encoded signature."""
        return encode_hex(sign(self.keypair, message))

    def verify_message(self, public_key_hex: str, message: Message, signature_hex: str) -> None:
        # Verification does not touch the session key; any public key will do.
        verify_hex(public_key_hex, message, signature_hex)

    def close(self) -> None:
        self._keypair.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
