# fresh recovery phrases for rehearsing the ceremony.
# for testing purposes only: callers print the phrase in the clear.

from __future__ import annotations

from typing import Tuple

from .keys import WORD_COUNTS, KeyPair, _english, derive_keypair

__all__ = ["generate_phrase", "rehearsal_keypair"]

# 12 words -> 128 bits of entropy, 24 words -> 256 bits
STRENGTHS = {count: count * 32 // 3 for count in WORD_COUNTS}


def generate_phrase(words: int = 24) -> str:
    if words not in STRENGTHS:
        raise ValueError(f"words must be one of {', '.join(map(str, WORD_COUNTS))}")
    return _english().generate(strength=STRENGTHS[words])


def rehearsal_keypair(words: int = 24) -> Tuple[str, KeyPair]:
    """New phrase plus the keypair the ceremony derivation gives for it."""
    phrase = generate_phrase(words)
    return phrase, derive_keypair(phrase)
