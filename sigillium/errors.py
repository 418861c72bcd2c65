"""
Typed error classes for sigillium.

Every failure the signing core reports is a :class:`SigilliumError`, so the
front end can catch the base class, print the message and exit with the
kind-specific ``exit_code``. None of these are fatal to the process: a bad
phrase can be re-entered and a failed verification is simply a "no".
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar

__all__ = [
    "SigilliumError",
    "InvalidMnemonic",
    "MalformedInput",
    "VerificationFailed",
]


class SigilliumError(Exception):
    """Base class for all sigillium errors."""

    exit_code: ClassVar[int] = 1

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __post_init__(self) -> None:
        # args mirror the constructor so copies and pickles rebuild the same error
        super().__init__(*(getattr(self, f.name) for f in fields(self)))


@dataclass(eq=False)
class InvalidMnemonic(SigilliumError):
    """
    The recovery phrase failed wordlist, length, or checksum validation.

    ``reason`` describes the complaint without echoing the phrase itself.
    """

    reason: str
    exit_code: ClassVar[int] = 3

    def __str__(self) -> str:
        return f"InvalidMnemonic: {self.reason}"


@dataclass(eq=False)
class MalformedInput(SigilliumError):
    """A hex-encoded public key or signature did not decode to the expected size."""

    field: str
    reason: str
    exit_code: ClassVar[int] = 4

    def __str__(self) -> str:
        return f"MalformedInput: {self.field}: {self.reason}"


@dataclass(eq=False)
class VerificationFailed(SigilliumError):
    """Well-formed inputs, but the signature does not match the key and message."""

    reason: str = "signature does not match public key and message"
    exit_code: ClassVar[int] = 5

    def __str__(self) -> str:
        return f"VerificationFailed: {self.reason}"
