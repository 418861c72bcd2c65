"""
Where phrases and messages come from.

The signing core never prompts. A front end picks one source per input:
an interactive prompt, or a value supplied up front (command-line option or
environment variable).
"""

from __future__ import annotations

from typing import Optional, Protocol

import typer

__all__ = [
    "PhraseSource",
    "MessageSource",
    "PromptPhraseSource",
    "SuppliedPhraseSource",
    "PromptMessageSource",
    "SuppliedMessageSource",
]


class PhraseSource(Protocol):
    def read_phrase(self) -> str:
        ...


class MessageSource(Protocol):
    def read_message(self) -> str:
        ...


class PromptPhraseSource:
    """Masked interactive entry; can be asked again after a rejected phrase."""

    def __init__(self, prompt: str) -> None:
        self.prompt = prompt

    def read_phrase(self) -> str:
        return typer.prompt(self.prompt, hide_input=True, prompt_suffix="\n> ")


class SuppliedPhraseSource:
    """
    A phrase handed over before the run starts. The source drops its reference
    on the first read, so it can only be consumed once.
    """

    def __init__(self, phrase: str) -> None:
        self._phrase: Optional[str] = phrase

    @property
    def consumed(self) -> bool:
        return self._phrase is None

    def read_phrase(self) -> str:
        if self._phrase is None:
            raise ValueError("supplied recovery phrase has already been consumed")
        phrase, self._phrase = self._phrase, None
        return phrase


class PromptMessageSource:
    def __init__(self, prompt: str) -> None:
        self.prompt = prompt

    def read_message(self) -> str:
        return typer.prompt(self.prompt, default="", show_default=False, prompt_suffix="\n> ")


class SuppliedMessageSource:
    def __init__(self, message: str) -> None:
        self.message = message

    def read_message(self) -> str:
        return self.message
