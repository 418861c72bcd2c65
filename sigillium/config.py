"""
Front-end settings with environment overrides (SIGILLIUM_*).

The recovery phrase is deliberately not a setting: it is read by the CLI
(``--phrase`` / ``SIGILLIUM_PHRASE``) and handed straight to the core.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

MNEMONIC_PROMPT = (
    "Please enter the seed phrase that you used during the Namada Trusted Setup "
    "ceremony in November 2022."
)
MENU_PROMPT = "What would you like to do?"
SIGN_PROMPT = "Please enter the challenge from the website:"
VERIFY_KEY_PROMPT = "Public key (hex):"
VERIFY_SIGNATURE_PROMPT = "Signature (hex):"
VERIFY_MESSAGE_PROMPT = "Message that was signed:"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

__all__ = ["Settings", "parse_log_level"]


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    return v if v is not None and v != "" else default


def parse_log_level(value: Any) -> int:
    """Accepts a level name (any case) or a numeric level."""
    if isinstance(value, int):
        return value
    s = str(value).strip().upper()
    if s.isdigit():
        return int(s)
    if s not in _LOG_LEVELS:
        raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(_LOG_LEVELS)}")
    return getattr(logging, s)


def _parse_attempts(value: Any) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"phrase attempts must be an integer, got {value!r}") from None
    if n < 1:
        raise ValueError(f"phrase attempts must be at least 1, got {n}")
    return n


@dataclass
class Settings:
    log_level: int = logging.WARNING
    # How many times interactive entry may re-prompt for a rejected phrase
    phrase_attempts: int = 3
    mnemonic_prompt: str = MNEMONIC_PROMPT
    menu_prompt: str = MENU_PROMPT
    sign_prompt: str = SIGN_PROMPT
    verify_prompts: Dict[str, str] = field(
        default_factory=lambda: {
            "public_key": VERIFY_KEY_PROMPT,
            "signature": VERIFY_SIGNATURE_PROMPT,
            "message": VERIFY_MESSAGE_PROMPT,
        }
    )

    @classmethod
    def from_env(cls, prefix: str = "SIGILLIUM_") -> "Settings":
        """
        Create settings from environment variables:

        SIGILLIUM_LOG_LEVEL        (level name or number, default WARNING)
        SIGILLIUM_PHRASE_ATTEMPTS  (int >= 1, default 3)
        SIGILLIUM_MNEMONIC_PROMPT  (str)
        SIGILLIUM_SIGN_PROMPT      (str)
        """
        return cls(
            log_level=parse_log_level(_env(f"{prefix}LOG_LEVEL", "WARNING")),
            phrase_attempts=_parse_attempts(_env(f"{prefix}PHRASE_ATTEMPTS", "3")),
            mnemonic_prompt=_env(f"{prefix}MNEMONIC_PROMPT", MNEMONIC_PROMPT) or MNEMONIC_PROMPT,
            sign_prompt=_env(f"{prefix}SIGN_PROMPT", SIGN_PROMPT) or SIGN_PROMPT,
        )

    def with_overrides(self, **overrides: Any) -> "Settings":
        """Copy with keyword overrides; None values and unknown keys are ignored."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if k in data and v is not None})
        data["log_level"] = parse_log_level(data["log_level"])
        data["phrase_attempts"] = _parse_attempts(data["phrase_attempts"])
        return Settings(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
