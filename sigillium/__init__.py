"""
sigillium: derive the ceremony Ed25519 key from a recovery phrase and use it
to sign and verify challenges. The key only ever lives in process memory.
"""

from .version import __version__  # noqa: F401

# Errors
from .errors import (  # noqa: F401
    SigilliumError,
    InvalidMnemonic,
    MalformedInput,
    VerificationFailed,
)

# Key derivation
from .keys import KeyPair, derive_keypair  # noqa: F401

# Signing / verification
from .signing import sign, verify, verify_hex, is_valid  # noqa: F401

# Hex helpers
from .encoding import encode_hex, decode_hex  # noqa: F401

# Sessions and sources
from .session import Session  # noqa: F401
from .sources import PromptPhraseSource, SuppliedPhraseSource  # noqa: F401
from .sensitive import SensitiveBuffer  # noqa: F401
