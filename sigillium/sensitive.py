"""
Scoped buffers for secret material (phrases, seeds, secret keys).

A :class:`SensitiveBuffer` owns a private ``bytearray`` and zeroes it with
libsodium's ``sodium_memzero`` when released. Use it as a context manager so
the wipe happens on every exit path, including exceptions:

    with SensitiveBuffer(secret) as buf:
        use(buf.view())

Python ``str`` and ``bytes`` objects are immutable and cannot be wiped; only
the buffers created here are guaranteed to be zeroed. Hand secrets over as
early as possible and drop other references to them.
"""

from __future__ import annotations

from typing import Union

from nacl._sodium import ffi as _ffi, lib as _lib

BytesLike = Union[bytes, bytearray, memoryview]

__all__ = ["SensitiveBuffer", "wipe"]


def wipe(buf: Union[bytearray, memoryview]) -> None:
    """Overwrite a mutable buffer with zeroes in place."""
    if not isinstance(buf, (bytearray, memoryview)):
        raise TypeError("only bytearray or memoryview buffers can be wiped")
    n = len(buf)
    if n == 0:
        return
    _lib.sodium_memzero(_ffi.from_buffer(buf), n)


class SensitiveBuffer:
    """A bytearray copy of a secret that is zeroed on release."""

    __slots__ = ("_buf", "_released")

    def __init__(self, data: BytesLike) -> None:
        self._buf = bytearray(data)
        self._released = False

    @classmethod
    def from_str(cls, text: str) -> "SensitiveBuffer":
        return cls(text.encode("utf-8"))

    @property
    def released(self) -> bool:
        return self._released

    def _check(self) -> None:
        if self._released:
            raise ValueError("sensitive buffer has already been wiped")

    def view(self) -> memoryview:
        """Read-only view over the live contents."""
        self._check()
        return memoryview(self._buf).toreadonly()

    def bytes(self) -> bytes:
        """
        Immutable copy of the contents, for APIs that only accept ``bytes``.
        The copy is not wiped; keep it short-lived.
        """
        self._check()
        return bytes(self._buf)

    def decode(self, encoding: str = "utf-8") -> str:
        self._check()
        return self._buf.decode(encoding)

    def wipe(self) -> None:
        """Zero the backing storage. Safe to call more than once."""
        if self._released:
            return
        wipe(self._buf)
        self._released = True

    def __len__(self) -> int:
        return len(self._buf)

    def __enter__(self) -> "SensitiveBuffer":
        self._check()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.wipe()

    def __del__(self) -> None:
        # Interpreter shutdown may have torn down the cffi module already.
        try:
            self.wipe()
        except Exception:
            pass

    def __repr__(self) -> str:
        state = "wiped" if self._released else f"{len(self._buf)} bytes"
        return f"<SensitiveBuffer {state}>"
