"""A byte buffer that keeps its capacity across assignments."""

from __future__ import annotations


class ByteString:
    """Bytes whose length is fixed by the first assignment that fits them.

    Assigning more bytes than the buffer holds replaces it with a larger
    one; assigning fewer keeps the current length and pads with zero bytes.
    """

    def __init__(self, data: bytes | str | None = None) -> None:
        self._data: bytearray | None = None
        if data is not None:
            self.set(data)

    @staticmethod
    def _as_bytes(data: bytes | str) -> bytes:
        return data.encode() if isinstance(data, str) else bytes(data)

    def set(self, data: bytes | str, size: int = 0) -> bytes:
        """Copy ``size`` bytes of ``data`` into the buffer and return its contents.

        A ``size`` of 0 copies up to the first zero byte of ``data``.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        raw = self._as_bytes(data)
        if size == 0:
            size = raw.find(b"\0")
            if size < 0:
                size = len(raw)
        if self._data is not None and size > len(self._data):
            self._data = None
        if self._data is None:
            self._data = bytearray(size)
        length = len(self._data)
        self._data[:] = raw[:length].ljust(length, b"\0")
        return bytes(self._data)

    def __len__(self) -> int:
        return 0 if self._data is None else len(self._data)

    def __bytes__(self) -> bytes:
        return b"" if self._data is None else bytes(self._data)

    def find(self, char: int | bytes | str) -> int:
        """Return the first position of ``char``, or -1 when it is absent."""
        if isinstance(char, str):
            char = char.encode()
        if isinstance(char, (bytes, bytearray)):
            if len(char) != 1:
                raise ValueError("expected a single byte")
            char = char[0]
        return bytes(self).find(bytes([char]))

    def render(self, suffix: str = "") -> str:
        """Return the bytes as text, one character per byte, followed by ``suffix``."""
        return bytes(self).decode("latin-1") + suffix

    def __repr__(self) -> str:
        return f"ByteString({bytes(self)!r})"