from __future__ import annotations

from typing import TextIO


class TextSource:
    """Byte-read endpoint over a text stream.

    Characters are pulled one at a time and their UTF-8 bytes handed out
    individually. An empty read means end of input.
    """

    def __init__(self, stream: TextIO, encoding: str = 'utf-8'):
        self.stream = stream
        self.encoding = encoding
        self._pending = bytearray()

    def read(self, size: int = 1) -> bytes:
        while len(self._pending) < size:
            char = self.stream.read(1)
            if not char:
                break
            self._pending.extend(char.encode(self.encoding))
        data = bytes(self._pending[:size])
        del self._pending[:size]
        return data


class TextSink:
    """Byte-write endpoint that prints each byte as the character with that code point."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def write(self, data: bytes) -> int:
        self.stream.write(data.decode('latin-1'))
        return len(data)

    def flush(self) -> None:
        self.stream.flush()
