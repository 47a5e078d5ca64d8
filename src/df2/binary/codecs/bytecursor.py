from __future__ import annotations
import io
import struct
from typing import BinaryIO

from ..errors import TruncatedRead


class StreamCursor:
    """Little-endian reads over a binary stream. Short reads raise TruncatedRead."""

    __slots__ = ("stream",)

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def tell(self) -> int: return self.stream.tell()
    def seekable(self) -> bool: return self.stream.seekable()

    def seek(self, pos: int) -> int:
        if pos < 0: raise ValueError("seek out of bounds")
        return self.stream.seek(pos, io.SEEK_SET)

    def skip(self, n: int) -> int: return self.stream.seek(n, io.SEEK_CUR)

    def size(self) -> int:
        here = self.stream.tell()
        end = self.stream.seek(0, io.SEEK_END)
        self.stream.seek(here, io.SEEK_SET)
        return end

    def _read_exact(self, n: int) -> bytes:
        # raw streams may return fewer bytes than asked before EOF
        chunks = []
        got = 0
        while got < n:
            chunk = self.stream.read(n - got)
            if not chunk:
                break
            chunks.append(chunk)
            got += len(chunk)
        return b"".join(chunks)

    def take(self, n: int) -> bytes:
        at = self.stream.tell() if self.stream.seekable() else -1
        out = self._read_exact(n)
        if len(out) != n: raise TruncatedRead(n, len(out), at)
        return out

    def take_or_eof(self, n: int) -> bytes | None:
        """Like take(), but zero bytes available is reported as None instead of an error."""
        at = self.stream.tell() if self.stream.seekable() else -1
        out = self._read_exact(n)
        if not out: return None
        if len(out) != n: raise TruncatedRead(n, len(out), at)
        return out

    def u16(self) -> int: return struct.unpack("<H", self.take(2))[0]

    def u16_array(self, count: int) -> list[int]:
        if count == 0: return []
        return list(struct.unpack(f"<{count}H", self.take(2 * count)))
