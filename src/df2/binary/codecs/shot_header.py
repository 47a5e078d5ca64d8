from __future__ import annotations
import struct
from .bytecursor import StreamCursor


def decode_shot_header(cur: StreamCursor) -> tuple[int, int] | None:
    """
    4-byte shot header: number (u16), offset (u16, words remaining in the record).
    Returns (number, offset), or None when the cursor sits exactly at end-of-stream.
    A partial number field, or a missing offset field, raises TruncatedRead.
    """
    raw = cur.take_or_eof(2)
    if raw is None:
        return None
    number = struct.unpack("<H", raw)[0]
    offset = cur.u16()
    return number, offset


def encode_shot_header(number: int, offset: int) -> bytes:
    return struct.pack("<HH", number, offset)
