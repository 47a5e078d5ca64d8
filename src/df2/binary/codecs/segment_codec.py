from __future__ import annotations
import logging
import struct
from .bytecursor import StreamCursor
from ...models.segment import Segment

L = logging.getLogger("df2.binary.codecs.segment")


def decode_segment(cur: StreamCursor) -> tuple[Segment, int]:
    """
    Decode one waveform segment at the cursor:
      sample_count u16, sample_count x u16 samples, time_interval u16, reserved u16.
    Returns (segment, bytes_consumed). Truncation raises TruncatedRead and is not recovered.
    """
    n = cur.u16()
    data = cur.u16_array(n)
    time_interval = cur.u16()
    reserved = cur.u16()  # no known meaning, not validated
    if reserved:
        L.debug("segment reserved field is non-zero: 0x%04x", reserved)

    seg = Segment.model_construct(data=data, time_interval=time_interval)
    return seg, seg.encoded_length


def encode_segment(seg: Segment, *, reserved: int = 0) -> bytes:
    n = len(seg.data)
    out = bytearray()
    out += struct.pack("<H", n)
    out += struct.pack(f"<{n}H", *seg.data)
    out += struct.pack("<HH", seg.time_interval, reserved)
    assert len(out) == seg.encoded_length
    return bytes(out)
