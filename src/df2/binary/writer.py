from __future__ import annotations
from typing import Iterable
from .codecs.segment_codec import encode_segment
from .codecs.shot_header import encode_shot_header
from ..models.common import U16_MAX
from ..models.file import Df2File
from ..models.segment import Segment
from ..models.shot import Shot


def write_shot(shot: Shot, *, outgoing_time_interval: int = 0) -> bytes:
    """Encode one shot record. The outgoing pulse carries no interval in the model, so it is written as given."""
    offset = shot.offset
    if offset > U16_MAX:
        raise ValueError(f"shot {shot.number} body is {shot.encoded_length} bytes; offset field tops out at {U16_MAX} words")
    out = bytearray(encode_shot_header(shot.number, offset))
    out += encode_segment(Segment(data=shot.outgoing, time_interval=outgoing_time_interval))
    for seg in shot.segments:
        out += encode_segment(seg)
    return bytes(out)


def write_shots(shots: Iterable[Shot]) -> bytes:
    return b"".join(write_shot(s) for s in shots)


def write_file(file: Df2File) -> bytes:
    return write_shots(file.shots)
