from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import List
from .common import U16, segment_length

class Segment(BaseModel):
    model_config = ConfigDict(frozen=True)

    data: List[U16] = Field(default_factory=list, max_length=0xFFFF)
    time_interval: U16 = 0

    @property
    def encoded_length(self) -> int:
        """Bytes this segment occupies on the wire: count, samples, interval, reserved."""
        return segment_length(len(self.data))

    # Convenience constructors; the codec lives in the binary layer
    @classmethod
    def from_binary(cls, data) -> "Segment":
        from ..binary.reader import read_segment
        return read_segment(data)

    def to_binary(self) -> bytes:
        from ..binary.codecs.segment_codec import encode_segment
        return encode_segment(self)
