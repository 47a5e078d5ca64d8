from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import List
from .common import U16, U16_MAX, segment_length
from .segment import Segment

class Shot(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1, le=U16_MAX)
    outgoing: List[U16] = Field(default_factory=list, max_length=U16_MAX)
    segments: List[Segment] = Field(default_factory=list)

    @property
    def encoded_length(self) -> int:
        """Bytes following the shot header: outgoing pulse plus every echo segment."""
        return segment_length(len(self.outgoing)) + sum(s.encoded_length for s in self.segments)

    @property
    def offset(self) -> int:
        return self.encoded_length // 2
