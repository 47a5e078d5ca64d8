from __future__ import annotations
from typing import Annotated
from pydantic import Field

U16_MAX = 0xFFFF

U16 = Annotated[int, Field(ge=0, le=U16_MAX)]

# sample_count + time_interval + reserved
SEGMENT_OVERHEAD_BYTES = 6


def segment_length(sample_count: int) -> int:
    return 2 * sample_count + SEGMENT_OVERHEAD_BYTES
