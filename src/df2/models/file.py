from __future__ import annotations
from pydantic import BaseModel, Field
from typing import List
from .shot import Shot

class Df2File(BaseModel):
    shots: List[Shot] = Field(default_factory=list)

    # Convenience constructors (the codec lives in the binary layer)
    @classmethod
    def from_binary(cls, data) -> "Df2File":
        from ..binary.reader import parse_file
        return parse_file(data)

    @classmethod
    def from_path(cls, path) -> "Df2File":
        from ..binary.reader import parse_file
        return parse_file(path)

    def to_binary(self) -> bytes:
        from ..binary.writer import write_file
        return write_file(self)
