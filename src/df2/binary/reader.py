from __future__ import annotations

import io
import logging
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Tuple, Union

from .codecs.bytecursor import StreamCursor
from .codecs.segment_codec import decode_segment
from .codecs.shot_header import decode_shot_header
from .errors import InvalidOffset, InvalidShotNumber, ReaderFailedError, TruncatedRead

from df2.models.common import U16_MAX
from df2.models.file import Df2File
from df2.models.segment import Segment
from df2.models.shot import Shot

L = logging.getLogger("df2.binary.reader")

Source = Union[str, Path, bytes, bytearray, memoryview, BinaryIO]


# -----------------------------
# Helpers
# -----------------------------

def _open_source(src: Source) -> Tuple[BinaryIO, bool]:
    """Return (stream, owned). Streams opened here are owned by the caller of this helper."""
    if isinstance(src, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(src)), True
    if isinstance(src, (str, Path)):
        return open(Path(src), "rb"), True
    return src, False


class ReaderState(Enum):
    AWAITING_SHOT = "awaiting_shot"
    DONE = "done"
    FAILED = "failed"


# -----------------------------
# Shot reader
# -----------------------------

class Reader:
    """
    Forward-only reader over a df2 waveform stream.

    The stream has no index: shots sit back to back, each a 4-byte header
    (number, offset in words) followed by an outgoing segment and zero or
    more echo segments that together fill exactly offset * 2 bytes.
    """

    def __init__(self, stream: BinaryIO, *, owns_stream: bool = False):
        self._cur = StreamCursor(stream)
        self._owns_stream = owns_stream
        self.state = ReaderState.AWAITING_SHOT

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "Reader":
        return cls(open(Path(path), "rb"), owns_stream=True)

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> "Reader":
        return cls(io.BytesIO(bytes(data)), owns_stream=True)

    def close(self) -> None:
        if self._owns_stream:
            self._cur.stream.close()

    def __enter__(self) -> "Reader":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # -- sequential decode --

    def read_one(self) -> Optional[Shot]:
        """Decode the next shot. Returns None at a clean end-of-stream."""
        if self.state is ReaderState.DONE:
            return None
        if self.state is ReaderState.FAILED:
            raise ReaderFailedError("reader failed on a previous shot; seek() or reopen before reading")
        try:
            shot = self._decode_shot()
        except Exception:
            self.state = ReaderState.FAILED
            raise
        if shot is None:
            self.state = ReaderState.DONE
        return shot

    def _decode_shot(self) -> Optional[Shot]:
        header = decode_shot_header(self._cur)
        if header is None:
            return None
        number, offset = header
        bytes_remaining = offset * 2

        outgoing, used = decode_segment(self._cur)
        if used > bytes_remaining:
            raise InvalidOffset(
                number, offset,
                f"outgoing pulse takes {used} bytes, record declares {bytes_remaining}",
            )
        bytes_remaining -= used

        segments = []
        while bytes_remaining > 0:
            seg, used = decode_segment(self._cur)
            if used > bytes_remaining:
                raise InvalidOffset(
                    number, offset,
                    f"echo segment {len(segments)} takes {used} bytes, {bytes_remaining} left",
                )
            bytes_remaining -= used
            segments.append(seg)

        L.debug("shot %d: offset=%d words, %d echo segments", number, offset, len(segments))
        return Shot.model_construct(number=number, outgoing=outgoing.data, segments=segments)

    def __iter__(self) -> "Reader":
        return self

    def __next__(self) -> Shot:
        if self.state is not ReaderState.AWAITING_SHOT:
            raise StopIteration
        shot = self.read_one()
        if shot is None:
            raise StopIteration
        return shot

    # -- positional seek --

    def seek(self, number: int) -> None:
        """
        Position the stream so the next read_one() decodes shot `number` (1-indexed).

        Walks the offset chain from the start of the stream; O(number).
        Seeking to last + 1 is allowed and leaves the cursor at end-of-stream.
        """
        if not 1 <= number <= U16_MAX:
            raise InvalidShotNumber(number, f"shot numbers run 1..{U16_MAX}")
        cur = self._cur
        if not cur.seekable():
            raise io.UnsupportedOperation("seek requires a seekable stream")

        try:
            self._walk_to(number, cur.size())
        except Exception:
            # cursor is somewhere inside the chain
            self.state = ReaderState.FAILED
            raise
        self.state = ReaderState.AWAITING_SHOT

    def _walk_to(self, number: int, size: int) -> None:
        cur = self._cur
        # Start on shot 1's offset field; its number field is bytes 0..2.
        position = 2
        cur.seek(position)
        current = 1
        while current < number:
            try:
                offset = cur.u16()
            except TruncatedRead as e:
                raise InvalidShotNumber(number, f"offset chain ends at shot {current}") from e
            # Skip the record body plus the next shot's number field.
            stride = offset * 2 + 2
            position += 2
            landed = cur.skip(stride)
            if landed != position + stride or landed - 2 > size:
                raise InvalidShotNumber(
                    number, f"shot {current} runs past end of stream ({landed - 2} > {size})"
                )
            position += stride
            current += 1
            L.debug("seek %d: shot %d at byte %d", number, current, position - 2)

        # Back onto the number field of the target shot.
        cur.seek(position - 2)


# -----------------------------
# Module-level conveniences
# -----------------------------

def read_segment(src: Source) -> Segment:
    """Decode a single standalone segment from bytes, a path or a binary stream."""
    stream, owned = _open_source(src)
    try:
        seg, _ = decode_segment(StreamCursor(stream))
        return seg
    finally:
        if owned:
            stream.close()


def iter_shots(src: Source, *, max_shots: Optional[int] = None) -> Iterator[Shot]:
    """Stream shots from any source. Decode errors propagate and end the stream."""
    stream, owned = _open_source(src)
    try:
        emitted = 0
        reader = Reader(stream)
        while max_shots is None or emitted < max_shots:
            shot = reader.read_one()
            if shot is None:
                return
            yield shot
            emitted += 1
    finally:
        if owned:
            stream.close()


def summarize_file(src: Source, max_shots: Optional[int] = None) -> Tuple[int, int]:
    """
    Streaming summary: returns (shots_count, echo_segments_count).
    Every shot is decoded and validated; nothing is kept.
    """
    shots = 0
    segments = 0
    for shot in iter_shots(src, max_shots=max_shots):
        shots += 1
        segments += len(shot.segments)
    return shots, segments


def parse_file(src: Source) -> Df2File:
    """Full parse: every shot in the stream, materialized in a Df2File."""
    return Df2File(shots=list(iter_shots(src)))
