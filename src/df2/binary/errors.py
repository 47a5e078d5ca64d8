from __future__ import annotations


class Df2Error(Exception):
    pass


class InvalidOffset(Df2Error, ValueError):
    """A shot's declared offset does not account for the bytes its segments consumed."""

    def __init__(self, shot_number: int, offset: int, detail: str = ""):
        self.shot_number = shot_number
        self.offset = offset
        msg = f"shot {shot_number} has an invalid offset {offset}"
        super().__init__(f"{msg}: {detail}" if detail else msg)


class InvalidShotNumber(Df2Error, ValueError):
    def __init__(self, number: int, detail: str = ""):
        self.number = number
        msg = f"invalid shot number {number}"
        super().__init__(f"{msg}: {detail}" if detail else msg)


class ReadError(Df2Error, OSError):
    pass


class TruncatedRead(ReadError):
    def __init__(self, need: int, got: int, at: int):
        self.need, self.got, self.at = need, got, at
        super().__init__(f"underrun: need {need} bytes at {at}, got {got}")


class ReaderFailedError(Df2Error):
    pass
