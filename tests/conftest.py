import sys
from pathlib import Path

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

import pytest

from df2.binary.writer import write_shots
from df2.models.segment import Segment
from df2.models.shot import Shot


def make_shots(count: int) -> list:
    """Shots 1..count with a varying number of echoes (0, 1, 2, 0, 1, ...)."""
    shots = []
    for n in range(1, count + 1):
        echoes = [
            Segment(data=[n * 100 + i + k for k in range(5 + i)], time_interval=10 + i)
            for i in range((n - 1) % 3)
        ]
        shots.append(Shot(number=n, outgoing=list(range(n, n + 8)), segments=echoes))
    return shots


@pytest.fixture
def four_shots():
    return make_shots(4)


@pytest.fixture
def four_shot_bytes(four_shots):
    return write_shots(four_shots)


@pytest.fixture
def four_shot_path(tmp_path, four_shot_bytes):
    p = tmp_path / "four-shots.df2"
    p.write_bytes(four_shot_bytes)
    return p


@pytest.fixture
def one_shot_path(tmp_path):
    # 22 outgoing samples -> 50-byte segment -> offset 25 words, no echoes
    p = tmp_path / "one-shot.df2"
    p.write_bytes(write_shots([Shot(number=1, outgoing=list(range(22)))]))
    return p
