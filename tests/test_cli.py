import json
import struct

import pytest

from df2.cli import main


def test_shot_prints_json(four_shot_path, four_shots, capsys):
    assert main(["shot", str(four_shot_path), "3"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == four_shots[2].model_dump(mode="json")
    assert set(out) == {"number", "outgoing", "segments"}


def test_shot_past_end_fails(four_shot_path, capsys):
    assert main(["shot", str(four_shot_path), "5"]) == 1
    assert capsys.readouterr().out == ""
    assert main(["shot", str(four_shot_path), "0"]) == 1


def test_summary(one_shot_path, capsys):
    assert main(["summary", str(one_shot_path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"Filename: {one_shot_path}"
    assert out[1] == "Number of shots: 1"


def test_summary_of_malformed_file_fails(tmp_path, capsys):
    p = tmp_path / "bad.df2"
    p.write_bytes(struct.pack("<HHHHHH", 1, 2, 1, 7, 0, 0))  # 8-byte outgoing, offset says 4 bytes
    assert main(["summary", str(p)]) == 1
    assert capsys.readouterr().out == ""


def test_segment(tmp_path, capsys):
    p = tmp_path / "one-segment.bin"
    p.write_bytes(struct.pack("<H52HHH", 52, *range(52), 9, 0))
    assert main(["segment", str(p)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["encoded_length"] == 110
    assert out["time_interval"] == 9


def test_missing_file_fails(tmp_path):
    assert main(["summary", str(tmp_path / "nope.df2")]) == 1


def test_no_command_prints_help(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().out


def test_bad_number_is_usage_error():
    with pytest.raises(SystemExit) as ei:
        main(["shot", "x.df2", "three"])
    assert ei.value.code == 2
