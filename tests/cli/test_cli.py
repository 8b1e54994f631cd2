import json
import logging
import runpy
from pathlib import Path
from unittest.mock import patch

import pytest

from waypoint import cli

PATH_YAML = """
length: 10
points:
  - progress: 0
    position: [0, 0, 0]
  - progress: 10
    position: [10, 10, 10]
"""


@pytest.fixture
def path_file(tmp_path: Path) -> Path:
    file = tmp_path / "path.yaml"
    file.write_text(PATH_YAML)
    return file


def test_sample_writes_output_file(path_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "nested" / "samples.json"

    cli.main(["sample", str(path_file), "--step", "2.5", "--output", str(out)])

    data = json.loads(out.read_text())
    assert data["length"] == 10.0
    progresses = [s["progress"] for s in data["samples"]]
    assert progresses == [0.0, 2.5, 5.0, 7.5, 10.0]
    assert data["samples"][2]["position"] == [5.0, 5.0, 5.0]


def test_sample_stdout_is_pure_json(path_file: Path, capsys) -> None:
    cli.main(["sample", str(path_file), "--samples", "3"])
    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert [s["progress"] for s in payload["samples"]] == [0.0, 5.0, 10.0]
    assert "Loading path from" in captured.err
    assert "Loading path from" not in captured.out


def test_sample_with_bounds(path_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "samples.json"
    cli.main(
        ["sample", str(path_file), "-s", "1", "--start", "2", "--end", "4", "-o", str(out)]
    )
    data = json.loads(out.read_text())
    assert [s["progress"] for s in data["samples"]] == [2.0, 3.0, 4.0]


def test_sample_out_of_range_exits_1(path_file: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["sample", str(path_file), "--end", "20"])
    assert exc_info.value.code == 1


def test_sample_step_below_min_step_exits_1(path_file: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["sample", str(path_file), "--step", "1e-12"])
    assert exc_info.value.code == 1
    assert "min_step" in capsys.readouterr().err


def test_sample_missing_file_exits_1(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["sample", str(tmp_path / "missing.yaml")])
    assert exc_info.value.code == 1


def test_inspect_prints_anchor_table(path_file: Path, capsys) -> None:
    cli.main(["inspect", str(path_file)])
    out = capsys.readouterr().out
    assert "Length: 10" in out
    assert "Anchors: 2" in out
    assert "progress" in out
    assert "10" in out


def test_inspect_invalid_document_exits_1(tmp_path: Path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("length: 1\npoints: {}\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(bad)])
    assert exc_info.value.code == 1


def test_inspect_warns_on_single_anchor(tmp_path: Path, capsys) -> None:
    one = tmp_path / "one.yaml"
    one.write_text("length: 1\npoints:\n  - progress: 0\n    position: [1, 2]\n")
    cli.main(["inspect", str(one)])
    assert "at least two anchors" in capsys.readouterr().out


def test_no_arguments_prints_help_and_exits_zero(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_verbose_enables_debug(path_file: Path, caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="waypoint"):
        cli.main(["--verbose", "inspect", str(path_file)])
    assert any("Debug logging enabled" in r.message for r in caplog.records)


def test_quiet_suppresses_info(path_file: Path, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="waypoint"):
        cli.main(["--quiet", "inspect", str(path_file)])
    assert not any(r.levelno == logging.INFO for r in caplog.records)


def test_module_help_exits_zero() -> None:
    with patch("sys.argv", ["waypoint", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("waypoint", run_name="__main__")
    assert exc_info.value.code == 0


def test_format_number() -> None:
    assert cli._format_number(0.25) == "0.25"
    assert cli._format_number(10.0) == "10"
    assert cli._format_table(["a"], []) == ""
