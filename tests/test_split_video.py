"""Tests for the split_video CLI."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from mpdu import cli
from mpdu.scripts import split_video


def test_parse_args_defaults() -> None:
    args = split_video.parse_args(["--input", "in.mp4"])
    assert args.size == 960
    assert args.quality == 3
    assert args.outdir == Path("output")


def test_parse_args_rejects_unknown_size() -> None:
    with pytest.raises(SystemExit):
        split_video.parse_args(["--input", "in.mp4", "--size", "800"])


def test_main_missing_input(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        split_video.main(["--input", str(tmp_path / "missing.mp4"), "--quiet"])


@patch("mpdu.scripts.split_video.run_split")
def test_main_builds_conf(mock_run: MagicMock, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    video = tmp_path / "in.mp4"
    video.write_bytes(b"x")
    mock_run.return_value.to_dict.return_value = {"count": 3, "name": "a.zip"}

    split_video.main(
        ["--input", str(video), "--outdir", str(tmp_path / "o"), "--size", "320", "--quality", "15", "--json"],
    )

    kwargs = mock_run.call_args.kwargs
    assert kwargs["input_path"] == video
    assert kwargs["quiet"] is True
    assert kwargs["conf"]["split"] == {"size": 320, "quality": 15}
    assert kwargs["conf"]["paths"]["output_dir"] == str(tmp_path / "o")
    assert json.loads(capsys.readouterr().out) == {"count": 3, "name": "a.zip"}


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    from mpdu import __version__

    assert cli.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == __version__


@patch("mpdu.scripts.split_video.main")
def test_cli_forwards_to_split(mock_main: MagicMock) -> None:
    assert cli.main(["--input", "in.mp4", "--size", "640"]) == 0
    mock_main.assert_called_once_with(["--input", "in.mp4", "--size", "640"])
