"""Tests for the split session lifecycle."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from mpdu.session import STATUS_DONE, SplitSession, SplitState, truncation_warning
from mpdu.stages.extract_stage import ExtractResult, SplitConfig


def _extractor(count: int, write_frames):
    def fake_extract(video: Path, workdir: Path, cfg: SplitConfig) -> ExtractResult:
        frames = write_frames(workdir, count)
        kept = frames[: cfg.max_frames]
        return ExtractResult(frames=kept, fps=1, raw_count=len(frames))

    return fake_extract


def test_process_without_selection_is_noop(tmp_path: Path) -> None:
    session = SplitSession(SplitConfig(), tmp_path)
    assert session.can_process is False
    assert session.process() is None
    assert session.state is SplitState.IDLE


def test_process_reaches_done(tmp_path: Path, write_frames) -> None:
    session = SplitSession(SplitConfig(quality=2), tmp_path / "out")
    session.select(tmp_path / "a.mp4")

    with patch("mpdu.session.extract_frames", side_effect=_extractor(4, write_frames)):
        result = session.process()

    assert result is not None
    assert session.state is SplitState.DONE
    assert session.status == STATUS_DONE
    assert session.info == result
    assert result.count == 4
    assert result.quality == "100%"
    assert result.truncated is False
    assert result.path.exists()


def test_process_reports_truncation(tmp_path: Path, write_frames) -> None:
    session = SplitSession(SplitConfig(max_frames=150), tmp_path / "out")
    session.select(tmp_path / "a.mp4")

    with patch("mpdu.session.extract_frames", side_effect=_extractor(151, write_frames)):
        result = session.process()

    assert result.count == 150
    assert result.truncated is True
    assert "150" in truncation_warning(150)


def test_select_discards_previous_result(tmp_path: Path, write_frames) -> None:
    session = SplitSession(SplitConfig(), tmp_path / "out")
    session.select(tmp_path / "a.mp4")
    with patch("mpdu.session.extract_frames", side_effect=_extractor(2, write_frames)):
        session.process()

    session.select(tmp_path / "b.mp4")

    assert session.info is None
    assert session.status == ""
    assert session.video == tmp_path / "b.mp4"


def test_guard_blocks_second_job(tmp_path: Path) -> None:
    session = SplitSession(SplitConfig(), tmp_path)
    session.select(tmp_path / "a.mp4")
    session.state = SplitState.PROCESSING

    assert session.can_process is False
    with pytest.raises(RuntimeError, match="already in progress"):
        session.process()


@patch("mpdu.session.extract_frames")
def test_engine_failure_never_reaches_done(mock_extract: MagicMock, tmp_path: Path) -> None:
    mock_extract.side_effect = subprocess.CalledProcessError(1, ["ffmpeg"], "", "boom")
    session = SplitSession(SplitConfig(), tmp_path)
    session.select(tmp_path / "a.mp4")

    with pytest.raises(subprocess.CalledProcessError):
        session.process()

    assert session.state is SplitState.PROCESSING
    assert session.info is None
    assert session.status != STATUS_DONE
