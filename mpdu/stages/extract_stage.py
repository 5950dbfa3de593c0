"""JA: フレーム抽出ステージ (FFmpeg)。

動画の長さから fps を算出し、長辺サイズと画質コードを指定して
JPEG 連番を書き出す。出力は最大 150 枚に制限される。

EN: Frame extraction stage (FFmpeg).

Derives the sampling rate from the video duration, then asks FFmpeg for
sequentially numbered JPEG frames scaled to the requested long edge and encoded
at the requested quality code. Output is capped at 150 frames.
"""

from __future__ import annotations

import logging
import math
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from mpdu.utils.media_probe import probe_duration
from mpdu.utils.quality import DEFAULT_QUALITY, DEFAULT_SIZE

TARGET_FRAMES: Final = 150
MAX_FRAMES: Final = 150
INPUT_NAME: Final = "input.mp4"
FRAME_PATTERN: Final = "frame_%03d.jpg"

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplitConfig:
    """JA: 分割ジョブの設定。

    EN: Settings for one split job.
    """

    size: int = DEFAULT_SIZE
    quality: int = DEFAULT_QUALITY
    target_frames: int = TARGET_FRAMES
    max_frames: int = MAX_FRAMES
    ffmpeg: str = "ffmpeg"
    ffprobe: str = "ffprobe"


@dataclass(frozen=True)
class ExtractResult:
    """Frames kept after extraction, in name order."""

    frames: list[Path]
    fps: int
    raw_count: int

    @property
    def truncated(self) -> bool:
        return self.raw_count > len(self.frames)


def _run_subprocess(cmd: list[str], *, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """Run a subprocess command with safe defaults."""

    normalized_cmd = [str(part) for part in cmd]
    return subprocess.run(normalized_cmd, cwd=cwd, capture_output=True, text=True, check=False)


def compute_frame_rate(duration: float, target_frames: int = TARGET_FRAMES) -> int:
    """Return ``ceil(target_frames / duration)``."""

    if not math.isfinite(duration) or duration <= 0:
        message = f"Invalid video duration: {duration!r}"
        raise ValueError(message)
    return math.ceil(target_frames / duration)


def scale_filter(size: int) -> str:
    """Scale so the longer side equals ``size``; the other side keeps aspect."""

    return f"scale='if(gte(iw,ih),{size},-1)':'if(gte(iw,ih),-1,{size})'"


def build_ffmpeg_cmd(*, fps: int, size: int, quality: int, ffmpeg: str = "ffmpeg") -> list[str]:
    return [
        ffmpeg,
        "-y",
        "-i",
        INPUT_NAME,
        "-vf",
        f"fps={fps},{scale_filter(size)}",
        "-q:v",
        str(quality),
        FRAME_PATTERN,
    ]


def stage_input(video_in: Path, workdir: Path) -> Path:
    """JA: 入力動画を作業ディレクトリへ input.mp4 としてコピーする。

    EN: Copy the input video into the working directory as ``input.mp4``,
    replacing a stale copy from a previous run.
    """
    workdir.mkdir(parents=True, exist_ok=True)
    staged = workdir / INPUT_NAME
    staged.unlink(missing_ok=True)
    shutil.copyfile(video_in, staged)
    return staged


def list_frames(workdir: Path) -> list[Path]:
    # frame_999 < frame_1000: compare by stem length first.
    frames = [p for p in workdir.iterdir() if p.is_file() and p.name.endswith(".jpg")]
    return sorted(frames, key=lambda p: (len(p.stem), p.stem))


def limit_frames(frames: list[Path], max_frames: int = MAX_FRAMES) -> list[Path]:
    if len(frames) > max_frames:
        LOG.warning("Frame count %d exceeds %d; keeping the first %d", len(frames), max_frames, max_frames)
        return frames[:max_frames]
    return frames


def extract_frames(video_in: Path, workdir: Path, cfg: SplitConfig) -> ExtractResult:
    """JA: 動画からフレームを抽出し、名前順で最大 max_frames 枚を返す。

    EN: Extract frames from ``video_in`` into ``workdir``.

    Args:
        video_in: Source MP4 file.
        workdir: Scratch directory for the staged input and frame outputs.
        cfg: Target size, quality code and frame limits.

    Returns:
        ExtractResult with at most ``cfg.max_frames`` frames in name order.

    Raises:
        subprocess.CalledProcessError: FFmpeg or ffprobe exited with an error.
    """
    duration = probe_duration(video_in, ffprobe=cfg.ffprobe)
    fps = compute_frame_rate(duration, cfg.target_frames)
    LOG.info("Duration %.2fs -> sampling at %d fps", duration, fps)

    stage_input(video_in, workdir)

    cmd = build_ffmpeg_cmd(fps=fps, size=cfg.size, quality=cfg.quality, ffmpeg=cfg.ffmpeg)
    LOG.debug("Running: %s", " ".join(cmd))
    res = _run_subprocess(cmd, cwd=workdir)
    if res.returncode != 0:
        raise subprocess.CalledProcessError(res.returncode, cmd, res.stdout, res.stderr)

    raw = list_frames(workdir)
    frames = limit_frames(raw, cfg.max_frames)
    LOG.info("Extracted %d frames (kept %d)", len(raw), len(frames))
    return ExtractResult(frames=frames, fps=fps, raw_count=len(raw))
