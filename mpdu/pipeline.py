"""JA: MPDU の実行フロー。

1) 入力 MP4 の選択 (明示指定、または入力ディレクトリの最新ファイル)
2) 動画の長さから fps を算出し FFmpeg でフレーム抽出
3) 最大 150 枚に制限して ZIP を作成・保存
4) 出力情報の表示

EN: Run flow for MPDU.

1) Pick the input MP4 (explicit path or newest file in the input directory)
2) Derive fps from the duration and extract frames with FFmpeg
3) Cap at 150 frames, build and save the ZIP
4) Print the output info block
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mpdu.session import STATUS_PROCESSING, SplitSession, truncation_warning
from mpdu.stages.archive_stage import SplitResult
from mpdu.stages.extract_stage import MAX_FRAMES, TARGET_FRAMES, SplitConfig
from mpdu.utils.quality import DEFAULT_QUALITY, DEFAULT_SIZE

log = logging.getLogger("mpdu")

VIDEO_EXTS = (".mp4",)


@dataclass(frozen=True)
class PipelineIO:
    """JA: 入出力パス。

    EN: Input/output paths for the pipeline.
    """

    input_dir: Path
    output_dir: Path


def pick_input_file(input_dir: Path, suffixes: tuple[str, ...]) -> Path | None:
    """JA: ディレクトリ内で拡張子が一致する最新のファイルを選ぶ。

    EN: Pick the newest matching file from a directory.

    Args:
        input_dir: Directory to search for files.
        suffixes: Tuple of allowed file extensions (with dots, e.g., '.mp4').

    Returns:
        Path to the newest matching file, or None if no files found.
    """
    if not input_dir.exists():
        return None
    files = [
        p for p in input_dir.iterdir() if p.is_file() and p.suffix.lower() in suffixes
    ]
    if not files:
        return None
    files.sort(key=lambda p: p.stat().st_mtime, reverse=True)
    return files[0]


def status(msg: str, *, quiet: bool) -> None:
    """JA: 短いステータス行を出力する (quiet でなければ)。

    EN: Emit a short status line.
    """
    if not quiet:
        print(msg, flush=True)


def split_config_from_conf(conf: dict[str, Any]) -> SplitConfig:
    """Build a SplitConfig from the ``split`` and ``ffmpeg`` config sections."""
    s_conf = conf.get("split", {}) if isinstance(conf, dict) else {}
    f_conf = conf.get("ffmpeg", {}) if isinstance(conf, dict) else {}
    return SplitConfig(
        size=int(s_conf.get("size", DEFAULT_SIZE)),
        quality=int(s_conf.get("quality", DEFAULT_QUALITY)),
        target_frames=int(s_conf.get("target_frames", TARGET_FRAMES)),
        max_frames=int(s_conf.get("max_frames", MAX_FRAMES)),
        ffmpeg=str(f_conf.get("binary", "ffmpeg")),
        ffprobe=str(f_conf.get("probe", "ffprobe")),
    )


def format_info(info: SplitResult) -> str:
    return "\n".join(
        [
            "[output]",
            f"Frames: {info.count}",
            f"Image size: {info.width}x{info.height}px",
            f"Quality: {info.quality}",
            f"ZIP size: {info.size}MB",
            f"File name: {info.name}",
        ],
    )


def run_split(
    *,
    conf: dict[str, Any],
    input_path: Path | None = None,
    quiet: bool = False,
    progress: bool = True,
) -> SplitResult:
    """JA: 設定に従って 1 本の動画を分割し ZIP を保存する。

    EN: Split one video according to ``conf`` and save the ZIP.

    Args:
        conf: Configuration dictionary loaded from config.yaml.
        input_path: Explicit video; when None the newest MP4 in
            ``paths.input_dir`` is used.
        quiet: Suppress status messages.
        progress: Show a progress bar while zipping.
    """
    paths = conf.get("paths", {}) if isinstance(conf, dict) else {}
    io = PipelineIO(
        input_dir=Path(str(paths.get("input_dir", "input"))),
        output_dir=Path(str(paths.get("output_dir", "output"))),
    )

    video_path = input_path or pick_input_file(io.input_dir, VIDEO_EXTS)
    if not video_path:
        raise SystemExit(
            f"No video file found in {io.input_dir}. Put an .mp4 into {io.input_dir}/",
        )
    if not video_path.exists():
        raise SystemExit(f"Input video not found: {video_path}")

    cfg = split_config_from_conf(conf)
    log.debug("Split config: %s", cfg)
    session = SplitSession(cfg, io.output_dir, progress=progress and not quiet)
    session.select(video_path)

    status(f"[mpdu] video: {video_path.name}", quiet=quiet)
    status(f"[mpdu] {STATUS_PROCESSING}", quiet=quiet)
    result = session.process()

    if result.truncated:
        status(f"[mpdu] {truncation_warning(cfg.max_frames)}", quiet=quiet)
    status(f"[mpdu] {session.status}", quiet=quiet)
    status(format_info(result), quiet=quiet)
    return result
