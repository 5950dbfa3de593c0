"""JA: ZIP 作成ステージ。

抽出済みフレームを名前順に ZIP へ格納し、先頭フレームの画素サイズと
合計バイト数からファイル名を決める。

EN: Archive assembly stage.

Stores extracted frames in name order, decodes the first frame for its pixel
size and names the archive after the size, quality label and total bytes.
"""

from __future__ import annotations

import logging
import tempfile
import zipfile
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from tqdm import tqdm

from mpdu.utils.media_probe import read_image_size
from mpdu.utils.quality import quality_label

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplitResult:
    """JA: 出力情報 (枚数・画像サイズ・画質・ZIP 容量・ファイル名)。

    EN: Output info shown to the user after a successful split.
    """

    count: int
    width: int
    height: int
    quality: str
    size: str
    name: str
    path: Path
    truncated: bool = False

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["path"] = str(self.path)
        return data


def format_megabytes(total_bytes: int) -> str:
    return f"{total_bytes / 1024 / 1024:.2f}"


def archive_name(width: int, height: int, label: str, size_mb: str) -> str:
    return f"ugoira_spv2_{width}x{height}_{label}_{size_mb}MB.zip"


def build_archive(
    frames: list[Path],
    outdir: Path,
    *,
    quality: int,
    truncated: bool = False,
    progress: bool = False,
) -> SplitResult:
    """JA: フレームを ZIP にまとめて outdir に保存する。

    EN: Pack ``frames`` into a ZIP saved under ``outdir``.

    The archive is assembled under a temporary name first because its final
    name depends on the accumulated frame size.
    """
    if not frames:
        message = "No frames to archive"
        raise ValueError(message)

    outdir.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(dir=outdir, prefix=".mpdu-", suffix=".zip", delete=False) as tmp:
        tmp_path = Path(tmp.name)

    total_size = 0
    width: int | None = None
    height: int | None = None

    try:
        with zipfile.ZipFile(tmp_path, "w", compression=zipfile.ZIP_STORED) as zf:
            for frame in tqdm(frames, desc="zip", disable=not progress):
                data = frame.read_bytes()
                total_size += len(data)
                zf.writestr(frame.name, data)

                if width is None:
                    width, height = read_image_size(data)
                    LOG.debug("First frame %s is %dx%d", frame.name, width, height)

        label = quality_label(quality)
        size_mb = format_megabytes(total_size)
        name = archive_name(width, height, label, size_mb)
        out_path = outdir / name
        tmp_path.replace(out_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise

    LOG.info("Saved %s (%d frames, %s MB)", out_path, len(frames), size_mb)
    return SplitResult(
        count=len(frames),
        width=width,
        height=height,
        quality=label,
        size=size_mb,
        name=name,
        path=out_path,
        truncated=truncated,
    )
