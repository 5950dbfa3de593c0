"""JA: 1 回の分割操作の状態 (idle -> processing -> done)。

EN: State of one user-initiated split (idle -> processing -> done).
"""

from __future__ import annotations

import enum
import logging
import tempfile
from pathlib import Path
from typing import Final

from mpdu.stages.archive_stage import SplitResult, build_archive
from mpdu.stages.extract_stage import SplitConfig, extract_frames

LOG = logging.getLogger(__name__)

STATUS_PROCESSING: Final = "Processing..."
STATUS_DONE: Final = "Done! ZIP saved."


def truncation_warning(max_frames: int) -> str:
    return f"Frame count exceeded {max_frames}; kept the first {max_frames} frames."


class SplitState(enum.Enum):
    IDLE = "idle"
    PROCESSING = "processing"
    DONE = "done"


class SplitSession:
    """Holds the selected video, the status line and the last result.

    A failed job leaves the session in ``PROCESSING`` with no result; the
    engine error propagates to the caller.
    """

    def __init__(self, cfg: SplitConfig, outdir: Path, *, progress: bool = False) -> None:
        self.cfg = cfg
        self.outdir = Path(outdir)
        self.progress = progress
        self.video: Path | None = None
        self.state = SplitState.IDLE
        self.status = ""
        self.info: SplitResult | None = None

    @property
    def can_process(self) -> bool:
        return self.video is not None and self.state is not SplitState.PROCESSING

    def select(self, video: Path) -> None:
        """Select a new input video, discarding the previous status and result."""
        self.video = Path(video)
        self.status = ""
        self.info = None

    def process(self) -> SplitResult | None:
        if self.video is None:
            return None
        if self.state is SplitState.PROCESSING:
            message = "A split job is already in progress"
            raise RuntimeError(message)

        self.state = SplitState.PROCESSING
        self.status = STATUS_PROCESSING
        self.info = None
        LOG.info("Splitting %s (size=%d, q=%d)", self.video.name, self.cfg.size, self.cfg.quality)

        with tempfile.TemporaryDirectory(prefix="mpdu-") as tmp:
            extracted = extract_frames(self.video, Path(tmp), self.cfg)
            if extracted.truncated:
                self.status = truncation_warning(self.cfg.max_frames)
            result = build_archive(
                extracted.frames,
                self.outdir,
                quality=self.cfg.quality,
                truncated=extracted.truncated,
                progress=self.progress,
            )

        self.info = result
        self.status = STATUS_DONE
        self.state = SplitState.DONE
        return result
