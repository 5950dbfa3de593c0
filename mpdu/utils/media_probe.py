from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path

import cv2
import numpy as np

LOG = logging.getLogger(__name__)


def _run_subprocess(cmd: list[str]) -> subprocess.CompletedProcess[str]:
    normalized_cmd = [str(part) for part in cmd]
    return subprocess.run(normalized_cmd, capture_output=True, text=True, check=False)


def probe_duration(video_path: Path, *, ffprobe: str = "ffprobe") -> float:
    """Return container duration in seconds as reported by ffprobe.

    Raises ``subprocess.CalledProcessError`` when ffprobe fails and
    ``ValueError`` when no usable duration is reported.
    """

    cmd = [
        ffprobe,
        "-v",
        "error",
        "-print_format",
        "json",
        "-show_format",
        str(video_path),
    ]
    res = _run_subprocess(cmd)
    if res.returncode != 0:
        raise subprocess.CalledProcessError(res.returncode, cmd, res.stdout, res.stderr)

    try:
        data = json.loads(res.stdout or "{}")
        duration = float(data.get("format", {}).get("duration"))
    except (json.JSONDecodeError, TypeError, ValueError) as exc:
        message = f"Could not read duration of {video_path}"
        raise ValueError(message) from exc

    LOG.debug("Duration of %s: %.3fs", video_path.name, duration)
    return duration


def read_image_size(data: bytes) -> tuple[int, int]:
    """Decode an encoded image and return its ``(width, height)``."""

    buf = np.frombuffer(data, dtype=np.uint8)
    img = cv2.imdecode(buf, cv2.IMREAD_UNCHANGED)
    if img is None:
        message = "Could not decode image data"
        raise ValueError(message)
    h, w = img.shape[:2]
    return int(w), int(h)
