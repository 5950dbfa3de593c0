from __future__ import annotations

from pathlib import Path
from typing import Callable

import cv2
import numpy as np
import pytest


def encode_jpeg(width: int, height: int) -> bytes:
    img = np.zeros((height, width, 3), dtype=np.uint8)
    img[:, : width // 2] = (40, 120, 200)
    ok, buf = cv2.imencode(".jpg", img)
    assert ok
    return buf.tobytes()


@pytest.fixture
def write_frames() -> Callable[[Path, int, int, int], list[Path]]:
    """Write ``count`` JPEG frames named like FFmpeg's ``frame_%03d.jpg``."""

    def _write(directory: Path, count: int, width: int = 64, height: int = 36) -> list[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        data = encode_jpeg(width, height)
        paths = []
        for i in range(1, count + 1):
            p = directory / f"frame_{i:03d}.jpg"
            p.write_bytes(data)
            paths.append(p)
        return paths

    return _write


@pytest.fixture
def jpeg_bytes() -> Callable[[int, int], bytes]:
    return encode_jpeg
