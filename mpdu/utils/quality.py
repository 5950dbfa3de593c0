"""Size and quality option tables for frame export."""

from __future__ import annotations

from typing import Final

SIZE_CHOICES: Final = (320, 640, 960, 1280, 1920)
DEFAULT_SIZE: Final = 960

QUALITY_CHOICES: Final = (2, 3, 5, 10, 15)
DEFAULT_QUALITY: Final = 3

# ffmpeg -q:v code -> approximate visual quality shown to the user.
QUALITY_LABELS: Final[dict[int, str]] = {
    2: "100%",
    3: "92%",
    5: "80%",
    10: "60%",
    15: "50%",
}


def quality_label(code: int | str) -> str:
    """Return the display label for a JPEG quality code.

    Codes outside the table fall back to ``100 - 5 * code``.
    """
    q = int(code)
    label = QUALITY_LABELS.get(q)
    if label is not None:
        return label
    return f"{100 - q * 5}%"
