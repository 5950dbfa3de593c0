#!/usr/bin/env python3
"""JA: MP4 をフレームに分割して ZIP 保存する CLI。

EN: Split an MP4 into JPEG frames and save them as a ZIP.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from mpdu.pipeline import run_split
from mpdu.utils.logging_utils import setup_logging
from mpdu.utils.quality import (
    DEFAULT_QUALITY,
    DEFAULT_SIZE,
    QUALITY_CHOICES,
    SIZE_CHOICES,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""

    ap = argparse.ArgumentParser(description="Split an MP4 into frames and save a ZIP")
    ap.add_argument("--input", type=Path, required=True, help="Input MP4 file")
    ap.add_argument("--outdir", type=Path, default=Path("output"), help="Output directory")
    ap.add_argument(
        "--size",
        type=int,
        choices=SIZE_CHOICES,
        default=DEFAULT_SIZE,
        help=f"Long edge in pixels (default: {DEFAULT_SIZE})",
    )
    ap.add_argument(
        "--quality",
        type=int,
        choices=QUALITY_CHOICES,
        default=DEFAULT_QUALITY,
        help=f"JPEG quality code, lower is better (default: {DEFAULT_QUALITY})",
    )
    ap.add_argument("--ffmpeg", default="ffmpeg", help="FFmpeg binary")
    ap.add_argument("--ffprobe", default="ffprobe", help="ffprobe binary")
    ap.add_argument("--json", action="store_true", help="Print the output info as JSON")
    ap.add_argument("--quiet", action="store_true", help="Suppress non-error output")
    ap.add_argument("--verbose", action="store_true", help="Verbose output (incl. progress)")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the split script."""

    args = parse_args(argv)
    log = setup_logging(verbose=args.verbose, quiet=args.quiet)

    if not args.input.exists():
        log.error("input video not found: %s", args.input)
        sys.exit(1)

    conf = {
        "paths": {"output_dir": str(args.outdir)},
        "split": {"size": args.size, "quality": args.quality},
        "ffmpeg": {"binary": args.ffmpeg, "probe": args.ffprobe},
    }
    result = run_split(
        conf=conf,
        input_path=args.input,
        quiet=args.quiet or args.json,
        progress=args.verbose,
    )
    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
