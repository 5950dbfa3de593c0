#!/usr/bin/env python3
"""JA: MPDU のメインランチャー (config.yaml を読み込んで 1 本の動画を処理)。

EN: Main launcher for MPDU (loads config.yaml and splits one video).
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml

log = logging.getLogger("mpdu")


def ensure_venv() -> None:
    """JA: 仮想環境の外で起動された場合、リポジトリの venv で再実行する。

    EN: Re-exec into the virtual environment if not already running there.
    """
    env_flag = "MPDU_VENV_ACTIVE"
    if os.environ.get(env_flag) == "1":
        return

    if sys.prefix != sys.base_prefix:
        os.environ[env_flag] = "1"
        return

    script_dir = Path(__file__).resolve().parent
    venv_python = script_dir / "mpdu-env" / "bin" / "python"
    if venv_python.exists():
        os.environ[env_flag] = "1"
        os.execv(str(venv_python), [str(venv_python), *sys.argv])  # noqa: S606


ensure_venv()

from mpdu.pipeline import run_split  # noqa: E402
from mpdu.utils.logging_utils import setup_logging  # noqa: E402
from mpdu.utils.quality import QUALITY_CHOICES, SIZE_CHOICES  # noqa: E402


def load_config(path: Path) -> dict[str, Any]:
    with path.open(encoding="utf-8") as f:
        conf = yaml.safe_load(f) or {}
    return conf if isinstance(conf, dict) else {}


def main() -> None:
    """JA: CLI エントリポイント。

    EN: Main entry point for the launcher.
    """
    ap = argparse.ArgumentParser(
        description="MPDU - split an MP4 into frames and save them as a ZIP",
    )
    ap.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    ap.add_argument("--input", type=Path, help="MP4 to split (default: newest in paths.input_dir)")
    ap.add_argument("--size", type=int, choices=SIZE_CHOICES, help="Override split.size")
    ap.add_argument("--quality", type=int, choices=QUALITY_CHOICES, help="Override split.quality")
    ap.add_argument("--quiet", action="store_true", help="Only errors")
    ap.add_argument("--verbose", action="store_true", help="Verbose logs")
    ap.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable progress UI (useful for logs/CI)",
    )
    args = ap.parse_args()

    config_path = Path(args.config)
    if not config_path.exists():
        log.error("Config file not found: %s", args.config)
        sys.exit(1)

    conf = load_config(config_path)

    cli_conf = conf.get("cli") or {}
    quiet = bool(args.quiet or cli_conf.get("quiet", False))
    verbose = bool(args.verbose or cli_conf.get("verbose", False))
    setup_logging(verbose=verbose, quiet=quiet)

    split_conf = dict(conf.get("split", {}) or {})
    if args.size is not None:
        split_conf["size"] = args.size
    if args.quality is not None:
        split_conf["quality"] = args.quality
    conf["split"] = split_conf

    run_split(
        conf=conf,
        input_path=args.input,
        quiet=quiet,
        progress=not args.no_progress,
    )


if __name__ == "__main__":
    main()
