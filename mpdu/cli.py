from __future__ import annotations

import argparse


def main(argv: list[str] | None = None) -> int:
    # JA: パッケージの entrypoint は薄く保ち、処理は split_video に委譲する。
    # EN: Package entrypoint stays thin; the work lives in scripts.split_video.
    parser = argparse.ArgumentParser(description="MPDU - split MP4 into a frame ZIP", add_help=False)
    parser.add_argument("--version", action="store_true")
    args, rest = parser.parse_known_args(argv)

    if args.version:
        from . import __version__

        print(__version__)
        return 0

    from mpdu.scripts.split_video import main as split_main

    split_main(rest)
    return 0
