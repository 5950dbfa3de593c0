"""JA: ロギング設定ユーティリティ。

EN: Logging setup utilities.
"""

from __future__ import annotations

import logging
from typing import Final

import coloredlogs

DEFAULT_LOGGER_NAME: Final = "mpdu"


def setup_logging(*, verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """JA: フラグに応じてロギングを設定する。

    EN: Configure logging according to verbosity flags.
    """
    level = logging.INFO
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG

    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    logger.setLevel(level)

    # JA: 再呼び出し時にハンドラが重複しないようにする。
    # EN: Avoid double handlers if called multiple times.
    if logger.handlers:
        return logger

    coloredlogs.install(level=level, logger=logger, fmt="%(asctime)s %(levelname)s %(message)s")
    return logger
