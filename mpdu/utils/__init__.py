"""JA: 補助ユーティリティ。

EN: Helper utilities (logging, option tables, media probing).
"""
