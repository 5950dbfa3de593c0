"""JA: CLI スクリプトの実装。

`python -m mpdu.scripts.<module>` またはパッケージの entrypoint から実行できる。

EN: CLI script implementations.

They can be invoked via `python -m mpdu.scripts.<module>` or through the
package entrypoints.
"""
