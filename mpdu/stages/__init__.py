"""JA: 分割ジョブの各ステージ実装。

`extract_stage` が FFmpeg でフレームを書き出し、`archive_stage` が ZIP に
まとめる。ルートの `start_mpdu.py` と `mpdu.scripts.split_video` は薄い
エントリポイントで、処理はこれらのモジュールに委譲される。

EN: Split job stage implementations.

`extract_stage` writes frames with FFmpeg and `archive_stage` packs them into a
ZIP. The root launcher `start_mpdu.py` and `mpdu.scripts.split_video` stay thin
and delegate into these modules.
"""
