"""
アプリケーション層のポート: クイズ API

目的:
- HTTP クライアントの具体実装（requests 等）からフェッチ処理を切り離す。
- フェッチ処理は本ポートの同期呼び出しをスレッドへ逃がして待つ。
"""

from __future__ import annotations

from typing import Any, Protocol


class QuizApi(Protocol):
    """リモートのクイズ API へのアクセス抽象。

    契約:
    - get_json はデコード済みの JSON を返す。
    - 通信失敗は requests.RequestException、JSON 不正は ValueError を送出する。
    """

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:  # noqa: ANN401
        """path（ベース URL からの相対）へ GET し、JSON を返す。"""
