"""
アプリケーション層のポート: ローディング表示

目的:
- フェッチ中の表示切替を UI 実装から切り離す。
"""

from __future__ import annotations

from typing import Protocol


class LoadingIndicator(Protocol):
    """ローディング表示の抽象。"""

    def show(self) -> None:
        """ローディング表示を出す。"""

    def hide(self) -> None:
        """ローディング表示を消す。"""
