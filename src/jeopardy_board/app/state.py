"""アプリケーションの状態モデル定義。

目的:
- UI とドメインの境界で用いる明示的な状態構造を提供する。
- ゲーム進行そのものは GameController が保持し、ここでは設定と進行フェーズのみ定義する。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.jeopardy_board.domain.constants import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT


class GamePhase(str, Enum):
    """ゲーム進行フェーズ。"""

    NOT_STARTED = "not_started"
    LOADING = "loading"
    READY = "ready"


@dataclass
class Settings:
    """API 接続や動作に関する設定。

    現状の契約:
    - api_base_url/timeout はクイズ API への接続設定。
    - muted は問題文の読み上げのミュート状態を示す。
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    muted: bool = False
