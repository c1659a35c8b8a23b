from __future__ import annotations

import logging

from src.jeopardy_board.adapters.quiz_api_requests import RequestsQuizApi
from src.jeopardy_board.app.ports.session_store import SessionStore
from src.jeopardy_board.app.state import Settings
from src.jeopardy_board.services.config_loader import load_default_settings
from src.jeopardy_board.services.game_controller import GameController
from src.jeopardy_board.services.gameplay import schedule_read_aloud

logger = logging.getLogger(__name__)


def _build_api(settings: Settings) -> RequestsQuizApi:
    return RequestsQuizApi(base_url=settings.api_base_url, timeout=settings.timeout)


def initialize_state(store: SessionStore) -> None:
    """アプリ起動時に必要なセッション状態を初期化する。

    既に存在するキーは上書きせず、未定義のときのみ初期値を設定する。
    GameController はセッションごとに1つだけ作り、クリック購読もここで1度だけ登録する。
    """
    if store.get("settings") is None:
        store.set("settings", load_default_settings())
    settings: Settings = store.get("settings")
    if store.get("game") is None:
        game = GameController(_build_api(settings))
        game.subscribe(lambda cid, state: schedule_read_aloud(store, game, cid, state))
        store.set("game", game)
        store.set("muted", settings.muted)
    # 読み上げ関連（未定義時のみ初期化）
    if store.get("audio_cache") is None:
        store.set("audio_cache", {})
    if store.get("autoplay_text") is None:
        store.set("autoplay_text", None)
        store.set("autoplay_cell", None)


def get_game(store: SessionStore) -> GameController:
    """セッションの GameController を返す（initialize_state 済みが前提）。"""
    game = store.get("game")
    if game is None:
        raise RuntimeError("session state is not initialized")
    return game


def apply_runtime_settings(store: SessionStore) -> Settings:
    """ランタイム設定を読み直し、API クライアントとミュート状態に反映する。

    盤面と進行状況はそのまま維持する。
    """
    settings = load_default_settings()
    store.set("settings", settings)
    store.set("muted", settings.muted)
    game = get_game(store)
    old_api = game.api
    game.api = _build_api(settings)
    if isinstance(old_api, RequestsQuizApi):
        old_api.close()
    logger.info("Applied settings: base_url=%s timeout=%s", settings.api_base_url, settings.timeout)
    return settings
