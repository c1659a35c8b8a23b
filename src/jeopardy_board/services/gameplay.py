from __future__ import annotations

import asyncio
import logging

from src.jeopardy_board.app.ports.loading_indicator import LoadingIndicator
from src.jeopardy_board.app.ports.session_store import SessionStore
from src.jeopardy_board.domain import RevealState, clue_at, parse_cell_id
from src.jeopardy_board.services.game_controller import GameController

# UI コンポーネントからのイベント（クリック、開始、ミュート切替等）を受け取り、
# セッション状態の更新と GameController の操作を一箇所に集約する。
# 本モジュールは UI フレームワークに依存しない。状態アクセスは SessionStore 経由で行う。

logger = logging.getLogger(__name__)


def start_game(store: SessionStore, game: GameController, loading: LoadingIndicator | None) -> bool:
    """スタート/リスタート操作を処理する（盤面の取得が終わるまで待つ）。

    読み上げの予約とキャッシュは新しい盤面に引き継がない。
    """
    store.set("autoplay_text", None)
    store.set("autoplay_cell", None)
    store.set("audio_cache", {})
    game.loading = loading
    return asyncio.run(game.setup_and_start())


def handle_cell_click(game: GameController, cid: str) -> RevealState | None:
    """盤面セルクリック時の処理を GameController に委譲する。"""
    return game.cell_clicked(cid)


def schedule_read_aloud(
    store: SessionStore,
    game: GameController,
    cid: str,
    state: RevealState,
) -> None:
    """問題文が表示されたクルーの読み上げを予約する。

    - 答えの表示やミュート中は予約しない。
    """
    if state is not RevealState.QUESTION or store.get("muted", False):
        return
    cat_idx, clue_idx = parse_cell_id(cid)
    clue = clue_at(game.board, cat_idx, clue_idx)
    if clue is None:
        return
    store.set("autoplay_text", clue.question)
    store.set("autoplay_cell", cid)


def on_muted_toggle(store: SessionStore, new_muted: bool) -> None:
    """ミュート切替時の副作用（設定更新・予約破棄）を処理する。"""
    desired = bool(new_muted)
    current = bool(store.get("muted", False))
    # 状態に変化がなければ何もしない
    if current == desired:
        return

    settings = store.get("settings")
    if settings is not None:
        settings.muted = desired
        store.set("settings", settings)
    store.set("muted", desired)
    if desired:
        store.set("autoplay_text", None)
        store.set("autoplay_cell", None)
    logger.info("Read-aloud %s", "muted" if desired else "unmuted")
