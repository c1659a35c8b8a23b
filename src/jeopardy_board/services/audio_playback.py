from __future__ import annotations

from src.jeopardy_board.app.ports.session_store import SessionStore
from src.jeopardy_board.services.audio import get_text_audio_bytes


def maybe_get_scheduled_autoplay(store: SessionStore) -> tuple[bool, bytes | None, str | None]:
    """予約された読み上げを実行し、結果を返す。

    Returns:
        (attempted, audio_bytes, player_id)
        attempted: 予約があり読み上げを試みたか
        audio_bytes: 取得できた音声（失敗時は None）
        player_id: プレーヤー要素のID（音声ありのとき）
    副作用:
        実行した場合は予約を消費する（成功/失敗問わず）。ミュート中は予約を破棄する。
    """
    text = store.get("autoplay_text")
    cid = store.get("autoplay_cell")
    if not text:
        return False, None, None
    store.set("autoplay_text", None)
    store.set("autoplay_cell", None)
    if store.get("muted", False):
        return False, None, None

    audio_bytes = get_text_audio_bytes(store, text)
    if audio_bytes:
        return True, audio_bytes, f"player-{cid}"
    return True, None, None
