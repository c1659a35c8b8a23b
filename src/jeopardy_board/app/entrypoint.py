import logging

import streamlit as st

from src.jeopardy_board.adapters.session_store_streamlit import StSessionStore
from src.jeopardy_board.services import app_state
from src.jeopardy_board.services.audio_playback import maybe_get_scheduled_autoplay
from src.jeopardy_board.services.config_loader import get_app_title
from src.jeopardy_board.ui.audio_player import build_autoplay_html, render_html
from src.jeopardy_board.ui.board import handle_click, render_board
from src.jeopardy_board.ui.header import render_header
from src.jeopardy_board.ui.sidebar import render_sidebar
from src.jeopardy_board.ui.status import render_status

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    # Streamlit は再実行のたびに main() を呼ぶため、ハンドラは未設定のときだけ追加する
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)-12s %(levelname)-8s %(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.INFO)


def main():
    _configure_logging()
    default_title = "Jeopardy!"
    st.set_page_config(page_title=default_title, layout="wide")

    try:
        store = StSessionStore()
        app_state.initialize_state(store)
        game = app_state.get_game(store)
    except Exception as e:
        logger.exception("Failed to initialize session state")
        st.error(f"Failed to initialize the game: {e}")
        return

    st.title(get_app_title(default_title))

    # サイドバー: 設定 UI
    render_sidebar(store)

    # ヘッダー操作（スタート/リスタート + ローディング + 音声プレーヤー置き場）
    audio_placeholder = render_header(store, game)

    render_status(game)

    # 盤面（全セルのクリックは GameController.cell_clicked に集約）
    st.divider()
    render_board(game.view, lambda cid: handle_click(game, cid))

    # 予約された読み上げ（サービスで判定し、UIで描画）
    attempted, audio_bytes, player_id = maybe_get_scheduled_autoplay(store)
    if attempted:
        if audio_bytes and player_id:
            render_html(audio_placeholder, build_autoplay_html(audio_bytes, player_id))
        else:
            st.warning("Could not read the question aloud (check your network connection).")
