from __future__ import annotations

import streamlit as st

from src.jeopardy_board.adapters.loading_indicator_streamlit import StLoadingIndicator
from src.jeopardy_board.adapters.session_store_streamlit import StSessionStore
from src.jeopardy_board.services.game_controller import GameController
from src.jeopardy_board.services.gameplay import start_game as _svc_start_game


def render_header(store: StSessionStore, game: GameController) -> object:
    """メインヘッダー（スタート/リスタートボタン + ローディング + 音声プレースホルダ）を描画する。

    Returns:
        音声プレースホルダ（st.empty() の返り値）。
    """
    c1, c2 = st.columns([2, 8])
    with c1:
        clicked = st.button(game.trigger_label, key="start", disabled=game.is_loading)
    with c2:
        loading_placeholder = st.empty()
        audio_placeholder = st.empty()
    if clicked:
        _svc_start_game(store, game, StLoadingIndicator(loading_placeholder))
        st.rerun()
    return audio_placeholder
