from __future__ import annotations

import streamlit as st

from src.jeopardy_board.adapters.session_store_streamlit import StSessionStore
from src.jeopardy_board.services import app_state
from src.jeopardy_board.services.config_loader import set_runtime_toml_bytes
from src.jeopardy_board.services.gameplay import on_muted_toggle as _svc_on_muted_toggle


def render_sidebar(store: StSessionStore) -> None:
    """サイドバーの設定 UI を描画する。

    - ミュート切替は常に反映する（プレイ中でも可）。
    - config.toml を読み込むと API 接続設定とミュートの既定値を反映する。
    - ページリンクは利用可能な場合のみ表示する。
    """
    with st.sidebar:
        st.subheader("Settings")
        current_muted = bool(store.get("muted", False))
        new_muted = st.toggle("Mute read-aloud", value=current_muted)
        _svc_on_muted_toggle(store, bool(new_muted))

        up = st.file_uploader("config.toml", type=["toml"], accept_multiple_files=False)
        if st.button("Apply config", disabled=up is None):
            if up is not None and set_runtime_toml_bytes(up.getvalue()):
                settings = app_state.apply_runtime_settings(store)
                st.success(f"Using {settings.api_base_url}")
            else:
                st.error("Could not read config.toml; using defaults.")
                app_state.apply_runtime_settings(store)

        # ページ移動リンク（Streamlit が対応している場合はサイドバーに表示）
        if hasattr(st.sidebar, "page_link"):
            st.divider()
            st.page_link("pages/board_progress.py", label="Board progress")
