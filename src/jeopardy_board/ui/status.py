from __future__ import annotations

import streamlit as st

from src.jeopardy_board.app.state import GamePhase
from src.jeopardy_board.services.game_controller import GameController
from src.jeopardy_board.services.progress import reveal_counts


def render_status(game: GameController) -> None:
    """公開状況（未公開・問題表示中・答え表示済み）を描画する。

    開始前は案内のみを表示する。
    """
    if game.phase is GamePhase.NOT_STARTED:
        st.info("Press start to fetch six random categories.")
        return
    if game.phase is GamePhase.READY and not game.board:
        # 取得に全て失敗しても盤面が空になるだけ（理由は表示しない）
        return
    counts = reveal_counts(game.board)
    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Hidden", counts["hidden"])
    with c2:
        st.metric("Question shown", counts["question"])
    with c3:
        st.metric("Answered", counts["answer"])
