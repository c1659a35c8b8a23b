"""
盤面の公開状況ページ
- トップページで開始したゲームのカテゴリ別の公開状況を表示します。
- 未開始の場合は案内のみを表示します。
"""

import streamlit as st

from src.jeopardy_board.services.progress import board_progress_frame

# ページ設定
st.set_page_config(page_title="Board progress", layout="wide")
st.title("Board progress")

game = st.session_state.get("game")

if game is None or not game.board:
    st.info("Start a game on the main page to see its progress here.")
    st.stop()

df = board_progress_frame(game.board)
st.dataframe(df, hide_index=True, use_container_width=True)
st.caption(f"{len(df)} categories, {int(df['answer'].sum())} clues answered.")
