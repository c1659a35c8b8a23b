from __future__ import annotations

import html
import re
from collections.abc import Callable

import streamlit as st

from src.jeopardy_board.domain.constants import MARKER_ANSWER, MARKER_QUESTION
from src.jeopardy_board.services.board_renderer import BoardView
from src.jeopardy_board.services.game_controller import GameController
from src.jeopardy_board.services.gameplay import handle_cell_click as _svc_handle_cell_click

# ボタンのラベルは Markdown/LaTeX として解釈されるため、これらの文字はエスケープする
_MARKDOWN_ACTIVE = re.compile(r"([\\`*_{}\[\]()<>#+\-.!|~$])")


def escape_label(text: str) -> str:
    """API 由来のテキストをボタンラベルに文字どおり表示できる形にする。"""
    return _MARKDOWN_ACTIVE.sub(r"\\\1", text)


def header_html(title: str) -> str:
    """カテゴリ見出しの HTML を返す（タイトルは HTML エスケープし、$ は実体参照にする）。"""
    safe = html.escape(title).replace("$", "&#36;")
    return f"<div style='text-align:center;font-weight:700;'>{safe}</div>"


def render_board(view: BoardView, on_click: Callable[[str], None]) -> None:
    """盤面を描画し、クリックで on_click(セル識別子) を呼び出す。

    すべてのセルが同じ on_click に集約される（セルごとのハンドラは持たない）。
    """
    if not view.headers:
        return
    n_cols = len(view.headers)
    header_cols = st.columns(n_cols)
    for c, title in enumerate(view.headers):
        header_cols[c].markdown(header_html(title), unsafe_allow_html=True)
    for row in view.rows:
        cols = st.columns(n_cols)
        for c, cell in enumerate(row):
            is_answer = cell.marker == MARKER_ANSWER
            if cols[c].button(
                escape_label(cell.text),
                key=f"cell-{cell.id}",
                use_container_width=True,
                type="primary" if cell.marker == MARKER_QUESTION else "secondary",
                disabled=is_answer,
            ):
                on_click(cell.id)
                st.rerun()


def handle_click(game: GameController, cid: str) -> None:
    """盤面セルクリック時の処理をサービスに委譲する。"""
    _svc_handle_cell_click(game, cid)
