"""Streamlit のプレースホルダを使うローディング表示。"""

from __future__ import annotations

from typing import Any

from src.jeopardy_board.app.ports.loading_indicator import LoadingIndicator


class StLoadingIndicator(LoadingIndicator):
    """`st.empty()` のプレースホルダにローディング表示を出し入れする。"""

    def __init__(self, placeholder: Any, message: str = "Loading the board…") -> None:
        self._placeholder = placeholder
        self._message = message

    def show(self) -> None:
        self._placeholder.info(f"⏳ {self._message}")

    def hide(self) -> None:
        self._placeholder.empty()
