from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from src.jeopardy_board.domain import RevealState, advance, clue_at, parse_cell_id
from src.jeopardy_board.domain.constants import MARKER_ANSWER, MARKER_QUESTION

if TYPE_CHECKING:
    from src.jeopardy_board.services.game_controller import GameController

logger = logging.getLogger(__name__)


class RevealController:
    """セルクリックを受けてクルーの公開状態を進め、セル表示を更新する。

    振る舞い:
    - HIDDEN → QUESTION: 問題文を表示し、"showing-question" を付ける。
    - QUESTION → ANSWER: 答えを表示し、"showing-answer" を付ける。
    - ANSWER: 何もしない。
    盤面・表示は GameController が保持するものを参照する（自身では保持しない）。
    """

    def __init__(self, game: GameController) -> None:
        self._game = game

    def handle_click(self, cid: str) -> RevealState | None:
        """クリックされたセルを処理し、遷移後の状態を返す。変化が無ければ None。"""
        try:
            cat_idx, clue_idx = parse_cell_id(cid)
        except ValueError:
            logger.debug("Ignoring click on unknown cell %r", cid)
            return None
        clue = clue_at(self._game.board, cat_idx, clue_idx)
        cell = self._game.view.cell(cid)
        if clue is None or cell is None:
            logger.debug("Ignoring click outside the board: %s", cid)
            return None

        new_state = advance(clue)
        if new_state is RevealState.QUESTION:
            cell.text = clue.question
            cell.marker = MARKER_QUESTION
        elif new_state is RevealState.ANSWER:
            cell.text = clue.answer
            cell.marker = MARKER_ANSWER
        return new_state
