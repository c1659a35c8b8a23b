from __future__ import annotations

import pandas as pd

from src.jeopardy_board.domain import Board, RevealState

_COLUMNS = ["category", "hidden", "question", "answer"]


def board_progress_frame(board: Board) -> pd.DataFrame:
    """カテゴリごとの公開状況（状態別のクルー数）を DataFrame で返す。"""
    rows = []
    for category in board:
        counts = {state: 0 for state in RevealState}
        for clue in category.clues:
            counts[clue.reveal_state] += 1
        rows.append(
            {
                "category": category.title.upper(),
                "hidden": counts[RevealState.HIDDEN],
                "question": counts[RevealState.QUESTION],
                "answer": counts[RevealState.ANSWER],
            }
        )
    return pd.DataFrame(rows, columns=_COLUMNS)


def reveal_counts(board: Board) -> dict[str, int]:
    """盤面全体の状態別クルー数を返す。"""
    df = board_progress_frame(board)
    return {col: int(df[col].sum()) for col in _COLUMNS[1:]}
