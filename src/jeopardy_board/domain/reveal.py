from __future__ import annotations

from src.jeopardy_board.domain.data import Board, Clue, RevealState

# 公開状態の遷移表（ANSWER は終端）
_TRANSITIONS: dict[RevealState, RevealState] = {
    RevealState.HIDDEN: RevealState.QUESTION,
    RevealState.QUESTION: RevealState.ANSWER,
}


def next_state(state: RevealState) -> RevealState | None:
    """次の公開状態を返す。終端（ANSWER）なら None。"""
    return _TRANSITIONS.get(state)


def advance(clue: Clue) -> RevealState | None:
    """クルーの公開状態を1段進め、新しい状態を返す。

    ANSWER のクルーは変更せず None を返す。
    """
    new_state = next_state(clue.reveal_state)
    if new_state is None:
        return None
    clue.reveal_state = new_state
    return new_state


def cell_id(cat_idx: int, clue_idx: int) -> str:
    """セル識別子 "カテゴリ番号-クルー番号" を返す。"""
    return f"{cat_idx}-{clue_idx}"


def parse_cell_id(value: str) -> tuple[int, int]:
    """セル識別子を (カテゴリ番号, クルー番号) に分解する。

    形式が不正なら ValueError。
    """
    parts = str(value).split("-")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f"invalid cell id: {value!r}")
    return int(parts[0]), int(parts[1])


def clue_at(board: Board, cat_idx: int, clue_idx: int) -> Clue | None:
    """盤面上の位置からクルーを返す。範囲外なら None。"""
    if not 0 <= cat_idx < len(board):
        return None
    clues = board[cat_idx].clues
    if not 0 <= clue_idx < len(clues):
        return None
    return clues[clue_idx]
