from __future__ import annotations

from dataclasses import dataclass, field

from src.jeopardy_board.domain import MASK_GLYPH, NUM_QUESTIONS_PER_CAT, Board, cell_id


@dataclass
class Cell:
    """盤面の1セル（表示テキストと表示状態マーカー）。"""

    id: str
    text: str = MASK_GLYPH
    marker: str | None = None


@dataclass
class BoardView:
    """盤面の表示モデル。

    現状の契約:
    - headers: カテゴリタイトル（大文字化済み）を列順に保持する。
    - rows: NUM_QUESTIONS_PER_CAT 行、各行はカテゴリ数ぶんの Cell。
    """

    headers: list[str] = field(default_factory=list)
    rows: list[list[Cell]] = field(default_factory=list)

    @classmethod
    def empty(cls) -> BoardView:
        return cls()

    def cell(self, cid: str) -> Cell | None:
        """セル識別子から Cell を返す。無ければ None。"""
        for row in self.rows:
            for c in row:
                if c.id == cid:
                    return c
        return None

    def cell_ids(self) -> list[str]:
        return [c.id for row in self.rows for c in row]


def render_board(board: Board) -> BoardView:
    """盤面から新しい表示モデルを作る。

    既存の表示は引き継がない（毎回まるごと作り直す）。
    カテゴリが無い場合はヘッダも行も空。
    """
    if not board:
        return BoardView.empty()
    headers = [category.title.upper() for category in board]
    rows = [
        [Cell(id=cell_id(cat_idx, clue_idx)) for cat_idx in range(len(board))]
        for clue_idx in range(NUM_QUESTIONS_PER_CAT)
    ]
    return BoardView(headers=headers, rows=rows)
