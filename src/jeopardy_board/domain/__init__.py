"""ドメイン層（純粋ロジック/データモデル）。

提供物:
- データモデル（Clue/Category/Board と公開状態）
- API レコードの正規化
- 公開状態の遷移とセル識別子
"""

from src.jeopardy_board.domain.constants import (
    CATEGORY_POOL_SIZE,
    MASK_GLYPH,
    NUM_CATEGORIES,
    NUM_QUESTIONS_PER_CAT,
)
from src.jeopardy_board.domain.data import (
    Board,
    Category,
    Clue,
    RevealState,
    category_from_record,
    category_ids_from_records,
    clue_from_record,
)
from src.jeopardy_board.domain.reveal import (
    advance,
    cell_id,
    clue_at,
    next_state,
    parse_cell_id,
)

__all__ = [
    # data
    "Board",
    "Category",
    "Clue",
    "RevealState",
    "category_from_record",
    "category_ids_from_records",
    "clue_from_record",
    # reveal
    "advance",
    "cell_id",
    "clue_at",
    "next_state",
    "parse_cell_id",
    # constants
    "CATEGORY_POOL_SIZE",
    "MASK_GLYPH",
    "NUM_CATEGORIES",
    "NUM_QUESTIONS_PER_CAT",
]
