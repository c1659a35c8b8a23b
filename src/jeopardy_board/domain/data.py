from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.jeopardy_board.domain.constants import NUM_QUESTIONS_PER_CAT


class RevealState(str, Enum):
    """クルーの公開状態。HIDDEN → QUESTION → ANSWER の順にのみ進む。"""

    HIDDEN = "hidden"
    QUESTION = "question"
    ANSWER = "answer"


@dataclass
class Clue:
    """問題と答えのペア（公開状態つき）。

    現状の契約:
    - question/answer: 簡易正規化済みのテキスト
    - reveal_state: RevealController 以外からは変更しない
    """

    question: str
    answer: str
    reveal_state: RevealState = RevealState.HIDDEN


@dataclass
class Category:
    """カテゴリ（タイトル + 先頭 NUM_QUESTIONS_PER_CAT 件のクルー）。"""

    title: str
    clues: list[Clue] = field(default_factory=list)
    id: int | None = None


# 盤面は Category のリスト（挿入順 = 列の表示順）
Board = list[Category]


def _normalize_text(s: Any) -> str:
    """軽量な正規化を行う。

    - None は空文字
    - 文字列以外（数値の答え等）は str へ変換
    - 連続空白を1つに圧縮し、前後空白を除去（表示上の選択: API の改行やインデントを盤面に持ち込まない）
    """
    if s is None:
        return ""
    s = str(s).strip()
    s = re.sub(r"\s+", " ", s)
    return s


def clue_from_record(record: dict[str, Any]) -> Clue | None:
    """API のクルーレコードから HIDDEN 状態の `Clue` を作る。

    question/answer のどちらかが空なら None（余分なフィールドは無視）。
    """
    if not isinstance(record, dict):
        return None
    question = _normalize_text(record.get("question"))
    answer = _normalize_text(record.get("answer"))
    if not question or not answer:
        return None
    return Clue(question=question, answer=answer)


def category_from_record(
    record: dict[str, Any],
    limit: int = NUM_QUESTIONS_PER_CAT,
) -> Category | None:
    """API のカテゴリ詳細レコードから `Category` を作る。

    契約:
    - clues は先頭 limit 件に切り詰める（API はそれ以上返すことがある）
    - 全クルーの公開状態は HIDDEN
    - タイトル欠損、clues が配列でない、先頭 limit 件に満たない、
      または先頭 limit 件に問題文か答えが空のものがある場合は None
    """
    if not isinstance(record, dict):
        return None
    title = _normalize_text(record.get("title"))
    raw_clues = record.get("clues")
    if not title or not isinstance(raw_clues, list):
        return None

    clues: list[Clue] = []
    # 先頭 limit 件だけを使う（欠けたレコードを後続で埋めない）
    for raw in raw_clues[:limit]:
        clue = clue_from_record(raw)
        if clue is None:
            return None
        clues.append(clue)
    if len(clues) < limit:
        return None

    raw_id = record.get("id")
    cat_id = raw_id if isinstance(raw_id, int) and not isinstance(raw_id, bool) else None
    return Category(title=title, clues=clues, id=cat_id)


def category_ids_from_records(records: Any) -> list[int]:
    """カテゴリ一覧レコードから id を取り出す（重複は最初の1件に統合）。

    整数として解釈できない id を持つレコードはスキップする。
    一覧が配列でなければ TypeError。
    """
    if not isinstance(records, list):
        raise TypeError(f"category list must be an array, got {type(records).__name__}")
    ids: list[int] = []
    seen: set[int] = set()
    for rec in records:
        if not isinstance(rec, dict):
            continue
        raw = rec.get("id")
        if isinstance(raw, bool):
            continue
        try:
            cid = int(raw)
        except (TypeError, ValueError):
            continue
        if cid in seen:
            continue
        seen.add(cid)
        ids.append(cid)
    return ids
