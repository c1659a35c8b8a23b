"""
クイズ API からのフェッチ処理（Streamlit 非依存）
- カテゴリ候補の取得と抽選（CategoryFetcher）
- カテゴリ詳細の取得と正規化（ClueSetFetcher）

失敗時の契約:
    通信失敗・応答不正はどちらも例外を外へ出さず、ログを残して縮退する。
    - fetch_category_ids: 空リスト
    - fetch_category: None（そのカテゴリはスキップ）
"""

from __future__ import annotations

import asyncio
import logging
import random

import requests

from src.jeopardy_board.app.ports.quiz_api import QuizApi
from src.jeopardy_board.domain import Category, category_from_record, category_ids_from_records
from src.jeopardy_board.domain.constants import (
    CATEGORIES_PATH,
    CATEGORY_PATH,
    CATEGORY_POOL_SIZE,
    NUM_CATEGORIES,
    NUM_QUESTIONS_PER_CAT,
)

logger = logging.getLogger(__name__)


async def fetch_category_ids(
    api: QuizApi,
    rng: random.Random | None = None,
    count: int = NUM_CATEGORIES,
) -> list[int]:
    """CATEGORY_POOL_SIZE 件の候補から count 件の id を重複なしで抽選して返す。

    候補が count 件に満たない場合は候補すべてを（順序をシャッフルして）返す。
    """
    try:
        records = await asyncio.to_thread(
            api.get_json, CATEGORIES_PATH, {"count": CATEGORY_POOL_SIZE}
        )
        pool = category_ids_from_records(records)
    except requests.RequestException as e:
        logger.error("Error fetching category IDs: %s", e)
        return []
    except (ValueError, TypeError) as e:
        logger.error("Malformed category list: %s", e)
        return []

    if len(pool) < count:
        logger.warning("Only %d categories available (wanted %d)", len(pool), count)
    picker = rng or random
    return picker.sample(pool, min(count, len(pool)))


async def fetch_category(api: QuizApi, category_id: int) -> Category | None:
    """カテゴリ詳細を取得し、先頭 NUM_QUESTIONS_PER_CAT 件の HIDDEN なクルーを持つ `Category` を返す。

    失敗時（通信失敗・応答不正・クルー不足）は None。
    """
    try:
        record = await asyncio.to_thread(api.get_json, CATEGORY_PATH, {"id": category_id})
    except requests.RequestException as e:
        logger.error("Error fetching category %s: %s", category_id, e)
        return None
    except ValueError as e:
        logger.error("Malformed category %s: %s", category_id, e)
        return None

    category = category_from_record(record, NUM_QUESTIONS_PER_CAT)
    if category is None:
        logger.warning(
            "Skipping category %s: missing title or fewer than %d clues",
            category_id,
            NUM_QUESTIONS_PER_CAT,
        )
        return None
    if category.id is None:
        category.id = category_id
    return category
