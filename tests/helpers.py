"""テスト共通のフェイク（API とセッションストア）。"""

from __future__ import annotations

import threading
from typing import Any

import requests


def category_record(cat_id: int, n_clues: int = 7, title: str | None = None) -> dict[str, Any]:
    return {
        "id": cat_id,
        "title": title if title is not None else f"category {cat_id}",
        "clues_count": n_clues,
        "clues": [
            {
                "id": cat_id * 100 + i,
                "question": f"question {cat_id}.{i}",
                "answer": f"answer {cat_id}.{i}",
                "value": (i + 1) * 200,
            }
            for i in range(n_clues)
        ],
    }


class FakeQuizApi:
    """パスに応じて固定レスポンスを返す QuizApi。

    - category_ids: /categories が返す id 一覧
    - failing: 詳細取得で ConnectionError を送出する id
    - overrides: id -> 詳細レスポンスの差し替え
    """

    def __init__(
        self,
        category_ids: list[int] | None = None,
        failing: set[int] | None = None,
        overrides: dict[int, Any] | None = None,
    ) -> None:
        self.category_ids = list(range(1, 101)) if category_ids is None else category_ids
        self.failing = failing or set()
        self.overrides = overrides or {}
        self.calls: list[tuple[str, dict[str, Any] | None]] = []
        self._lock = threading.Lock()

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        with self._lock:
            self.calls.append((path, params))
        if path == "/categories":
            return [{"id": i, "title": f"category {i}", "clues_count": 7} for i in self.category_ids]
        if path == "/category":
            cat_id = params["id"]
            if cat_id in self.failing:
                raise requests.ConnectionError(f"category {cat_id} unreachable")
            if cat_id in self.overrides:
                return self.overrides[cat_id]
            return category_record(cat_id)
        raise AssertionError(f"unexpected path {path}")


class DictStore:
    """dict による SessionStore。"""

    def __init__(self, **initial: Any) -> None:
        self.data: dict[str, Any] = dict(initial)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value
