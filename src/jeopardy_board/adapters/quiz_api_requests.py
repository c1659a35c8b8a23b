"""requests によるクイズ API アダプタ。

目的:
- アプリ層ポート `QuizApi` の実装を提供する。
- セッション（コネクション）はインスタンス単位で使い回す。
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from src.jeopardy_board.app.ports.quiz_api import QuizApi
from src.jeopardy_board.domain.constants import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class RequestsQuizApi(QuizApi):
    """requests.Session を使う QuizApi。

    Args:
        base_url: API のベース URL（末尾スラッシュは無視）
        timeout:  1 リクエストあたりのタイムアウト秒
        session:  差し替え用のセッション（未指定なら新規作成）
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:  # noqa: ANN401
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("GET %s params=%s", url, params)
        resp = self._session.get(url, params=params, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def close(self) -> None:
        self._session.close()
