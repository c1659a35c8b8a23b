from __future__ import annotations

import logging
import random
from collections.abc import Callable

from src.jeopardy_board.app.ports.loading_indicator import LoadingIndicator
from src.jeopardy_board.app.ports.quiz_api import QuizApi
from src.jeopardy_board.app.state import GamePhase
from src.jeopardy_board.domain import Board, RevealState
from src.jeopardy_board.domain.constants import RESTART_LABEL, START_LABEL
from src.jeopardy_board.services.board_renderer import BoardView, render_board
from src.jeopardy_board.services.fetchers import fetch_category, fetch_category_ids
from src.jeopardy_board.services.reveal import RevealController

# クリック通知の購読者: (セル識別子, 遷移後の状態)
ClickObserver = Callable[[str, RevealState], None]

logger = logging.getLogger(__name__)


class GameController:
    """ゲームの開始/リスタートとクリック配送を一箇所に集約する。

    現状の契約:
    - board/view/started/phase は本インスタンスだけが書き換える。
    - クリックは cell_clicked() の1か所で受け、RevealController に委譲する。
    - setup_and_start() は世代番号を持ち、後から開始された実行があれば
      次の await 地点で打ち切る（盤面は書き換えない）。
    """

    def __init__(
        self,
        api: QuizApi,
        loading: LoadingIndicator | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.api = api
        self.loading = loading
        self._rng = rng
        self.board: Board = []
        self.view: BoardView = BoardView.empty()
        self.phase: GamePhase = GamePhase.NOT_STARTED
        self.started: bool = False
        self._generation = 0
        self._reveal = RevealController(self)
        self._observers: list[ClickObserver] = []

    @property
    def trigger_label(self) -> str:
        return RESTART_LABEL if self.started else START_LABEL

    @property
    def is_loading(self) -> bool:
        return self.phase is GamePhase.LOADING

    def subscribe(self, observer: ClickObserver) -> None:
        """状態が変化したクリックの通知先を登録する（同じ購読者は1度だけ）。"""
        if observer not in self._observers:
            self._observers.append(observer)

    def cell_clicked(self, cid: str) -> RevealState | None:
        """盤面のクリックを受け付ける唯一の入口。"""
        new_state = self._reveal.handle_click(cid)
        if new_state is not None:
            for observer in self._observers:
                observer(cid, new_state)
        return new_state

    def _show_loading(self) -> None:
        if self.loading is not None:
            self.loading.show()

    def _hide_loading(self) -> None:
        if self.loading is not None:
            self.loading.hide()

    async def setup_and_start(self) -> bool:
        """カテゴリを取得して新しい盤面を作り、描画する。

        手順:
        - ローディング表示、盤面クリア
        - カテゴリ id を取得（完了してからクルー取得に進む）
        - カテゴリを1件ずつ順に取得し、失敗したものはスキップ
        - 描画、ローディング非表示、started を反転

        Returns:
            盤面を反映したら True、後続の開始に追い越されて打ち切ったら False。
        """
        self._generation += 1
        generation = self._generation
        self.phase = GamePhase.LOADING
        self.board = []
        self.view = BoardView.empty()
        self._show_loading()

        category_ids = await fetch_category_ids(self.api, self._rng)
        if generation != self._generation:
            logger.info("Start #%d superseded before fetching clues", generation)
            return False

        board: Board = []
        for category_id in category_ids:
            category = await fetch_category(self.api, category_id)
            if generation != self._generation:
                logger.info("Start #%d superseded while fetching clues", generation)
                return False
            if category is not None:
                board.append(category)

        self.board = board
        self.view = render_board(board)
        self._hide_loading()
        self.phase = GamePhase.READY
        self.started = not self.started
        logger.info(
            "Board ready with %d categories: %s",
            len(board),
            ", ".join(c.title for c in board),
        )
        return True
