"""
共通定数
- コメントは現状の目的・契約・使い方のみを記載する。
"""

# 1 ゲームで使うカテゴリ数（盤面の列数）
NUM_CATEGORIES: int = 6

# 1 カテゴリあたりのクルー数（盤面の行数）
NUM_QUESTIONS_PER_CAT: int = 5

# カテゴリ候補の取得件数（ここから NUM_CATEGORIES 件を抽選する）
CATEGORY_POOL_SIZE: int = 100

# クイズ API の既定ベース URL と各エンドポイント
DEFAULT_API_BASE_URL: str = "https://jservice-new.herokuapp.com/api"
CATEGORIES_PATH: str = "/categories"
CATEGORY_PATH: str = "/category"

# HTTP タイムアウト（秒）
DEFAULT_TIMEOUT: float = 10.0

# 未公開セルに表示するマスク文字
MASK_GLYPH: str = "?"

# セルの表示状態マーカー
MARKER_QUESTION: str = "showing-question"
MARKER_ANSWER: str = "showing-answer"

# スタート/リスタートボタンの表示
START_LABEL: str = "👉 Start 👈"
RESTART_LABEL: str = "👉 Restart 👈"
