from __future__ import annotations

import logging
from functools import lru_cache
from io import BytesIO

from gtts import gTTS
from gtts.tts import gTTSError

from src.jeopardy_board.app.ports.session_store import SessionStore

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def synthesize_text(text: str, lang: str = "en") -> bytes | None:
    """テキストから音声(mp3)のバイト列を生成して返す。

    - gTTS のネットワーク障害などが起きた場合は None を返す。
    - lru_cache でテキストごとの結果をメモリキャッシュ。
    """
    if not text:
        return None
    try:
        tts = gTTS(text=text, lang=lang)
        bio = BytesIO()
        tts.write_to_fp(bio)
        return bio.getvalue()
    except (gTTSError, ValueError) as e:
        logger.warning("Speech synthesis failed: %s", e)
        return None


def get_text_audio_bytes(store: SessionStore, text: str | None) -> bytes | None:
    """読み上げ音声を返す（セッション内キャッシュ利用）。"""
    if not text:
        return None
    cache: dict[str, bytes] = store.get("audio_cache", {})
    if text in cache:
        return cache[text]
    audio_bytes = synthesize_text(text)
    if audio_bytes:
        cache[text] = audio_bytes
        # 変更を永続化
        store.set("audio_cache", cache)
    return audio_bytes
