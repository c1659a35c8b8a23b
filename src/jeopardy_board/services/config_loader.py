from __future__ import annotations

import logging
import tomllib
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)


class _RuntimeStore:
    config: dict[str, Any] | None = None


_RUNTIME_STORE = _RuntimeStore()


def set_runtime_config(cfg: dict[str, Any] | None) -> None:
    """実行時（アップロード）で与えられた設定を保持する。None で解除。"""
    _RUNTIME_STORE.config = cfg if isinstance(cfg, dict) else None


def set_runtime_toml_bytes(data: bytes) -> bool:
    """アップロードされた TOML バイト列から実行時設定を反映する。

    解釈できなければ設定を解除して False を返す。
    """
    try:
        cfg = tomllib.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring invalid config.toml: %s", e)
        set_runtime_config(None)
        return False
    set_runtime_config(cfg)
    return True


def _get_config() -> dict[str, Any]:
    """現在有効な設定を返す。

    方針: ローカルの TOML は読み込まない。
    - アップロードによって与えられたランタイム設定があればそれを返す。
    - それ以外は空辞書を返し、各呼び出し側で default 値にフォールバックさせる。
    """
    if isinstance(_RUNTIME_STORE.config, dict):
        return _RUNTIME_STORE.config
    return {}


def get_app_title(default: str = "Jeopardy!") -> str:
    cfg = _get_config()
    title = cfg.get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    return default


def load_default_settings_values() -> dict[str, str | float | bool]:
    result: dict[str, str | float | bool] = {}
    cfg = _get_config()
    api = cfg.get("api")
    if isinstance(api, dict):
        base_url = api.get("base_url")
        if isinstance(base_url, str) and base_url.strip():
            result["api_base_url"] = base_url.strip()
        timeout = api.get("timeout")
        # bool は int のサブクラスなので除外する
        if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout > 0:
            result["timeout"] = float(timeout)
    settings = cfg.get("settings")
    if isinstance(settings, dict):
        if isinstance(settings.get("muted"), bool):
            result["muted"] = bool(settings["muted"])
    return result


if TYPE_CHECKING:
    from src.jeopardy_board.app.state import Settings as _SettingsType


def load_default_settings() -> _SettingsType:
    from src.jeopardy_board.app.state import Settings  # 局所インポートで循環回避

    values = load_default_settings_values()
    return Settings(
        api_base_url=str(values.get("api_base_url", Settings.api_base_url)),
        timeout=float(values.get("timeout", Settings.timeout)),
        muted=bool(values.get("muted", Settings.muted)),
    )
