"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str

MIN_CIRCLE_SEGMENTS = 8


@dataclass
class _Settings:
    # 乱数（None で非決定的）
    SEED: int | None = None

    # Logging
    LOG_LEVEL: str = "INFO"

    # HUD
    HUD_ENABLED: bool = True

    # Renderer（円/楕円の分割数）
    CIRCLE_SEGMENTS: int = 48


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int` を使用。
    - 分割数は下限丸めを適用。
    """
    _settings.SEED = env_int("FS_SEED", None)
    _settings.LOG_LEVEL = (env_str("FS_LOG_LEVEL", "INFO") or "INFO").upper()
    _settings.HUD_ENABLED = env_bool("FS_HUD_ENABLED", True)
    _settings.CIRCLE_SEGMENTS = (
        env_int("FS_CIRCLE_SEGMENTS", 48, min_value=MIN_CIRCLE_SEGMENTS) or MIN_CIRCLE_SEGMENTS
    )


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings", "MIN_CIRCLE_SEGMENTS"]
