"""
どこで: `engine.ui.hud` パッケージ。
何を: HUD 表示の設定と項目定義（フィールド名）を提供する。
なぜ: HUD の有効/無効や表示項目の選択を宣言的に制御するため。

`overlay`（pyglet 依存）はここでは import しない。
"""

from __future__ import annotations

from .config import HUDConfig
from .fields import AREA, FPS, GRAVITY, SHAPES, SPAWN_RATE

__all__ = [
    "HUDConfig",
    "SHAPES",
    "AREA",
    "SPAWN_RATE",
    "GRAVITY",
    "FPS",
]
