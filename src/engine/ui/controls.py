"""
どこで: `engine.ui.controls`。
何を: 4 つの操作（スポーン頻度 ±0.5 / 重力 ±0.1）を `SimConfig` に適用する純関数と表示整形。
なぜ: キー入力などの UI 配線から範囲クランプと丸めの規則を切り離し、単体で検証できるようにするため。
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

from engine.runtime.config import (
    GRAVITY_MAX,
    GRAVITY_MIN,
    GRAVITY_STEP,
    SPAWN_RATE_MAX,
    SPAWN_RATE_MIN,
    SPAWN_RATE_STEP,
    SimConfig,
    clamp,
)


class ControlAction(str, Enum):
    INCREASE_SPAWN = "increase_spawn"
    DECREASE_SPAWN = "decrease_spawn"
    INCREASE_GRAVITY = "increase_gravity"
    DECREASE_GRAVITY = "decrease_gravity"


def apply_control(config: SimConfig, action: ControlAction) -> SimConfig:
    """操作を適用した新しい設定を返す（範囲外はクランプ）。"""
    if action is ControlAction.INCREASE_SPAWN:
        rate = clamp(config.shapes_per_second + SPAWN_RATE_STEP, SPAWN_RATE_MIN, SPAWN_RATE_MAX)
        return replace(config, shapes_per_second=rate)
    if action is ControlAction.DECREASE_SPAWN:
        rate = clamp(config.shapes_per_second - SPAWN_RATE_STEP, SPAWN_RATE_MIN, SPAWN_RATE_MAX)
        return replace(config, shapes_per_second=rate)
    if action is ControlAction.INCREASE_GRAVITY:
        g = clamp(round(config.gravity + GRAVITY_STEP, 1), GRAVITY_MIN, GRAVITY_MAX)
        return replace(config, gravity=g)
    if action is ControlAction.DECREASE_GRAVITY:
        g = clamp(round(config.gravity - GRAVITY_STEP, 1), GRAVITY_MIN, GRAVITY_MAX)
        return replace(config, gravity=g)
    raise ValueError(f"unknown control action: {action!r}")


def format_spawn_rate(value: float) -> str:
    """スポーン頻度の表示文字列（"0.5", "1", "1.5" ...）。"""
    return f"{value:g}"


def format_gravity(value: float) -> str:
    """重力の表示文字列（小数 1 桁固定）。"""
    return f"{value:.1f}"


__all__ = ["ControlAction", "apply_control", "format_spawn_rate", "format_gravity"]
