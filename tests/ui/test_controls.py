from __future__ import annotations

import pytest

from engine.runtime.config import SimConfig
from engine.ui.controls import ControlAction, apply_control, format_gravity, format_spawn_rate


def _apply_n(cfg: SimConfig, action: ControlAction, n: int) -> SimConfig:
    for _ in range(n):
        cfg = apply_control(cfg, action)
    return cfg


def test_spawn_rate_steps_and_clamps() -> None:
    cfg = SimConfig()
    up = apply_control(cfg, ControlAction.INCREASE_SPAWN)
    assert up.shapes_per_second == pytest.approx(1.0)
    # 元の設定は変更されない
    assert cfg.shapes_per_second == pytest.approx(0.5)

    top = _apply_n(cfg, ControlAction.INCREASE_SPAWN, 20)
    assert top.shapes_per_second == pytest.approx(5.0)
    bottom = _apply_n(top, ControlAction.DECREASE_SPAWN, 20)
    assert bottom.shapes_per_second == pytest.approx(0.5)


def test_decrease_spawn_at_minimum_is_noop() -> None:
    cfg = apply_control(SimConfig(), ControlAction.DECREASE_SPAWN)
    assert cfg.shapes_per_second == pytest.approx(0.5)


def test_gravity_steps_are_rounded() -> None:
    cfg = _apply_n(SimConfig(), ControlAction.INCREASE_GRAVITY, 2)
    # 0.1 + 0.1 + 0.1 の誤差を残さない
    assert cfg.gravity == 0.3
    cfg = apply_control(cfg, ControlAction.DECREASE_GRAVITY)
    assert cfg.gravity == 0.2


def test_gravity_clamps_at_both_ends() -> None:
    top = _apply_n(SimConfig(), ControlAction.INCREASE_GRAVITY, 50)
    assert top.gravity == pytest.approx(2.0)
    bottom = _apply_n(top, ControlAction.DECREASE_GRAVITY, 50)
    assert bottom.gravity == pytest.approx(0.1)


def test_other_fields_are_preserved() -> None:
    cfg = SimConfig(width=320, height=240, spawn_y=-10.0)
    out = apply_control(cfg, ControlAction.INCREASE_GRAVITY)
    assert (out.width, out.height, out.spawn_y) == (320, 240, -10.0)


def test_unknown_action_is_rejected() -> None:
    with pytest.raises(ValueError):
        apply_control(SimConfig(), "jump")  # type: ignore[arg-type]


@pytest.mark.parametrize("value, text", [(0.5, "0.5"), (1.0, "1"), (2.5, "2.5"), (5.0, "5")])
def test_format_spawn_rate(value: float, text: str) -> None:
    assert format_spawn_rate(value) == text


@pytest.mark.parametrize("value, text", [(0.1, "0.1"), (1.0, "1.0"), (0.30000000000000004, "0.3")])
def test_format_gravity(value: float, text: str) -> None:
    assert format_gravity(value) == text
