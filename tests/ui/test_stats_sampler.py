from __future__ import annotations

import pytest

from engine.runtime.config import SimConfig
from engine.runtime.simulation import Stats
from engine.ui.hud.config import HUDConfig
from engine.ui.hud.fields import AREA, FPS, GRAVITY, SHAPES, SPAWN_RATE
from engine.ui.hud.sampler import StatsSampler


def _sampler(stats: Stats, cfg: SimConfig, **hud) -> StatsSampler:
    return StatsSampler(lambda: stats, lambda: cfg, hud_config=HUDConfig(**hud))


def test_sample_formats_values() -> None:
    s = _sampler(Stats(count=3, total_area=1234.6), SimConfig(gravity=0.3, shapes_per_second=1.5))
    s.sample()
    assert s.data[SHAPES] == "3"
    assert s.data[AREA] == "1235"
    assert s.data[SPAWN_RATE] == "1.5"
    assert s.data[GRAVITY] == "0.3"
    assert list(s.data) == [SHAPES, AREA, SPAWN_RATE, GRAVITY, FPS]
    assert s.values[AREA] == pytest.approx(1234.6)


def test_disabled_groups_are_hidden() -> None:
    s = _sampler(Stats(0, 0.0), SimConfig(), show_controls=False, show_fps=False)
    s.sample()
    assert list(s.data) == [SHAPES, AREA]


def test_explicit_order_wins() -> None:
    s = _sampler(Stats(0, 0.0), SimConfig(), order=[GRAVITY, SHAPES])
    s.sample()
    assert list(s.data) == [GRAVITY, SHAPES]


def test_fps_is_measured_over_half_second_window() -> None:
    s = _sampler(Stats(0, 0.0), SimConfig())
    for _ in range(40):
        s.tick(1 / 60)
    assert s.values[FPS] == pytest.approx(60.0)


def test_sample_interval_throttles_updates() -> None:
    box = {"stats": Stats(1, 0.0)}
    s = StatsSampler(
        lambda: box["stats"], lambda: SimConfig(), hud_config=HUDConfig(sample_interval=1.0)
    )
    s.tick(0.6)
    assert s.data == {}
    s.tick(0.6)
    assert s.data[SHAPES] == "1"
    box["stats"] = Stats(5, 0.0)
    s.tick(0.1)
    assert s.data[SHAPES] == "1"


def test_hud_config_from_mapping_ignores_unknown_keys() -> None:
    cfg = HUDConfig.from_mapping({"show_fps": False, "font_size": 14, "bogus": 1}, enabled=None)
    assert cfg.show_fps is False
    assert cfg.font_size == 14
    assert cfg.enabled is True
