"""
どこで: tests（engine.runtime.simulation）。
何を: tick 単位の落下/スポーン、クリックによる除去/生成、操作の通知を確認。
なぜ: ウィンドウ無しで 1 フレームの振る舞いを固定するため。
"""

from __future__ import annotations

import pytest

from api.factory import ShapeFactory
from engine.runtime.config import SimConfig
from engine.runtime.simulation import ClickResult, Simulation
from engine.ui.controls import ControlAction
from shapes.kinds import RANDOM_KINDS, ShapeKind
from tests._utils.samples import make_square


class _FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def clock() -> _FakeClock:
    return _FakeClock()


@pytest.fixture()
def sim(factory: ShapeFactory, clock: _FakeClock) -> Simulation:
    return Simulation(SimConfig(), factory, clock_ms=clock)


def test_first_tick_spawns_above_canvas(sim: Simulation) -> None:
    sim.tick(1 / 60)
    assert sim.manager.get_count() == 1
    (shape,) = list(sim.manager.shapes())
    assert shape.y == pytest.approx(-50.0)
    assert 0.0 <= shape.x < 800.0
    assert shape.kind in RANDOM_KINDS
    assert shape in sim.scene


def test_tick_spawns_at_most_one_per_frame(sim: Simulation, clock: _FakeClock) -> None:
    sim.tick(1 / 60)
    clock.now = 60_000.0
    sim.tick(1 / 60)
    assert sim.manager.get_count() == 2


def test_spawn_respects_interval(sim: Simulation, clock: _FakeClock) -> None:
    sim.tick(1 / 60)
    clock.now = 1000.0
    sim.tick(1 / 60)
    assert sim.manager.get_count() == 1
    clock.now = 2000.0
    sim.tick(1 / 60)
    assert sim.manager.get_count() == 2


def test_step_scales_gravity_by_delta(factory: ShapeFactory) -> None:
    sim = Simulation(SimConfig(gravity=0.5), factory, clock_ms=lambda: 0.0)
    sim.throttle.mark(0.0)
    s = sim.scene.add_child(make_square(y=0.0))
    h = sim.manager.add_shape(s)

    assert sim.step(2.0, 0.0) is None
    assert sim.manager.get(h).velocity.y == pytest.approx(1.0)  # type: ignore[union-attr]
    assert s.y == pytest.approx(1.0)


def test_shapes_fall_out_and_are_destroyed(sim: Simulation) -> None:
    sim.throttle.mark(0.0)
    s = sim.scene.add_child(make_square(y=690.0))
    sim.manager.add_shape(s, (0.0, 20.0))
    sim.step(1.0, 0.0)
    assert sim.manager.get_count() == 0
    assert s.destroyed
    assert len(sim.scene) == 0


def test_click_on_shape_removes_without_spawning(sim: Simulation) -> None:
    h = sim.spawn(100.0, 100.0, ShapeKind.SQUARE)
    assert sim.hovering(100.0, 100.0)
    assert sim.click(100.0, 100.0) is ClickResult.REMOVED
    assert sim.manager.get(h) is None
    assert sim.manager.get_count() == 0
    assert len(sim.scene) == 0


def test_click_on_empty_space_spawns_irregular(sim: Simulation) -> None:
    assert not sim.hovering(300.0, 300.0)
    assert sim.click(300.0, 300.0) is ClickResult.SPAWNED
    (shape,) = list(sim.manager.shapes())
    assert shape.kind is ShapeKind.IRREGULAR
    assert shape.position == (300.0, 300.0)
    assert shape.interactive


def test_spawned_shapes_start_at_rest(sim: Simulation) -> None:
    h = sim.spawn(10.0, 10.0)
    entry = sim.manager.get(h)
    assert entry is not None
    assert (entry.velocity.x, entry.velocity.y) == (0.0, 0.0)


def test_apply_notifies_subscribers(sim: Simulation) -> None:
    seen: list[SimConfig] = []
    sim.subscribe(seen.append)
    cfg = sim.apply(ControlAction.INCREASE_GRAVITY)
    assert cfg.gravity == pytest.approx(0.2)
    assert sim.config is cfg
    assert seen == [cfg]


def test_stats_reflect_manager(sim: Simulation) -> None:
    sim.spawn(0.0, 0.0, ShapeKind.SQUARE)
    sim.spawn(0.0, 0.0, ShapeKind.CIRCLE)
    st = sim.stats()
    assert st.count == 2
    assert st.total_area == pytest.approx(sim.manager.get_total_area())


def test_close_destroys_everything(sim: Simulation) -> None:
    shapes = [sim.manager.get(sim.spawn(float(i), 0.0)).shape for i in range(3)]  # type: ignore[union-attr]
    sim.close()
    assert sim.manager.get_count() == 0
    assert all(s.destroyed for s in shapes)
