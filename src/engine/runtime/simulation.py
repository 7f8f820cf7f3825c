"""
どこで: `engine.runtime.simulation`。
何を: ホストループから `tick(dt)` で駆動されるシミュレーション本体（落下更新・スポーン・クリック処理）。
なぜ: フレームコールバックに散っていた処理を 1 つの Tickable に集め、設定/状態を明示的に
      受け渡すことで、ウィンドウなしでも検証できるようにするため。

1 tick の流れ:
1) `delta = dt * 60`（60 FPS を 1.0 とするフレーム単位）
2) `manager.update(gravity * delta, height, boundary_margin)`
3) スポーン間隔を満たしていれば、画面上端より上にランダムな図形を 1 体追加
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol

import numpy as np

from engine.core.manager import ShapeManager
from engine.core.scene import Container
from engine.core.shape import Shape
from engine.ui.controls import ControlAction, apply_control
from shapes.kinds import ShapeKind

from .config import SimConfig
from .spawner import SpawnThrottle

logger = logging.getLogger(__name__)

# pyglet の dt [s] を「60 FPS で 1.0」のフレーム単位へ換算する係数
FRAMES_PER_SECOND_BASE = 60.0


class ShapeSource(Protocol):
    """図形の生成元（`api.factory.ShapeFactory` が満たす）。"""

    rng: np.random.Generator

    def create_shape(self, kind: ShapeKind | int | str, x: float, y: float, color: int) -> Shape:
        ...

    def random_color(self) -> int:
        ...

    def random_kind(self) -> ShapeKind:
        ...


class ClickResult(str, Enum):
    REMOVED = "removed"
    SPAWNED = "spawned"


@dataclass(frozen=True)
class Stats:
    """HUD 向けの集計値。"""

    count: int
    total_area: float


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Simulation:
    """ShapeManager/Container/ShapeFactory を束ね、1 フレーム分ずつ進める。"""

    def __init__(
        self,
        config: SimConfig,
        factory: ShapeSource,
        *,
        manager: ShapeManager | None = None,
        scene: Container | None = None,
        throttle: SpawnThrottle | None = None,
        clock_ms: Callable[[], float] = monotonic_ms,
    ) -> None:
        self._config = config
        self.factory = factory
        self.manager = manager if manager is not None else ShapeManager()
        self.scene = scene if scene is not None else Container()
        self.throttle = throttle if throttle is not None else SpawnThrottle()
        self._clock_ms = clock_ms
        self._listeners: list[Callable[[SimConfig], None]] = []

    # ---- 設定 ----------------------------------------------------------
    @property
    def config(self) -> SimConfig:
        return self._config

    def apply(self, action: ControlAction) -> SimConfig:
        """操作を適用して設定を差し替え、購読者へ通知する。"""
        self._config = apply_control(self._config, action)
        logger.debug(
            "%s -> gravity=%.1f rate=%g",
            action.value,
            self._config.gravity,
            self._config.shapes_per_second,
        )
        for cb in self._listeners:
            cb(self._config)
        return self._config

    def subscribe(self, callback: Callable[[SimConfig], None]) -> None:
        """設定変更時に呼ばれるコールバックを登録する。"""
        self._listeners.append(callback)

    # ---- Tickable ------------------------------------------------------
    def tick(self, dt: float) -> None:
        self.step(dt * FRAMES_PER_SECOND_BASE, self._clock_ms())

    def step(self, delta: float, now_ms: float) -> int | None:
        """フレーム単位 `delta` だけ進め、スポーンした場合はそのハンドルを返す。"""
        cfg = self._config
        self.manager.update(cfg.gravity * delta, cfg.height, cfg.boundary_margin)
        if self.throttle.try_spawn(now_ms, cfg.shapes_per_second):
            x = float(self.factory.rng.random()) * cfg.width
            return self.spawn(x, cfg.spawn_y)
        return None

    # ---- 操作 ----------------------------------------------------------
    def spawn(self, x: float, y: float, kind: ShapeKind | int | str | None = None) -> int:
        """図形を生成してシーンとマネージャへ登録し、ハンドルを返す。"""
        resolved = kind if kind is not None else self.factory.random_kind()
        shape = self.factory.create_shape(resolved, x, y, self.factory.random_color())
        self.scene.add_child(shape)
        handle = self.manager.add_shape(shape, (0.0, 0.0))
        logger.debug("spawned #%d %r", handle, shape)
        return handle

    def click(self, x: float, y: float) -> ClickResult:
        """クリック処理: 図形に当たれば除去、当たらなければその位置に不規則図形を生成。"""
        handle = self.manager.shape_at(x, y)
        if handle is not None:
            self.manager.discard(handle)
            logger.debug("clicked #%d at (%.1f, %.1f)", handle, x, y)
            return ClickResult.REMOVED
        self.spawn(x, y, ShapeKind.IRREGULAR)
        return ClickResult.SPAWNED

    def hovering(self, x: float, y: float) -> bool:
        """点 (x, y) にクリック可能な図形があるか。"""
        return self.manager.shape_at(x, y) is not None

    def stats(self) -> Stats:
        return Stats(self.manager.get_count(), self.manager.get_total_area())

    def close(self) -> None:
        """全図形を破棄する（冪等）。"""
        for entry in self.manager.entries():
            self.manager.discard(entry.handle)
        self.scene.destroy()


__all__ = ["Simulation", "ShapeSource", "ClickResult", "Stats", "FRAMES_PER_SECOND_BASE"]
