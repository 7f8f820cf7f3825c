"""
どこで: `engine.core.manager`。
何を: 生存中の図形を整数ハンドルで管理し、毎 tick 重力で落下させ、境界外を除去する ShapeManager。
なぜ: 図形の寿命（生成→落下→除去）を一箇所に集約し、描画やイベント処理から切り離すため。

要点:
- 追加時に整数ハンドル（単調増加、再利用しない）を払い出し、削除キーとして使う。
- 面積は追加時のバウンディングボックスから 1 度だけ計算してキャッシュする。
- `update()` は 2 パス: 全図形の速度/位置を更新してから、境界外の図形をまとめて除去する。
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Iterator

from .shape import Shape

logger = logging.getLogger(__name__)

# 境界（キャンバス下端）からさらにこの距離を超えたら除去
DEFAULT_BOUNDARY_MARGIN = 100.0


@dataclass
class Velocity:
    """速度（px / frame）。"""

    x: float = 0.0
    y: float = 0.0


@dataclass
class ManagedEntry:
    """ShapeManager の 1 レコード。"""

    handle: int
    shape: Shape
    velocity: Velocity
    area: float


class ShapeManager:
    """生存中の図形リストと、その落下計算を担当する。"""

    def __init__(self) -> None:
        self._entries: list[ManagedEntry] = []
        self._handles = itertools.count(1)

    # ---- 追加/削除 ----------------------------------------------------
    def add_shape(
        self, shape: Shape, velocity: Velocity | tuple[float, float] | None = None
    ) -> int:
        """図形を追加してハンドルを返す。

        例外:
            ValueError: 既に管理中、または破棄済みの図形を渡した場合。
        """
        if shape.destroyed:
            raise ValueError(f"destroyed shape cannot be added: {shape!r}")
        if self.handle_of(shape) is not None:
            raise ValueError(f"shape is already managed: {shape!r}")
        if velocity is None:
            vel = Velocity()
        elif isinstance(velocity, Velocity):
            vel = velocity
        else:
            vel = Velocity(float(velocity[0]), float(velocity[1]))
        handle = next(self._handles)
        self._entries.append(ManagedEntry(handle, shape, vel, self.calculate_area(shape)))
        return handle

    def remove_shape(self, handle: int) -> bool:
        """ハンドルで登録を外す。見つからなければ False（例外にしない）。

        図形の親ノードからの取り外しや破棄は行わない（`discard` を使う）。
        """
        for i, entry in enumerate(self._entries):
            if entry.handle == handle:
                del self._entries[i]
                return True
        return False

    def discard(self, handle: int) -> bool:
        """登録を外し、描画上の親から取り外して破棄する。"""
        entry = self.get(handle)
        if entry is None:
            return False
        self.remove_shape(handle)
        shape = entry.shape
        if shape.parent is not None:
            shape.parent.remove_child(shape)
        shape.destroy()
        return True

    # ---- 参照 ----------------------------------------------------------
    @staticmethod
    def calculate_area(shape: Shape) -> float:
        bounds = shape.bounds()
        return bounds.width * bounds.height

    def get(self, handle: int) -> ManagedEntry | None:
        for entry in self._entries:
            if entry.handle == handle:
                return entry
        return None

    def handle_of(self, shape: Shape) -> int | None:
        for entry in self._entries:
            if entry.shape is shape:
                return entry.handle
        return None

    def shape_at(self, x: float, y: float) -> int | None:
        """点 (x, y) を含む最前面（最後に追加された）図形のハンドル。"""
        for entry in reversed(self._entries):
            if entry.shape.interactive and entry.shape.contains(x, y):
                return entry.handle
        return None

    def shapes(self) -> Iterator[Shape]:
        return (entry.shape for entry in tuple(self._entries))

    def entries(self) -> tuple[ManagedEntry, ...]:
        return tuple(self._entries)

    def get_total_area(self) -> float:
        return sum(entry.area for entry in self._entries)

    def get_count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    # ---- 更新 ----------------------------------------------------------
    def update(
        self,
        gravity: float,
        boundary_height: float,
        margin: float = DEFAULT_BOUNDARY_MARGIN,
    ) -> None:
        """重力で 1 ステップ進め（半陰的 Euler）、境界外の図形を除去する。

        1 パス目で全図形の `velocity.y += gravity; y += velocity.y` を行い、
        2 パス目で `y > boundary_height + margin` の図形を除去・破棄する。
        """
        limit = boundary_height + margin
        out_of_bounds: list[int] = []
        for entry in self._entries:
            entry.velocity.y += gravity
            entry.shape.y += entry.velocity.y
            if entry.shape.y > limit:
                out_of_bounds.append(entry.handle)

        for handle in out_of_bounds:
            self.discard(handle)
        if out_of_bounds:
            logger.debug("removed %d shape(s) below y=%.1f", len(out_of_bounds), limit)


__all__ = ["DEFAULT_BOUNDARY_MARGIN", "Velocity", "ManagedEntry", "ShapeManager"]
