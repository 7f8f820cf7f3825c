"""
どこで: `engine.runtime.spawner`。
何を: 実時間ベースのスポーン間引き `SpawnThrottle`。
なぜ: 1 フレームにつき高々 1 体、前回から `1000 / rate` ms 以上経っていればスポーンさせるため。

遅れを取り戻す（複数体まとめてスポーンする）処理はしない。
"""

from __future__ import annotations


class SpawnThrottle:
    """前回スポーン時刻 [ms] を保持し、次のスポーン可否を判定する。"""

    def __init__(self) -> None:
        self.last_spawn_ms: float | None = None

    @staticmethod
    def interval_ms(shapes_per_second: float) -> float:
        if shapes_per_second <= 0:
            raise ValueError(f"shapes_per_second must be > 0, got {shapes_per_second}")
        return 1000.0 / shapes_per_second

    def ready(self, now_ms: float, shapes_per_second: float) -> bool:
        """まだ一度もスポーンしていないか、間隔以上経過していれば True。"""
        if self.last_spawn_ms is None:
            return True
        return now_ms - self.last_spawn_ms >= self.interval_ms(shapes_per_second)

    def mark(self, now_ms: float) -> None:
        self.last_spawn_ms = float(now_ms)

    def try_spawn(self, now_ms: float, shapes_per_second: float) -> bool:
        """スポーン可能なら時刻を記録して True を返す。"""
        if not self.ready(now_ms, shapes_per_second):
            return False
        self.mark(now_ms)
        return True

    def reset(self) -> None:
        self.last_spawn_ms = None


__all__ = ["SpawnThrottle"]
