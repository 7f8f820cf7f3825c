"""
どこで: `engine.core` の簡易フレームドライバ。
何を: `Tickable` の列を固定順序で呼び出す FrameClock（dt 測定とループ管理）。
なぜ: ホストループ（pyglet.clock）から呼ぶだけで、シミュレーション → HUD の更新順を統一するため。
"""

from __future__ import annotations

import time
from typing import Callable, Sequence

from .tickable import Tickable


class FrameClock:
    """登録された Tickable を固定順序で実行するだけの極小クラス。"""

    def __init__(
        self,
        tickables: Sequence[Tickable],
        *,
        clock: Callable[[], float] = time.perf_counter,
        max_dt: float | None = None,
    ):
        self._tickables = tuple(tickables)
        self._clock = clock
        self._last_time = clock()
        # ウィンドウ移動などで止まった後の巨大な dt を抑える上限（秒）
        self._max_dt = max_dt
        self.frame_count = 0

    @property
    def tickables(self) -> tuple[Tickable, ...]:
        return self._tickables

    # GUI フレームワークから schedule_interval で呼ばせる
    def tick(self, dt: float | None = None) -> None:
        now = self._clock()
        if dt is None:  # pyglet は dt を渡してくれる
            dt = now - self._last_time
        self._last_time = now
        if self._max_dt is not None and dt > self._max_dt:
            dt = self._max_dt

        for t in self._tickables:
            t.tick(dt)
        self.frame_count += 1
