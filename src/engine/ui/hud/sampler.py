"""
どこで: `engine.ui.hud` の計測サブモジュール。
何を: シミュレーションの集計値（図形数/総面積）と操作値（スポーン頻度/重力）、実効 FPS を
      一定間隔でサンプリングし、HUD 描画向けに文字列辞書として保持する。
なぜ: 表示側（OverlayHUD）を pyglet 依存のまま薄く保ち、値の整形を単体で検証できるようにするため。
"""

from __future__ import annotations

from typing import Callable

from engine.runtime.config import SimConfig
from engine.runtime.simulation import Stats

from ...core.tickable import Tickable
from ..controls import format_gravity, format_spawn_rate
from .config import HUDConfig
from .fields import AREA, FPS, GRAVITY, SHAPES, SPAWN_RATE


class StatsSampler(Tickable):
    """集計値を一定間隔でサンプリングし dict に保持する。

    - `data`: HUD のテキスト表示用にフォーマット済みの文字列。
    - `values`: 生値（SHAPES[int], AREA[float], FPS[Hz] など）。
    """

    def __init__(
        self,
        stats: Callable[[], Stats],
        config: Callable[[], SimConfig],
        *,
        hud_config: HUDConfig | None = None,
    ):
        self._stats = stats
        self._sim_config = config
        self._config = hud_config or HUDConfig()
        self._interval = max(0.0, float(self._config.sample_interval))
        self._order = self._config.resolved_order()
        self._elapsed = 0.0
        self._frames = 0
        self._fps_elapsed = 0.0
        self._fps = 0.0
        self.data: dict[str, str] = {}
        self.values: dict[str, float] = {}

    # -------- Tickable --------
    def tick(self, dt: float) -> None:
        self._frames += 1
        self._fps_elapsed += dt
        # 実効 FPS は 0.5 秒窓のフレーム数から算出
        if self._fps_elapsed >= 0.5:
            self._fps = self._frames / self._fps_elapsed
            self._frames = 0
            self._fps_elapsed = 0.0

        self._elapsed += dt
        if self._elapsed < self._interval:
            return
        self._elapsed = 0.0
        self.sample()

    def sample(self) -> None:
        """現在値を読み取り `data`/`values` を更新する。"""
        st = self._stats()
        cfg = self._sim_config()
        self.values.update(
            {
                SHAPES: float(st.count),
                AREA: float(st.total_area),
                SPAWN_RATE: float(cfg.shapes_per_second),
                GRAVITY: float(cfg.gravity),
                FPS: float(self._fps),
            }
        )
        text = {
            SHAPES: f"{st.count}",
            AREA: f"{round(st.total_area)}",
            SPAWN_RATE: format_spawn_rate(cfg.shapes_per_second),
            GRAVITY: format_gravity(cfg.gravity),
            FPS: f"{self._fps:4.1f}",
        }
        self.data = {key: text[key] for key in self._order if key in text}


__all__ = ["StatsSampler"]
