"""
どこで: `engine.runtime.config`。
何を: シミュレーションの調整値 `SimConfig`（キャンバス寸法・重力・スポーン頻度など）。
なぜ: グローバルな可変設定をやめ、tick と操作ハンドラへ明示的に渡す値にするため。

`SimConfig` は不変。操作（`engine.ui.controls`）は `dataclasses.replace` で新しい値を返す。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

# スポーン頻度 [個/秒] と重力 [px/frame^2] の範囲と刻み
SPAWN_RATE_MIN = 0.5
SPAWN_RATE_MAX = 5.0
SPAWN_RATE_STEP = 0.5
GRAVITY_MIN = 0.1
GRAVITY_MAX = 2.0
GRAVITY_STEP = 0.1


@dataclass(frozen=True, slots=True)
class SimConfig:
    """シミュレーション設定。

    Parameters
    ----------
    width, height : int
        キャンバス寸法 [px]。
    gravity : float
        1 フレーム（60 FPS 基準）あたりの速度増分。
    shapes_per_second : float
        自動スポーンの頻度。
    spawn_y : float
        自動スポーンの y 座標（画面上端より上）。
    boundary_margin : float
        `height + boundary_margin` を超えた図形を除去する。
    """

    width: int = 800
    height: int = 600
    gravity: float = 0.1
    shapes_per_second: float = 0.5
    spawn_y: float = -50.0
    boundary_margin: float = 100.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"canvas size must be positive, got {(self.width, self.height)}")
        if self.shapes_per_second <= 0:
            raise ValueError(f"shapes_per_second must be > 0, got {self.shapes_per_second}")
        if self.boundary_margin < 0:
            raise ValueError(f"boundary_margin must be >= 0, got {self.boundary_margin}")

    @property
    def spawn_interval_ms(self) -> float:
        return 1000.0 / self.shapes_per_second

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any] | None, **overrides: Any) -> "SimConfig":
        """`load_config()` の辞書から生成する（`overrides` は None 以外を優先）。

        読む鍵: `canvas.width`, `canvas.height`, `simulation.gravity`,
        `simulation.shapes_per_second`, `simulation.spawn_y`, `simulation.boundary_margin`。
        """
        canvas = _section(cfg, "canvas")
        sim = _section(cfg, "simulation")
        defaults = cls()
        values: dict[str, Any] = {
            "width": int(canvas.get("width", defaults.width)),
            "height": int(canvas.get("height", defaults.height)),
            "gravity": float(sim.get("gravity", defaults.gravity)),
            "shapes_per_second": float(sim.get("shapes_per_second", defaults.shapes_per_second)),
            "spawn_y": float(sim.get("spawn_y", defaults.spawn_y)),
            "boundary_margin": float(sim.get("boundary_margin", defaults.boundary_margin)),
        }
        for key, value in overrides.items():
            if key not in values:
                raise TypeError(f"unknown SimConfig field: {key}")
            if value is not None:
                values[key] = value
        values["gravity"] = clamp(values["gravity"], GRAVITY_MIN, GRAVITY_MAX)
        values["shapes_per_second"] = clamp(
            values["shapes_per_second"], SPAWN_RATE_MIN, SPAWN_RATE_MAX
        )
        return cls(**values)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, float(value)))


def _section(cfg: Mapping[str, Any] | None, name: str) -> Mapping[str, Any]:
    if not isinstance(cfg, Mapping):
        return {}
    section = cfg.get(name, {})
    return section if isinstance(section, Mapping) else {}


__all__ = [
    "SimConfig",
    "clamp",
    "SPAWN_RATE_MIN",
    "SPAWN_RATE_MAX",
    "SPAWN_RATE_STEP",
    "GRAVITY_MIN",
    "GRAVITY_MAX",
    "GRAVITY_STEP",
]
