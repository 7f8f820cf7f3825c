"""
どこで: `api.app_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS/キャンバス解決・投影行列・ウィンドウ座標 → キャンバス座標の変換を提供。
なぜ: `api.app` を薄く保ち、テスト容易性と再利用性を上げるため。
"""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np

DEFAULT_FPS = 60


def resolve_fps(requested_fps: int | None, cfg: Mapping[str, Any] | None = None) -> int:
    """FPS を解決して 1 以上の int を返す。

    - 明示指定があればそれを優先（<=0 は `ValueError`）。
    - それ以外は設定辞書の `fps`、無ければ既定値 60。
    """
    if requested_fps is not None:
        v = int(requested_fps)
        if v <= 0:
            raise ValueError(f"fps must be > 0, got {requested_fps}")
        return v
    raw = cfg.get("fps", DEFAULT_FPS) if isinstance(cfg, Mapping) else DEFAULT_FPS
    try:
        return max(1, int(raw))
    except (TypeError, ValueError):
        return DEFAULT_FPS


def build_projection(canvas_width: float, canvas_height: float) -> "np.ndarray":
    """キャンバス px（左上原点・y 下向き）を基準とする正射影行列（ModernGL 用の転置済み）を返す。"""
    proj = np.array(
        [
            [2 / canvas_width, 0, 0, -1],
            [0, -2 / canvas_height, 0, 1],
            [0, 0, -1, 0],
            [0, 0, 0, 1],
        ],
        dtype="f4",
    ).T
    return proj


def window_to_canvas(
    x: float,
    y: float,
    window_size: tuple[float, float],
    canvas_size: tuple[float, float],
) -> tuple[float, float]:
    """ウィンドウ座標（左下原点・y 上向き）をキャンバス座標（左上原点・y 下向き）へ変換する。

    ウィンドウとキャンバスの寸法が異なる場合（拡大表示など）は比率で拡縮する。
    """
    win_w, win_h = window_size
    canvas_w, canvas_h = canvas_size
    if win_w <= 0 or win_h <= 0:
        raise ValueError(f"window size must be positive, got {window_size}")
    sx = canvas_w / win_w
    sy = canvas_h / win_h
    return float(x) * sx, (float(win_h) - float(y)) * sy


__all__ = ["DEFAULT_FPS", "resolve_fps", "build_projection", "window_to_canvas"]
