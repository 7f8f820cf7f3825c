from __future__ import annotations

import numpy as np

from .base import Outline
from .kinds import ShapeKind
from .registry import shape

# 頂点 0 を真上（y 下向き座標で -Y 方向）に置くための開始角
TOP_START = -np.pi / 2


def regular_polygon_points(sides: int, radius: float, *, start: float = TOP_START) -> np.ndarray:
    """正多角形の頂点配列を生成します。

    引数:
        sides: 辺の数（3 以上）。
        radius: 外接円の半径。
        start: 頂点 0 の角度（ラジアン）。

    返り値:
        `(sides, 2) float32`。頂点 i の角度は `i / sides * 2π + start`。
    """
    if sides < 3:
        raise ValueError(f"sides must be >= 3, got {sides}")
    t = np.arange(sides, dtype=np.float64) / sides * 2 * np.pi + start
    xy = np.stack([np.cos(t) * radius, np.sin(t) * radius], axis=1)
    return xy.astype(np.float32)


@shape(ShapeKind.TRIANGLE)
def triangle(size: float, rng: np.random.Generator) -> Outline:
    """直径 `size` の円に内接する正三角形（頂点が上）。"""
    return Outline.polygon(regular_polygon_points(3, size / 2))


@shape(ShapeKind.SQUARE)
def square(size: float, rng: np.random.Generator) -> Outline:
    """一辺 `size` の軸平行な正方形。

    角度ジェネレータを使わない（菱形ではなく 0° 配置）。
    """
    return Outline.rect(size, size)


@shape(ShapeKind.PENTAGON)
def pentagon(size: float, rng: np.random.Generator) -> Outline:
    return Outline.polygon(regular_polygon_points(5, size / 2))


@shape(ShapeKind.HEXAGON)
def hexagon(size: float, rng: np.random.Generator) -> Outline:
    return Outline.polygon(regular_polygon_points(6, size / 2))
