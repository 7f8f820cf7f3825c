from __future__ import annotations

import numpy as np

from .base import Outline
from .kinds import ShapeKind
from .registry import shape

STAR_POINTS = 10


def star_points(outer_radius: float, inner_radius: float, n_points: int = STAR_POINTS) -> np.ndarray:
    """外側/内側の半径を交互に取る星形の頂点列を返す。

    偶数番目が外側の尖端。頂点 0 は真上（角度 -π/2）。
    """
    i = np.arange(n_points, dtype=np.float64)
    t = i / n_points * 2 * np.pi - np.pi / 2
    r = np.where(i % 2 == 0, outer_radius, inner_radius)
    return np.stack([np.cos(t) * r, np.sin(t) * r], axis=1).astype(np.float32)


@shape(ShapeKind.STAR)
def star(size: float, rng: np.random.Generator) -> Outline:
    """5 本の尖端を持つ星（外径 `size / 2`、内径 `size / 4`）。"""
    return Outline.polygon(star_points(size / 2, size / 4))
