"""
どこで: `engine.render.tessellate`（純粋関数）。
何を: `Shape` の輪郭を原点中心の三角形ファンへ分割し、位置/色を付けた頂点配列を作る。
なぜ: GPU に渡す `TRIANGLES` 用データを GL なしで生成・検証できるようにするため。

前提:
- すべての輪郭は原点に対して星型（頂点角度が単調）なので、原点からのファンで正しく塗れる。
  非凸の星や不規則図形も同様。
- 頂点レイアウトは `[x, y, r, g, b]`（float32, 5 要素）。
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from engine.core.shape import Shape
from shapes.base import Outline, Primitive
from util.color import int_to_rgb

VERTEX_STRIDE = 5  # x, y, r, g, b


def ellipse_ring(rx: float, ry: float, segments: int) -> np.ndarray:
    """楕円周上の `segments` 点（頂点 0 は +X 軸上）。"""
    if segments < 3:
        raise ValueError(f"segments must be >= 3, got {segments}")
    t = np.arange(segments, dtype=np.float64) / segments * 2 * np.pi
    return np.stack([np.cos(t) * rx, np.sin(t) * ry], axis=1).astype(np.float32)


def outline_ring(outline: Outline, segments: int) -> np.ndarray:
    """輪郭の頂点列 `(N, 2)` を返す（円/楕円は `segments` 分割）。"""
    if outline.primitive in (Primitive.CIRCLE, Primitive.ELLIPSE):
        rx, ry = outline.radii
        return ellipse_ring(rx, ry, segments)
    return np.asarray(outline.points, dtype=np.float32)


def fan_triangles(ring: np.ndarray) -> np.ndarray:
    """原点と隣接 2 頂点で三角形を作る。`(N, 2)` → `(3N, 2)`。"""
    ring = np.asarray(ring, dtype=np.float32)
    n = ring.shape[0]
    if n < 3:
        raise ValueError("ring must have at least 3 points")
    tris = np.zeros((n, 3, 2), dtype=np.float32)
    tris[:, 1] = ring
    tris[:, 2] = np.roll(ring, -1, axis=0)
    return tris.reshape(-1, 2)


def local_triangles(outline: Outline, segments: int) -> np.ndarray:
    return fan_triangles(outline_ring(outline, segments))


def shape_vertices(shape: Shape, local: np.ndarray) -> np.ndarray:
    """ローカル三角形に位置と色を付与して `(3N, 5)` の頂点配列にする。"""
    out = np.empty((local.shape[0], VERTEX_STRIDE), dtype=np.float32)
    out[:, 0] = local[:, 0] + shape.x
    out[:, 1] = local[:, 1] + shape.y
    out[:, 2:5] = int_to_rgb(shape.color)
    return out


def scene_vertices(
    shapes: Iterable[Shape],
    segments: int,
    cache: dict[Outline, np.ndarray] | None = None,
) -> np.ndarray:
    """複数図形を描画順に連結した頂点配列。空なら `(0, 5)`。

    `cache` を渡すと輪郭ごとのローカル三角形を再利用する（輪郭は生成後に不変）。
    """
    chunks: list[np.ndarray] = []
    for shape in shapes:
        if shape.destroyed:
            continue
        local = cache.get(shape.outline) if cache is not None else None
        if local is None:
            local = local_triangles(shape.outline, segments)
            if cache is not None:
                cache[shape.outline] = local
        chunks.append(shape_vertices(shape, local))
    if not chunks:
        return np.empty((0, VERTEX_STRIDE), dtype=np.float32)
    return np.concatenate(chunks, axis=0)


__all__ = [
    "VERTEX_STRIDE",
    "ellipse_ring",
    "outline_ring",
    "fan_triangles",
    "local_triangles",
    "shape_vertices",
    "scene_vertices",
]
