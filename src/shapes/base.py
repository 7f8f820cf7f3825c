"""
シェイプ基底モジュール

概要:
- 生成結果の共通表現 `Outline`（原点基準の素の形状）を定義する。
- 各ジェネレータは `Outline` のみを返し、配置（x, y）や色は上位の
  `api.factory.ShapeFactory` と `engine.core.shape.Shape` が担う。

データモデル（不変条件）:
- `primitive` は POLYGON / RECT / CIRCLE / ELLIPSE のいずれか。
- POLYGON/RECT は `points: float32 ndarray (N, 2)` を持つ（閉路。末尾に始点は複製しない）。
- CIRCLE/ELLIPSE は `radii=(rx, ry)` を持ち、`points` は空配列 `(0, 2)`。
- 座標系はキャンバスと同じ y 下向き。生成後に形状が変わることはない。

使用例:
    pts = regular_polygon_points(5, 20.0)
    outline = Outline.polygon(pts)
    outline.local_bounds()  # (min_x, min_y, max_x, max_y)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from common.types import Vec2


class Primitive(str, Enum):
    """描画プリミティブの種類。"""

    POLYGON = "polygon"
    RECT = "rect"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"


def _empty_points() -> np.ndarray:
    return np.empty((0, 2), dtype=np.float32)


@dataclass(frozen=True, eq=False)
class Outline:
    """原点基準の形状データ。

    Parameters
    ----------
    primitive : Primitive
        プリミティブ種別。
    points : np.ndarray
        POLYGON/RECT の頂点列 `(N, 2) float32`。円/楕円では空。
    radii : Vec2
        CIRCLE/ELLIPSE の半径 `(rx, ry)`。多角形では `(0, 0)`。
    """

    primitive: Primitive
    points: np.ndarray = field(default_factory=_empty_points)
    radii: Vec2 = (0.0, 0.0)

    def __post_init__(self) -> None:
        pts = np.asarray(self.points, dtype=np.float32)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"points は形状 (N, 2) の配列である必要があります: {pts.shape}")
        if self.primitive in (Primitive.POLYGON, Primitive.RECT) and pts.shape[0] < 3:
            raise ValueError("多角形には 3 点以上が必要です")
        if self.primitive in (Primitive.CIRCLE, Primitive.ELLIPSE):
            rx, ry = self.radii
            if rx <= 0 or ry <= 0:
                raise ValueError(f"radii は正である必要があります: {self.radii}")
        pts.setflags(write=False)
        object.__setattr__(self, "points", pts)

    # ── ファクトリ ───────────────────
    @classmethod
    def polygon(cls, points: np.ndarray) -> "Outline":
        return cls(Primitive.POLYGON, points=points)

    @classmethod
    def rect(cls, width: float, height: float) -> "Outline":
        """原点中心・軸平行の矩形。頂点は左上から時計回り（y 下向き）。"""
        hw, hh = width / 2.0, height / 2.0
        pts = np.array([[-hw, -hh], [hw, -hh], [hw, hh], [-hw, hh]], dtype=np.float32)
        return cls(Primitive.RECT, points=pts)

    @classmethod
    def circle(cls, radius: float) -> "Outline":
        return cls(Primitive.CIRCLE, radii=(float(radius), float(radius)))

    @classmethod
    def ellipse(cls, rx: float, ry: float) -> "Outline":
        return cls(Primitive.ELLIPSE, radii=(float(rx), float(ry)))

    # ── 参照 ───────────────────────
    @property
    def vertex_count(self) -> int:
        """多角形の頂点数（円/楕円は 0）。"""
        return int(self.points.shape[0])

    def local_bounds(self) -> tuple[float, float, float, float]:
        """原点基準のバウンディングボックス `(min_x, min_y, max_x, max_y)`。"""
        if self.primitive in (Primitive.CIRCLE, Primitive.ELLIPSE):
            rx, ry = self.radii
            return (-float(rx), -float(ry), float(rx), float(ry))
        mins = self.points.min(axis=0)
        maxs = self.points.max(axis=0)
        return (float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))


__all__ = ["Primitive", "Outline"]
