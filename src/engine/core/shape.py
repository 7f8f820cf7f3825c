"""
どこで: `engine.core.shape`。
何を: 画面上の 1 図形 `Shape`（原点基準 `Outline` + 位置 + 塗り色 + 親ノード）と、
      ワールド座標のバウンディングボックス `Bounds` を定義する。
なぜ: 生成（shapes）・管理（ShapeManager）・描画（FillRenderer）が同じ実体を共有し、
      破棄後の再利用を確実に防ぐため。

不変条件:
- 形状（`outline`/`size`/`color`）は生成後に変化しない。変わるのは `x`/`y` のみ。
- `destroy()` は不可逆。破棄後は当たり判定が常に False になり、再追加もできない。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from shapely import affinity
from shapely.geometry import Point, Polygon

from shapes.base import Outline, Primitive
from shapes.kinds import ShapeKind

if TYPE_CHECKING:
    from .scene import Container

# 円/楕円の当たり判定ポリゴンの 1/4 円あたり分割数
_HIT_QUAD_SEGS = 16


@dataclass(frozen=True)
class Bounds:
    """ワールド座標の軸平行バウンディングボックス（左上原点）。"""

    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


class Shape:
    """描画可能な 1 図形。

    Parameters
    ----------
    kind : ShapeKind
        形状の種類。
    outline : Outline
        原点基準の形状データ。
    size : float
        生成時に抽選された基準サイズ。
    color : int
        塗り色（24bit, 0xRRGGBB）。
    x, y : float
        配置位置（キャンバス座標、y 下向き）。
    """

    __slots__ = (
        "kind",
        "outline",
        "size",
        "color",
        "x",
        "y",
        "interactive",
        "cursor",
        "parent",
        "_destroyed",
        "_hit_geom",
    )

    def __init__(
        self,
        kind: ShapeKind,
        outline: Outline,
        *,
        size: float,
        color: int,
        x: float = 0.0,
        y: float = 0.0,
    ) -> None:
        self.kind = kind
        self.outline = outline
        self.size = float(size)
        self.color = int(color)
        self.x = float(x)
        self.y = float(y)
        self.interactive = False
        self.cursor: str | None = None
        self.parent: Container | None = None
        self._destroyed = False
        self._hit_geom: Any = None

    def __repr__(self) -> str:
        return (
            f"Shape(kind={self.kind.value}, x={self.x:.1f}, y={self.y:.1f}, "
            f"size={self.size:.1f}, color=0x{self.color:06x})"
        )

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def bounds(self) -> Bounds:
        """現在位置でのバウンディングボックスを返す。"""
        min_x, min_y, max_x, max_y = self.outline.local_bounds()
        return Bounds(self.x + min_x, self.y + min_y, max_x - min_x, max_y - min_y)

    def contains(self, px: float, py: float) -> bool:
        """ワールド座標の点が図形の内側（境界含む）にあるか。"""
        if self._destroyed:
            return False
        min_x, min_y, max_x, max_y = self.outline.local_bounds()
        lx, ly = float(px) - self.x, float(py) - self.y
        if lx < min_x or lx > max_x or ly < min_y or ly > max_y:
            return False
        if self.outline.primitive is Primitive.RECT:
            return True
        if self._hit_geom is None:
            self._hit_geom = _hit_geometry(self.outline)
        return bool(self._hit_geom.covers(Point(lx, ly)))

    def destroy(self) -> None:
        """親ノードから外し、以後使えない状態にする（冪等）。"""
        if self._destroyed:
            return
        if self.parent is not None:
            self.parent.remove_child(self)
        self._destroyed = True
        self._hit_geom = None


def _hit_geometry(outline: Outline) -> Any:
    if outline.primitive in (Primitive.CIRCLE, Primitive.ELLIPSE):
        rx, ry = outline.radii
        unit = Point(0.0, 0.0).buffer(1.0, quad_segs=_HIT_QUAD_SEGS)
        return affinity.scale(unit, xfact=rx, yfact=ry, origin=(0.0, 0.0))
    return Polygon(outline.points.tolist())


__all__ = ["Bounds", "Shape"]
