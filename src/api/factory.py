"""
ShapeFactory - 図形生成の高レベル入口

概要:
- `create_shape(kind, x, y, color)` で描画可能な `Shape` を返す。
- 種類ごとの幾何生成は `shapes` レジストリ（`@shape(ShapeKind.X)`）に登録された
  ジェネレータへ委譲し、本クラスはサイズ抽選・配置・インタラクティブ属性の付与のみを行う。
- 乱数は `numpy.random.Generator` を 1 つ保持し、シード指定で再現可能にする。

種類の指定:
- `ShapeKind` メンバー、または旧来のタグ `3, 4, 5, 6, "circle", "ellipse", "star", "irregular"`。
- 未知の指定は `ValueError`（空の図形は返さない）。

使用例:
    factory = ShapeFactory(seed=1)
    s = factory.create_shape(ShapeKind.STAR, 100.0, -50.0, factory.random_color())
    s.bounds().area
"""

from __future__ import annotations

import numpy as np

# レジストリ登録の副作用を発火させるため、shapes パッケージを 1 度だけ import すれば十分
import shapes  # noqa: F401  (登録目的の副作用)
from engine.core.shape import Shape
from shapes.kinds import RANDOM_KINDS, ShapeKind
from shapes.registry import get_shape
from util.color import MAX_RGB24

SIZE_MIN = 30.0
SIZE_SPAN = 30.0
POINTER_CURSOR = "pointer"


class ShapeFactory:
    """図形の生成器。

    Parameters
    ----------
    rng : numpy.random.Generator | None
        乱数生成器。None の場合は `seed` から作る。
    seed : int | None
        `rng` 未指定時のシード（None で非決定的）。
    """

    def __init__(self, rng: np.random.Generator | None = None, *, seed: int | None = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def random_size(self) -> float:
        """基準サイズ [30, 60) を抽選する。"""
        return SIZE_MIN + float(self.rng.random()) * SIZE_SPAN

    def create_shape(self, kind: ShapeKind | int | str, x: float, y: float, color: int) -> Shape:
        """`kind` の図形を (x, y) に配置して返す。

        例外:
            ValueError: 未知の種類、または 24bit を超える色。
        """
        resolved = ShapeKind.parse(kind)
        if not 0 <= int(color) <= MAX_RGB24:
            raise ValueError(f"color must be within 0..0xFFFFFF, got {color!r}")
        size = self.random_size()
        outline = get_shape(resolved)(size, self.rng)
        shape = Shape(resolved, outline, size=size, color=int(color), x=x, y=y)
        shape.interactive = True
        shape.cursor = POINTER_CURSOR
        return shape

    def random_color(self) -> int:
        """一様な 24bit RGB 値。"""
        return int(self.rng.integers(0, MAX_RGB24 + 1))

    def random_kind(self) -> ShapeKind:
        """IRREGULAR を除く 7 種から一様に選ぶ。"""
        return RANDOM_KINDS[int(self.rng.integers(0, len(RANDOM_KINDS)))]


_default_factory: ShapeFactory | None = None


def default_factory() -> ShapeFactory:
    """モジュール共有のファクトリ（遅延生成）。"""
    global _default_factory
    if _default_factory is None:
        from common.settings import get as _get_settings

        _default_factory = ShapeFactory(seed=_get_settings().SEED)
    return _default_factory


def create_shape(kind: ShapeKind | int | str, x: float, y: float, color: int) -> Shape:
    return default_factory().create_shape(kind, x, y, color)


def get_random_color() -> int:
    return default_factory().random_color()


def get_random_type() -> ShapeKind:
    return default_factory().random_kind()


__all__ = [
    "ShapeFactory",
    "default_factory",
    "create_shape",
    "get_random_color",
    "get_random_type",
    "SIZE_MIN",
    "SIZE_SPAN",
]
