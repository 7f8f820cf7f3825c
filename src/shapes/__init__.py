"""
どこで: `shapes` パッケージ（関数登録）。
何を: ビルトインの形状ジェネレータを import 副作用で登録し、`api.factory` から解決できるようにする。
なぜ: 生成ロジックの拡張点を一箇所に集約し、ファクトリ層を薄く保つため。
"""

# 関数版 shape 定義を import して登録（副作用）
from . import ellipse as _register_ellipse  # noqa: F401
from . import irregular as _register_irregular  # noqa: F401
from . import polygon as _register_polygon  # noqa: F401
from . import star as _register_star  # noqa: F401
from .base import Outline, Primitive
from .kinds import RANDOM_KINDS, ShapeKind
from .registry import get_shape, is_shape_registered, list_shapes, shape  # re-export

__all__ = [
    "Outline",
    "Primitive",
    "ShapeKind",
    "RANDOM_KINDS",
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
]
