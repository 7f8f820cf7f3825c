"""
どこで: `shapes` のレジストリ層（関数専用）。
何を: `@shape(ShapeKind.X)` デコレータで形状ジェネレータを登録し、取得/一覧/検査を提供。
なぜ: 種類ごとの生成ロジックを一貫 API で管理し、`api.factory` から安全に解決するため。

概要:
- 登録対象は「関数」のみ（`(size, rng) -> Outline`）。
- デコレータは名前省略可（`@shape` / `@shape()`）と明示指定（`@shape(ShapeKind.STAR)`）をサポート。
- 未登録の種類を引くと `KeyError`。
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

import numpy as np

from common.base_registry import BaseRegistry

from .base import Outline

ShapeFn = Callable[[float, np.random.Generator], Outline]

# 統一されたレジストリシステム
_shape_registry = BaseRegistry()


def shape(arg: Any | None = None, /, name: Any | None = None):
    """形状ジェネレータをレジストリに登録するデコレータ。

    使用例:
    - `@shape` / `@shape()`                 → 関数名から自動推論。
    - `@shape(ShapeKind.STAR)` / `@shape("star")` → 明示キーで登録。

    例外:
    - TypeError: 関数以外を登録しようとした場合。
    """

    def _register_checked(obj: Any, resolved_name: Any = None):
        if not inspect.isfunction(obj):
            raise TypeError(f"@shape は関数のみ登録可能です: got {obj!r}")
        return _shape_registry.register(resolved_name)(obj)

    # 直付け (@shape)
    if inspect.isfunction(arg) and name is None:
        return _register_checked(arg, None)

    # 位置引数でキーを渡した (@shape(ShapeKind.X) / @shape("name"))
    if arg is not None and name is None:

        def _decorator_named(obj: Any):
            return _register_checked(obj, arg)

        return _decorator_named

    def _decorator_generic(obj: Any):
        return _register_checked(obj, name)

    return _decorator_generic


def get_shape(name: Any) -> ShapeFn:
    """登録された形状ジェネレータを取得。

    例外:
        KeyError: 登録されていない場合
    """
    return _shape_registry.get(name)


def list_shapes() -> list[str]:
    """登録されている形状名の一覧（昇順）。"""
    return sorted(_shape_registry.list_all())


def is_shape_registered(name: Any) -> bool:
    """形状が登録されているかチェック。"""
    return _shape_registry.is_registered(name)


def unregister(name: Any) -> None:
    """キーを指定して登録を解除（存在しない場合は無視）。"""
    _shape_registry.unregister(name)


def get_registry() -> Mapping[str, Any]:
    """読み取り専用ビューとしてレジストリ辞書を返す。"""
    return _shape_registry.registry


__all__ = [
    "ShapeFn",
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "unregister",
    "get_registry",
]
