"""
どこで: `engine.core.scene`。
何を: 描画ツリーのコンテナノード `Container`（子の追加/削除/一括破棄）。
なぜ: 図形の「描画上の親」を明示し、ShapeManager の削除と描画対象の削除を一致させるため。
"""

from __future__ import annotations

import logging
from typing import Iterator

from .shape import Shape

logger = logging.getLogger(__name__)


class Container:
    """子 `Shape` を追加順（= 描画順、後ろほど手前）で保持するノード。"""

    def __init__(self) -> None:
        self._children: list[Shape] = []
        self._destroyed = False

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Shape]:
        return iter(tuple(self._children))

    def __contains__(self, shape: object) -> bool:
        return any(child is shape for child in self._children)

    @property
    def children(self) -> tuple[Shape, ...]:
        return tuple(self._children)

    def add_child(self, shape: Shape) -> Shape:
        """子として追加する。別の親に付いていればそこから外す。

        例外:
            ValueError: 破棄済みの図形、または破棄済みのコンテナに追加しようとした場合。
        """
        if self._destroyed:
            raise ValueError("destroyed container cannot accept children")
        if shape.destroyed:
            raise ValueError(f"destroyed shape cannot be added: {shape!r}")
        if shape.parent is self:
            return shape
        if shape.parent is not None:
            shape.parent.remove_child(shape)
        self._children.append(shape)
        shape.parent = self
        return shape

    def remove_child(self, shape: Shape) -> bool:
        """子から外す。子でなければ False。"""
        for i, child in enumerate(self._children):
            if child is shape:
                del self._children[i]
                shape.parent = None
                return True
        return False

    def destroy(self) -> None:
        """全ての子を破棄し、コンテナ自体も使用不可にする。"""
        children = self._children
        self._children = []
        for child in children:
            child.parent = None
            child.destroy()
        self._destroyed = True
        logger.debug("container destroyed (%d children)", len(children))


__all__ = ["Container"]
