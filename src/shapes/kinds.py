"""
どこで: `shapes.kinds`。
何を: 生成可能な形状の閉じた集合 `ShapeKind` と、旧来のタグ（3/4/5/6/"circle" 等）からの解決を提供。
なぜ: 整数/文字列が混在したタグ分岐をやめ、未知の種類を生成時点で確実に弾くため。
"""

from __future__ import annotations

from enum import Enum


class ShapeKind(str, Enum):
    """形状の種類。値はレジストリキー（snake_case）と一致する。"""

    TRIANGLE = "triangle"
    SQUARE = "square"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    STAR = "star"
    IRREGULAR = "irregular"

    @property
    def sides(self) -> int | None:
        """正多角形系なら辺数、それ以外は None。"""
        return _SIDES.get(self)

    @classmethod
    def parse(cls, tag: object) -> "ShapeKind":
        """種類指定を `ShapeKind` に解決する。

        受理:
        - `ShapeKind` メンバー
        - 辺数の整数 3/4/5/6（bool は不可）
        - 値/名前の文字列（"star", "STAR", " Circle " など）

        例外:
        - ValueError: 上記いずれにも該当しない場合。
        """
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, int) and not isinstance(tag, bool):
            for kind, n in _SIDES.items():
                if n == tag:
                    return kind
            raise ValueError(f"unsupported side count: {tag!r} (expected 3, 4, 5 or 6)")
        if isinstance(tag, str):
            key = tag.strip().lower()
            if key.isdigit():
                return cls.parse(int(key))
            try:
                return cls(key)
            except ValueError:
                pass
        allowed = ", ".join(k.value for k in cls)
        raise ValueError(f"unknown shape kind: {tag!r}; allowed={allowed}")


_SIDES: dict[ShapeKind, int] = {
    ShapeKind.TRIANGLE: 3,
    ShapeKind.SQUARE: 4,
    ShapeKind.PENTAGON: 5,
    ShapeKind.HEXAGON: 6,
}

# 自動スポーンの抽選対象。IRREGULAR はクリック生成専用のため含めない。
RANDOM_KINDS: tuple[ShapeKind, ...] = (
    ShapeKind.TRIANGLE,
    ShapeKind.SQUARE,
    ShapeKind.PENTAGON,
    ShapeKind.HEXAGON,
    ShapeKind.CIRCLE,
    ShapeKind.ELLIPSE,
    ShapeKind.STAR,
)

__all__ = ["ShapeKind", "RANDOM_KINDS"]
