"""
どこで: tests（shapes/kinds）。
何を: 旧来タグ（3/4/5/6/"circle" 等）から ShapeKind への解決と、未知タグの拒否を確認。
なぜ: 種類の閉じた集合を保証し、空の図形が黙って生成されないようにするため。
"""

from __future__ import annotations

import pytest

from shapes.kinds import RANDOM_KINDS, ShapeKind


@pytest.mark.parametrize(
    "tag, expected",
    [
        (3, ShapeKind.TRIANGLE),
        (4, ShapeKind.SQUARE),
        (5, ShapeKind.PENTAGON),
        (6, ShapeKind.HEXAGON),
        ("circle", ShapeKind.CIRCLE),
        ("ellipse", ShapeKind.ELLIPSE),
        ("star", ShapeKind.STAR),
        ("irregular", ShapeKind.IRREGULAR),
        ("STAR", ShapeKind.STAR),
        (" Circle ", ShapeKind.CIRCLE),
        ("5", ShapeKind.PENTAGON),
        (ShapeKind.HEXAGON, ShapeKind.HEXAGON),
    ],
)
def test_parse_accepts_legacy_tags(tag, expected) -> None:
    assert ShapeKind.parse(tag) is expected


@pytest.mark.parametrize("tag", [2, 7, 0, "blob", "", None, 3.0, True])
def test_parse_rejects_unknown_tags(tag) -> None:
    with pytest.raises(ValueError):
        ShapeKind.parse(tag)


def test_sides_only_for_polygon_kinds() -> None:
    assert ShapeKind.TRIANGLE.sides == 3
    assert ShapeKind.SQUARE.sides == 4
    assert ShapeKind.HEXAGON.sides == 6
    assert ShapeKind.STAR.sides is None
    assert ShapeKind.CIRCLE.sides is None


def test_random_kinds_exclude_irregular() -> None:
    assert ShapeKind.IRREGULAR not in RANDOM_KINDS
    assert len(RANDOM_KINDS) == 7
    assert set(RANDOM_KINDS) | {ShapeKind.IRREGULAR} == set(ShapeKind)
