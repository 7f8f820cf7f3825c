from __future__ import annotations

import numpy as np
import pytest

from engine.core.shape import Shape
from shapes.base import Outline
from shapes.kinds import ShapeKind
from shapes.star import star_points
from tests._utils.samples import make_circle, make_square


def test_bounds_follow_position() -> None:
    s = make_square(x=100.0, y=50.0, size=40.0)
    b = s.bounds()
    assert (b.x, b.y, b.width, b.height) == pytest.approx((80.0, 30.0, 40.0, 40.0))
    assert b.area == pytest.approx(1600.0)
    s.y += 10.0
    assert s.bounds().y == pytest.approx(40.0)


def test_square_contains_edges_and_corners() -> None:
    s = make_square(x=0.0, y=0.0, size=40.0)
    assert s.contains(0.0, 0.0)
    assert s.contains(20.0, 20.0)
    assert s.contains(-20.0, 0.0)
    assert not s.contains(20.5, 0.0)


def test_circle_excludes_bbox_corners() -> None:
    c = make_circle(x=50.0, y=50.0, radius=20.0)
    assert c.contains(50.0, 50.0)
    assert c.contains(69.0, 50.0)
    # bbox 内だが円の外
    assert not c.contains(68.0, 68.0)


def test_ellipse_uses_both_radii() -> None:
    e = Shape(ShapeKind.ELLIPSE, Outline.ellipse(30.0, 10.0), size=60.0, color=0, x=0.0, y=0.0)
    assert e.contains(29.0, 0.0)
    assert not e.contains(0.0, 12.0)
    assert e.contains(0.0, 9.0)


def test_star_concavity_is_respected() -> None:
    outline = Outline.polygon(star_points(40.0, 10.0))
    s = Shape(ShapeKind.STAR, outline, size=80.0, color=0xFFFFFF)
    # 上の尖端付近は内側
    assert s.contains(0.0, -30.0)
    # 尖端の間のくぼみ（内径より外、外径より内）は外側
    angle = -np.pi / 2 + np.pi / 5
    assert not s.contains(float(np.cos(angle) * 30.0), float(np.sin(angle) * 30.0))


def test_destroyed_shape_never_hits() -> None:
    s = make_square()
    assert s.contains(0.0, 0.0)
    s.destroy()
    assert not s.contains(0.0, 0.0)


def test_repr_mentions_kind_and_color() -> None:
    r = repr(make_square())
    assert "square" in r
    assert "0x336699" in r
