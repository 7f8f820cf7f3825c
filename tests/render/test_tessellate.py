from __future__ import annotations

import numpy as np
import pytest

from engine.render.tessellate import (
    VERTEX_STRIDE,
    ellipse_ring,
    fan_triangles,
    local_triangles,
    scene_vertices,
    shape_vertices,
)
from shapes.base import Outline
from tests._utils.samples import make_circle, make_square


def test_fan_triangles_uses_origin_and_neighbours() -> None:
    ring = np.array([[1, 0], [0, 1], [-1, 0]], dtype=np.float32)
    tris = fan_triangles(ring).reshape(-1, 3, 2)
    assert tris.shape == (3, 3, 2)
    assert np.all(tris[:, 0] == 0.0)
    assert np.array_equal(tris[0, 1:], [[1, 0], [0, 1]])
    # 最後の三角形は始点へ戻る
    assert np.array_equal(tris[2, 1:], [[-1, 0], [1, 0]])


def test_fan_triangles_rejects_degenerate_ring() -> None:
    with pytest.raises(ValueError):
        fan_triangles(np.zeros((2, 2), dtype=np.float32))


def test_ellipse_ring_radii() -> None:
    ring = ellipse_ring(30.0, 10.0, 48)
    assert ring.shape == (48, 2)
    assert ring[:, 0].max() == pytest.approx(30.0)
    assert ring[:, 1].max() == pytest.approx(10.0)
    with pytest.raises(ValueError):
        ellipse_ring(1.0, 1.0, 2)


def test_fan_area_matches_polygon_area() -> None:
    tris = local_triangles(Outline.rect(40.0, 20.0), 48).reshape(-1, 3, 2).astype(np.float64)
    a, b, c = tris[:, 0], tris[:, 1], tris[:, 2]
    area = 0.5 * np.abs(
        (b[:, 0] - a[:, 0]) * (c[:, 1] - a[:, 1]) - (c[:, 0] - a[:, 0]) * (b[:, 1] - a[:, 1])
    )
    assert area.sum() == pytest.approx(800.0)


def test_circle_segments_control_vertex_count() -> None:
    assert local_triangles(Outline.circle(5.0), 12).shape == (36, 2)
    assert local_triangles(Outline.circle(5.0), 48).shape == (144, 2)


def test_shape_vertices_translate_and_colorize() -> None:
    s = make_square(x=100.0, y=50.0, size=10.0)
    local = local_triangles(s.outline, 48)
    v = shape_vertices(s, local)
    assert v.shape == (local.shape[0], VERTEX_STRIDE)
    assert v.dtype == np.float32
    assert v[0, 0] == pytest.approx(100.0)
    assert v[0, 1] == pytest.approx(50.0)
    assert tuple(v[0, 2:5]) == pytest.approx((0x33 / 255, 0x66 / 255, 0x99 / 255))


def test_scene_vertices_skip_destroyed_and_reuse_cache() -> None:
    a = make_square(size=10.0)
    b = make_circle(radius=5.0)
    dead = make_square()
    dead.destroy()
    cache: dict = {}

    v = scene_vertices([a, dead, b], 16, cache)
    assert v.shape == (4 * 3 + 16 * 3, VERTEX_STRIDE)
    assert set(cache) == {a.outline, b.outline}

    cached = cache[a.outline]
    scene_vertices([a], 16, cache)
    assert cache[a.outline] is cached


def test_scene_vertices_empty() -> None:
    v = scene_vertices([], 48)
    assert v.shape == (0, VERTEX_STRIDE)
