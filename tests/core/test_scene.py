from __future__ import annotations

import pytest

from engine.core.scene import Container
from tests._utils.samples import make_square


def test_add_and_remove_child(scene: Container) -> None:
    s = make_square()
    assert scene.add_child(s) is s
    assert s.parent is scene
    assert s in scene
    assert len(scene) == 1

    assert scene.remove_child(s) is True
    assert s.parent is None
    assert scene.remove_child(s) is False


def test_add_child_reparents() -> None:
    a, b = Container(), Container()
    s = a.add_child(make_square())
    b.add_child(s)
    assert s not in a
    assert s in b
    assert s.parent is b


def test_add_same_child_twice_keeps_single_entry(scene: Container) -> None:
    s = make_square()
    scene.add_child(s)
    scene.add_child(s)
    assert len(scene) == 1


def test_children_keep_insertion_order(scene: Container) -> None:
    shapes = [scene.add_child(make_square(x=float(i))) for i in range(4)]
    assert list(scene) == shapes
    assert scene.children == tuple(shapes)


def test_destroyed_shape_cannot_be_added(scene: Container) -> None:
    s = make_square()
    s.destroy()
    with pytest.raises(ValueError):
        scene.add_child(s)


def test_shape_destroy_detaches_from_parent(scene: Container) -> None:
    s = scene.add_child(make_square())
    s.destroy()
    s.destroy()  # 冪等
    assert len(scene) == 0
    assert s.destroyed


def test_destroy_container_destroys_children(scene: Container) -> None:
    shapes = [scene.add_child(make_square()) for _ in range(3)]
    scene.destroy()
    assert len(scene) == 0
    assert all(s.destroyed and s.parent is None for s in shapes)
    with pytest.raises(ValueError):
        scene.add_child(make_square())
