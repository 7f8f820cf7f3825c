"""共通フィクスチャ。

- 乱数シード固定の ShapeFactory
- 空の ShapeManager / Container
"""

from __future__ import annotations

import numpy as np
import pytest

from api.factory import ShapeFactory
from engine.core.manager import ShapeManager
from engine.core.scene import Container
from engine.core.shape import Shape
from tests._utils.samples import make_square


@pytest.fixture()
def rng() -> np.random.Generator:
    """シード固定の乱数生成器。"""
    return np.random.default_rng(12345)


@pytest.fixture()
def factory(rng: np.random.Generator) -> ShapeFactory:
    return ShapeFactory(rng)


@pytest.fixture()
def manager() -> ShapeManager:
    return ShapeManager()


@pytest.fixture()
def scene() -> Container:
    return Container()


@pytest.fixture()
def square() -> Shape:
    return make_square()
