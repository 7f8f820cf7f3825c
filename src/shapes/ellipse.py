from __future__ import annotations

import numpy as np

from .base import Outline
from .kinds import ShapeKind
from .registry import shape


@shape(ShapeKind.CIRCLE)
def circle(size: float, rng: np.random.Generator) -> Outline:
    """半径 `size / 2` の円。"""
    return Outline.circle(size / 2)


@shape(ShapeKind.ELLIPSE)
def ellipse(size: float, rng: np.random.Generator) -> Outline:
    """横半径 `size / 2`・縦半径 `size / 3` の楕円。"""
    return Outline.ellipse(size / 2, size / 3)
