from __future__ import annotations

import numpy as np

from .base import Outline
from .kinds import ShapeKind
from .registry import shape

MIN_POINTS = 5
MAX_POINTS = 8


@shape(ShapeKind.IRREGULAR)
def irregular(size: float, rng: np.random.Generator) -> Outline:
    """不規則な多角形（ブロブ）を生成します。

    頂点数は 5〜8 の一様抽選。角度は等間隔（頂点 0 は +X 軸上）で、
    各頂点の半径を `(size / 2) * (0.5 + u * 0.5)`（u ∈ [0, 1)）に揺らす。
    角度が単調に増えるため原点に対して星型（非凸でも自己交差しない）。
    """
    n = MIN_POINTS + int(rng.integers(0, MAX_POINTS - MIN_POINTS + 1))
    t = np.arange(n, dtype=np.float64) / n * 2 * np.pi
    r = (size / 2) * (0.5 + rng.random(n) * 0.5)
    xy = np.stack([np.cos(t) * r, np.sin(t) * r], axis=1)
    return Outline.polygon(xy.astype(np.float32))
