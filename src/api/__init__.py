"""
どこで: `api` 入口（高レベル公開 API）。
何を: 図形ファクトリ `ShapeFactory`・管理 `ShapeManager`・`Simulation`・ランナー `run` を再輸出。
なぜ: 利用者が単一名前空間から図形生成 → 管理 → 実行まで完結できるようにするため。

Usage:
    from api import ShapeFactory, ShapeKind, ShapeManager

    factory = ShapeFactory(seed=0)
    manager = ShapeManager()
    h = manager.add_shape(factory.create_shape(ShapeKind.STAR, 100, 0, 0xFF8800))
    manager.update(0.1, 600)

    from api import run
    run(gravity=0.5, shapes_per_second=2)
"""

from engine.core.manager import ShapeManager, Velocity
from engine.core.scene import Container
from engine.core.shape import Shape
from engine.runtime.config import SimConfig
from engine.runtime.simulation import ClickResult, Simulation
from shapes.kinds import RANDOM_KINDS, ShapeKind
from shapes.registry import shape as shape

from .app import run_app as run
from .app import run_app as run_app
from .factory import ShapeFactory, create_shape, get_random_color, get_random_type

__all__ = [
    # 主要API
    "ShapeFactory",
    "ShapeKind",
    "RANDOM_KINDS",
    "ShapeManager",
    "Simulation",
    "SimConfig",
    "run",
    "run_app",
    "shape",  # ユーザー拡張用デコレータ
    "create_shape",
    "get_random_color",
    "get_random_type",
    # クラス（高度な使用）
    "Shape",
    "Container",
    "Velocity",
    "ClickResult",
]

__version__ = "0.1.0"
