"""
どこで: `engine.render` の高レベル描画。
何を: シーン（Container）の図形を三角形へ分割し、ModernGL に転送して塗りつぶし描画する。
なぜ: 毎フレームのアップロード/描画/リソース寿命を一箇所に集約し、描画処理を単純化するため。
"""

from __future__ import annotations

import logging
from typing import Any

import moderngl as mgl
import numpy as np

from engine.core.scene import Container
from shapes.base import Outline

from ..core.tickable import Tickable
from .fill_mesh import FillMesh
from .shader import Shader
from .tessellate import scene_vertices


class FillRenderer(Tickable):
    """
    Container の子を毎フレーム GPU に送り込み、描画する。
    tick で頂点を作ってアップロードし、draw（on_draw）では描画命令のみを発行する。
    """

    def __init__(
        self,
        mgl_context: Any,
        projection_matrix: np.ndarray,
        scene: Container,
        *,
        circle_segments: int | None = None,
        alpha: float = 1.0,
    ):
        self.ctx = mgl_context
        self.scene = scene
        self._logger = logging.getLogger(__name__)

        if circle_segments is None:
            from common.settings import get as _get_settings

            circle_segments = _get_settings().CIRCLE_SEGMENTS
        self.circle_segments = int(circle_segments)

        self.program = Shader.create_shader(mgl_context)
        self.program["projection"].write(projection_matrix.tobytes())
        self.program["alpha"].value = float(alpha)
        self.mesh = FillMesh(ctx=mgl_context, program=self.program)

        # 輪郭は生成後に不変なので、ローカル三角形を輪郭単位でキャッシュする
        self._triangles: dict[Outline, np.ndarray] = {}
        # HUD 連携用: 直近アップロードの図形/頂点数
        self._last_shape_count: int = 0
        self._last_vertex_count: int = 0

    # --------------------------------------------------------------------- #
    # Tickable                                                               #
    # --------------------------------------------------------------------- #
    def tick(self, dt: float) -> None:
        """毎フレーム呼ばれ、シーンの現在位置で頂点を作り直して GPU へ転送。"""
        shapes = self.scene.children
        cache: dict[Outline, np.ndarray] = {}
        for shape in shapes:
            local = self._triangles.get(shape.outline)
            if local is not None:
                cache[shape.outline] = local
        vertices = scene_vertices(shapes, self.circle_segments, cache)
        # 消えた図形のエントリはここで落ちる
        self._triangles = cache
        self.mesh.upload(vertices)
        self._last_shape_count = len(shapes)
        self._last_vertex_count = int(vertices.shape[0])

    # --------------------------------------------------------------------- #
    # Public drawing API                                                    #
    # --------------------------------------------------------------------- #
    def draw(self) -> None:
        """GPUに送ったデータを画面に描画"""
        if self.mesh.vertex_count == 0:
            return
        self.mesh.vao.render(mgl.TRIANGLES, vertices=self.mesh.vertex_count)

    def get_last_counts(self) -> tuple[int, int]:
        """直近アップロードの (図形数, 頂点数)。"""
        return self._last_shape_count, self._last_vertex_count

    def release(self) -> None:
        """GPU リソースを解放。"""
        self.mesh.release()
        self._triangles.clear()


__all__ = ["FillRenderer"]
