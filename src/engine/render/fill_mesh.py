"""
どこで: `engine.render` の低レベルメッシュ層。
何を: VBO/VAO の確保・更新・解放を担当し、描画可能な FillMesh を管理。
なぜ: GPU 転送の詳細を Renderer から切り離し、再確保や VAO の張り直しを一元化するため。
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .tessellate import VERTEX_STRIDE

# in_vert(vec2) + in_color(vec3)
VERTEX_FORMAT = "2f 3f"
VERTEX_ATTRIBUTES = ("in_vert", "in_color")


class FillMesh:
    """
    GPUに三角形の頂点データを送り込む作業を管理
    """

    def __init__(
        self,
        ctx: Any,
        program: Any,
        # 初期GPUメモリ確保量（既定: 1MB）。必要に応じて自動拡張。
        initial_reserve: int = 1024 * 1024,
    ):
        """
        ctx: GPUへの描画処理を行うためのモダンOpenGL（moderngl）コンテキスト
        program: GPU側で使うシェーダープログラム。
        VBO (Vertex Buffer Object): `[x, y, r, g, b]` の頂点データを格納するメモリ。
        VAO (Vertex Array Object): VBO とシェーダ入力の対応付け。
        """
        self.ctx = ctx
        self.program = program
        self.initial_reserve = initial_reserve

        self.vbo = ctx.buffer(reserve=initial_reserve, dynamic=True)
        self.vao = self._build_vao()

        # 描画ステート
        self.vertex_count: int = 0

    def _build_vao(self) -> Any:
        return self.ctx.vertex_array(
            self.program, [(self.vbo, VERTEX_FORMAT, *VERTEX_ATTRIBUTES)]
        )

    # ---------- バッファ操作 ----------
    def _ensure_capacity(self, vbo_size: int) -> None:
        """データが大きくなったらGPUのバッファを再確保"""
        if vbo_size <= self.vbo.size:
            return
        self.vao.release()
        self.vbo.release()
        self.vbo = self.ctx.buffer(reserve=max(vbo_size, self.initial_reserve * 2), dynamic=True)
        # VAO は VBO が差し替わるたびに張り直す
        self.vao = self._build_vao()

    def upload(self, vertices: np.ndarray) -> None:
        """実際にデータをGPUへ送り込む"""
        if vertices.ndim != 2 or vertices.shape[1] != VERTEX_STRIDE:
            raise ValueError(f"vertices must be (N, {VERTEX_STRIDE}), got {vertices.shape}")
        self.vertex_count = int(vertices.shape[0])
        if self.vertex_count == 0:
            return
        data = np.ascontiguousarray(vertices, dtype=np.float32)
        self._ensure_capacity(data.nbytes)
        self.vbo.orphan()
        self.vbo.write(data.tobytes())

    def release(self) -> None:
        """GPUのメモリを解放する（終了時に使う）"""
        self.vao.release()
        self.vbo.release()
