"""
どこで: `api.app_runner.render`
何を: RenderWindow/ModernGL/FillRenderer の初期化と背景色の決定。
なぜ: `api.app` を薄くし、描画初期化の責務を分離するため。
"""

from __future__ import annotations

from typing import Any

import moderngl

from engine.core.scene import Container

DEFAULT_BACKGROUND = "#1a1a2e"


def create_window_and_renderer(
    window_width: int,
    window_height: int,
    *,
    background: Any,
    projection_matrix,
    scene: Container,
    circle_segments: int | None = None,
):
    """ウィンドウ/ModernGL/FillRenderer を生成して返す。

    Returns
    -------
    (rendering_window, mgl_ctx, fill_renderer, bg_rgba)
    """

    from engine.core.render_window import RenderWindow
    from engine.render.renderer import FillRenderer
    from util.color import normalize_color as _normalize_color

    bg_rgba = _normalize_color(background if background is not None else DEFAULT_BACKGROUND)
    rendering_window = RenderWindow(window_width, window_height, bg_color=bg_rgba)  # type: ignore[abstract]

    # ModernGL コンテキスト（pyglet のウィンドウが作った GL コンテキストを共有）
    mgl_ctx: moderngl.Context = moderngl.create_context()
    mgl_ctx.enable(moderngl.BLEND)
    mgl_ctx.blend_func = (moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA)

    fill_renderer = FillRenderer(
        mgl_context=mgl_ctx,
        projection_matrix=projection_matrix,
        scene=scene,
        circle_segments=circle_segments,
    )

    return rendering_window, mgl_ctx, fill_renderer, bg_rgba


__all__ = ["create_window_and_renderer", "DEFAULT_BACKGROUND"]
