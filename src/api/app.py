"""
どこで: `api.app`（実行ランナー）。
何を: Simulation を pyglet のクロックで駆動し、ModernGL で図形を塗りつぶし描画、HUD に統計を表示する。
なぜ: 設定解決・ウィンドウ生成・入力配線・後始末を一箇所にまとめ、`run_app()` 1 回で動かせるようにするため。

実行フロー（概要）:
1) 設定解決: `util.utils.load_config()`（configs/default.yaml + config.yaml）と引数から
   `SimConfig`/`HUDConfig`/FPS を確定する。引数が設定ファイルより優先。
2) コア: `ShapeFactory`（シード指定可）・`ShapeManager`・`Container` を束ねた `Simulation` を作る。
3) ウィンドウ/GL: `RenderWindow` と ModernGL の `FillRenderer` を生成する。
4) HUD: `StatsSampler`（図形数/総面積/操作値/FPS）と `OverlayHUD`。
5) フレーム駆動: `FrameClock` が Simulation → Renderer → HUD の順に `tick(dt)` を呼ぶ。
6) 入力: ←/→ でスポーン頻度、↑/↓ で重力、クリックで図形除去（空振りなら不規則図形を生成）、
   `ESC` で終了。終了時に図形と GL リソースを解放する。

注意/制限:
- ヘッドレス/仮想環境では `pyglet`/`ModernGL` の初期化に失敗する場合がある。
- `init_only=True` で重い依存を読み込まず、設定解決と Simulation 生成だけを行って返す。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from engine.core.frame_clock import FrameClock
from engine.core.manager import ShapeManager
from engine.core.scene import Container
from engine.core.tickable import Tickable
from engine.runtime.config import SimConfig
from engine.runtime.simulation import Simulation
from engine.ui.hud.config import HUDConfig
from util.utils import config_section, load_config

from .app_runner.utils import build_projection, resolve_fps
from .factory import ShapeFactory

logger = logging.getLogger(__name__)

# 1 フレームで進める最大時間 [s]（ウィンドウ操作で止まった後の大ジャンプを防ぐ）
MAX_FRAME_DT = 0.25


@dataclass(frozen=True)
class AppSetup:
    """設定解決の結果（`init_only` の戻り値）。"""

    config: SimConfig
    hud: HUDConfig
    fps: int
    background: Any
    simulation: Simulation


def prepare_app(
    *,
    width: int | None = None,
    height: int | None = None,
    gravity: float | None = None,
    shapes_per_second: float | None = None,
    fps: int | None = None,
    seed: int | None = None,
    show_hud: bool | None = None,
    cfg: Mapping[str, Any] | None = None,
) -> AppSetup:
    """設定を解決して Simulation を組み立てる（GL/ウィンドウには触れない）。"""
    from common.settings import get as _get_settings

    settings = _get_settings()
    cfg_all = load_config() if cfg is None else dict(cfg)
    sim_config = SimConfig.from_mapping(
        cfg_all,
        width=width,
        height=height,
        gravity=gravity,
        shapes_per_second=shapes_per_second,
    )
    hud_section = config_section(cfg_all, "hud")
    hud_enabled = show_hud
    if hud_enabled is None and "enabled" not in hud_section:
        hud_enabled = settings.HUD_ENABLED
    hud_conf = HUDConfig.from_mapping(hud_section, enabled=hud_enabled)
    resolved_fps = resolve_fps(fps, cfg_all)
    background = config_section(cfg_all, "canvas").get("background_color")

    factory = ShapeFactory(seed=seed if seed is not None else settings.SEED)
    simulation = Simulation(
        sim_config,
        factory,
        manager=ShapeManager(),
        scene=Container(),
    )
    return AppSetup(sim_config, hud_conf, resolved_fps, background, simulation)


def run_app(
    *,
    width: int | None = None,
    height: int | None = None,
    gravity: float | None = None,
    shapes_per_second: float | None = None,
    fps: int | None = None,
    seed: int | None = None,
    show_hud: bool | None = None,
    init_only: bool = False,
) -> AppSetup | None:
    """アプリを起動し、ウィンドウが閉じられるまでブロックする。

    Parameters
    ----------
    width, height : int | None
        キャンバス寸法 [px]。None で設定ファイル/既定（800x600）。
    gravity : float | None
        初期重力（0.1〜2.0 にクランプ）。
    shapes_per_second : float | None
        初期スポーン頻度（0.5〜5 にクランプ）。
    fps : int | None
        更新レート。None で設定ファイルから解決（既定 60）。
    seed : int | None
        乱数シード。None で `FS_SEED`、それも無ければ非決定的。
    show_hud : bool | None
        HUD の有効/無効。None で設定ファイル/`FS_HUD_ENABLED` に従う。
    init_only : bool
        True で設定解決だけ行い `AppSetup` を返す（ウィンドウを開かない）。
    """
    setup = prepare_app(
        width=width,
        height=height,
        gravity=gravity,
        shapes_per_second=shapes_per_second,
        fps=fps,
        seed=seed,
        show_hud=show_hud,
    )
    sim_config = setup.config
    logger.info(
        "canvas=%dx%d fps=%d gravity=%.1f rate=%g/s hud=%s",
        sim_config.width,
        sim_config.height,
        setup.fps,
        sim_config.gravity,
        sim_config.shapes_per_second,
        setup.hud.enabled,
    )
    if init_only:
        return setup

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet
    from pyglet.window import key, mouse

    from .app_runner.input import InputController
    from .app_runner.render import create_window_and_renderer

    simulation = setup.simulation
    proj = build_projection(float(sim_config.width), float(sim_config.height))
    rendering_window, _mgl_ctx, fill_renderer, _bg = create_window_and_renderer(
        sim_config.width,
        sim_config.height,
        background=setup.background,
        projection_matrix=proj,
        scene=simulation.scene,
    )

    # ---- HUD ---------------------------------------------------------
    overlay = None
    tickables: list[Tickable] = [simulation, fill_renderer]
    if setup.hud.enabled:
        from engine.ui.hud.overlay import OverlayHUD
        from engine.ui.hud.sampler import StatsSampler

        sampler = StatsSampler(simulation.stats, lambda: simulation.config, hud_config=setup.hud)
        overlay = OverlayHUD(rendering_window, sampler, config=setup.hud)
        tickables.extend([sampler, overlay])

    def _draw_main() -> None:
        fill_renderer.draw()
        if overlay is not None:
            overlay.draw()

    rendering_window.add_draw_callback(_draw_main)

    # ---- 入力 ----------------------------------------------------------
    controller = InputController(
        simulation,
        lambda: (float(rendering_window.width), float(rendering_window.height)),
        notify=overlay.show_message if overlay is not None else None,
    )

    frame_clock = FrameClock(tickables, max_dt=MAX_FRAME_DT)
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / setup.fps)

    @rendering_window.event
    def on_key_press(sym, mods):  # noqa: ANN001
        if sym == key.ESCAPE:
            rendering_window.close()
            return
        controller.on_key(key.symbol_string(sym))

    @rendering_window.event
    def on_mouse_press(x, y, button, mods):  # noqa: ANN001
        if button == mouse.LEFT:
            controller.on_click(x, y)

    @rendering_window.event
    def on_mouse_motion(x, y, dx, dy):  # noqa: ANN001
        rendering_window.set_pointer_cursor(controller.on_hover(x, y))

    @rendering_window.event
    def on_close():  # noqa: ANN001
        # 冪等なクリーンアップ
        if getattr(on_close, "_closed", False):
            return
        setattr(on_close, "_closed", True)
        pyglet.clock.unschedule(frame_clock.tick)
        simulation.close()
        fill_renderer.release()
        logger.info("closed after %d frame(s)", frame_clock.frame_count)
        pyglet.app.exit()

    pyglet.app.run()
    return None


__all__ = ["AppSetup", "prepare_app", "run_app", "MAX_FRAME_DT"]
