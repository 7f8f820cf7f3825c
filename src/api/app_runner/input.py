"""
どこで: `api.app_runner.input`
何を: キー/マウス入力を Simulation の操作へ対応付ける（キー割り当て表とクリック/ホバー処理）。
なぜ: pyglet のイベント配線から入力の意味付けを切り離し、ウィンドウなしで検証できるようにするため。
"""

from __future__ import annotations

from typing import Callable, Mapping

from engine.runtime.simulation import ClickResult, Simulation
from engine.ui.controls import ControlAction, format_gravity, format_spawn_rate

from .utils import window_to_canvas

# pyglet.window.key の名前 → 操作（値はシンボル名で持ち、pyglet 非依存にする）
DEFAULT_KEY_BINDINGS: Mapping[str, ControlAction] = {
    "RIGHT": ControlAction.INCREASE_SPAWN,
    "LEFT": ControlAction.DECREASE_SPAWN,
    "UP": ControlAction.INCREASE_GRAVITY,
    "DOWN": ControlAction.DECREASE_GRAVITY,
}


class InputController:
    """ウィンドウ入力を Simulation に流す。

    Parameters
    ----------
    simulation : Simulation
        操作対象。
    window_size : Callable[[], tuple[float, float]]
        現在のウィンドウ寸法（リサイズ/拡大表示に追従するため関数で受け取る）。
    notify : Callable[[str], None] | None
        操作値の表示先（HUD メッセージなど）。
    """

    def __init__(
        self,
        simulation: Simulation,
        window_size: Callable[[], tuple[float, float]],
        *,
        bindings: Mapping[str, ControlAction] | None = None,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self.simulation = simulation
        self._window_size = window_size
        self._bindings = dict(bindings if bindings is not None else DEFAULT_KEY_BINDINGS)
        self._notify = notify

    def _to_canvas(self, x: float, y: float) -> tuple[float, float]:
        cfg = self.simulation.config
        return window_to_canvas(x, y, self._window_size(), (cfg.width, cfg.height))

    def on_key(self, key_name: str) -> ControlAction | None:
        """キー名に割り当てられた操作を適用し、その操作を返す（未割り当ては None）。"""
        action = self._bindings.get(key_name)
        if action is None:
            return None
        cfg = self.simulation.apply(action)
        if self._notify is not None:
            if action in (ControlAction.INCREASE_SPAWN, ControlAction.DECREASE_SPAWN):
                self._notify(f"spawn rate: {format_spawn_rate(cfg.shapes_per_second)} /s")
            else:
                self._notify(f"gravity: {format_gravity(cfg.gravity)}")
        return action

    def on_click(self, x: float, y: float) -> ClickResult:
        """ウィンドウ座標のクリックを処理する。"""
        cx, cy = self._to_canvas(x, y)
        return self.simulation.click(cx, cy)

    def on_hover(self, x: float, y: float) -> bool:
        """ウィンドウ座標がクリック可能な図形上にあるか。"""
        cx, cy = self._to_canvas(x, y)
        return self.simulation.hovering(cx, cy)


__all__ = ["DEFAULT_KEY_BINDINGS", "InputController"]
