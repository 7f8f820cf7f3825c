"""
どこで: `engine.ui.hud` の HUD 表示モジュール。
何を: StatsSampler のキー/値ペアを pyglet の Label でオーバーレイ描画する。
なぜ: 図形数・総面積・操作値を毎フレーム可視化し、操作のフィードバックを即座に返すため。
"""

from __future__ import annotations

import time
from typing import Literal

import pyglet
from pyglet.window import Window

from util.color import to_u8_rgba

from ...core.tickable import Tickable
from .config import HUDConfig
from .sampler import StatsSampler

_LINE_HEIGHT = 18
_MARGIN = 10

MessageLevel = Literal["info", "warn", "error"]


class OverlayHUD(Tickable):
    """StatsSampler が溜めた文字列を pyglet Label で描画する。"""

    def __init__(
        self,
        window: Window,
        sampler: StatsSampler,
        *,
        config: HUDConfig | None = None,
    ):
        self.window = window
        self.sampler = sampler
        self._config = config or HUDConfig()
        self._color = to_u8_rgba(self._config.text_color)
        self._font = self._config.font_name
        self.font_size = int(self._config.font_size)
        self._labels: dict[str, pyglet.text.Label] = {}
        self._messages: list[tuple[str, float, MessageLevel]] = []

    def _make_label(self, text: str, y: int, **kwargs) -> pyglet.text.Label:
        return pyglet.text.Label(
            text=text,
            x=_MARGIN,
            y=y,
            anchor_x="left",
            font_name=self._font,
            font_size=kwargs.pop("font_size", self.font_size),
            color=kwargs.pop("color", self._color),
            **kwargs,
        )

    # -------- Tickable --------
    def tick(self, dt: float) -> None:
        # 左上から下へ 1 行ずつ並べる
        for i, (key, txt) in enumerate(self.sampler.data.items()):
            label = self._labels.get(key)
            if label is None:
                y = self.window.height - _MARGIN - i * _LINE_HEIGHT
                label = self._make_label("", y, anchor_y="top")
                self._labels[key] = label
            label.text = f"{key} : {txt}"
        # メッセージの有効期限を掃除
        now = time.monotonic()
        self._messages = [m for m in self._messages if m[1] > now]

    # -------- draw --------
    def draw(self) -> None:
        for lab in self._labels.values():
            lab.draw()
        # 一時メッセージ（左下から上へ積む）
        for i, (text, _expire, level) in enumerate(self._messages):
            rgba = {
                "info": self._color,
                "warn": (230, 160, 40, 230),
                "error": (230, 60, 60, 230),
            }[level]
            lbl = self._make_label(
                text, _MARGIN + i * _LINE_HEIGHT, anchor_y="bottom", color=rgba
            )
            lbl.draw()

    # ---- public helpers ----
    def show_message(self, text: str, level: MessageLevel = "info", timeout_sec: float = 2) -> None:
        expire = time.monotonic() + max(0.1, float(timeout_sec))
        self._messages.append((text, expire, level))


__all__ = ["OverlayHUD"]
