"""
どこで: `engine.ui.hud.config`。
何を: HUD 表示の設定（有効/無効や表示項目、順序、サンプリング周期、文字）を定義する。
なぜ: HUD の表示を宣言的に制御し、設定ファイルからも上書きできるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Sequence

from .fields import AREA, FPS, GRAVITY, SHAPES, SPAWN_RATE


@dataclass(frozen=True)
class HUDConfig:
    """HUD の表示設定。

    Parameters
    ----------
    enabled : bool
        HUD 全体の有効/無効。
    show_stats : bool
        図形数/総面積の表示有無。
    show_controls : bool
        スポーン頻度/重力の現在値の表示有無。
    show_fps : bool
        FPS 表示の有無。
    order : list[str] | None
        表示順（None なら既定順）。
    sample_interval : float
        サンプリング周期（秒）。0 で毎フレーム。
    font_name : str | None
        ラベルのフォント（None で pyglet 既定）。
    font_size : int
        ラベルの文字サイズ。
    text_color : str | tuple
        文字色（Hex / 0..1 / 0..255）。
    """

    enabled: bool = True
    show_stats: bool = True
    show_controls: bool = True
    show_fps: bool = True
    order: Sequence[str] | None = None
    sample_interval: float = 0.0
    font_name: str | None = None
    font_size: int = 10
    text_color: Any = "#e6e6e6"

    def resolved_order(self) -> list[str]:
        """有効フラグに基づく既定順を返す（`order` 指定時はそれを優先）。"""
        if self.order is not None:
            return list(self.order)
        keys: list[str] = []
        if self.show_stats:
            keys.extend([SHAPES, AREA])
        if self.show_controls:
            keys.extend([SPAWN_RATE, GRAVITY])
        if self.show_fps:
            keys.append(FPS)
        return keys

    @classmethod
    def from_mapping(cls, hud_cfg: Mapping[str, Any] | None, **overrides: Any) -> "HUDConfig":
        """`hud` セクションの辞書から生成する（未知キーは無視、`overrides` は None 以外を優先）。"""
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        if isinstance(hud_cfg, Mapping):
            values.update({k: v for k, v in hud_cfg.items() if k in known})
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = ["HUDConfig"]
