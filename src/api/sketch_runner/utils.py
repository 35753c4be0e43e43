"""
どこで: `api.sketch_runner.utils`（純粋関数/小ヘルパ）。
何を: FPS/ウィンドウ寸法/配色/HUD 設定の解決を提供する。
なぜ: `api.sketch` を薄く保ち、ウィンドウを開かずにテストできるようにするため。

解決順序（共通）:
    引数での明示指定 > 環境変数（`common.settings`） > 設定ファイル（`util.utils.load_config`） > 既定値
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from common import settings as _settings
from common.types import RGBA8
from engine.runtime.loop import FramePalette
from engine.ui.hud.config import HUDConfig
from engine.ui.slider import SliderStyle
from util.color import to_u8_rgba
from util.utils import config_section

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 800
DEFAULT_CAPTION = "Squircle (superellipse) drawer"
DEFAULT_FPS = 60


def _positive_int(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    try:
        v = int(raw)
    except (TypeError, ValueError):
        return None
    return v if v > 0 else None


def resolve_fps(
    requested_fps: int | None, window_cfg: Mapping[str, Any] | None = None, *, default: int = DEFAULT_FPS
) -> int:
    """FPS を解決して 1 以上の int を返す。

    - 明示指定があればそれを優先（数値化できない/<=0 は既定へ）。
    - 次に `SQR_FPS`、続いて設定ファイルの `window.fps`。
    """
    if requested_fps is not None:
        v = _positive_int(requested_fps)
        return v if v is not None else max(1, int(default))
    env_fps = _settings.get().FPS
    if env_fps is not None:
        return max(1, int(env_fps))
    v = _positive_int((window_cfg or {}).get("fps"))
    return v if v is not None else max(1, int(default))


def resolve_window_size(
    width: int | None, height: int | None, window_cfg: Mapping[str, Any] | None = None
) -> tuple[int, int]:
    """ウィンドウ寸法 [px] を解決する。明示指定が 0 以下なら `ValueError`。"""
    cfg = window_cfg or {}
    resolved: list[int] = []
    for name, explicit, default in (("width", width, DEFAULT_WIDTH), ("height", height, DEFAULT_HEIGHT)):
        if explicit is not None:
            if int(explicit) <= 0:
                raise ValueError(f"window {name} must be > 0, got {explicit}")
            resolved.append(int(explicit))
            continue
        v = _positive_int(cfg.get(name))
        resolved.append(v if v is not None else default)
    return resolved[0], resolved[1]


def resolve_caption(caption: str | None, window_cfg: Mapping[str, Any] | None = None) -> str:
    if caption is not None:
        return str(caption)
    raw = (window_cfg or {}).get("caption")
    return raw if isinstance(raw, str) and raw else DEFAULT_CAPTION


def _color_or(section: Mapping[str, Any], name: str, fallback: RGBA8) -> RGBA8:
    raw = section.get(name)
    if raw is None:
        return fallback
    try:
        return to_u8_rgba(raw)
    except ValueError as e:
        logger.warning("invalid canvas.%s in config: %s (using default)", name, e)
        return fallback


@dataclass(frozen=True)
class ResolvedColors:
    """曲線とスライダーの配色（0–255 RGBA）。"""

    palette: FramePalette
    slider_style: SliderStyle


def resolve_colors(canvas_cfg: Mapping[str, Any] | None = None) -> ResolvedColors:
    """設定ファイルの `canvas` セクションから配色を解決する（不正値は警告して既定値）。"""
    cfg = canvas_cfg or {}
    base_palette = FramePalette()
    base_style = SliderStyle()
    palette = FramePalette(
        background=_color_or(cfg, "background_color", base_palette.background),
        line=_color_or(cfg, "line_color", base_palette.line),
        fill=_color_or(cfg, "fill_color", base_palette.fill),
    )
    text = _color_or(cfg, "text_color", base_style.text_color)
    style = SliderStyle(
        text_color=text,
        track_color=_color_or(cfg, "track_color", text),
        marker_color=_color_or(cfg, "marker_color", base_style.marker_color),
    )
    return ResolvedColors(palette=palette, slider_style=style)


def resolve_hud_config(show_hud: bool | None, cfg: Mapping[str, Any] | None = None) -> HUDConfig:
    """HUD 設定を解決する（優先: show_hud 明示 > SQR_SHOW_HUD=0 > 設定ファイル > 既定）。"""
    section = config_section(dict(cfg or {}), "hud")
    enabled: bool | None = None
    if show_hud is not None:
        enabled = bool(show_hud)
    elif not _settings.get().SHOW_HUD:
        enabled = False
    return HUDConfig.from_mapping(section, enabled=enabled)


__all__ = [
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "DEFAULT_CAPTION",
    "DEFAULT_FPS",
    "ResolvedColors",
    "resolve_fps",
    "resolve_window_size",
    "resolve_caption",
    "resolve_colors",
    "resolve_hud_config",
]
