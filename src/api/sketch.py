"""
どこで: `api.sketch`（実行ランナー）。
何を: スーパー楕円（スクワクル）をスライダーで対話的に描くウィンドウを起動する。
なぜ: 設定解決・ウィンドウ生成・描画ループ・HUD の結線を 1 か所にまとめ、利用側を 1 行にするため。

api.sketch — スクワクル描画ランナー

主エントリポイント:
- `run_squircle(*, width=None, height=None, fps=None, caption=None, show_hud=None, init_only=False)`:
  - 第 1 象限の頂点列を `shapes.quarter_superellipse` で生成し、4 象限へ鏡映して描く。
  - 6 本のスライダー（長半径/短半径/丸み/太さ/分割数/回転）をドラッグして形を変える。
  - `F` で輪郭/塗りを切り替え、`ESC` でウィンドウを閉じる。

実行フロー（概要）:
1) ロギング: `common.logging.setup_default_logging()`（ハンドラ未設定時のみ）。
2) 設定解決: `util.utils.load_config()` の `window`/`canvas`/`hud` セクションと環境変数から
   FPS・寸法・配色・HUD 設定を確定する。
3) 状態生成: `AppState.create()` に形状生成関数を注入（engine は shapes を知らない）。
4) `init_only=True` ならここで戻る（pyglet を import しない）。
5) ウィンドウ: `RenderWindow` を生成し、`PygletCanvas` を描画先にする。
6) 監視/HUD: `MetricSampler` と `OverlayHUD` をセットアップする。
7) フレーム駆動: `FrameClock` で `SquircleLoop` → sampler → overlay の順に `tick(dt)` を呼ぶ。

注意/制限:
- ヘッドレス環境では `pyglet` のウィンドウ生成に失敗する場合がある。
"""

from __future__ import annotations

import logging

from common.logging import setup_default_logging
from engine.core.input_state import InputState
from engine.core.tickable import Tickable
from engine.runtime.state import AppState
from shapes.superellipse import quarter_superellipse
from util.utils import config_section, load_config

from .sketch_runner.utils import (
    resolve_caption,
    resolve_colors,
    resolve_fps,
    resolve_hud_config,
    resolve_window_size,
)

logger = logging.getLogger(__name__)


def run_squircle(
    *,
    width: int | None = None,
    height: int | None = None,
    fps: int | None = None,
    caption: str | None = None,
    show_hud: bool | None = None,
    init_only: bool = False,
) -> AppState:
    """スクワクル描画ウィンドウを起動し、閉じられるまでイベントループを回す。

    Parameters
    ----------
    width, height : int | None
        ウィンドウ寸法 [px]。None で設定ファイル（`window.width/height`）→ 1280x800。
    fps : int | None
        更新レート。None で `SQR_FPS` → 設定ファイル（`window.fps`）→ 60。
    caption : str | None
        ウィンドウタイトル。
    show_hud : bool | None
        HUD の有効/無効。None で `SQR_SHOW_HUD` と設定ファイル（`hud.enabled`）に従う。
    init_only : bool, default False
        True で設定解決と状態生成だけを行い、ウィンドウを開かずに戻る。

    Returns
    -------
    AppState
        描画ループが所有していた状態（終了時点のスライダー値/再生成回数を含む）。
    """
    setup_default_logging()

    # ---- ① 設定解決 -----------------------------------------------
    cfg = load_config()
    window_cfg = config_section(cfg, "window")
    fps = resolve_fps(fps, window_cfg)
    window_width, window_height = resolve_window_size(width, height, window_cfg)
    title = resolve_caption(caption, window_cfg)
    colors = resolve_colors(config_section(cfg, "canvas"))
    hud_conf = resolve_hud_config(show_hud, cfg)

    # ---- ② 状態（形状生成関数を注入） ------------------------------
    state = AppState.create(window_width, quarter_superellipse, style=colors.slider_style)
    logger.debug(
        "resolved window=%dx%d fps=%d hud=%s", window_width, window_height, fps, hud_conf.enabled
    )

    if init_only:
        return state

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet

    from engine.core.frame_clock import FrameClock
    from engine.core.render_window import RenderWindow
    from engine.render.pyglet_canvas import PygletCanvas
    from engine.runtime.loop import SquircleLoop
    from engine.ui.hud.overlay import OverlayHUD
    from engine.ui.hud.sampler import MetricSampler

    # ---- ③ Window & Canvas ----------------------------------------
    inputs = InputState()
    bg = colors.palette.background
    rendering_window = RenderWindow(
        window_width,
        window_height,
        inputs=inputs,
        caption=title,
        bg_color=(bg[0] / 255.0, bg[1] / 255.0, bg[2] / 255.0, bg[3] / 255.0),
    )
    canvas = PygletCanvas(rendering_window)

    # ---- ④ モニタリング --------------------------------------------
    sampler: MetricSampler | None = None
    overlay: OverlayHUD | None = None
    if hud_conf.enabled:
        sampler = MetricSampler(hud_conf)
        overlay = OverlayHUD(
            sampler,
            height=lambda: float(rendering_window.height),
            config=hud_conf,
            color=colors.slider_style.text_color,
        )

    def _on_toggle(fill_mode: bool) -> None:
        if overlay is not None:
            overlay.show_message("Fill mode" if fill_mode else "Outline mode")

    loop = SquircleLoop(
        state,
        inputs,
        canvas,
        center=lambda: rendering_window.center,
        palette=colors.palette,
        on_toggle=_on_toggle,
    )
    if sampler is not None:
        sampler.set_stats_provider(loop.stats)

    # ---- ⑤ Draw callback ------------------------------------------
    def _draw_main() -> None:
        canvas.begin_frame()
        loop.draw()
        if overlay is not None:
            overlay.draw(canvas)
        canvas.flush()

    rendering_window.add_draw_callback(_draw_main)

    # ---- ⑥ FrameClock ---------------------------------------------
    tickables: list[Tickable] = [loop]
    if sampler is not None:
        tickables.append(sampler)
    if overlay is not None:
        tickables.append(overlay)
    frame_clock = FrameClock(tickables)
    pyglet.clock.schedule_interval(frame_clock.tick, 1 / fps)

    @rendering_window.event
    def on_close():  # noqa: ANN001
        pyglet.clock.unschedule(frame_clock.tick)
        logger.info(
            "closing after %d frames (%d regenerations)", state.frames, state.regenerations
        )

    logger.info(
        "squircle drawer started (%dx%d @ %d fps); F toggles fill, ESC quits",
        window_width,
        window_height,
        fps,
    )
    pyglet.app.run()
    return state


def main() -> None:
    """コマンドラインエントリポイント（`squircle`）。"""
    run_squircle()


__all__ = ["run_squircle", "main"]
