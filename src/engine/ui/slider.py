"""
どこで: `engine.ui.slider`。
何を: ラベル/値/範囲/矩形を持つ水平スライダー。ポインタ入力で値を更新し、自身を Canvas に描く。
なぜ: 曲線パラメータを画面上のドラッグで直接操作するための最小ウィジェット。

補足:
- 値は比率 `ratio = clamp((x - rect.x) / rect.w, 0, 1)` を経由して決まる。生の値はクランプしない。
  そのため矩形の外までドラッグしても値は必ず `[min, max]` に収まる。
- ボタンを押している間にポインタが操作領域（矩形を上下に `INTERACTION_MARGIN` 拡張）内にあれば
  ドラッグが始まる（押下後に領域へ入った場合も含む）。始まった後はボタンを離すまで、
  ポインタが領域外に出ても追従する。
- 変化判定はレンジ相対の許容誤差 `CHANGE_EPSILON * (max - min)` を全スライダー共通で使う。
"""

from __future__ import annotations

from dataclasses import dataclass, field

from common.types import RGBA8, Vec2
from engine.render.types import Canvas

# 操作領域の上下マージン（ピクセル）
INTERACTION_MARGIN = 10.0
# レンジに対する相対許容誤差
CHANGE_EPSILON = 1e-9


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    def contains(self, px: float, py: float, *, margin_y: float = 0.0) -> bool:
        return (
            self.x <= px <= self.x + self.w
            and self.y - margin_y <= py <= self.y + self.h + margin_y
        )


@dataclass(frozen=True)
class SliderStyle:
    """スライダーの見た目（色/寸法）。"""

    text_color: RGBA8 = (255, 255, 255, 255)
    track_color: RGBA8 = (255, 255, 255, 255)
    marker_color: RGBA8 = (230, 41, 55, 255)
    font_size: float = 12.0
    track_thickness: float = 2.0
    marker_radius: float = 5.0
    label_gap: float = 10.0
    value_gap: float = 10.0


@dataclass
class Slider:
    """単一パラメータを表す水平スライダー。"""

    label: str
    value: float
    min: float
    max: float
    bounds: Rect
    style: SliderStyle = field(default_factory=SliderStyle)
    dragging: bool = False

    def __post_init__(self) -> None:
        self.value = float(self.value)
        self.min = float(self.min)
        self.max = float(self.max)
        if not self.max > self.min:
            raise ValueError(
                f"slider '{self.label}': max must be greater than min (min={self.min}, max={self.max})"
            )
        if not self.min <= self.value <= self.max:
            raise ValueError(
                f"slider '{self.label}': value {self.value} outside [{self.min}, {self.max}]"
            )
        if not self.bounds.w > 0:
            raise ValueError(f"slider '{self.label}': width must be > 0, got {self.bounds.w}")

    # ---- geometry ----
    @property
    def span(self) -> float:
        return self.max - self.min

    @property
    def epsilon(self) -> float:
        return CHANGE_EPSILON * self.span

    @property
    def track_y(self) -> float:
        return self.bounds.y + self.bounds.h / 2.0

    def ratio(self) -> float:
        """現在値のトラック上の比率（表示用に 0..1 へクランプ）。"""
        r = (self.value - self.min) / self.span
        return max(0.0, min(1.0, r))

    def hit_test(self, x: float, y: float) -> bool:
        return self.bounds.contains(x, y, margin_y=INTERACTION_MARGIN)

    def value_at(self, pointer_x: float) -> float:
        """ポインタ X 座標に対応する値（比率をクランプしてから写像）。"""
        ratio = (float(pointer_x) - self.bounds.x) / self.bounds.w
        if ratio <= 0.0:
            return self.min
        if ratio >= 1.0:
            # span + min が丸めで max を超えないよう端点は直接返す
            return self.max
        return min(self.max, ratio * self.span + self.min)

    # ---- input ----
    def update(self, pointer: Vec2, pressed: bool) -> bool:
        """ポインタ入力を消費し、値が変化したら True を返す。"""
        px, py = float(pointer[0]), float(pointer[1])
        if not pressed:
            self.dragging = False
            return False
        if not self.dragging and self.hit_test(px, py):
            self.dragging = True
        if not self.dragging:
            return False

        new_value = self.value_at(px)
        changed = abs(new_value - self.value) > self.epsilon
        self.value = new_value
        return changed

    # ---- draw ----
    def draw(self, canvas: Canvas) -> None:
        st = self.style
        x = self.bounds.x
        y = self.track_y
        w = self.bounds.w
        canvas.text(self.label, (x, y - st.label_gap), st.font_size, st.text_color)
        canvas.line((x, y), (x + w, y), st.track_thickness, st.track_color)
        canvas.circle((x + self.ratio() * w, y), st.marker_radius, st.marker_color)
        canvas.text(
            f"{self.value:.2f}",
            (x + w + st.value_gap, y + st.font_size / 2.0),
            st.font_size,
            st.text_color,
        )


__all__ = ["INTERACTION_MARGIN", "CHANGE_EPSILON", "Rect", "SliderStyle", "Slider"]
