"""Widget styles: per-state colors, margins and background sprites, plus the default skin."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, NamedTuple

from quadkit.commands import ElementState
from quadkit.geometry import Color, RectOffset


class _Image(NamedTuple):
    """Raw RGBA image handed to the sprite cache."""

    width: int
    height: int
    bytes: bytes


SpriteCache = Callable[[Any], int]

_BLACK = Color.from_rgba(0, 0, 0, 255)
_WHITE = Color.from_rgba(255, 255, 255, 255)


def _to_byte(value: float) -> int:
    # float-to-u8 casts saturate and truncate
    return int(max(0.0, min(255.0, value)))


@dataclass
class Style:
    """Resolved look of one kind of widget."""

    background: int | None = None
    background_hovered: int | None = None
    background_clicked: int | None = None
    color: Color = _WHITE
    color_inactive: Color | None = None
    color_hovered: Color = _WHITE
    color_clicked: Color = _WHITE
    color_selected: Color = _WHITE
    color_selected_hovered: Color = _WHITE
    # Unscaled border of the background image.
    background_margin: RectOffset | None = None
    # Space between the element border and its content; may be negative.
    margin: RectOffset | None = None
    font: Any = None
    text_color: Color = _BLACK
    text_color_hovered: Color = _BLACK
    text_color_clicked: Color = _BLACK
    font_size: int = 16
    reverse_background_z: bool = False

    def border_margin(self) -> RectOffset:
        """Background margin and content margin added together."""
        bg = self.background_margin or RectOffset()
        m = self.margin or RectOffset()
        return RectOffset(
            left=bg.left + m.left,
            right=bg.right + m.right,
            top=bg.top + m.top,
            bottom=bg.bottom + m.bottom,
        )

    def text_color_for(self, element_state: ElementState) -> Color:
        """Text color for the given interaction state."""
        if element_state.clicked:
            return self.text_color_clicked
        if element_state.hovered:
            return self.text_color_hovered
        if element_state.focused:
            return self.text_color
        c = self.text_color
        return Color(c.r * 0.6, c.g * 0.6, c.b * 0.6, c.a * 0.6)

    def color_for(self, element_state: ElementState) -> Color:
        """Background color for the given interaction state."""
        if not element_state.focused:
            if self.color_inactive is not None:
                return self.color_inactive
            c = self.color
            return Color.from_rgba(
                _to_byte(c.r * 255.0),
                _to_byte(c.g * 255.0),
                _to_byte(c.b * 255.0),
                _to_byte(c.a * 255.0 * 0.8),
            )
        if element_state.clicked:
            return self.color_clicked
        if element_state.selected and element_state.hovered:
            return self.color_selected_hovered
        if element_state.selected:
            return self.color_selected
        if element_state.hovered:
            return self.color_hovered
        return self.color

    def background_sprite(self, element_state: ElementState) -> int | None:
        """Sprite id to draw as background for the given state, if any."""
        if element_state.clicked and self.background_clicked is not None:
            return self.background_clicked
        if element_state.hovered and self.background_hovered is not None:
            return self.background_hovered
        return self.background


class StyleBuilder:
    """Immutable builder for a Style; each setter returns a new builder."""

    def __init__(self, font: Any = None) -> None:
        self._fields: dict[str, Any] = {"font": font}
        self._images: dict[str, Any] = {}

    def _with(self, images: dict[str, Any] | None = None, **fields: Any) -> StyleBuilder:
        new = StyleBuilder()
        new._fields = {**self._fields, **fields}
        new._images = {**self._images, **(images or {})}
        return new

    def background(self, background: Any) -> StyleBuilder:
        return self._with(images={"background": background})

    def margin(self, margin: RectOffset) -> StyleBuilder:
        return self._with(margin=margin)

    def background_margin(self, margin: RectOffset) -> StyleBuilder:
        return self._with(background_margin=margin)

    def background_hovered(self, background_hovered: Any) -> StyleBuilder:
        return self._with(images={"background_hovered": background_hovered})

    def background_clicked(self, background_clicked: Any) -> StyleBuilder:
        return self._with(images={"background_clicked": background_clicked})

    def text_color(self, color: Color) -> StyleBuilder:
        return self._with(text_color=color)

    def text_color_hovered(self, color: Color) -> StyleBuilder:
        return self._with(text_color_hovered=color)

    def text_color_clicked(self, color: Color) -> StyleBuilder:
        return self._with(text_color_clicked=color)

    def font_size(self, font_size: int) -> StyleBuilder:
        return self._with(font_size=font_size)

    def color(self, color: Color) -> StyleBuilder:
        return self._with(color=color)

    def color_hovered(self, color: Color) -> StyleBuilder:
        return self._with(color_hovered=color)

    def color_clicked(self, color: Color) -> StyleBuilder:
        return self._with(color_clicked=color)

    def color_selected(self, color: Color) -> StyleBuilder:
        return self._with(color_selected=color)

    def color_selected_hovered(self, color: Color) -> StyleBuilder:
        return self._with(color_selected_hovered=color)

    def color_inactive(self, color: Color) -> StyleBuilder:
        return self._with(color_inactive=color)

    def reverse_background_z(self, reverse_background_z: bool) -> StyleBuilder:
        return self._with(reverse_background_z=reverse_background_z)

    def build(self, cache_sprite: SpriteCache) -> Style:
        """Cache the background images through cache_sprite and make the Style."""
        sprites = {
            name: cache_sprite(self._images[name])
            for name in ("background", "background_hovered", "background_clicked")
            if name in self._images
        }
        return Style(**self._fields, **sprites)


_WINDOW_BACKGROUND = _Image(
    width=3,
    height=3,
    bytes=bytes(
        [
            68, 68, 68, 255, 68, 68, 68, 255, 68, 68, 68, 255,
            68, 68, 68, 255, 238, 238, 238, 255, 68, 68, 68, 255,
            68, 68, 68, 255, 68, 68, 68, 255, 68, 68, 68, 255,
        ]
    ),
)


@dataclass
class Skin:
    """Styles for every widget kind plus global spacing metrics."""

    label_style: Style
    button_style: Style
    tabbar_style: Style
    combobox_style: Style
    window_style: Style
    editbox_style: Style
    window_titlebar_style: Style
    scrollbar_style: Style
    scrollbar_handle_style: Style
    checkbox_style: Style
    group_style: Style
    margin: float = 2.0
    title_height: float = 14.0
    scroll_width: float = 10.0
    scroll_multiplier: float = 3.0

    @classmethod
    def default(cls, cache_sprite: SpriteCache) -> Skin:
        """The built-in skin; background images go through cache_sprite."""
        rgba = Color.from_rgba
        base = Style()
        margin2 = RectOffset(2.0, 2.0, 2.0, 2.0)
        return cls(
            label_style=replace(
                base,
                margin=margin2,
                text_color=rgba(0, 0, 0, 255),
                color_inactive=rgba(0, 0, 0, 128),
            ),
            button_style=replace(
                base,
                margin=margin2,
                color=rgba(204, 204, 204, 235),
                color_clicked=rgba(187, 187, 187, 255),
                color_hovered=rgba(170, 170, 170, 235),
                text_color=rgba(0, 0, 0, 255),
            ),
            combobox_style=StyleBuilder()
            .background_margin(RectOffset(1.0, 14.0, 1.0, 1.0))
            .color_inactive(rgba(238, 238, 238, 128))
            .text_color(rgba(0, 0, 0, 255))
            .color(rgba(220, 220, 220, 255))
            .build(cache_sprite),
            tabbar_style=replace(
                base,
                margin=margin2,
                color=rgba(220, 220, 220, 235),
                color_clicked=rgba(187, 187, 187, 235),
                color_hovered=rgba(170, 170, 170, 235),
                color_selected_hovered=rgba(180, 180, 180, 235),
                color_selected=rgba(204, 204, 204, 235),
                text_color=rgba(0, 0, 0, 255),
            ),
            window_style=StyleBuilder()
            .background_margin(RectOffset(1.0, 1.0, 1.0, 1.0))
            .color_inactive(rgba(238, 238, 238, 128))
            .text_color(rgba(0, 0, 0, 255))
            .background(_WINDOW_BACKGROUND)
            .build(cache_sprite),
            window_titlebar_style=replace(
                base,
                color=rgba(68, 68, 68, 255),
                color_inactive=rgba(102, 102, 102, 127),
                text_color=rgba(0, 0, 0, 255),
            ),
            scrollbar_style=replace(base, color=rgba(68, 68, 68, 255)),
            editbox_style=replace(
                base,
                text_color=rgba(0, 0, 0, 255),
                color_selected=rgba(200, 200, 200, 255),
            ),
            scrollbar_handle_style=replace(
                base,
                color=rgba(204, 204, 204, 235),
                color_inactive=rgba(204, 204, 204, 128),
                color_hovered=rgba(180, 180, 180, 235),
                color_clicked=rgba(170, 170, 170, 235),
            ),
            checkbox_style=replace(
                base,
                text_color=rgba(0, 0, 0, 255),
                font_size=16,
                color=rgba(200, 200, 200, 255),
                color_hovered=rgba(210, 210, 210, 255),
                color_clicked=rgba(150, 150, 150, 255),
                color_selected=rgba(128, 128, 128, 255),
                color_selected_hovered=rgba(140, 140, 140, 255),
            ),
            group_style=replace(
                base,
                color=rgba(34, 34, 34, 68),
                color_hovered=rgba(34, 153, 34, 68),
                color_selected=rgba(34, 34, 255, 255),
                color_selected_hovered=rgba(55, 55, 55, 68),
            ),
        )