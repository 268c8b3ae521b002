"""Widget placement cursor and scroll state.

The GUI cursor is not the mouse cursor: it tracks where the next widget
goes unless its position is given explicitly with a free layout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from quadkit.geometry import Rect, Vec2


@dataclass
class Scroll:
    """Scroll state of a window area."""

    scroll: Vec2 = field(default_factory=Vec2)
    dragging_x: bool = False
    dragging_y: bool = False
    rect: Rect = field(default_factory=lambda: Rect(0.0, 0.0, 0.0, 0.0))
    inner_rect: Rect = field(default_factory=lambda: Rect(0.0, 0.0, 0.0, 0.0))
    inner_rect_previous_frame: Rect = field(
        default_factory=lambda: Rect(0.0, 0.0, 0.0, 0.0)
    )
    initial_scroll: Vec2 = field(default_factory=Vec2)

    def _clamp(self, y: float) -> float:
        prev = self.inner_rect_previous_frame
        return min(max(y, prev.y), prev.h - self.rect.h + prev.y)

    def scroll_to(self, y: float) -> None:
        """Scroll to y, kept within the content of the previous frame."""
        self.rect.y = self._clamp(y)

    def update(self) -> None:
        """Keep the current scroll within the content of the previous frame."""
        self.rect.y = self._clamp(self.rect.y)


class _LayoutKind(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    FREE = "free"


@dataclass(frozen=True)
class Layout:
    """How a widget is placed: below, beside, or at a fixed point."""

    kind: _LayoutKind
    point: Vec2 | None = None

    @classmethod
    def vertical(cls) -> Layout:
        return cls(_LayoutKind.VERTICAL)

    @classmethod
    def horizontal(cls) -> Layout:
        return cls(_LayoutKind.HORIZONTAL)

    @classmethod
    def free(cls, point: Vec2) -> Layout:
        return cls(_LayoutKind.FREE, point)


@dataclass
class Cursor:
    """Placement cursor for widgets inside an area."""

    area: Rect
    margin: float
    x: float = field(init=False)
    y: float = field(init=False)
    start_x: float = field(init=False)
    start_y: float = field(init=False)
    ident: float = field(init=False, default=0.0)
    scroll: Scroll = field(init=False)
    next_same_line: float | None = field(init=False, default=None)
    max_row_y: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self.x = self.margin
        self.y = self.margin
        self.start_x = self.margin
        self.start_y = self.margin
        w, h = self.area.w, self.area.h
        self.scroll = Scroll(
            rect=Rect(0.0, 0.0, w, h),
            inner_rect=Rect(0.0, 0.0, w, h),
            inner_rect_previous_frame=Rect(0.0, 0.0, w, h),
        )

    def _to_screen(self, point: Vec2) -> Vec2:
        return (
            point
            + Vec2(self.area.x, self.area.y)
            + self.scroll.scroll
            + Vec2(self.ident, 0.0)
        )

    def reset(self) -> None:
        """Return to the start position for a new frame."""
        self.x = self.start_x
        self.y = self.start_y
        self.max_row_y = 0.0
        self.ident = 0.0
        self.scroll.inner_rect_previous_frame = self.scroll.inner_rect
        self.scroll.inner_rect = Rect(0.0, 0.0, self.area.w, self.area.h)

    def current_position(self) -> Vec2:
        """Screen position where the cursor currently stands."""
        return self._to_screen(Vec2(self.x, self.y))

    def fit(self, size: Vec2, layout: Layout) -> Vec2:
        """Reserve space for a widget of the given size; return its screen position."""
        if self.next_same_line is not None:
            same_line_x = self.next_same_line
            self.next_same_line = None
            if same_line_x != 0.0:
                self.x = same_line_x
            layout = Layout.horizontal()

        if layout.kind is _LayoutKind.HORIZONTAL:
            self.max_row_y = max(self.max_row_y, size.y)
            if self.x + size.x < self.area.w - self.margin * 2.0:
                res = Vec2(self.x, self.y)
            else:
                # the extra 1 makes the next vertical item jump to a new row
                self.x = self.margin + 1.0
                self.y += self.max_row_y + self.margin
                self.max_row_y = 0.0
                res = Vec2(self.x, self.y)
            self.x += size.x + self.margin
        elif layout.kind is _LayoutKind.VERTICAL:
            if self.x != self.margin:
                self.x = self.margin
                self.y += self.max_row_y
            res = Vec2(self.x, self.y)
            self.x += size.x + self.margin
            self.max_row_y = size.y + self.margin
        else:
            res = layout.point if layout.point is not None else Vec2()

        self.scroll.inner_rect = self.scroll.inner_rect.combine_with(
            Rect(res.x, res.y, size.x, size.y)
        )
        return self._to_screen(res)