"""Element state, label parameters and the draw commands produced by the painter."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Union

from quadkit.geometry import Color, Rect, RectOffset, Vec2

_BLACK = Color(0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class ElementState:
    """Interaction state of a widget, used to pick its colors."""

    focused: bool = False
    hovered: bool = False
    clicked: bool = False
    selected: bool = False


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"


@dataclass(frozen=True)
class LabelParams:
    color: Color = _BLACK
    alignment: Alignment = Alignment.LEFT

    @classmethod
    def from_color(cls, color: Color | None) -> LabelParams:
        """Params with the given color, black when None."""
        return cls(color=color if color is not None else _BLACK)


@dataclass(frozen=True)
class DrawCharacter:
    dest: Rect
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawCharacter:
        return replace(self, dest=self.dest.offset(offset))

    def estimate_triangles_budget(self) -> tuple[int, int]:
        return (10, 10)


@dataclass(frozen=True)
class DrawRect:
    rect: Rect
    source: Rect
    fill: Color | None = None
    stroke: Color | None = None

    def offset(self, offset: Vec2) -> DrawRect:
        return replace(self, rect=self.rect.offset(offset))

    def estimate_triangles_budget(self) -> tuple[int, int]:
        return (10, 10)


@dataclass(frozen=True)
class DrawSprite:
    rect: Rect
    source: Rect
    color: Color
    offsets: RectOffset | None = None
    offsets_uv: RectOffset | None = None

    def offset(self, offset: Vec2) -> DrawSprite:
        return replace(self, rect=self.rect.offset(offset))

    def estimate_triangles_budget(self) -> tuple[int, int]:
        return (0, 0)


@dataclass(frozen=True)
class DrawTriangle:
    p0: Vec2
    p1: Vec2
    p2: Vec2
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawTriangle:
        return replace(
            self, p0=self.p0 + offset, p1=self.p1 + offset, p2=self.p2 + offset
        )

    def estimate_triangles_budget(self) -> tuple[int, int]:
        return (10, 10)


@dataclass(frozen=True)
class DrawLine:
    start: Vec2
    end: Vec2
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawLine:
        return replace(self, start=self.start + offset, end=self.end + offset)

    def estimate_triangles_budget(self) -> tuple[int, int]:
        return (10, 10)


@dataclass(frozen=True)
class DrawRawTexture:
    rect: Rect
    texture: Any = field(compare=True)

    def offset(self, offset: Vec2) -> DrawRawTexture:
        return replace(self, rect=self.rect.offset(offset))

    def estimate_triangles_budget(self) -> tuple[int, int]:
        return (10, 10)


@dataclass(frozen=True)
class Clip:
    rect: Rect | None = None

    def offset(self, offset: Vec2) -> Clip:
        return Clip(None if self.rect is None else self.rect.offset(offset))

    def estimate_triangles_budget(self) -> tuple[int, int]:
        return (0, 0)


DrawCommand = Union[
    DrawCharacter, DrawRect, DrawSprite, DrawTriangle, DrawLine, DrawRawTexture, Clip
]