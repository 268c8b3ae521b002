"""Turns draw commands into batched triangle meshes ready for the GPU."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from quadkit.commands import (
    Clip,
    DrawCharacter,
    DrawCommand,
    DrawLine,
    DrawRawTexture,
    DrawRect,
    DrawSprite,
    DrawTriangle,
)
from quadkit.geometry import Color, Rect, RectOffset, Vec2

MAX_VERTICES = 8000
MAX_INDICES = 4000

_F32_EPSILON = 1.1920929e-07
_WHITE = Color(1.0, 1.0, 1.0, 1.0)
_UNIT_RECT = Rect(0.0, 0.0, 1.0, 1.0)


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, texture coordinates and RGBA color."""

    pos: tuple[float, float, float]
    uv: tuple[float, float]
    color: tuple[float, float, float, float]

    def as_tuple(
        self,
    ) -> tuple[
        tuple[float, float, float],
        tuple[float, float],
        tuple[float, float, float, float],
    ]:
        """The vertex as plain (pos, uv, color) tuples."""
        return (self.pos, self.uv, self.color)


def _vertex(x: float, y: float, u: float, v: float, color: Color) -> Vertex:
    return Vertex((x, y, 0.0), (u, v), color.to_tuple())


@dataclass
class DrawList:
    """A batch of triangles sharing one clipping zone and one texture."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    clipping_zone: Rect | None = None
    texture: Any = None

    def _append(self, vertices: list[Vertex], indices: list[int]) -> None:
        base = len(self.vertices)
        self.vertices.extend(vertices)
        self.indices.extend(i + base for i in indices)

    def clear(self) -> None:
        """Drop all geometry and the clipping zone; the texture is kept."""
        self.vertices.clear()
        self.indices.clear()
        self.clipping_zone = None

    def draw_rectangle_lines(self, rect: Rect, source: Rect, color: Color) -> None:
        """Draw a one pixel wide outline of rect."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        self.draw_rectangle(Rect(x, y, w, 1.0), source, color)
        self.draw_rectangle(Rect(x + w - 1.0, y + 1.0, 1.0, h - 2.0), source, color)
        self.draw_rectangle(Rect(x, y + h - 1.0, w, 1.0), source, color)
        self.draw_rectangle(Rect(x, y + 1.0, 1.0, h - 2.0), source, color)

    def draw_rectangle(self, rect: Rect, source: Rect, color: Color) -> None:
        """Draw a filled rectangle mapped onto the source uv area."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        vertices = [
            _vertex(x, y, source.x, source.y, color),
            _vertex(x + w, y, source.x + source.w, source.y, color),
            _vertex(x + w, y + h, source.x + source.w, source.y + source.h, color),
            _vertex(x, y + h, source.x, source.y + source.h, color),
        ]
        self._append(vertices, [0, 1, 2, 0, 2, 3])

    def draw_sprite(
        self,
        rect: Rect,
        source: Rect,
        offsets: RectOffset,
        uv_offsets: RectOffset,
        color: Color,
    ) -> None:
        """Draw a nine-slice sprite: borders stay unscaled, the middle stretches."""
        x, y, w, h = rect.x, rect.y, rect.w, rect.h
        xs = [x, x + offsets.left, x + w - offsets.right, x + w]
        ys = [y, y + offsets.top, y + h - offsets.top, y + h]
        us = [
            source.x,
            source.x + uv_offsets.left,
            source.x + source.w - uv_offsets.right,
            source.x + source.w,
        ]
        vs = [
            source.y,
            source.y + uv_offsets.top,
            source.y + source.h - uv_offsets.bottom,
            source.y + source.h,
        ]

        vertices = [
            _vertex(vx, vy, u, v, color)
            for vx, u in zip(xs, us)
            for vy, v in zip(ys, vs)
        ]

        indices: list[int] = []
        for row in range(3):
            for column in range(3):
                top_left = row * 4 + column
                below = (row + 1) * 4 + column
                indices += [top_left, top_left + 1, below]
                indices += [top_left + 1, below, below + 1]

        self._append(vertices, indices)

    def draw_triangle(
        self, p0: Vec2, p1: Vec2, p2: Vec2, source: Rect, color: Color
    ) -> None:
        """Draw a single flat triangle."""
        vertices = [
            _vertex(p.x, p.y, source.x, source.y, color) for p in (p0, p1, p2)
        ]
        self._append(vertices, [0, 1, 2])

    def draw_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        thickness: float,
        source: Rect,
        color: Color,
    ) -> None:
        """Draw a line segment as a quad of the given thickness."""
        dx = x2 - x1
        dy = y2 - y1
        nx = -dy
        ny = dx

        length = math.sqrt(nx * nx + ny * ny)
        half = thickness * 0.5
        if half == 0.0:
            tlen = math.inf if length != 0.0 else math.nan
        else:
            tlen = length / half
        if tlen < _F32_EPSILON:
            return
        tx = nx / tlen
        ty = ny / tlen

        vertices = [
            _vertex(x1 + tx, y1 + ty, source.x, source.y, color),
            _vertex(x1 - tx, y1 - ty, source.x, source.y, color),
            _vertex(x2 + tx, y2 + ty, source.x, source.y, color),
            _vertex(x2 - tx, y2 - ty, source.x, source.y, color),
        ]
        self._append(vertices, [0, 1, 2, 2, 1, 3])


def _active_draw_list(draw_lists: list[DrawList], command: DrawCommand) -> DrawList:
    if not draw_lists:
        draw_lists.append(DrawList())

    last = draw_lists[-1]
    if isinstance(command, Clip):
        if last.clipping_zone != command.rect:
            draw_lists.append(DrawList())
    elif isinstance(command, DrawRawTexture):
        if last.texture is None or last.texture != command.texture:
            draw_lists.append(
                DrawList(texture=command.texture, clipping_zone=last.clipping_zone)
            )
    elif isinstance(
        command, (DrawCharacter, DrawLine, DrawRect, DrawSprite, DrawTriangle)
    ):
        vertices, indices = command.estimate_triangles_budget()
        if (
            last.texture is not None
            or len(last.vertices) + vertices >= MAX_VERTICES
            or len(last.indices) + indices >= MAX_INDICES
        ):
            draw_lists.append(DrawList(clipping_zone=last.clipping_zone))
    else:
        raise TypeError(f"unknown draw command: {command!r}")
    return draw_lists[-1]


def render_command(draw_lists: list[DrawList], command: DrawCommand) -> None:
    """Rasterize one command into the draw lists, starting a new batch when needed."""
    active = _active_draw_list(draw_lists, command)

    match command:
        case Clip(rect=rect):
            active.clipping_zone = rect
        case DrawRect(rect=rect, source=source, fill=fill, stroke=stroke):
            if fill is not None:
                active.draw_rectangle(rect, source, fill)
            if stroke is not None:
                active.draw_rectangle_lines(rect, source, stroke)
        case DrawSprite(
            rect=rect, source=source, color=color, offsets=offsets, offsets_uv=uv
        ):
            active.draw_sprite(
                rect,
                source,
                offsets if offsets is not None else RectOffset(),
                uv if uv is not None else RectOffset(),
                color,
            )
        case DrawLine(start=start, end=end, source=source, color=color):
            active.draw_line(start.x, start.y, end.x, end.y, 1.0, source, color)
        case DrawCharacter(dest=dest, source=source, color=color):
            active.draw_rectangle(dest, source, color)
        case DrawRawTexture(rect=rect):
            active.draw_rectangle(rect, _UNIT_RECT, _WHITE)
        case DrawTriangle(p0=p0, p1=p1, p2=p2, source=source, color=color):
            active.draw_triangle(p0, p1, p2, source, color)