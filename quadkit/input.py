"""Input state, key codes, clipboard and key-repeat emulation for the GUI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from quadkit.geometry import Vec2


class KeyCode(Enum):
    """Keys the GUI reacts to."""

    UP = auto()
    DOWN = auto()
    RIGHT = auto()
    LEFT = auto()
    BACKSPACE = auto()
    DELETE = auto()
    ENTER = auto()
    TAB = auto()
    HOME = auto()
    END = auto()
    CONTROL = auto()
    ESCAPE = auto()
    A = auto()  # select all
    Z = auto()  # undo
    Y = auto()  # redo
    C = auto()  # copy
    V = auto()  # paste
    X = auto()  # cut


@dataclass(frozen=True)
class InputCharacter:
    """One keyboard event: a typed character (str) or a key code."""

    key: str | KeyCode
    modifier_shift: bool = False
    modifier_ctrl: bool = False


@dataclass
class Input:
    """Per-frame input state seen by widgets."""

    mouse_position: Vec2 = field(default_factory=Vec2)
    raw_mouse_down: bool = False
    raw_click_down: bool = False
    raw_click_up: bool = False
    mouse_wheel: Vec2 = field(default_factory=Vec2)
    input_buffer: list[InputCharacter] = field(default_factory=list)
    modifier_ctrl: bool = False
    escape: bool = False
    enter: bool = False
    cursor_grabbed: bool = False
    window_active: bool = False

    def _usable(self) -> bool:
        return not self.cursor_grabbed and self.window_active

    def is_mouse_down(self) -> bool:
        return self.raw_mouse_down and self._usable()

    def click_down(self) -> bool:
        return self.raw_click_down and self._usable()

    def click_up(self) -> bool:
        return self.raw_click_up and self._usable()

    def reset(self) -> None:
        """Clear the one-frame events."""
        self.modifier_ctrl = False
        self.escape = False
        self.enter = False
        self.raw_click_down = False
        self.raw_click_up = False
        self.mouse_wheel = Vec2(0.0, 0.0)
        self.input_buffer = []
        self.window_active = False


class ClipboardObject:
    """In-memory clipboard; subclass to connect a system clipboard."""

    def __init__(self, data: str | None = None) -> None:
        self._data = data

    def get(self) -> str | None:
        return self._data

    def set(self, data: str) -> None:
        self._data = data


@dataclass
class KeyRepeat:
    """Emulates OS key repeat: a held key fires once, then repeatedly after a delay."""

    character_this_frame: KeyCode | None = None
    active_character: KeyCode | None = None
    repeating_character: KeyCode | None = None
    pressed_time: float = 0.0

    def add_repeat_gap(self, character: KeyCode, time: float) -> bool:
        """Record a press this frame; return whether it should take effect."""
        self.character_this_frame = character
        return (
            self.active_character is None
            or self.active_character != self.character_this_frame
            or self.repeating_character == self.character_this_frame
        )

    def new_frame(self, time: float) -> None:
        character_this_frame = self.character_this_frame
        self.character_this_frame = None

        if (
            character_this_frame == self.active_character
            and time - self.pressed_time > 0.5
        ):
            self.repeating_character = self.active_character

        if character_this_frame != self.active_character:
            self.active_character = character_this_frame
            self.pressed_time = time
            self.repeating_character = None