"""Keyboard state tracking and translation of window key events."""

from __future__ import annotations

import enum
from typing import Optional

Key = enum.IntEnum(
    "Key",
    [
        *"ABCDEFGHIJKLMNOPQRSTUVWXYZ",
        *(f"NUM{n}" for n in range(10)),
        *(f"NUMPAD{n}" for n in range(10)),
        "LCTRL",
        "RCTRL",
        "LALT",
        "RALT",
        "LSHIFT",
        "RSHIFT",
        "RETURN",
        "SPACE",
        "BACKSPACE",
        "ESC",
    ],
    module=__name__,
    start=0,
)
Key.__doc__ = "Keys the input system keeps track of."

# Window-system key codes and actions.
_CODE_A, _CODE_Z = 65, 90
_CODE_0, _CODE_9 = 48, 57
_CODE_KP_0, _CODE_KP_9 = 320, 329
_ACTION_PRESS = 1

_SPECIAL_KEYS = {
    32: Key.SPACE,
    341: Key.LCTRL,
    345: Key.RCTRL,
    342: Key.LALT,
    346: Key.RALT,
    259: Key.BACKSPACE,
}


def _translate_key(key_code: int) -> Optional[Key]:
    if _CODE_A <= key_code <= _CODE_Z:
        return Key(Key.A + key_code - _CODE_A)
    if _CODE_0 <= key_code <= _CODE_9:
        return Key(Key.NUM0 + key_code - _CODE_0)
    if _CODE_KP_0 <= key_code <= _CODE_KP_9:
        return Key(Key.NUMPAD0 + key_code - _CODE_KP_0)
    return _SPECIAL_KEYS.get(key_code)


class InputSystem:
    """Holds the key state of the current and the previous input frame."""

    def __init__(self) -> None:
        self._current: set[Key] = set()
        self._previous: set[Key] = set()

    def new_input_frame(self) -> None:
        """Start a frame: the current state becomes the previous one."""
        self._previous = set(self._current)

    def notify_key_change(self, key: Key, state: bool) -> None:
        """Record that ``key`` is now down (True) or up (False)."""
        if state:
            self._current.add(Key(key))
        else:
            self._current.discard(Key(key))

    def key_down(self, key: Key) -> bool:
        """Whether the key is held in this frame."""
        return key in self._current

    def key_up(self, key: Key) -> bool:
        """Whether the key is not held in this frame."""
        return not self.key_down(key)

    def key_pressed(self, key: Key) -> bool:
        """Whether the key went down since the previous frame."""
        return key not in self._previous and self.key_down(key)

    def key_released(self, key: Key) -> bool:
        """Whether the key went up since the previous frame."""
        return key in self._previous and self.key_up(key)


class InputEventProvider:
    """Turns raw window key events into key changes on an input system."""

    def __init__(self) -> None:
        self._system: Optional[InputSystem] = None

    def bind_input_system(self, system: InputSystem) -> None:
        """Send translated events to ``system``."""
        self._system = system

    def report_keyboard_input(
        self, key_code: int, scan_code: int, action: int, mods: int
    ) -> None:
        """Report one key event; unknown keys and unbound providers are ignored."""
        if self._system is None:
            return
        key = _translate_key(key_code)
        if key is not None:
            self._system.notify_key_change(key, action == _ACTION_PRESS)