"""The application window: events, frame presentation and a GUI layer."""

from __future__ import annotations

from typing import Optional

import pygame

from ostengine.input import InputEventProvider
from ostengine.rendering import TextureRenderTarget

WINDOW_CAPTION = "OstEng Window"
_CLEAR_COLOR = (0x10, 0x10, 0x10)

# Window-system key codes understood by the input event provider.
_ACTION_RELEASE = 0
_ACTION_PRESS = 1

_SPECIAL_KEY_CODES = {
    pygame.K_SPACE: 32,
    pygame.K_ESCAPE: 256,
    pygame.K_RETURN: 257,
    pygame.K_BACKSPACE: 259,
    pygame.K_LSHIFT: 340,
    pygame.K_LCTRL: 341,
    pygame.K_LALT: 342,
    pygame.K_RSHIFT: 344,
    pygame.K_RCTRL: 345,
    pygame.K_RALT: 346,
}

_KEYPAD_KEYS = (
    pygame.K_KP0,
    pygame.K_KP1,
    pygame.K_KP2,
    pygame.K_KP3,
    pygame.K_KP4,
    pygame.K_KP5,
    pygame.K_KP6,
    pygame.K_KP7,
    pygame.K_KP8,
    pygame.K_KP9,
)
_KEYPAD_CODES = {key: 320 + n for n, key in enumerate(_KEYPAD_KEYS)}


def _window_key_code(key: int) -> Optional[int]:
    if pygame.K_a <= key <= pygame.K_z:
        return 65 + key - pygame.K_a
    if pygame.K_0 <= key <= pygame.K_9:
        return 48 + key - pygame.K_0
    if key in _KEYPAD_CODES:
        return _KEYPAD_CODES[key]
    return _SPECIAL_KEY_CODES.get(key)


class AppWindow:
    """A single window that forwards key events and presents frames."""

    def __init__(self) -> None:
        self._surface: Optional[pygame.Surface] = None
        self._render_target = TextureRenderTarget()
        self._input_event_provider = InputEventProvider()
        self._gui_surface: Optional[pygame.Surface] = None
        self._close_requested = False

    @property
    def render_target(self) -> TextureRenderTarget:
        return self._render_target

    @property
    def input_event_provider(self) -> InputEventProvider:
        return self._input_event_provider

    @property
    def gui_surface(self) -> Optional[pygame.Surface]:
        """The transparent layer drawn over each frame, once the GUI is set up."""
        return self._gui_surface

    def _require_window(self) -> pygame.Surface:
        if self._surface is None:
            raise RuntimeError("window has not been created")
        return self._surface

    def create(self, width: int, height: int, title: str) -> None:
        """Open the window at the given size."""
        pygame.display.init()
        self._surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(WINDOW_CAPTION)
        self._close_requested = False

    def init_gui(self) -> None:
        """Set up the GUI layer that is composited over every frame."""
        surface = self._require_window()
        pygame.font.init()
        self._gui_surface = pygame.Surface(surface.get_size(), pygame.SRCALPHA)

    def destroy(self) -> None:
        """Close the window and release the GUI layer."""
        if self._gui_surface is not None:
            pygame.font.quit()
            self._gui_surface = None
        if self._surface is not None:
            self._surface = None
            pygame.display.quit()

    def should_remain_open(self) -> bool:
        """False once the window has been asked to close."""
        self._require_window()
        return not self._close_requested

    def poll_events(self) -> None:
        """Handle pending window events, forwarding key changes to the input provider."""
        self._require_window()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._close_requested = True
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                code = _window_key_code(event.key)
                if code is None:
                    continue
                action = _ACTION_PRESS if event.type == pygame.KEYDOWN else _ACTION_RELEASE
                self._input_event_provider.report_keyboard_input(
                    code,
                    getattr(event, "scancode", 0),
                    action,
                    getattr(event, "mod", 0),
                )

    def begin_frame(self) -> None:
        """Start a frame: the GUI layer is cleared for new drawing."""
        if self._gui_surface is not None:
            self._gui_surface.fill((0, 0, 0, 0))

    def end_frame(self) -> None:
        """Clear the window, draw the GUI layer over it and present it."""
        surface = self._require_window()
        surface.fill(_CLEAR_COLOR)
        if self._gui_surface is not None:
            surface.blit(self._gui_surface, (0, 0))
        pygame.display.flip()