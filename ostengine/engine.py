"""The engine that owns the subsystems."""

from __future__ import annotations

import os
from typing import Any, Optional, Union

from ostengine.assets import AssetsSystem
from ostengine.input import InputEventProvider, InputSystem


class Engine:
    """Owns the input and assets subsystems and advances the game each tick."""

    def __init__(self) -> None:
        self._input = InputSystem()
        self._assets = AssetsSystem()
        self._render_target: Optional[Any] = None
        self._frame_count = 0

    @property
    def assets(self) -> AssetsSystem:
        return self._assets

    @property
    def input(self) -> InputSystem:
        return self._input

    @property
    def render_target(self) -> Optional[Any]:
        """The target the engine renders into, once rendering is set up."""
        return self._render_target

    @property
    def frame_count(self) -> int:
        """How many ticks the engine has run."""
        return self._frame_count

    def init_assets(self, root_path: Union[str, os.PathLike]) -> None:
        """Point the assets system at its root directory."""
        self._assets.set_root_path(root_path)

    def init_rendering(self, render_target: Any) -> None:
        """Remember ``render_target`` as the engine's rendering destination."""
        self._render_target = render_target

    def init_input(self, event_provider: InputEventProvider) -> None:
        """Route events from ``event_provider`` into the input system."""
        event_provider.bind_input_system(self._input)

    def tick(self) -> None:
        """Advance the engine by one frame."""
        self._frame_count += 1