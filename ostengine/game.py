"""The interface a game implements, and a small demo game."""

from __future__ import annotations

import abc


class GameInstance(abc.ABC):
    """A game: the engine talks to it through this interface."""

    @abc.abstractmethod
    def game_title(self) -> str:
        """The title of the game."""

    @abc.abstractmethod
    def run(self) -> None:
        """Run the game."""


class DemoGame(GameInstance):
    """A minimal game that announces itself."""

    def game_title(self) -> str:
        return "My Ost Engine Game"

    def run(self) -> None:
        print("This is printed from the game instance yo")