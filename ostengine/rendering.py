"""Render targets that the engine draws into."""

from __future__ import annotations

import abc
from typing import ClassVar, Optional

import pygame


class RenderTarget(abc.ABC):
    """Something that can be bound as the destination of drawing."""

    @abc.abstractmethod
    def bind(self) -> None:
        """Make this the active drawing destination."""

    @abc.abstractmethod
    def unbind(self) -> None:
        """Return drawing to the default destination."""

    @property
    @abc.abstractmethod
    def width(self) -> int:
        """Width in pixels."""

    @property
    @abc.abstractmethod
    def height(self) -> int:
        """Height in pixels."""


class TextureRenderTarget(RenderTarget):
    """An off-screen colour surface that drawing can be directed into."""

    _bound: ClassVar[Optional[TextureRenderTarget]] = None

    def __init__(self) -> None:
        self._width = 0
        self._height = 0
        self._surface: Optional[pygame.Surface] = None
        self._viewport: Optional[tuple[int, int, int, int]] = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def surface(self) -> Optional[pygame.Surface]:
        """The colour surface, or None before create()."""
        return self._surface

    @property
    def viewport(self) -> Optional[tuple[int, int, int, int]]:
        """The (x, y, width, height) viewport set by the last bind()."""
        return self._viewport

    @property
    def is_bound(self) -> bool:
        """Whether this target is the active drawing destination."""
        return TextureRenderTarget._bound is self

    def _set_size(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"render target size must not be negative: {width}x{height}")
        self._width = int(width)
        self._height = int(height)

    def _create_resources(self) -> None:
        self._surface = pygame.Surface((self._width, self._height))
        self._surface.fill((0, 0, 0))

    def _delete_resources(self) -> None:
        self._surface = None

    def create(self, width: int, height: int) -> None:
        """Allocate the surface at the given size."""
        self._set_size(width, height)
        self._create_resources()

    def resize(self, width: int, height: int) -> None:
        """Replace the surface with a new one of the given size."""
        self._set_size(width, height)
        self._delete_resources()
        self._create_resources()

    def bind(self) -> None:
        """Make this target active and set the viewport to cover it."""
        TextureRenderTarget._bound = self
        self._viewport = (0, 0, self._width, self._height)

    def unbind(self) -> None:
        """Return drawing to the default destination."""
        TextureRenderTarget._bound = None