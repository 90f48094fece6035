"""Ordered collection of textures forming an animation sequence."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

import pygame


class Atlas:
    """A list of textures indexed from zero."""

    def __init__(self, textures: Iterable[pygame.Surface] = ()) -> None:
        self._textures: list[pygame.Surface] = list(textures)

    def __len__(self) -> int:
        return len(self._textures)

    def __iter__(self) -> Iterator[pygame.Surface]:
        return iter(self._textures)

    def clear(self) -> None:
        self._textures.clear()

    def get_texture(self, idx: int) -> Optional[pygame.Surface]:
        """Return the texture at ``idx``, or None when out of range."""
        if idx < 0 or idx >= len(self._textures):
            return None
        return self._textures[idx]

    def add_texture(self, texture: pygame.Surface) -> None:
        self._textures.append(texture)