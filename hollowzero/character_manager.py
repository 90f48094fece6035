"""Owner of the characters in play."""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from hollowzero.camera import Camera
from hollowzero.character import Character
from hollowzero.player import Player


class CharacterManager:
    """Holds the player and the enemy and forwards frame events to the player."""

    _instance: ClassVar[Optional[CharacterManager]] = None

    def __init__(
        self, player: Optional[Character] = None, enemy: Optional[Character] = None
    ) -> None:
        self._player = player if player is not None else Player()
        self._enemy = enemy

    @classmethod
    def instance(cls) -> CharacterManager:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def player(self) -> Character:
        return self._player

    @property
    def enemy(self) -> Optional[Character]:
        return self._enemy

    def on_input(self, event: Any) -> None:
        self._player.on_input(event)

    def update(self, delta_time: float) -> None:
        self._player.on_update(delta_time)

    def render(self, camera: Camera) -> None:
        self._player.render(camera)

    def close(self) -> None:
        """Release the characters' collision boxes."""
        self._player.close()
        if self._enemy is not None:
            self._enemy.close()