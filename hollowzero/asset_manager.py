"""Loading and lookup of textures, sounds and enemy atlases."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, ClassVar, Iterable, Optional, Union

import pygame

from hollowzero.atlas import Atlas

DEFAULT_ROOT = "assets"

PathLike = Union[str, "os.PathLike[str]"]


class AssetError(RuntimeError):
    """Raised when an asset cannot be loaded or found."""


@dataclass(frozen=True)
class AtlasAssetInfo:
    """A directory of numbered frames that forms one atlas."""

    name: str
    base_path: str
    frame_count: int = 0


def _load_texture(path: Path) -> pygame.Surface:
    return pygame.image.load(str(path))


def _load_audio(path: Path) -> pygame.mixer.Sound:
    return pygame.mixer.Sound(str(path))


class AssetManager:
    """Holds every loaded asset, keyed by its path relative to the asset root.

    Keys use forward slashes and drop the file extension, so
    ``assets/player/idle.png`` is found as ``"player/idle"``.
    """

    _instance: ClassVar[Optional[AssetManager]] = None

    def __init__(
        self,
        texture_loader: Callable[[Path], Any] = _load_texture,
        audio_loader: Callable[[Path], Any] = _load_audio,
    ) -> None:
        self._texture_loader = texture_loader
        self._audio_loader = audio_loader
        self._root = Path(DEFAULT_ROOT)
        self._audio: dict[str, Any] = {}
        self._textures: dict[str, Any] = {}
        self._atlases: dict[str, Atlas] = {}

    @classmethod
    def instance(cls) -> AssetManager:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def root(self) -> Path:
        return self._root

    def load(self, root: PathLike = DEFAULT_ROOT) -> None:
        """Load every ``.png`` and ``.mp3`` under ``root``, then the enemy atlases."""
        root_path = Path(root)
        if not root_path.is_dir():
            raise AssetError(f"Asset directory not found: {root_path}")
        self._root = root_path

        for path in sorted(p for p in root_path.rglob("*") if p.is_file()):
            key = path.relative_to(root_path).with_suffix("").as_posix()
            if path.suffix == ".png":
                try:
                    self._textures[key] = self._texture_loader(path)
                except (pygame.error, OSError) as exc:
                    raise AssetError(f"Unable to create texture from {path}! {exc}") from exc
            elif path.suffix == ".mp3":
                try:
                    self._audio[key] = self._audio_loader(path)
                except (pygame.error, OSError) as exc:
                    raise AssetError(f"Unable to create sound from {path}! {exc}") from exc

        self.load_enemy_atlases()

    def discover_enemy_atlases(self) -> list[AtlasAssetInfo]:
        """List the subdirectories of ``enemy`` that contain at least one ``.png``."""
        enemy_path = self._root / "enemy"
        if not enemy_path.is_dir():
            raise AssetError(f"Enemy asset directory not found: {enemy_path}")

        atlases = []
        for entry in sorted(enemy_path.iterdir()):
            if not entry.is_dir():
                continue
            frame_count = sum(1 for item in entry.iterdir() if item.suffix == ".png")
            if frame_count > 0:
                atlases.append(AtlasAssetInfo(entry.name, str(entry), frame_count))
        return atlases

    def find_audio(self, name: str) -> Optional[Any]:
        return self._audio.get(name)

    def find_texture(self, name: str) -> Optional[Any]:
        return self._textures.get(name)

    def find_atlas(self, name: str) -> Optional[Atlas]:
        return self._atlases.get(name)

    def create_atlas(self, texture_names: Iterable[str]) -> Atlas:
        """Build an atlas from already loaded textures, in the given order."""
        atlas = Atlas()
        for name in texture_names:
            texture = self.find_texture(name)
            if texture is None:
                raise AssetError(f"Unable to find texture for name: {name}!")
            atlas.add_texture(texture)
        return atlas

    def create_atlas_by_pattern(self, base_path: PathLike, count: int) -> Atlas:
        """Build an atlas from ``base_path/1.png`` up to ``base_path/<count>.png``."""
        atlas = Atlas()
        for i in range(1, count + 1):
            full_path = Path(base_path) / f"{i}.png"
            key = Path(os.path.relpath(full_path, self._root)).with_suffix("").as_posix()
            texture = self.find_texture(key)
            if texture is None:
                raise AssetError(f"Unable to find texture for texture name: {key}!")
            atlas.add_texture(texture)
        return atlas

    def load_enemy_atlases(self) -> None:
        for info in self.discover_enemy_atlases():
            self._atlases[info.name] = self.create_atlas_by_pattern(info.base_path, info.frame_count)


def play_audio(name: str, should_loop: bool) -> Optional[Any]:
    """Play a loaded sound; returns the playing channel, or None if it is unknown."""
    sound = AssetManager.instance().find_audio(name)
    if sound is None:
        return None
    return sound.play(loops=int(should_loop))


def random_int(min_value: int, max_value: int) -> int:
    """A uniformly random integer in ``[min_value, max_value]``."""
    return random.SystemRandom().randint(min_value, max_value)