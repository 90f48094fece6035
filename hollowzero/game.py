"""Window, main loop and top-level frame update and drawing."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Any, Callable, Iterable, Optional, Sequence

import pygame

from hollowzero.asset_manager import DEFAULT_ROOT, AssetError, AssetManager
from hollowzero.camera import Camera

WINDOW_TITLE = "Atlas"
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
# Target time per frame, in seconds (one tenth of a second over 144 frames).
FRAME_DURATION = 0.1 / 144
BACKGROUND_TEXTURE = "background"

_UNSET = object()


class Game:
    """Owns the drawing surface, the camera and the loaded assets, and runs frames.

    When no ``surface`` is given a window is opened; otherwise everything is
    drawn onto the given surface and no display is touched.
    """

    def __init__(
        self,
        surface: Optional[pygame.Surface] = None,
        asset_manager: Optional[AssetManager] = None,
        asset_root: str = DEFAULT_ROOT,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        event_source: Optional[Callable[[], Iterable[Any]]] = None,
    ) -> None:
        self._owns_display = surface is None
        if surface is None:
            pygame.init()
            surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
            pygame.mouse.set_visible(False)
        self._surface = surface
        self._clock = clock
        self._sleep = sleep
        self._event_source = event_source if event_source is not None else pygame.event.get
        self._assets = asset_manager if asset_manager is not None else AssetManager.instance()
        self._running = False
        self._closed = False
        self._frame_count = 0
        self._background: Any = _UNSET
        self.load_error: Optional[str] = None

        try:
            self._assets.load(asset_root)
        except AssetError as exc:
            self.load_error = f"Can't load assets: {exc}"
            print(f"Loading assets failed: {self.load_error}", file=sys.stderr)

        self._camera = Camera(self._surface)

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def camera(self) -> Camera:
        return self._camera

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def running(self) -> bool:
        return self._running

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def run(self) -> None:
        """Run frames until a quit event arrives."""
        self._running = True
        last_tick = self._clock()
        while self._running:
            for event in self._event_source():
                if event.type == pygame.QUIT:
                    self._running = False

            frame_start = self._clock()
            self.update(frame_start - last_tick)
            self.render()
            if self._owns_display:
                pygame.display.flip()
            self._frame_count += 1

            last_tick = frame_start
            remaining = FRAME_DURATION - (self._clock() - frame_start)
            if remaining > 0:
                self._sleep(remaining)

    def update(self, delta_time: float) -> None:
        self._camera.update(delta_time)

    def render(self) -> None:
        """Draw the background centred in the window."""
        if self._background is _UNSET:
            self._background = self._assets.find_texture(BACKGROUND_TEXTURE)
        background = self._background
        if background is None:
            return
        width, height = background.get_size()
        rect_dst = (
            (WINDOW_WIDTH - width) / 2.0,
            (WINDOW_HEIGHT - height) / 2.0,
            float(width),
            float(height),
        )
        self._camera.render_texture(background, None, rect_dst, 0, None)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._running = False
        if self._owns_display:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="hollowzero", description="Run the game.")
    parser.add_argument("--assets", default=DEFAULT_ROOT, help="asset directory")
    args = parser.parse_args(argv)
    with Game(asset_root=args.assets) as game:
        game.run()
    return 0