"""
wallsplash rotator

The rotator is the main loop of wallsplash. On every tick it asks one of the two image
sources for a path, hands that path to the wallpaper command, switches to the other source
and sleeps. Sources are used strictly in alternation, starting with the local directory,
whether or not the previous tick succeeded.

Failures never stop the loop. An empty directory, an Unsplash outage or a broken wallpaper
command is reported and the tick is skipped; the sleep between ticks is the only backoff.
"""

import time
from datetime import timedelta
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from wallsplash.console import confirm_success, describe, fail
from wallsplash.image_source import ImageSource
from wallsplash.wallpaper_handler import update_wallpaper


class SourceState(Enum):
    USE_LOCAL = "local"
    USE_REMOTE = "unsplash"

    def toggle(self) -> "SourceState":
        if self is SourceState.USE_LOCAL:
            return SourceState.USE_REMOTE
        return SourceState.USE_LOCAL


class Rotator:
    """
    Alternate between a local and a remote image source on a fixed interval.

    display is called with the chosen path and sleep with the number of seconds to wait;
    both default to the real thing and are swapped out in tests.
    """

    def __init__(
        self,
        local: ImageSource,
        remote: ImageSource,
        timeout: timedelta = timedelta(minutes=30),
        display: Callable[[Path], None] = update_wallpaper,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.local = local
        self.remote = remote
        self.timeout = timeout
        self.state = SourceState.USE_LOCAL
        self._display = display
        self._sleep = sleep

    def current_source(self) -> ImageSource:
        if self.state is SourceState.USE_LOCAL:
            return self.local
        return self.remote

    def tick(self) -> Optional[Path]:
        """
        Run a single rotation step. Return the path that was displayed, or None if the
        source or the wallpaper command failed.
        """

        name = self.state.value
        displayed = None

        try:
            path = self.current_source().next_image_path()

        except Exception as error:
            fail(f"{name}: {error}")

        else:
            try:
                self._display(path)

            except Exception as error:
                fail(f"could not display '{path}': {error}")

            else:
                confirm_success(
                    f":desktop_computer-emoji: {name}: wallpaper updated to {path}"
                )
                displayed = path

        self.state = self.state.toggle()
        return displayed

    def run(self, ticks: Optional[int] = None) -> None:
        """
        Rotate wallpapers until the process is terminated. ticks limits the number of
        iterations and is only meant for tests.
        """

        count = 0
        while ticks is None or count < ticks:
            self.tick()
            count += 1

            seconds = self.timeout.total_seconds()
            describe(f"Waiting {seconds:g}s for next wallpaper...")
            self._sleep(seconds)
