"""
Local Image Handler

Cycle through the images in a local directory. The directory is listed again on every
call because the user may add or remove wallpapers while wallsplash is running. Files
are taken in whatever order the filesystem returns them; no sorting is applied.
"""

from pathlib import Path

from wallsplash.console import log
from wallsplash.errors import NoLocalImageError


class LocalSource:
    """
    Round-robin image source over the regular files directly under a directory.
    Subdirectories and other non-file entries are ignored.
    """

    def __init__(self, directory):
        self._directory = Path(directory).expanduser()
        self.cursor = 0

    @property
    def directory(self) -> Path:
        return self._directory

    def list_images(self) -> list[Path]:
        """Return every regular file directly under the configured directory."""

        return [entry for entry in self._directory.iterdir() if entry.is_file()]

    def next_image_path(self) -> Path:
        images = self.list_images()

        if not images:
            raise NoLocalImageError(self._directory)

        # the listing may have shrunk since the last call
        self.cursor = self.cursor % len(images)

        path = images[self.cursor].absolute()
        self.cursor += 1

        log(f"local: {path}")
        return path
