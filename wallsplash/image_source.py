"""
Image Source

Both places wallsplash gets wallpapers from (a local directory and the Unsplash API)
expose the same single operation, so the rotator never needs to know which one it is
talking to.
"""

from pathlib import Path
from typing import Protocol


class ImageSource(Protocol):
    def next_image_path(self) -> Path:
        """
        Return the path of the next image to display. Raise a WallsplashError (or let a
        transport/filesystem error propagate) if no image is available this time.
        """
