"""
wallsplash errors

Exceptions raised by the image sources. Each class corresponds to one way a source can
come up empty handed for a given tick. Network, JSON and filesystem errors are not wrapped
here; they propagate from requests and the OS as they are.
"""


class WallsplashError(Exception):
    """Base class for errors raised by wallsplash image sources."""

    pass


class NoLocalImageError(WallsplashError):
    """
    Raised when the local image directory contains no regular files.
    """

    def __init__(self, directory):
        self.directory = directory
        super().__init__(f"No local images found in {directory}")


class RemoteAPIError(WallsplashError):
    """
    Raised when the Unsplash /photos endpoint responds with a non-success status code.
    """

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Unsplash /photos api failed (status code {status_code})")


class NoRemoteImageError(WallsplashError):
    """
    Raised when a refresh of the Unsplash cache finished without writing a single image.
    """

    def __init__(self):
        super().__init__("No images found from Unsplash")
