"""
Unsplash API Handler

This module keeps a small cache of the latest photos published on Unsplash and hands them
out one at a time. The API requires a developer account and corresponding access key
however it is otherwise free to use. See https://unsplash.com/documentation#list-photos

The cache is a flat directory of files named by their position in the last batch
(0.jpg, 1.jpg, ...). That naming is the only bookkeeping: nothing maps Unsplash photo ids
to files, and a new batch simply overwrites the old files by index. A batch is downloaded
the first time an image is requested and again whenever the refresh interval has elapsed.
"""

import time
import tempfile
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Callable, Optional

import requests

from wallsplash.console import log
from wallsplash.errors import NoRemoteImageError
from wallsplash.errors import RemoteAPIError

UNSPLASH_API = "https://api.unsplash.com"
PHOTOS_ENDPOINT = "/photos"

JPEG_MEDIA_TYPE = "image/jpeg"
CHUNK_SIZE = 64 * 1024


@dataclass
class Photo:
    """
    A single entry of the /photos listing. Only the fields needed to download the image
    are kept.
    """

    id: str
    download_url: str

    @classmethod
    def from_json(cls, data: dict) -> "Photo":
        # a missing key here is a malformed response and should fail the refresh
        return cls(id=data["id"], download_url=data["links"]["download"])


def media_type(content_type: Optional[str]) -> str:
    """
    Reduce a Content-Type header to its bare media type, e.g.
    "image/jpeg; charset=binary" -> "image/jpeg".
    """

    if not content_type:
        return ""

    return content_type.split(";")[0].strip().lower()


def photos_url(limit: int) -> str:
    return f"{UNSPLASH_API}{PHOTOS_ENDPOINT}?per_page={limit}&order_by=latest"


class UnsplashSource:
    """
    Image source backed by the latest photos on Unsplash.

    If no cache_dir is given, images are kept in a temporary directory that is removed
    when the source is garbage collected or the process exits.
    """

    def __init__(
        self,
        token: str,
        limit: int = 10,
        refresh: timedelta = timedelta(hours=24),
        cache_dir=None,
        request_timeout: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.token = token
        self.limit = limit
        self.refresh = refresh
        self.request_timeout = request_timeout
        self._clock = clock

        if cache_dir is None:
            self._tempdir = tempfile.TemporaryDirectory(prefix="unsplash")
            self.cache_dir = Path(self._tempdir.name)
        else:
            self._tempdir = None
            self.cache_dir = Path(cache_dir).expanduser().resolve()
            self.cache_dir.mkdir(parents=True, exist_ok=True)

        log(f"unsplash cache directory: {self.cache_dir}")

        self.cursor = 0
        self.total = 0
        self.cached = False
        self.timestamp: Optional[float] = None

    def is_stale(self) -> bool:
        """
        True if there is no usable batch or the last successful refresh is older than the
        refresh interval.
        """

        if not self.cached or self.timestamp is None:
            return True

        return self._clock() - self.timestamp >= self.refresh.total_seconds()

    def cache_path(self, index: int) -> Path:
        return self.cache_dir / f"{index}.jpg"

    def next_image_path(self) -> Path:
        if self.is_stale():
            try:
                written = self.download_images()
            except Exception:
                # never fall back to a previous batch after a failed refresh
                self.cached = False
                raise

            self.total = written
            self.cached = written > 0
            self.timestamp = self._clock()

        if self.total == 0:
            raise NoRemoteImageError()

        self.cursor = self.cursor % self.total

        path = self.cache_path(self.cursor)
        self.cursor += 1

        log(f"unsplash: {path}")
        return path

    def headers(self) -> dict:
        return {
            "Authorization": f"Client-ID {self.token}",
            "Accept-Version": "v1",
        }

    def list_photos(self) -> list[Photo]:
        """
        Call the /photos endpoint and return the descriptors of the latest photos, at most
        `limit` of them.
        """

        url = photos_url(self.limit)
        log(f"url: {url}")

        response = requests.get(url, headers=self.headers(), timeout=self.request_timeout)
        log(f"status: {response.status_code}")

        if not response.ok:
            raise RemoteAPIError(response.status_code)

        return [Photo.from_json(item) for item in response.json()]

    def download_images(self) -> int:
        """
        Download the latest batch into the cache directory and return the number of images
        written. Photos not served as image/jpeg are skipped and do not use up an index.
        Any network or filesystem error aborts the whole batch.
        """

        index = 0

        for photo in self.list_photos():
            log(f"downloading: {photo.download_url}")

            with requests.get(
                photo.download_url, stream=True, timeout=self.request_timeout
            ) as response:

                kind = media_type(response.headers.get("Content-Type"))
                if kind != JPEG_MEDIA_TYPE:
                    log(f"skipping photo {photo.id}: content type '{kind}'")
                    continue

                path = self.cache_path(index)
                with path.open("wb") as file:
                    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                        file.write(chunk)

            log(f"wrote image: {path}")
            index += 1

        return index
