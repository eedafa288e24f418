"""
Wallpaper Handler

This module sets the desktop background by dropping into an external command. The default
is feh (`feh --bg-fill <image>`), which works for most X window managers. Any command that
takes the image path as its last argument can be configured instead, for example the GNOME
settings CLI:

    gsettings set org.gnome.desktop.background picture-uri

The command is treated as opaque: wallsplash only looks at whether it succeeded.
"""

import shlex
import subprocess
from pathlib import Path

from wallsplash.console import log

DEFAULT_COMMAND = "feh --bg-fill"


class WallpaperUpdateError(Exception):
    """
    Raised when an attempt to update the desktop background fails.
    """

    pass


def build_command(img_path: Path, command: str = DEFAULT_COMMAND) -> list[str]:
    """
    Split the configured command the way a shell would and append the image path as the
    final argument.
    """

    args = shlex.split(command)
    if not args:
        raise WallpaperUpdateError("No wallpaper command configured.")

    return [*args, str(img_path)]


def update_wallpaper(img_path: Path, command: str = DEFAULT_COMMAND) -> None:
    """
    Update the background image to the one specified by img_path. Raise WallpaperUpdateError
    if issues are encountered during the attempt to update the background.
    """

    wallpaper_location = Path(img_path).expanduser().resolve()

    # subsequent operations will fail if path does not exist or is not a file, so catch this.
    if not wallpaper_location.exists() or not wallpaper_location.is_file():
        raise WallpaperUpdateError(
            f"Invalid path provided for image location: {img_path} does not exist."
        )

    args = build_command(wallpaper_location, command)
    log(f"running: {shlex.join(args)}")

    """
    subprocess.CalledProcessError is raised by the run method call if a non-zero exit status is
    returned. OSError covers the case where the command itself cannot be found or executed.
    """

    try:
        subprocess.run(args, check=True, capture_output=True, text=True)

    except subprocess.CalledProcessError as error:
        raise WallpaperUpdateError(
            f"Could not set desktop background: {error} {error.stderr or ''}".strip()
        )

    except OSError as error:
        raise WallpaperUpdateError(f"Could not run wallpaper command: {error}")
