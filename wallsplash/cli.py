"""
wallsplash

Display wallpapers from a local image directory and Unsplash.

This module defines the entry point to the wallsplash CLI. Options given on the command
line take precedence over the config file, which takes precedence over the built-in
defaults. Once the settings are resolved, the two image sources are created and the
rotator runs until the process is stopped.
"""

from pathlib import Path

import click
from dotenv import load_dotenv

from wallsplash.config import load_config_file
from wallsplash.config import resolve_config
from wallsplash.console import describe, set_verbosity
from wallsplash.decorators import catch_errors
from wallsplash.local_handler import LocalSource
from wallsplash.rotator import Rotator
from wallsplash.unsplash_handler import UnsplashSource
from wallsplash.wallpaper_handler import update_wallpaper


@click.command(name="wallsplash")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to configuration file, default ~/.config/wallsplash/config.json",
)
@click.option(
    "--dir",
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    help="Path to local directory of images",
)
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    metavar="NUM",
    help="Max number of Unsplash images to download and cache, default 10",
)
@click.option(
    "--refresh",
    type=click.IntRange(min=0),
    metavar="SECS",
    help="Seconds before refreshing Unsplash image cache, default 86400 (1 day)",
)
@click.option(
    "--timeout",
    type=click.IntRange(min=0),
    metavar="SECS",
    help="Seconds before displaying next image, default 1800 (30 mins)",
)
@click.option(
    "--token",
    envvar="UNSPLASH_TOKEN",
    metavar="TOKEN",
    help="Unsplash API token. Also read from UNSPLASH_TOKEN (a .env file works too)",
)
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for cached Unsplash images, default is a temporary directory",
)
@click.option(
    "--command",
    metavar="CMD",
    help="Command used to set the wallpaper, the image path is appended. default 'feh --bg-fill'",
)
@click.option(
    "--verbose",
    "verbosity",
    flag_value="verbose",
    default=True,
    help="Print all output to stdout or the terminal",
)
@click.option(
    "--quiet",
    "verbosity",
    flag_value="quiet",
    help="Silence all output printed to the stdout or the terminal.",
)
@click.option(
    "--debug",
    "verbosity",
    flag_value="debug",
    help="Also print details of every request and file written.",
)
@click.version_option(package_name="wallsplash")
@catch_errors
def cli(
    config_path, directory, limit, refresh, timeout, token, cache_dir, command, verbosity
):
    """
    Wallsplash

    Rotate your desktop wallpaper between your own images and the latest photos on Unsplash.

        $ wallsplash --dir ~/Pictures/wallpapers --token <UNSPLASH ACCESS KEY>

    Every tick alternates between the local directory and Unsplash, starting with the local
    directory. Unsplash photos are downloaded in batches and cached until the refresh
    interval has passed.
    """

    set_verbosity(verbosity)

    file_values = load_config_file(config_path)
    config = resolve_config(
        {
            "dir": directory,
            "token": token,
            "limit": limit,
            "refresh": refresh,
            "timeout": timeout,
            "cache_dir": cache_dir,
            "command": command,
        },
        file_values,
    )

    local = LocalSource(config.dir)
    remote = UnsplashSource(
        token=config.token,
        limit=config.limit,
        refresh=config.refresh_interval,
        cache_dir=config.cache_dir,
        request_timeout=config.request_timeout,
    )

    def display(path: Path):
        update_wallpaper(path, command=config.command)

    describe(
        f":framed_picture-emoji: rotating wallpapers from {config.dir} and Unsplash "
        f"every {config.timeout}s"
    )

    rotator = Rotator(local, remote, timeout=config.tick_timeout, display=display)
    rotator.run()


def main():
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
