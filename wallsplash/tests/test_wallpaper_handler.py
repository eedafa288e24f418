"""
Test wallpaper_handler

Validate that the wallpaper command is built and invoked correctly and that every way it
can fail surfaces as a WallpaperUpdateError.

subprocess.run is patched in every test that would otherwise run a real command, so the
desktop is never touched.

*** Fixtures ***
- image_dir (defined in conftest.py)
"""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

# following entities are tested in this module:
from wallsplash.wallpaper_handler import build_command
from wallsplash.wallpaper_handler import update_wallpaper
from wallsplash.wallpaper_handler import WallpaperUpdateError


@pytest.fixture
def test_image(image_dir) -> Path:
    return image_dir / "mountain.jpg"


@patch("wallsplash.wallpaper_handler.subprocess.run", autospec=True)
def test_update_wallpaper_default_command(fake_run, test_image):

    update_wallpaper(test_image)

    fake_run.assert_called_once()
    assert fake_run.call_args.args[0] == ["feh", "--bg-fill", str(test_image.resolve())]
    assert fake_run.call_args.kwargs["check"] is True


@patch("wallsplash.wallpaper_handler.subprocess.run", autospec=True)
def test_update_wallpaper_custom_command(fake_run, test_image):

    update_wallpaper(
        test_image, command="gsettings set org.gnome.desktop.background picture-uri"
    )

    assert fake_run.call_args.args[0] == [
        "gsettings",
        "set",
        "org.gnome.desktop.background",
        "picture-uri",
        str(test_image.resolve()),
    ]


def test_build_command_quoted_arguments(test_image):

    assert build_command(test_image, "'/opt/my tools/setbg' --mode \"fill screen\"") == [
        "/opt/my tools/setbg",
        "--mode",
        "fill screen",
        str(test_image),
    ]


@pytest.mark.parametrize("command", ["", "   "])
def test_build_command_empty(test_image, command):

    with pytest.raises(WallpaperUpdateError):
        build_command(test_image, command)


@pytest.mark.parametrize(
    "img_path",
    [
        "/not/a/real/absolute/path.jpg",
        "relative/missing.jpg",
    ],
)
@patch("wallsplash.wallpaper_handler.subprocess.run", autospec=True)
def test_update_wallpaper_missing_file(fake_run, img_path):

    with pytest.raises(WallpaperUpdateError):
        update_wallpaper(Path(img_path))

    fake_run.assert_not_called()


@patch("wallsplash.wallpaper_handler.subprocess.run", autospec=True)
def test_update_wallpaper_directory(fake_run, image_dir):

    with pytest.raises(WallpaperUpdateError):
        update_wallpaper(image_dir)

    fake_run.assert_not_called()


@patch("wallsplash.wallpaper_handler.subprocess.run", autospec=True)
def test_update_wallpaper_subprocess_failure(fake_run, test_image):

    fake_run.side_effect = subprocess.CalledProcessError(
        cmd="feh", returncode=1, stderr="feh: can't open X display"
    )

    with pytest.raises(WallpaperUpdateError) as error:
        update_wallpaper(test_image)

    assert "X display" in str(error.value)


@patch("wallsplash.wallpaper_handler.subprocess.run", autospec=True)
def test_update_wallpaper_command_not_found(fake_run, test_image):

    fake_run.side_effect = FileNotFoundError(2, "No such file or directory", "feh")

    with pytest.raises(WallpaperUpdateError):
        update_wallpaper(test_image)
