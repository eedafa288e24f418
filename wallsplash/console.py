"""
wallsplash console utilities

This module provides application-wide access to a Rich Console object for handling
writing to stdout and stderr. Everything wallsplash reports, from the path shown on
each tick to the details of an Unsplash refresh, goes through the helpers below.
"""

from io import StringIO

from rich.console import Console
from rich.theme import Theme

wallsplash_theme = Theme(
    {
        "warning": "orange_red1",
        "fail": "bold red",
        "confirm": "",
        "describe": "",
        "log": "dim",
    }
)

console = Console(theme=wallsplash_theme)
error_console = Console(theme=wallsplash_theme, stderr=True)
log_console = Console(theme=wallsplash_theme, stderr=True)

_debug = False


def set_verbosity(verbosity: str):
    """
    Configure console output. "quiet" silences everything by redirecting the consoles to
    a junk buffer, "debug" additionally enables log() output. Anything else is the default
    verbose output.
    """

    global _debug

    if verbosity == "quiet":
        console.file = StringIO()
        error_console.file = StringIO()
        log_console.file = StringIO()

    _debug = verbosity == "debug"


"""
Formatting helpers
"""


def warn(msg: str):
    """
    Format msg and print to stderr.
    """

    error_console.print(
        f":exclamation_mark-emoji: [bold]warning: [/] {msg}", style="warning"
    )


def describe(msg: str, **kwargs):
    """
    Format descriptive msg and print to stdout.
    """

    console.print(f"{msg}", style="describe", **kwargs)


def confirm_success(msg: str, **kwargs):
    """
    Format confirmation msg and print to stdout. Accept any additional kwargs that console.print from
    rich module exposes.
    """

    console.print(f"{msg}", style="confirm", **kwargs)


def fail(msg: str):
    """
    Format failure msg and print to stderr.
    """

    error_console.print(f":x-emoji: failed. {msg}", style="fail")


def log(msg: str):
    """
    Print a timestamped debug line to stderr. Silent unless debug output was enabled.
    """

    if _debug:
        log_console.log(msg, style="log", _stack_offset=2)
