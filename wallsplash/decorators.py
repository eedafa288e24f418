"""
wallsplash Decorators

catch_errors wraps the CLI entry point so that anything going wrong before the rotator
starts (a missing token, an unreadable config file, a cache directory that can't be
created) is printed as a single failure line instead of a traceback.
"""

from sys import exit
from functools import wraps

from wallsplash.console import fail


def catch_errors(func):
    """
    Report any exception escaping func with the "fail" console template and exit with
    status 1. The rotator never lets an error escape, so in practice this only fires
    during startup.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as error:
            fail(str(error))
            exit(1)

    return wrapper
