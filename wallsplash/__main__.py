"""
__main__.py

This file adds support for running wallsplash as a python module instead of invoking the
"wallsplash" command line entrypoint.
"""


from wallsplash.cli import main


if __name__ == "__main__":
    main()
