"""Conversion of Unix-style paths to the host's style."""

import os


def os_path(path, windows=None):
    """Return ``path`` with ``/`` turned into ``\\`` on Windows.

    ``windows`` defaults to whether the running system is Windows.
    """
    if windows is None:
        windows = os.name == "nt"
    return path.replace("/", "\\") if windows else path