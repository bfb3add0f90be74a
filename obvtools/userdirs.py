"""Per-user configuration and data directories."""

from __future__ import annotations

import enum
import os

from obvtools.confparse import APP_NAME


class UserDir(enum.Enum):
    """Kind of per-user directory."""

    CONFIG = "config"
    DATA = "data"


def _create_dir(path: str) -> bool:
    if not os.path.exists(path):
        try:
            os.mkdir(path, 0o700)
        except OSError:
            pass
    return os.path.isdir(path)


def create_dirs(path: str) -> bool:
    """Create every directory along ``path`` up to its last ``/``.

    Returns True when all of them exist as directories afterwards.
    """
    pos = path.find("/", 1)
    while pos != -1:
        if not _create_dir(path[: pos + 1]):
            return False
        pos = path.find("/", pos + 1)
    return True


def get_user_dir(userdir: UserDir, app_name: str = APP_NAME) -> str:
    """Return the application's directory of the given kind, ending in ``/``.

    XDG_CONFIG_HOME or XDG_DATA_HOME is used when set, otherwise
    ``~/.config`` or ``~/.local/share``. The directory is created when
    missing; ``./`` is returned when that is not possible.
    """
    if userdir is UserDir.CONFIG:
        base = os.environ.get("XDG_CONFIG_HOME", "")
    else:
        base = os.environ.get("XDG_DATA_HOME", "")

    path = ""
    if not base:
        home = os.environ.get("HOME", "")
        if home:
            suffix = "/.config" if userdir is UserDir.CONFIG else "/.local/share"
            path = home + suffix
    else:
        path = base

    if path:
        path += f"/{app_name}/"
        if create_dirs(path):
            return path
    return "./"