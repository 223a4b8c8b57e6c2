"""File copies and handing files over to the platform's file manager."""

import logging
import os
import platform
import shutil
import subprocess

from sramcompare.errors import ExportError

log = logging.getLogger(__name__)


def open_file(path):
    """Open `path` with its default application. Returns False if it is missing."""
    if not os.path.exists(path):
        return False
    path = os.path.abspath(path)
    system = platform.system()
    log.debug("opening %s (%s)", path, system)
    if system == "Windows":
        os.startfile(path)
    elif system == "Darwin":
        subprocess.Popen(["open", path])
    else:
        subprocess.Popen(["xdg-open", path])
    return True


def select_file(path):
    """Reveal `path` in the file manager. Returns False if it is missing."""
    if not os.path.exists(path):
        return False
    path = os.path.abspath(path)
    system = platform.system()
    log.debug("selecting %s (%s)", path, system)
    if system == "Windows":
        subprocess.Popen(["explorer.exe", f"/select,{path}"])
    elif system == "Darwin":
        subprocess.Popen(["open", "-R", path])
    else:
        # no portable "select" on Linux file managers; show the folder
        subprocess.Popen(["xdg-open", os.path.dirname(path)])
    return True


def copy_file(source, target):
    """Copy `source` over `target`; failures carry the target path."""
    try:
        shutil.copyfile(source, target)
    except OSError as e:
        raise ExportError(target, e) from e
    log.debug("copied %s -> %s", source, target)
    return target
