"""
Shared pytest fixtures for the sramcompare test suite.

Provides:
- 32-byte save files (4 slots of 8 bytes) with a .comp companion
- a CommandHandler wired to a StringIO printer and scripted input
"""

import io
import os
import sys

import pytest

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)

from sramcompare.commands import CommandHandler
from sramcompare.console import ConsolePrinter
from sramcompare.layout import LayoutComparer
from sramcompare.options import Options


class ScriptedInput:
    """Callable standing in for input(); raises EOFError when exhausted."""

    def __init__(self, lines=()):
        self.lines = list(lines)

    def feed(self, *lines):
        self.lines.extend(lines)

    def __call__(self, prompt=""):
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


# =============================================================================
# Save data
# =============================================================================


@pytest.fixture
def save_bytes():
    """32 bytes: slot 1 = 01..08, the other slots zero."""
    return bytes(range(1, 9)) + bytes(24)


@pytest.fixture
def srm_file(tmp_path, save_bytes):
    path = tmp_path / "game.srm"
    path.write_bytes(save_bytes)
    return str(path)


@pytest.fixture
def comp_file(srm_file, save_bytes):
    """Comparison file identical to the current one except offset 3 = 0xFF."""
    data = bytearray(save_bytes)
    data[3] = 0xFF
    path = srm_file + ".comp"
    with open(path, "wb") as f:
        f.write(data)
    return path


# =============================================================================
# Session
# =============================================================================


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def printer(output):
    return ConsolePrinter(output)


@pytest.fixture
def scripted_input():
    return ScriptedInput()


@pytest.fixture
def handler(tmp_path, printer, scripted_input):
    return CommandHandler(
        printer,
        LayoutComparer(),
        input_func=scripted_input,
        key_bindings_path=str(tmp_path / "KeyBindings.json"),
        default_config_path=str(tmp_path / "Config.json"),
        log_file=str(tmp_path / "Exports.log"),
    )


@pytest.fixture
def options(srm_file):
    return Options(current_file_path=srm_file)
