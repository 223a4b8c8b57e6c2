"""
Console printer used for every piece of user-facing output.

Everything the engine, the comparers and the command handler show goes
through a ConsolePrinter, so an export can capture a comparison by pointing
the printer at another stream for a while.
"""

import contextlib
import dataclasses
import enum
import logging
import os
import sys

from sramcompare import resources as res
from sramcompare.flags import active_flags

log = logging.getLogger(__name__)

INDENT = " " * 6
SECTION_WIDTH = 60
OFFSET_NAME_WIDTH = 28


def format_value(value, width=1):
    """Hex, decimal and binary form of a byte (width 1) or word (width 2)."""
    digits = width * 2
    return f"0x{value:0{digits}X} ({value:>{3 if width == 1 else 5}}) {value:0{width * 8}b}"


def byte_representations(value):
    return f"{value} | 0x{value:02X} | {value:08b}"


class ConsolePrinter:
    """Plain text printer writing to `out` (stdout by default)."""

    def __init__(self, out=None):
        self._out = out
        self.language = None

    @property
    def out(self):
        return self._out if self._out is not None else sys.stdout

    # ── Scoped state ────────────────────────────────────────────────────────

    @contextlib.contextmanager
    def redirect(self, stream):
        """Send output to `stream` until the block exits. None keeps the current one."""
        previous = self._out
        if stream is not None:
            self._out = stream
        try:
            yield self
        finally:
            self._out = previous

    @contextlib.contextmanager
    def scoped_language(self, language, restore_to=None):
        """Switch the active language for the block, then restore `restore_to`."""
        self.language = language or "en"
        log.debug("language switched to %s", self.language)
        try:
            yield self
        finally:
            self.language = restore_to

    # ── Basic output ────────────────────────────────────────────────────────

    def print(self, text=""):
        self.out.write(text)

    def print_line(self, text=""):
        print(text, file=self.out)

    def print_error(self, error):
        message = str(error) if isinstance(error, BaseException) else error
        print(f"Error: {message}", file=self.out)

    def print_fatal_error(self, message):
        print("=" * SECTION_WIDTH, file=self.out)
        print(f"  FATAL: {message}", file=self.out)
        print("=" * SECTION_WIDTH, file=self.out)

    def print_section_header(self):
        print("\n" + "-" * SECTION_WIDTH, file=self.out)

    def clear(self):
        if self.out.isatty():
            os.system("cls" if os.name == "nt" else "clear")

    # ── Session info ────────────────────────────────────────────────────────

    def print_start_message(self):
        self.print_line()
        self.print_line(res.START_MESSAGE)

    def print_settings(self, options):
        self.print_line("=" * SECTION_WIDTH)
        self.print_line(f"  {res.APP_TITLE}")
        self.print_line("=" * SECTION_WIDTH)
        self.print_config(options)

    def print_config(self, options):
        for field in dataclasses.fields(options):
            value = getattr(options, field.name)
            if isinstance(value, enum.Flag):
                value = ", ".join(active_flags(value)) or "-"
            elif value is None:
                value = "-"
            self.print_line(f"  {field.name:28s} {value}")

    def print_commands(self, commands):
        self.print_section_header()
        self.print_line("Commands:")
        for name, alias in commands:
            shortcut = f"({alias})" if alias else ""
            self.print_line(f"  {name:22s} {shortcut}")
        self.print_line("  ?                      (Help)")

    def print_guide(self, name):
        self.print_section_header()
        self.print_line(res.GUIDES[name])

    # ── Flags ───────────────────────────────────────────────────────────────

    def print_flags(self, flags):
        self.print_line(f"{type(flags).__name__}:")
        for member in type(flags).__members__.values():
            mark = "x" if flags & member else " "
            self.print_line(f"  [{mark}] {member.name} ({member.value})")

    def print_invert_flag(self, flags, flag):
        state = "on" if flags & flag else "off"
        self.print_line(res.STATUS_FLAG_INVERTED.format(flag.name, state))
        self.print_line(res.STATUS_ACTIVE_FLAGS.format(", ".join(active_flags(flags)) or "-"))

    # ── Comparison output ───────────────────────────────────────────────────

    def print_buffer_info(self, name, offset, size):
        self.print_line(f"  {name} [offset 0x{offset:X}, {size} byte(s)]")

    def print_comparison(self, offset, offset_name, curr, comp, width=1):
        label = (offset_name or "").ljust(OFFSET_NAME_WIDTH) if offset_name else ""
        self.print_line(
            f"{INDENT}0x{offset:04X} ({offset:>5}) {label}"
            f"curr: {format_value(curr, width)}  comp: {format_value(comp, width)}"
        )

    def print_bytes_changed(self, count):
        self.print_line(INDENT + res.STATUS_BYTES_CHANGED.format(count))

    def print_slot_header(self, name):
        self.print_line()
        self.print_line(f"[ {name} ]")

    def print_slot_summary(self, name, count):
        self.print_line(f"  {res.STATUS_SLOT_SUMMARY.format(name, count)}")

    def print_validation_status(self, name, valid):
        self.print_line(f"  {name}: {'valid' if valid else 'INVALID'}")

    def print_total(self, count):
        self.print_line()
        self.print_line(res.STATUS_TOTAL_BYTES_CHANGED.format(count))
