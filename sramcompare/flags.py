"""
Bitmask flags and the shared toggle/report helpers.

All three flag sets are IntFlags so they round-trip through ints as well as
through their member names (which is what the config file stores).
"""

import enum
import logging
import re

log = logging.getLogger(__name__)


class ComparisonFlags(enum.IntFlag):
    """Controls comparison granularity and what gets reported."""
    HideValidationStatus = 0x1
    SlotByteByByteComparison = 0x2
    NonSlotByteByByteComparison = 0x4


class ExportFlags(enum.IntFlag):
    """Side effects applied after an export was written."""
    OpenFile = 0x1
    SelectFile = 0x2
    PromptName = 0x4
    OverwriteComp = 0x8
    DeleteComp = 0x10
    AppendLog = 0x20


class LogFlags(enum.IntFlag):
    """Which reports are also appended to the application log file."""
    Export = 0x1
    Comparison = 0x2


_SEPARATORS = re.compile(r"[,|\s]+")


def _single_bit_members(flag_type):
    return [m for m in flag_type.__members__.values() if m.value and m.value & (m.value - 1) == 0]


def all_flags(flag_type):
    """Return the flag set with every member enabled."""
    value = 0
    for member in _single_bit_members(flag_type):
        value |= member.value
    return flag_type(value)


def active_flags(flags):
    """Names of the members set in `flags`, in declaration order."""
    return [m.name for m in _single_bit_members(type(flags)) if flags & m]


def invert_flag(flags, flag, printer=None):
    """Flip `flag` inside `flags` and return the new set.

    The flipped flag's new state and the full active list are reported
    through `printer` when one is given.
    """
    flag_type = type(flags)
    flag = flag_type(flag)
    result = flag_type(flags ^ flag)
    log.debug("inverted %s.%s -> %s", flag_type.__name__, flag.name, active_flags(result))
    if printer is not None:
        printer.print_invert_flag(result, flag)
    return result


def flags_from_names(flag_type, names):
    """Build a flag set from an iterable of member names (case-insensitive)."""
    lookup = {m.name.lower(): m for m in _single_bit_members(flag_type)}
    value = flag_type(0)
    for name in names:
        member = lookup.get(str(name).strip().lower())
        if member is None:
            raise ValueError(f"Unknown {flag_type.__name__} flag: {name!r}")
        value |= member
    return value


def parse_flags(flag_type, text):
    """Parse operator input into a flag set.

    Accepts member names separated by commas, pipes or whitespace, or a
    plain integer. An empty string clears every flag.
    """
    text = (text or "").strip()
    if not text:
        return flag_type(0)
    if text.isdigit():
        value = int(text)
        if value & ~all_flags(flag_type).value:
            raise ValueError(f"Invalid {flag_type.__name__} value: {value}")
        return flag_type(value)
    names = [t for t in _SEPARATORS.split(text) if t]
    return flags_from_names(flag_type, names)
