"""
Table-driven save layouts.

A SlotLayout describes where the slots live inside a raw save and which
named buffers each slot (and the file around the slots) is made of. Two
layouts ship with the tool:

  generic     whole file split into 4 equal slots, one buffer per slot
  checksum16  like generic, but the last 2 bytes of each slot hold a
              little-endian 16-bit sum of the other slot bytes
"""

import dataclasses
import logging

from sramcompare.flags import ComparisonFlags
from sramcompare.game import Buffer, GameComparer, SaveFile, SaveSlot

log = logging.getLogger(__name__)

DEFAULT_LAYOUT = "generic"


@dataclasses.dataclass(frozen=True)
class SlotLayout:
    name: str
    slot_count: int = 4
    slot_offset: int = 0
    slot_size: int = None  # None: fill the file after slot_offset
    header_buffers: tuple = ()  # (name, offset, size) relative to the file
    slot_buffers: tuple = ()  # (name, offset, size) relative to the slot; empty = whole slot
    checksum_offset: int = None  # relative to the slot, 16-bit little-endian
    offset_names: tuple = ()  # (offset, label) relative to the slot

    def resolve_slot_size(self, file_size):
        if self.slot_size is not None:
            return self.slot_size
        return (file_size - self.slot_offset) // self.slot_count


LAYOUTS = {}


def register_layout(layout):
    LAYOUTS[layout.name] = layout
    return layout


def get_layout(name):
    try:
        return LAYOUTS[name or DEFAULT_LAYOUT]
    except KeyError:
        raise ValueError(f"Unknown save layout: {name!r} (known: {', '.join(sorted(LAYOUTS))})") from None


register_layout(SlotLayout(DEFAULT_LAYOUT))
register_layout(SlotLayout("checksum16", checksum_offset=-2, offset_names=((-2, "checksum"), (-1, "checksum"))))


def slot_checksum(data):
    """Sum of all slot bytes except the trailing checksum word, mod 0x10000."""
    return sum(data[:-2]) & 0xFFFF


class LayoutSaveFile(SaveFile):
    """A raw save parsed according to a SlotLayout."""

    def __init__(self, data, layout, region=None):
        self.data = bytearray(data)
        self.layout = layout
        self.region = region
        self.slot_size = layout.resolve_slot_size(len(self.data))
        end = layout.slot_offset + self.slot_size * layout.slot_count
        if self.slot_size <= 0 or end > len(self.data):
            raise ValueError(f"File of {len(self.data)} bytes is too small for layout {layout.name!r}")

    @classmethod
    def from_stream(cls, stream, layout, region=None):
        return cls(stream.read(), layout, region)

    # ── Slots ───────────────────────────────────────────────────────────────

    def slot_start(self, slot_index):
        return self.layout.slot_offset + slot_index * self.slot_size

    def slot_data(self, slot_index):
        start = self.slot_start(slot_index)
        return bytes(self.data[start:start + self.slot_size])

    def _resolve(self, offset):
        return offset + self.slot_size if offset < 0 else offset

    @property
    def slots(self):
        names = {self._resolve(o): label for o, label in self.layout.offset_names}
        result = []
        for index in range(self.layout.slot_count):
            data = self.slot_data(index)
            specs = self.layout.slot_buffers or (("data", 0, self.slot_size),)
            buffers = []
            for name, offset, size in specs:
                labels = {o - offset: label for o, label in names.items() if offset <= o < offset + size}
                buffers.append(Buffer(name, offset, data[offset:offset + size], labels))
            result.append(SaveSlot(index, self.slot_start(index), buffers, self.is_slot_valid(index)))
        return result

    @property
    def non_slot_buffers(self):
        return [Buffer(name, offset, bytes(self.data[offset:offset + size]))
                for name, offset, size in self.layout.header_buffers]

    @property
    def has_validation(self):
        return self.layout.checksum_offset is not None

    def is_slot_valid(self, slot_index):
        if not self.has_validation:
            return True
        data = self.slot_data(slot_index)
        offset = self._resolve(self.layout.checksum_offset)
        stored = int.from_bytes(data[offset:offset + 2], "little")
        return stored == slot_checksum(data)

    # ── Offsets ─────────────────────────────────────────────────────────────

    def _check_offset(self, slot_index, offset, size=1):
        if not 0 <= slot_index < self.layout.slot_count:
            raise IndexError(f"Save slot index {slot_index} out of range")
        if offset < 0 or offset + size > self.slot_size:
            raise IndexError(f"Offset {offset} (+{size}) outside slot of {self.slot_size} bytes")

    def get_offset_byte(self, slot_index, offset):
        self._check_offset(slot_index, offset)
        return self.data[self.slot_start(slot_index) + offset]

    def set_offset_bytes(self, slot_index, offset, data):
        self._check_offset(slot_index, offset, len(data))
        start = self.slot_start(slot_index) + offset
        self.data[start:start + len(data)] = data
        log.debug("slot %d offset %d <- %s", slot_index + 1, offset, bytes(data).hex())

    def raw_save(self, path):
        with open(path, "wb") as f:
            f.write(self.data)


class LayoutComparer(GameComparer):
    """Compares two LayoutSaveFiles buffer by buffer."""

    def compare_file(self, curr_file, comp_file, options):
        total = 0
        non_slot_mode = self.non_slot_byte_mode(options)
        pairs = zip(curr_file.non_slot_buffers, comp_file.non_slot_buffers)
        for curr, comp in pairs:
            total += self.compare_buffer(curr, comp, non_slot_mode)

        show_status = curr_file.has_validation and not (
            options.comparison_flags & ComparisonFlags.HideValidationStatus)
        for curr_slot, comp_slot in self.slot_pairs(curr_file, comp_file, options):
            title = curr_slot.name
            if comp_slot.index != curr_slot.index:
                title += f" vs {comp_slot.name}"
            if self.printer is not None:
                self.printer.print_slot_header(title)
                if show_status:
                    self.printer.print_validation_status("current", curr_slot.valid)
                    self.printer.print_validation_status("comparison", comp_slot.valid)

            changed = self.compare_slot(curr_slot, comp_slot, options)
            if self.printer is not None:
                self.printer.print_slot_summary(title, changed)
            total += changed
        return total

    def compare_slot(self, curr_slot, comp_slot, options):
        byte_mode = self.slot_byte_mode(options)
        changed = 0
        for curr, comp in zip(curr_slot.buffers, comp_slot.buffers):
            changed += self.compare_buffer(curr, comp, byte_mode)
        return changed


def create_save_file(stream, layout=None, region=None):
    """Parse a raw save stream with the named layout."""
    return LayoutSaveFile.from_stream(stream, get_layout(layout), region)
