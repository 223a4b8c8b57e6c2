"""
Save file and game comparer contracts.

A SaveFile is a raw save parsed into slots and named buffers. A
GameComparer walks two SaveFiles and feeds each buffer pair to the engine;
it is the only place that knows how a game lays out its data.
"""

import abc
import dataclasses
import logging

from sramcompare import engine
from sramcompare import resources as res
from sramcompare.errors import CommandError
from sramcompare.flags import ComparisonFlags

log = logging.getLogger(__name__)


@dataclasses.dataclass
class Buffer:
    """A named region of a slot (or of the file, for non-slot buffers)."""
    name: str
    offset: int
    data: bytes
    offset_names: dict = dataclasses.field(default_factory=dict)

    def offset_name(self, offset):
        return self.offset_names.get(offset)


@dataclasses.dataclass
class SaveSlot:
    index: int
    offset: int
    buffers: list
    valid: bool = True

    @property
    def name(self):
        return f"Save slot {self.index + 1}"


class SaveFile(abc.ABC):
    """A raw save split into slots and non-slot buffers."""

    @property
    @abc.abstractmethod
    def slots(self):
        """List of SaveSlot."""

    @property
    def slot_count(self):
        return len(self.slots)

    @property
    def non_slot_buffers(self):
        return []

    @property
    def has_validation(self):
        return False

    @abc.abstractmethod
    def get_offset_byte(self, slot_index, offset):
        """Byte at `offset` inside slot `slot_index` (0-based)."""

    @abc.abstractmethod
    def set_offset_bytes(self, slot_index, offset, data):
        """Overwrite bytes starting at `offset` inside slot `slot_index`."""

    @abc.abstractmethod
    def raw_save(self, path):
        """Write the (possibly modified) raw bytes to `path`."""


class GameComparer(abc.ABC):
    """Compares two SaveFiles of the same game."""

    def __init__(self, printer=None):
        self.printer = printer

    @abc.abstractmethod
    def compare_file(self, curr_file, comp_file, options):
        """Compare whole files. Returns the total number of changed bytes."""

    @abc.abstractmethod
    def compare_slot(self, curr_slot, comp_slot, options):
        """Compare one slot pair. Returns the number of changed bytes."""

    def slot_pairs(self, curr_file, comp_file, options):
        """Slot pairs selected by the options' slot selectors.

        No selector: every slot against its counterpart. Current selector
        only: that slot in both files. Both: exactly that pair.
        """
        curr_id = options.current_file_slot
        comp_id = options.comparison_file_slot

        if not curr_id:
            if comp_id:
                raise CommandError(res.ERROR_COMP_SLOT_WITHOUT_CURR_SLOT)
            return list(zip(curr_file.slots, comp_file.slots))

        comp_id = comp_id or curr_id
        for slot_id, save_file in ((curr_id, curr_file), (comp_id, comp_file)):
            if not 1 <= slot_id <= save_file.slot_count:
                raise CommandError(f"{res.ERROR_INVALID_INDEX} ({slot_id})")
        return [(curr_file.slots[curr_id - 1], comp_file.slots[comp_id - 1])]

    def compare_buffer(self, curr, comp, byte_by_byte):
        """Compare one buffer pair in byte-array or 16-bit word mode."""
        if byte_by_byte:
            return engine.compare_bytes(curr.name, curr.offset, curr.data, comp.data,
                                        self.printer, curr.offset_name)

        if len(curr.data) != len(comp.data):
            raise ValueError(f"Buffer {curr.name} differs in length")
        changed = 0
        size = len(curr.data)
        for i in range(0, size - 1, engine.WORD_SIZE):
            a = int.from_bytes(curr.data[i:i + 2], "little")
            b = int.from_bytes(comp.data[i:i + 2], "little")
            changed += engine.compare_word(curr.name, curr.offset + i, a, b, self.printer)
        if size % engine.WORD_SIZE:
            changed += engine.compare_byte(curr.name, curr.offset + size - 1,
                                           curr.data[-1], comp.data[-1], self.printer)
        return changed

    @staticmethod
    def slot_byte_mode(options):
        return bool(options.comparison_flags & ComparisonFlags.SlotByteByByteComparison)

    @staticmethod
    def non_slot_byte_mode(options):
        return bool(options.comparison_flags & ComparisonFlags.NonSlotByteByByteComparison)
