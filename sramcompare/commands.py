"""
Command handling for an interactive comparison session.

Commands are resolved in this order: exact canonical name, shortcut alias,
custom key binding (case-insensitive). Every command gets the session's
Options passed in; nothing is kept in globals.
"""

import contextlib
import enum
import io
import logging
import os
import re
import time

from sramcompare import resources as res
from sramcompare.config import (
    DEFAULT_CONFIG_FILE, DEFAULT_CONFIG_NAME, KEY_BINDINGS_FILE, KeyBindings,
    create_key_bindings_file, get_config_file_path, load_config, save_config,
)
from sramcompare.console import ConsolePrinter, byte_representations
from sramcompare.errors import CommandError, ExportError, OperationCancelled
from sramcompare.files import copy_file, open_file, select_file
from sramcompare.flags import ComparisonFlags, ExportFlags, LogFlags, active_flags, invert_flag, parse_flags
from sramcompare.layout import create_save_file
from sramcompare.options import (
    MANIPULATED_EXTENSION, SaveFileKind, generate_export_file_name, get_backup_file_path,
    get_comparison_file_path, get_file_path, is_editable_save, is_raw_save,
)
from sramcompare.savestate import convert_savestate

log = logging.getLogger(__name__)

MAX_SAVE_SLOT_ID = 4
EXPORT_LOG_FILE = "Exports.log"
LANGUAGE_TAG = re.compile(r"^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*$")


class Commands(enum.Enum):
    Help = "Help"
    Config = "Config"
    Compare = "Compare"
    Export = "Export"
    ExportFlags = "ExportFlags"
    Guide_Srm = "Guide_Srm"
    Guide_Savestate = "Guide_Savestate"
    HideValidationStatus = "HideValidationStatus"
    SlotByteComp = "SlotByteComp"
    NonSlotByteComp = "NonSlotByteComp"
    SetSlot = "SetSlot"
    SetSlot_Comp = "SetSlot_Comp"
    OverwriteComp = "OverwriteComp"
    Backup = "Backup"
    Restore = "Restore"
    Backup_Comp = "Backup_Comp"
    Restore_Comp = "Restore_Comp"
    Transfer = "Transfer"
    Offset = "Offset"
    EditOffset = "EditOffset"
    Lang = "Lang"
    Lang_Comp = "Lang_Comp"
    LoadConfig = "LoadConfig"
    SaveConfig = "SaveConfig"
    OpenConfig = "OpenConfig"
    AutoLoadOn = "AutoLoadOn"
    AutoLoadOff = "AutoLoadOff"
    CreateBindings = "CreateBindings"
    OpenBindings = "OpenBindings"
    Clear = "Clear"
    Quit = "Quit"


ALTERNATE_COMMANDS = {
    "h": Commands.Help,
    "c": Commands.Compare,
    "e": Commands.Export,
    "ef": Commands.ExportFlags,
    "gs": Commands.Guide_Srm,
    "gst": Commands.Guide_Savestate,
    "hvs": Commands.HideValidationStatus,
    "sbc": Commands.SlotByteComp,
    "nsbc": Commands.NonSlotByteComp,
    "ss": Commands.SetSlot,
    "ssc": Commands.SetSlot_Comp,
    "ow": Commands.OverwriteComp,
    "b": Commands.Backup,
    "r": Commands.Restore,
    "bc": Commands.Backup_Comp,
    "rc": Commands.Restore_Comp,
    "t": Commands.Transfer,
    "o": Commands.Offset,
    "eo": Commands.EditOffset,
    "l": Commands.Lang,
    "lc": Commands.Lang_Comp,
    "lcf": Commands.LoadConfig,
    "scf": Commands.SaveConfig,
    "ocf": Commands.OpenConfig,
    "alon": Commands.AutoLoadOn,
    "aloff": Commands.AutoLoadOff,
    "ckb": Commands.CreateBindings,
    "okb": Commands.OpenBindings,
    "cls": Commands.Clear,
    "q": Commands.Quit,
}

COMMAND_NAMES = [c.value for c in Commands]


def command_aliases():
    """(command name, shortcut) pairs in menu order."""
    shortcuts = {cmd: alias for alias, cmd in ALTERNATE_COMMANDS.items()}
    return [(cmd.value, shortcuts.get(cmd)) for cmd in Commands]


def value_to_bytes(value):
    """Smallest little-endian representation of `value`: 1, 2 or 4 bytes."""
    if value < 0:
        raise CommandError(res.ERROR_VALUE_TOO_LARGE.format(value))
    if value < 0x100:
        return value.to_bytes(1, "little")
    if value < 0x10000:
        return value.to_bytes(2, "little")
    if value <= 0xFFFFFFFF:
        return value.to_bytes(4, "little")
    raise CommandError(res.ERROR_VALUE_TOO_LARGE.format(value))


def parse_uint(text):
    """Unsigned decimal or 0x-hex number, None if the text is neither."""
    text = (text or "").strip()
    try:
        value = int(text, 16) if text.lower().startswith("0x") else int(text)
    except ValueError:
        return None
    return value if value >= 0 else None


class CommandHandler:
    """Runs single commands against a session's Options.

    Args:
        printer: ConsolePrinter for all output
        comparer: GameComparer; without one Compare/Export are unavailable
        file_factory: callable(stream, layout, region) -> SaveFile
        input_func: callable() -> str reading one line of operator input
    """

    def __init__(self, printer=None, comparer=None, file_factory=create_save_file, input_func=input,
                 key_bindings_path=KEY_BINDINGS_FILE, default_config_path=DEFAULT_CONFIG_FILE,
                 log_file=EXPORT_LOG_FILE):
        self.printer = printer or ConsolePrinter()
        self.comparer = comparer
        if comparer is not None and comparer.printer is None:
            comparer.printer = self.printer
        self.file_factory = file_factory
        self.input_func = input_func
        self.key_bindings = KeyBindings(key_bindings_path, COMMAND_NAMES)
        self.default_config_path = default_config_path
        self.log_file = log_file

        self.handlers = {
            Commands.Help: self.print_help,
            Commands.Config: self.printer.print_config,
            Commands.Compare: self.run_compare,
            Commands.Export: self.export_comparison_result,
            Commands.ExportFlags: self.set_export_flags,
            Commands.Guide_Srm: lambda options: self.printer.print_guide("guide-srm"),
            Commands.Guide_Savestate: lambda options: self.printer.print_guide("guide-savestate"),
            Commands.HideValidationStatus: lambda options: self.toggle_comparison_flag(
                options, ComparisonFlags.HideValidationStatus),
            Commands.SlotByteComp: lambda options: self.toggle_comparison_flag(
                options, ComparisonFlags.SlotByteByByteComparison),
            Commands.NonSlotByteComp: lambda options: self.toggle_comparison_flag(
                options, ComparisonFlags.NonSlotByteByByteComparison),
            Commands.SetSlot: self.set_current_slot,
            Commands.SetSlot_Comp: self.set_comparison_slot,
            Commands.OverwriteComp: self.overwrite_comparison_file,
            Commands.Backup: lambda options: self.backup_save_file(options, SaveFileKind.CurrentFile),
            Commands.Restore: lambda options: self.backup_save_file(options, SaveFileKind.CurrentFile, True),
            Commands.Backup_Comp: lambda options: self.backup_save_file(options, SaveFileKind.ComparisonFile),
            Commands.Restore_Comp: lambda options: self.backup_save_file(
                options, SaveFileKind.ComparisonFile, True),
            Commands.Transfer: self.transfer_to_other_file,
            Commands.Offset: self.print_offset_value,
            Commands.EditOffset: self.save_offset_value,
            Commands.Lang: self.set_ui_language,
            Commands.Lang_Comp: self.set_comparison_language,
            Commands.LoadConfig: lambda options: self.load_config(options, self.get_config_name()),
            Commands.SaveConfig: lambda options: self.save_config(options, self.get_config_name()),
            Commands.OpenConfig: lambda options: self.open_config(options, self.get_config_name()),
            Commands.AutoLoadOn: self.auto_load_on,
            Commands.AutoLoadOff: self.auto_load_off,
            Commands.CreateBindings: self.create_key_bindings,
            Commands.OpenBindings: self.open_key_bindings,
            Commands.Clear: lambda options: self.printer.clear(),
        }

    # ── Dispatch ────────────────────────────────────────────────────────────

    def run_command(self, command, options, output=None):
        """Run one command. Returns False when the session should end."""
        with self.printer.redirect(output):
            if not options.current_file_path:
                self.printer.print_fatal_error(res.ERROR_MISSING_PATH_ARGUMENTS)
                return True
            return self.on_run_command(command, options)

    def resolve_command(self, command):
        """Map operator input to a Commands member, or None."""
        command = command.strip()
        if command == "?":
            return Commands.Help
        if command in Commands.__members__:
            return Commands[command]

        lowered = command.lower()
        if lowered in ALTERNATE_COMMANDS:
            return ALTERNATE_COMMANDS[lowered]

        bound = self.key_bindings.lookup(command)
        if bound is not None:
            return Commands[bound]

        for cmd in Commands:
            if cmd.value.lower() == lowered:
                return cmd
        return None

    def on_run_command(self, command, options):
        if not command or not command.strip():
            return True

        cmd = self.resolve_command(command)
        log.debug("command %r -> %s", command, cmd)
        if cmd is None:
            self.printer.print_commands(command_aliases())
            self.printer.print_error(res.ERROR_NO_VALID_COMMAND.format(command.strip(), Commands.Help.value))
            return True
        if cmd is Commands.Quit:
            return False

        self.handlers[cmd](options)
        return True

    def print_help(self, options):
        self.printer.print_commands(command_aliases())

    # ── Prompts ─────────────────────────────────────────────────────────────

    def prompt(self, text, result_template=None):
        self.printer.print_line(text)
        value = self.input_func().strip()
        if result_template is not None:
            self.printer.print_line(result_template.format(value))
        return value

    def prompt_uint(self, text, result_template):
        value = parse_uint(self.prompt(text))
        if value is not None:
            self.printer.print_line(result_template.format(value))
        return value

    def get_save_slot_id(self, max_slot_id=MAX_SAVE_SLOT_ID):
        """Ask for a 1-based slot id. None means all slots."""
        self.printer.print_section_header()
        slot_id = parse_uint(self.prompt(res.PROMPT_SET_SAVE_SLOT.format(max_slot_id)))
        if slot_id is not None and slot_id > max_slot_id:
            self.printer.print_error(res.ERROR_INVALID_INDEX)
            slot_id = None
        if slot_id:
            self.printer.print_line(res.STATUS_SINGLE_SLOT.format(slot_id))
            return slot_id
        self.printer.print_line(res.STATUS_ALL_SLOTS)
        return None

    def get_offset(self, max_slot_id=MAX_SAVE_SLOT_ID):
        """Ask for slot id and offset. Returns (slot_index, offset) or None if aborted."""
        slot_id = parse_uint(self.prompt(res.PROMPT_SET_SINGLE_SAVE_SLOT.format(max_slot_id)))
        if slot_id is None or slot_id > max_slot_id:
            self.printer.print_error(res.ERROR_INVALID_INDEX)
            return None
        if slot_id == 0:
            return None
        offset = self.prompt_uint(res.PROMPT_ENTER_OFFSET.format(slot_id), res.STATUS_OFFSET_WILL_BE_USED)
        if offset is None:
            self.printer.print_error(res.ERROR_INVALID_INDEX)
            return None
        return slot_id - 1, offset

    def get_config_name(self):
        self.printer.print_section_header()
        return self.prompt(res.PROMPT_ENTER_CONFIG_NAME) or None

    # ── Compare ─────────────────────────────────────────────────────────────

    def _require_comparer(self, command):
        if self.comparer is None:
            raise NotImplementedError(res.ERROR_COMMAND_NOT_IMPLEMENTED.format(command))

    def convert_if_savestate(self, stream, file_path, savestate_type):
        """Return a raw save stream for `file_path`, converting savestates."""
        if is_raw_save(file_path):
            return stream
        log.debug("converting %s as %s savestate", file_path, savestate_type)
        return convert_savestate(stream, savestate_type)

    def compare_streams(self, curr_stream, comp_stream, options):
        """Compare two already opened streams. Returns the changed byte count."""
        self._require_comparer(Commands.Compare.value)
        curr_stream = self.convert_if_savestate(curr_stream, options.current_file_path, options.savestate_type)
        comp_stream = self.convert_if_savestate(comp_stream, get_comparison_file_path(options),
                                                options.savestate_type)
        curr_file = self.file_factory(curr_stream, options.layout, options.game_region)
        comp_file = self.file_factory(comp_stream, options.layout, options.game_region)

        with self.printer.scoped_language(options.comparison_result_language, options.ui_language):
            total = self.comparer.compare_file(curr_file, comp_file, options)
        self.printer.print_total(total)
        return total

    def compare(self, options, output=None):
        """Compare the current file with its comparison file."""
        self._require_comparer(Commands.Compare.value)
        curr_path = options.current_file_path
        comp_path = get_comparison_file_path(options)
        if not os.path.isfile(curr_path):
            raise CommandError(res.ERROR_CURRENT_FILE_MISSING.format(curr_path))
        if not os.path.isfile(comp_path):
            raise CommandError(res.ERROR_COMPARISON_FILE_MISSING.format(comp_path))

        with self.printer.redirect(output), contextlib.ExitStack() as stack:
            curr_stream = stack.enter_context(open(curr_path, "rb"))
            comp_stream = stack.enter_context(open(comp_path, "rb"))
            return self.compare_streams(curr_stream, comp_stream, options)

    def capture_comparison(self, options):
        """Run a comparison into a buffer. Returns (report text, changed bytes)."""
        buffer = io.StringIO()
        total = self.compare(options, output=buffer)
        return buffer.getvalue(), total

    def run_compare(self, options):
        self._require_comparer(Commands.Compare.value)
        self.printer.print_section_header()
        report, total = self.capture_comparison(options)
        self.printer.print(report)
        if options.log_flags & LogFlags.Comparison:
            self.append_to_log(self.format_report(options, report, total))
        return total

    # ── Export ──────────────────────────────────────────────────────────────

    def get_export_file_path(self, options):
        """Where an export goes: explicit file, prompted name, or generated name."""
        export_dir = options.export_directory
        if export_dir and os.path.splitext(export_dir)[1]:
            return export_dir

        file_name = None
        if options.export_flags & ExportFlags.PromptName:
            file_name = self.prompt(res.PROMPT_ENTER_EXPORT_FILE_NAME)
            if file_name and not os.path.splitext(file_name)[1]:
                file_name += ".txt"
        if not file_name:
            file_name = generate_export_file_name(options.current_file_path)

        directory = export_dir or os.path.dirname(os.path.abspath(options.current_file_path))
        return os.path.join(directory, file_name)

    def format_report(self, options, report, total):
        curr_slot = options.current_file_slot or "all"
        comp_slot = options.comparison_file_slot or options.current_file_slot or "all"
        header = [
            "=" * 60,
            f"  {time.strftime('%Y-%m-%d %H:%M:%S')}",
            f"  Current file:    {options.current_file_path} (slot: {curr_slot})",
            f"  Comparison file: {get_comparison_file_path(options)} (slot: {comp_slot})",
            f"  Changed bytes:   {total}",
            "=" * 60,
        ]
        return "\n".join(header) + "\n" + report + "\n"

    def export_comparison_result(self, options):
        """Export the comparison to a file derived from the options. Returns its path."""
        self._require_comparer(Commands.Export.value)
        file_path = self.get_export_file_path(options)
        self.export_to(options, file_path)
        return file_path

    def export_to(self, options, file_path):
        """Append a comparison report to `file_path` and apply the export flags."""
        self._require_comparer(Commands.Export.value)
        flags = options.export_flags
        old_language = options.comparison_result_language
        options.comparison_result_language = "en"

        try:
            report, total = self.capture_comparison(options)
            text = self.format_report(options, report, total)

            directory = os.path.dirname(os.path.abspath(file_path))
            os.makedirs(directory, exist_ok=True)
            with open(file_path, "a", encoding="utf-8") as f:
                f.write(text)
            if flags & ExportFlags.AppendLog or options.log_flags & LogFlags.Export:
                self.append_to_log(text)

            self.printer.print_line()
            self.printer.print_line(res.STATUS_EXPORTED.format(file_path))

            comp_path = get_comparison_file_path(options)
            if flags & ExportFlags.DeleteComp:
                os.remove(comp_path)
                self.printer.print_line(res.STATUS_COMP_FILE_DELETED)
            elif flags & ExportFlags.OverwriteComp:
                copy_file(options.current_file_path, comp_path)
                self.printer.print_line(res.STATUS_COMP_FILE_OVERWRITTEN)

            if flags & ExportFlags.SelectFile:
                select_file(file_path)
            elif flags & ExportFlags.OpenFile:
                open_file(file_path)
        except OSError as e:
            raise ExportError(file_path, e) from e
        finally:
            options.comparison_result_language = old_language
        return total

    def append_to_log(self, text):
        try:
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise ExportError(self.log_file, e) from e

    def set_export_flags(self, options):
        self.printer.print_section_header()
        self.printer.print_flags(options.export_flags)
        text = self.prompt(res.PROMPT_ENTER_FLAGS)
        try:
            options.export_flags = parse_flags(ExportFlags, text)
        except ValueError as e:
            raise CommandError(f"{res.ERROR_INVALID_FLAGS} {text}") from e
        self.printer.print_line(res.STATUS_EXPORT_FLAGS_SET.format(
            ", ".join(active_flags(options.export_flags)) or "-"))

    # ── Flags / slots ───────────────────────────────────────────────────────

    def toggle_comparison_flag(self, options, flag):
        options.comparison_flags = invert_flag(options.comparison_flags, flag, self.printer)

    def set_current_slot(self, options):
        options.current_file_slot = self.get_save_slot_id()
        if not options.current_file_slot:
            options.comparison_file_slot = None

    def set_comparison_slot(self, options):
        if not options.current_file_slot:
            self.printer.print_error(res.ERROR_COMP_SLOT_WITHOUT_CURR_SLOT)
            return
        options.comparison_file_slot = self.get_save_slot_id()

    # ── Offsets ─────────────────────────────────────────────────────────────

    def _load_save_file(self, options, stream):
        stream = self.convert_if_savestate(stream, options.current_file_path, options.savestate_type)
        return self.file_factory(stream, options.layout, options.game_region)

    def _require_current_file(self, options):
        if not os.path.isfile(options.current_file_path):
            raise CommandError(res.ERROR_CURRENT_FILE_MISSING.format(options.current_file_path))

    def print_offset_value(self, options):
        self._require_current_file(options)
        with open(options.current_file_path, "rb") as f:
            save_file = self._load_save_file(options, f)

        location = self.get_offset()
        if location is None:
            self.printer.print_error(res.ERROR_OPERATION_ABORTED)
            return None
        slot_index, offset = location

        try:
            value = save_file.get_offset_byte(slot_index, offset)
        except IndexError as e:
            raise CommandError(str(e)) from e
        self.printer.print_line(res.STATUS_GET_OFFSET_VALUE.format(offset, byte_representations(value)))
        return value

    def save_offset_value(self, options):
        self._require_current_file(options)
        file_path = options.current_file_path
        if not is_editable_save(file_path):
            raise CommandError(res.ERROR_SAVESTATE_OFFSET_EDIT)

        location = self.get_offset()
        if location is None:
            self.printer.print_error(res.ERROR_OPERATION_ABORTED)
            return None
        slot_index, offset = location

        value = self.prompt_uint(res.PROMPT_ENTER_OFFSET_VALUE, res.STATUS_VALUE_WILL_BE_USED)
        if value is None:
            self.printer.print_error(res.ERROR_OPERATION_ABORTED)
            return None
        data = value_to_bytes(value)

        choice = self.prompt(res.PROMPT_CREATE_NEW_FILE)
        if choice == "1":
            target = file_path + MANIPULATED_EXTENSION
        elif choice == "2":
            target = file_path
        else:
            raise OperationCancelled(res.ERROR_OPERATION_ABORTED)

        with open(file_path, "rb") as f:
            save_file = self.file_factory(f, options.layout, options.game_region)
        try:
            save_file.set_offset_bytes(slot_index, offset, data)
        except IndexError as e:
            raise CommandError(str(e)) from e
        save_file.raw_save(target)

        self.printer.print_line(res.STATUS_SET_OFFSET_VALUE.format(value, offset))
        name = os.path.basename(target)
        if target == file_path:
            self.printer.print_line(res.STATUS_MODIFIED_FILE_OVERWRITTEN.format(name))
        else:
            self.printer.print_line(res.STATUS_MODIFIED_FILE_SAVED_AS.format(name))
        return target

    # ── File operations ─────────────────────────────────────────────────────

    def overwrite_comparison_file(self, options):
        self.printer.print_section_header()
        self._require_current_file(options)
        copy_file(options.current_file_path, get_comparison_file_path(options))
        self.printer.print_line(res.STATUS_CURRENT_FILE_SAVED)

    def backup_save_file(self, options, kind, restore=False):
        """Copy a save file to <path>.backup, or back again when restoring."""
        file_path = get_file_path(options, kind)
        backup_path = get_backup_file_path(file_path)
        self.printer.print_section_header()

        if restore:
            if not os.path.isfile(backup_path):
                raise CommandError(res.ERROR_BACKUP_FILE_MISSING.format(backup_path))
            copy_file(backup_path, file_path)
            self.printer.print_line(res.STATUS_FILE_RESTORED.format(kind.value))
        else:
            if not os.path.isfile(file_path):
                raise CommandError(res.ERROR_SAVE_FILE_MISSING.format(kind.value.capitalize(), file_path))
            copy_file(file_path, backup_path)
            self.printer.print_line(res.STATUS_FILE_BACKED_UP.format(kind.value))
        log.debug("%s %s <-> %s", "restored" if restore else "backed up", file_path, backup_path)

    def transfer_to_other_file(self, options):
        """Copy the current file over another file with the same extension."""
        self.printer.print_section_header()
        current = os.path.abspath(options.current_file_path)
        directory = os.path.dirname(current)
        extension = os.path.splitext(current)[1]
        files = sorted(
            os.path.join(directory, name) for name in os.listdir(directory)
            if os.path.splitext(name)[1] == extension and os.path.join(directory, name) != current
        )
        if not files:
            self.printer.print_line(res.STATUS_NO_OTHER_FILES)
            return None

        self.printer.print_line(res.PROMPT_TRANSFER_INDEX.format(len(files) - 1))
        for i, path in enumerate(files):
            self.printer.print_line(f"  [{i}] {os.path.splitext(os.path.basename(path))[0]}")
        index = parse_uint(self.input_func())
        if index is None or index >= len(files):
            self.printer.print_error(res.ERROR_INVALID_INDEX)
            return None

        target = files[index]
        backup_path = get_backup_file_path(target)
        if not os.path.exists(backup_path):
            copy_file(target, backup_path)
            self.printer.print_line(res.STATUS_TARGET_BACKED_UP.format(os.path.basename(backup_path)))
        copy_file(current, target)
        self.printer.print_line(res.STATUS_CURR_FILE_SAVED_AS.format(os.path.basename(target)))
        return target

    # ── Language ────────────────────────────────────────────────────────────

    def _read_language(self, prompt):
        self.printer.print_section_header()
        tag = self.prompt(prompt)
        if tag and not LANGUAGE_TAG.match(tag):
            self.printer.print_error(res.ERROR_INVALID_LANGUAGE.format(tag))
            return False, None
        return True, tag or None

    def set_ui_language(self, options):
        ok, tag = self._read_language(res.PROMPT_SET_UI_LANGUAGE)
        if not ok:
            return
        options.ui_language = tag
        self.printer.language = tag
        self.printer.print_config(options)

    def set_comparison_language(self, options):
        ok, tag = self._read_language(res.PROMPT_SET_COMPARISON_LANGUAGE)
        if not ok:
            return
        options.comparison_result_language = tag
        self.printer.print_config(options)

    # ── Config ──────────────────────────────────────────────────────────────

    def save_config(self, options, config_name=None, path=None):
        path = path or get_config_file_path(options.config_file_path, config_name)
        save_config(options, path)
        self.printer.print_line(res.STATUS_CONFIG_SAVED.format(path))
        return path

    def load_config(self, options, config_name=None):
        path = get_config_file_path(options.config_file_path, config_name)
        if not os.path.isfile(path):
            raise CommandError(res.ERROR_CONFIG_FILE_MISSING.format(path))
        current = options.current_file_path
        load_config(path, options)
        if not options.current_file_path:
            options.current_file_path = current
        self.printer.print_line(res.STATUS_CONFIG_LOADED.format(path))
        self.printer.print_config(options)
        return path

    def open_config(self, options, config_name=None):
        path = get_config_file_path(options.config_file_path, config_name)
        if not os.path.isfile(path):
            raise CommandError(res.ERROR_CONFIG_FILE_MISSING.format(path))
        open_file(path)
        self.printer.print_line(res.STATUS_CONFIG_OPENED.format(path))

    def auto_load_on(self, options):
        name = self.get_config_name() or DEFAULT_CONFIG_NAME
        options.config_file_path = get_config_file_path(None, name)
        self.save_config(options, path=self.default_config_path)

    def auto_load_off(self, options):
        options.config_file_path = None
        self.save_config(options, path=self.default_config_path)

    # ── Key bindings ────────────────────────────────────────────────────────

    def create_key_bindings(self, options):
        path = os.path.abspath(self.key_bindings.path)
        create_key_bindings_file(path, COMMAND_NAMES)
        self.printer.print_line(res.STATUS_KEY_BINDINGS_SAVED.format(path))

    def open_key_bindings(self, options):
        path = os.path.abspath(self.key_bindings.path)
        if not os.path.isfile(path):
            raise CommandError(res.ERROR_KEY_BINDINGS_FILE_MISSING.format(path))
        open_file(path)
