"""English message templates and guide texts shown by the console."""

APP_TITLE = "SRAM Comparer"

START_MESSAGE = "Enter a command (? for help):"

# ── Errors ──────────────────────────────────────────────────────────────────

ERROR_MISSING_PATH_ARGUMENTS = "No current save file given. Start with: sramcompare <file.srm>"
ERROR_NO_VALID_COMMAND = "'{0}' is not a valid command. Type {1} or ? to list all commands."
ERROR_COMMAND_NOT_IMPLEMENTED = "Command '{0}' needs a game-specific comparer and is not available here."
ERROR_COMPARISON_FILE_MISSING = "Comparison file does not exist: {0}"
ERROR_CURRENT_FILE_MISSING = "Current file does not exist: {0}"
ERROR_SAVE_FILE_MISSING = "{0} does not exist: {1}"
ERROR_BACKUP_FILE_MISSING = "Backup file does not exist: {0}"
ERROR_COMP_SLOT_WITHOUT_CURR_SLOT = "Set a save slot for the current file first (SetSlot)."
ERROR_INVALID_INDEX = "Invalid index."
ERROR_INVALID_FLAGS = "Invalid flags:"
ERROR_INVALID_LANGUAGE = "Invalid language tag: {0}"
ERROR_OPERATION_ABORTED = "Operation aborted."
ERROR_SAVESTATE_OFFSET_EDIT = "Editing offsets is only supported for raw save files (.srm, .comp), not savestates."
ERROR_VALUE_TOO_LARGE = "Value {0} does not fit into 4 bytes."
ERROR_CONFIG_FILE_MISSING = "Config file does not exist: {0}"
ERROR_KEY_BINDINGS_FILE_MISSING = "Key bindings file does not exist: {0}"

# ── Prompts ─────────────────────────────────────────────────────────────────

PROMPT_SET_SAVE_SLOT = "Enter save slot to compare (1-{0}), 0 or nothing for all slots:"
PROMPT_SET_SINGLE_SAVE_SLOT = "Enter the save slot (1-{0}) of the offset, 0 to abort:"
PROMPT_ENTER_OFFSET = "Enter the offset inside save slot {0}:"
PROMPT_ENTER_OFFSET_VALUE = "Enter the new value for the offset:"
PROMPT_CREATE_NEW_FILE = "[1] Save as new file (.manipulated)  [2] Overwrite current file  [other] Cancel"
PROMPT_ENTER_EXPORT_FILE_NAME = "Enter a name for the export file (empty for an automatic name):"
PROMPT_ENTER_FLAGS = "Enter flags separated by commas (or a number), empty to clear:"
PROMPT_ENTER_CONFIG_NAME = "Enter config name (empty for default):"
PROMPT_SET_UI_LANGUAGE = "Enter UI language (e.g. en, de-DE), empty to reset:"
PROMPT_SET_COMPARISON_LANGUAGE = "Enter comparison result language (e.g. en, de-DE), empty to reset:"
PROMPT_TRANSFER_INDEX = "Enter the index of the file to overwrite (0-{0}):"

# ── Status ──────────────────────────────────────────────────────────────────

STATUS_SINGLE_SLOT = "Only save slot {0} will be compared."
STATUS_ALL_SLOTS = "All save slots will be compared."
STATUS_OFFSET_WILL_BE_USED = "Offset {0} will be used."
STATUS_VALUE_WILL_BE_USED = "Value {0} will be used."
STATUS_GET_OFFSET_VALUE = "Value at offset {0}: {1}"
STATUS_SET_OFFSET_VALUE = "Value {0} written to offset {1}."
STATUS_MODIFIED_FILE_SAVED_AS = "Modified file saved as {0}."
STATUS_MODIFIED_FILE_OVERWRITTEN = "{0} overwritten."
STATUS_CURRENT_FILE_SAVED = "Comparison file overwritten with current file."
STATUS_FILE_BACKED_UP = "{0} backed up."
STATUS_FILE_RESTORED = "{0} restored from backup."
STATUS_TARGET_BACKED_UP = "Backup created: {0}"
STATUS_CURR_FILE_SAVED_AS = "Current file saved as {0}."
STATUS_NO_OTHER_FILES = "No other files with the same extension found."
STATUS_EXPORTED = "Comparison exported to {0}"
STATUS_COMP_FILE_DELETED = "Comparison file deleted."
STATUS_COMP_FILE_OVERWRITTEN = "Comparison file overwritten with current file."
STATUS_EXPORT_FLAGS_SET = "Export flags set: {0}"
STATUS_CONFIG_SAVED = "Config saved to {0}"
STATUS_CONFIG_LOADED = "Config loaded from {0}"
STATUS_CONFIG_OPENED = "Config file {0} will be opened."
STATUS_KEY_BINDINGS_SAVED = "Key bindings template saved to {0}"
STATUS_BYTES_CHANGED = "{0} byte(s) changed"
STATUS_TOTAL_BYTES_CHANGED = "Total: {0} byte(s) changed"
STATUS_SLOT_SUMMARY = "{0}: {1} byte(s) changed"
STATUS_FLAG_INVERTED = "{0} is now {1}."
STATUS_ACTIVE_FLAGS = "Active flags: {0}"

# ── Guides ──────────────────────────────────────────────────────────────────

GUIDES = {
    "guide-srm": """\
Comparing two SRAM (.srm) files

  1. Copy your save file next to itself with the extension .comp
     (e.g. game.srm -> game.srm.comp), or run OverwriteComp.
  2. Play until the thing you are interested in has happened.
  3. Let the emulator flush the save, then run Compare.
  4. Every changed byte is listed per save slot and buffer.
  5. Run Export to keep the result, OverwriteComp to make the current
     state the new baseline.
""",
    "guide-savestate": """\
Comparing savestates

  Savestates embed the SRAM in a different container. Pass
  --savestate-type so both files are converted to a raw save before
  the comparison, e.g.:

      sramcompare game.state --comp game_old.state --savestate-type zstd

  Offsets can only be edited in raw save files, not in savestates.
""",
}
