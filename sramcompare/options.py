"""
Session options and the file naming conventions built on them.
"""

import dataclasses
import enum
import os
import time

from sramcompare.flags import ComparisonFlags, ExportFlags, LogFlags

SRM_EXTENSION = ".srm"
COMP_EXTENSION = ".comp"
BACKUP_EXTENSION = ".backup"
MANIPULATED_EXTENSION = ".manipulated"
EXPORT_EXTENSION = ".txt"


class SaveFileKind(enum.Enum):
    CurrentFile = "current file"
    ComparisonFile = "comparison file"


@dataclasses.dataclass
class Options:
    """Everything a session needs; handed to every command explicitly."""
    current_file_path: str = None
    comparison_file_path: str = None
    current_file_slot: int = None
    comparison_file_slot: int = None
    comparison_flags: ComparisonFlags = ComparisonFlags(0)
    export_flags: ExportFlags = ExportFlags(0)
    log_flags: LogFlags = LogFlags(0)
    export_directory: str = None
    config_file_path: str = None
    ui_language: str = None
    comparison_result_language: str = None
    game_region: str = None
    savestate_type: str = None
    layout: str = None


INT_FIELDS = ("current_file_slot", "comparison_file_slot")

INT_FIELDS = ("current_file_slot", "comparison_file_slot")

FLAG_FIELDS = {
    "comparison_flags": ComparisonFlags,
    "export_flags": ExportFlags,
    "log_flags": LogFlags,
}


# ── File naming ─────────────────────────────────────────────────────────────

def get_comparison_file_path(options):
    """Explicit comparison path, or <current file>.comp next to it."""
    if options.comparison_file_path:
        return options.comparison_file_path
    return options.current_file_path + COMP_EXTENSION


def get_file_path(options, kind):
    if kind is SaveFileKind.CurrentFile:
        return options.current_file_path
    return get_comparison_file_path(options)


def get_backup_file_path(file_path):
    return file_path + BACKUP_EXTENSION


def is_raw_save(file_path):
    """True for .srm files and their .comp companions."""
    root, ext = os.path.splitext(file_path)
    ext = ext.lower()
    if ext == COMP_EXTENSION:
        ext = os.path.splitext(root)[1].lower()
    return ext == SRM_EXTENSION


def is_editable_save(file_path):
    ext = os.path.splitext(file_path)[1].lower()
    return ext in (SRM_EXTENSION, COMP_EXTENSION)


def generate_export_file_name(current_file_path, now=None):
    """<stem>_<YYYY-MM-DD_HHMMSS>.txt"""
    stem = os.path.splitext(os.path.basename(current_file_path))[0]
    stamp = time.strftime("%Y-%m-%d_%H%M%S", time.localtime(now))
    return f"{stem}_{stamp}{EXPORT_EXTENSION}"
