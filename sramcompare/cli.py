"""
Command line entry point.

Usage:
    sramcompare game.srm
    sramcompare game.srm --comp old/game.srm --slot 1
    sramcompare game.state --comp before.state --savestate-type zstd
"""

import argparse
import logging
import sys

from sramcompare import __version__
from sramcompare.commands import CommandHandler
from sramcompare.config import load_auto_config, load_config
from sramcompare.console import ConsolePrinter
from sramcompare.errors import ConfigError, FatalSessionError
from sramcompare.layout import LAYOUTS, LayoutComparer
from sramcompare.menu import CommandMenu
from sramcompare.options import Options


def build_parser():
    parser = argparse.ArgumentParser(prog="sramcompare", description="Compare two SRAM save files byte by byte")
    parser.add_argument("file", nargs="?", help="Current save file (.srm) or savestate")
    parser.add_argument("--comp", help="Comparison file (default: <file>.comp)")
    parser.add_argument("--slot", type=int, help="Only compare this save slot (1-4)")
    parser.add_argument("--comp-slot", type=int, help="Slot of the comparison file to compare against --slot")
    parser.add_argument("--layout", choices=sorted(LAYOUTS), help="Save layout (default: generic)")
    parser.add_argument("--savestate-type", help="Convert savestates of this type before comparing")
    parser.add_argument("--region", help="Game region passed to the save layout")
    parser.add_argument("--export-dir", help="Directory (or file) exports are written to")
    parser.add_argument("--config", help="Load this config file")
    parser.add_argument("--lang", help="UI language")
    parser.add_argument("--lang-comp", help="Comparison result language")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_options(args):
    """Options from the auto-load config (if any), the --config file and the arguments."""
    options = load_auto_config() or Options()
    if args.config:
        load_config(args.config, options)
        options.config_file_path = args.config

    overrides = {
        "current_file_path": args.file,
        "comparison_file_path": args.comp,
        "current_file_slot": args.slot,
        "comparison_file_slot": args.comp_slot,
        "layout": args.layout,
        "savestate_type": args.savestate_type,
        "game_region": args.region,
        "export_directory": args.export_dir,
        "ui_language": args.lang,
        "comparison_result_language": args.lang_comp,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(options, key, value)
    return options


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    printer = ConsolePrinter()
    try:
        options = build_options(args)
    except (ConfigError, OSError) as e:
        printer.print_error(e)
        return 1

    printer.language = options.ui_language
    handler = CommandHandler(printer, LayoutComparer(printer))

    try:
        CommandMenu(handler).show(options)
    except FatalSessionError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
