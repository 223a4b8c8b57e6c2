"""The interactive read-command loop."""

import logging

from sramcompare import resources as res
from sramcompare.errors import FatalSessionError

log = logging.getLogger(__name__)


class CommandMenu:
    """Reads commands until Quit (or end of input) and hands them to a CommandHandler."""

    def __init__(self, handler, input_func=None):
        self.handler = handler
        self.input_func = input_func or handler.input_func

    @property
    def printer(self):
        return self.handler.printer

    def show(self, options):
        if not options.current_file_path:
            self.printer.print_fatal_error(res.ERROR_MISSING_PATH_ARGUMENTS)
            raise FatalSessionError(res.ERROR_MISSING_PATH_ARGUMENTS)

        self.printer.print_settings(options)
        self.printer.print_start_message()

        while True:
            try:
                command = self.input_func()
            except (EOFError, KeyboardInterrupt):
                self.printer.print_line()
                break

            try:
                if not self.handler.run_command(command, options):
                    break
            except Exception as e:
                log.debug("command %r failed", command, exc_info=True)
                self.printer.print_error(e)
                self.printer.print_section_header()
