"""Exception types raised by sramcompare.

The command loop is the only place that catches these broadly; everything
below it (engine, layouts, converters) raises and lets the loop report.
"""


class SramCompareError(Exception):
    """Base class for all sramcompare errors."""


class FatalSessionError(SramCompareError):
    """The session cannot start (e.g. no current file path given)."""


class CommandError(SramCompareError):
    """A single command failed; the session carries on."""


class OperationCancelled(CommandError):
    """The operator cancelled a prompt."""


class ConfigError(SramCompareError):
    """A config file could not be read or holds invalid values."""


class KeyBindingError(ConfigError):
    """The key bindings file is malformed or ambiguous."""


class ConversionError(SramCompareError):
    """A savestate could not be converted to a raw save."""


class ExportError(SramCompareError):
    """A file operation during export/copy failed.

    Carries the target path and the original exception.
    """

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot write output file {path}: {cause}")
