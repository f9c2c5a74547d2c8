"""Exception types raised by procstats.

Every error derives from ProcStatsError. The concrete classes also derive from
the builtin they specialise (ValueError, OSError) so callers that only know
the builtins still catch them.

Fatal for the whole run:
  - UsageError
  - InputFileError
  - ParseError

Isolated to a single sample pipeline:
  - InvalidInputError / InsufficientSamplesError
  - ChartIOError
"""

from __future__ import annotations


class ProcStatsError(Exception):
    """Base class for all procstats errors."""


class UsageError(ProcStatsError):
    """Missing or invalid command line arguments."""


class InputFileError(ProcStatsError, OSError):
    """Input file or output directory cannot be accessed."""


class ParseError(ProcStatsError, ValueError):
    """A data row does not hold a valid float in the measurement column."""

    def __init__(self, message: str, *, row: int | None = None, text: str | None = None) -> None:
        super().__init__(message)
        self.row = row
        self.text = text


class InvalidInputError(ProcStatsError, ValueError):
    """A sample cannot be summarised (empty, NaN or infinite values)."""


class InsufficientSamplesError(InvalidInputError):
    """A sample of one value: the corrected variance is undefined."""


class ChartIOError(ProcStatsError, OSError):
    """A chart file could not be written."""
