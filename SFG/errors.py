# =============================================================================
# errors.py — SFG Error Taxonomy
# =============================================================================
#
# Every failure in the generator is fatal to the run.  Nothing is retried and
# nothing is skipped (blank and comment lines are format, not recovery).
#
#   SynthesisError
#     ├── DefinitionError   bad name, collision, unbalanced '(', unknown symbol
#     ├── FileError         input missing / unreadable, output not creatable
#     ├── RangeError        cell index out of bounds, invalid frame geometry
#     ├── CapacityError     sequence does not fit the ring buffer
#     └── ConfigError       malformed configuration file
#
# Only the command line catches these; library code raises and propagates.
# =============================================================================

from __future__ import annotations


class SynthesisError(Exception):
    """Base class for every error raised by the frame generator."""

    def __init__(self, message: str, source: str | None = None, line: int | None = None) -> None:
        self.message = message
        self.source  = source
        self.line    = line
        super().__init__(self._format())

    def _format(self) -> str:
        if self.source is None:
            return self.message
        if self.line is None:
            return f"{self.source}: {self.message}"
        return f"{self.source}:{self.line}: {self.message}"


class DefinitionError(SynthesisError, ValueError):
    """A nucleotide, fragment or distribution definition is malformed."""


class FileError(SynthesisError, OSError):
    """An input file can't be read or the output file can't be written."""


class RangeError(SynthesisError, ValueError):
    """A cell index or the frame geometry is out of bounds."""


class CapacityError(SynthesisError):
    """The distribution needs more frames than the ring buffer holds."""

    def __init__(self, message: str, plan=None) -> None:
        # The rejected CapacityPlan, so callers can still report the numbers
        self.plan = plan
        super().__init__(message)


class ConfigError(SynthesisError, ValueError):
    """The configuration file is malformed."""
