"""Typed exceptions for batch validation, theme tables and I/O formats."""


class BatchError(RuntimeError):
    """Base class for conditions that abort a whole generation batch."""


class NoSubmissionsError(BatchError):
    """Raised when no submission references were supplied or none are valid."""


class InvalidPatternError(BatchError):
    """Raised when the reference validation pattern does not compile."""


class NoFormatsError(BatchError):
    """Raised when the format specification yields no usable format."""


class OutputDirectoryError(BatchError):
    """Raised when the output directory cannot be created."""


class ManifestWriteError(BatchError):
    """Raised when the manifest cannot be serialized or written."""


class ThemeTableError(ValueError):
    """Raised when a themed lookup table lacks a usable DEFAULT row."""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no writer is registered for a file format."""
