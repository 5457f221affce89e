"""
Error taxonomy for the read -> transform -> serialize pipeline.

Every error raised by the library derives from DataReaderError, so callers
can catch the whole family or a specific kind.
"""


class DataReaderError(Exception):
    """Base class for all datareader errors."""


class ConfigurationError(DataReaderError):
    """Raised when a required collaborator is missing or configuration is invalid."""


class ResourceError(DataReaderError):
    """Raised when a source cannot be opened, read, or decoded into records."""

    def __init__(self, message: str, source: str | None = None, reason: str | None = None):
        self.source = source
        self.reason = reason
        if source:
            message = f"{message} ({source})"
        super().__init__(message)


class OutputError(DataReaderError):
    """Raised when records cannot be serialized to the destination format."""

    def __init__(self, message: str, format_name: str | None = None):
        self.format_name = format_name
        if format_name:
            message = f"[{format_name}] {message}"
        super().__init__(message)


class PipelineError(DataReaderError):
    """
    Raised by Reader.run() around any collaborator failure.

    The original error is available both as ``cause`` and as ``__cause__``.
    """

    def __init__(self, stage: str, cause: BaseException):
        self.stage = stage
        self.cause = cause
        super().__init__(f"Pipeline failed during {stage} stage: {cause}")
