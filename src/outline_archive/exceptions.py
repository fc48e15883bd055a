"""Custom exceptions for outline_archive."""


class OutlineArchiveError(Exception):
    """Base exception for outline_archive operations."""


class ConfigurationError(OutlineArchiveError):
    """Required configuration (such as the archive target) is missing or invalid."""


class SourceNotRecognizedError(OutlineArchiveError):
    """Source document is not a recognized archive source."""


class HeadingNotFoundError(OutlineArchiveError):
    """Heading path does not exist in the outline."""


class ArchiveWriteError(OutlineArchiveError):
    """Error while writing the archive document."""


class ArchiveReadError(OutlineArchiveError):
    """Error while reading the archive document."""


class SourceDocumentError(OutlineArchiveError):
    """Error while reading or rewriting the source document."""
