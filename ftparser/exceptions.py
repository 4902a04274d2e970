"""Exceptions raised by the segmentation pipelines."""


class FTParserError(Exception):
    """Base class for ftparser errors."""


class PipelineConstructionError(FTParserError):
    """A pipeline could not be built (analyzer missing, dictionary failed to load)."""


class ResourceNotFoundError(PipelineConstructionError):
    """A stopword list or other external resource could not be resolved."""


class PipelineUnavailableError(FTParserError):
    """The pipeline for a language is not available.

    Raised to callers whose construction attempt failed. The registry slot stays
    empty, so a later call retries construction.
    """

    def __init__(self, language, cause: BaseException = None):
        self.language = language
        self.cause = cause
        message = f"Pipeline for {getattr(language, 'name', language)} is unavailable"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class StreamStateError(FTParserError):
    """A token stream was driven out of protocol order."""


class ScanStateError(FTParserError):
    """A full-text scan was begun twice or read before it began."""


class UnsupportedLanguageError(FTParserError, ValueError):
    """A language value names none of the supported languages."""


class UnknownProfileError(FTParserError, ValueError):
    """A profile name is not in the profile table for its language."""
