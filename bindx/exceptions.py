"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class InvalidInputError(BaseAppError):
    """Exception raised when a user-supplied extension is empty after normalization."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class TypeResolutionError(BaseAppError):
    """Exception raised when the content type registry itself fails.

    An extension without a known content type is not an error; this is only
    raised when the lookup machinery breaks.
    """

    pass


class HandlerLookupError(BaseAppError):
    """Exception raised when the default-handler or application registry fails."""

    pass


class ApplicationIndexError(BaseAppError):
    """Exception raised when the installed-application scan cannot be run."""

    pass


class ScanTimeoutError(ApplicationIndexError):
    """Exception raised when the installed-application scan misses its deadline."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Application scan did not complete within {timeout:g} seconds")


class MalformedBundleError(BaseAppError):
    """Exception raised for an application bundle whose manifest cannot be used."""

    pass
