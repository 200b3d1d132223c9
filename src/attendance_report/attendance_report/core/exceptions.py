class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request parameters are malformed."""


class DataUnavailableError(DomainError):
    """Raised when one or more report sources could not be obtained.

    A report is never built from a partial set of sources.
    """

    def __init__(self, message: str, *, failed: tuple[str, ...] = ()):
        super().__init__(message)
        self.failed = failed
