"""Exceptions raised by the DNS updater."""


class DNSUpdaterError(Exception):
    """Base class for all DNS updater errors."""


class InvalidEventError(DNSUpdaterError):
    """The lifecycle notification could not be parsed."""


class ResourceLookupError(DNSUpdaterError, LookupError):
    """Fetching instance metadata, a hosted zone or a record set failed."""


class ChangeError(DNSUpdaterError):
    """Submitting a record set change failed.

    The DNS store may reject a change for several reasons at once, so every
    underlying cause is kept in order on ``causes``.
    """

    def __init__(self, message: str, causes: list[BaseException] | None = None):
        super().__init__(message)
        self.causes: list[BaseException] = list(causes or [])
