"""Exceptions raised while gathering system facts."""


class FetchError(Exception):
    """Base class for all failures to gather a single fact."""


class ResourceReadError(FetchError, OSError):
    """A pseudo-file or config resource could not be read."""


class ParseError(FetchError, ValueError):
    """A line or field in a resource was malformed."""


class NotFoundError(FetchError, LookupError):
    """An expected key or field was absent."""


class EnvVarError(FetchError, LookupError):
    """A required environment variable is unset."""


class HostIdentityError(FetchError):
    """The uname query failed. Fatal: nothing is displayed."""
