"""Exception types raised by the readiness core.

Validation failures and submission outcomes are returned as values; these
exceptions cover misconfiguration and misuse of the session API.
"""


class ReadinessError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(ReadinessError):
    """Invalid configuration value or unreadable configuration file."""


class CatalogError(ReadinessError):
    """Malformed question catalog (duplicate keys, empty choices, bad YAML)."""


class StorageError(ReadinessError):
    """The persisted form slot could not be written."""


class SubmissionInProgressError(ReadinessError):
    """A submission was requested while another one is still in flight."""


class IncompleteFormError(ReadinessError):
    """An export was requested before every required field was answered."""
