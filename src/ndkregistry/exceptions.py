"""ndkregistry exception hierarchy.

All public exceptions inherit from NdkRegistryError, giving callers a single
base class to catch when they want to handle any ndkregistry-specific failure
without swallowing unrelated errors.
"""


class NdkRegistryError(Exception):
    """Base exception for all ndkregistry errors."""


class InvalidVersionError(NdkRegistryError, ValueError):
    """Raised when a version string cannot be parsed.

    Valid versions have two to four dot-separated non-negative integer
    components (``MAJOR.MINOR[.BUILD[.REVISION]]``).
    """


class MissingFieldError(NdkRegistryError, ValueError):
    """Raised when a record is constructed without a required field.

    Covers an absent name on a versioned entity and empty host or target
    paths on an installation record.
    """
