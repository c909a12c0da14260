"""Exception classes for Rivit.

Parsing never raises: every input degrades into best-effort structure.
These exceptions cover the package's edges (configuration and
serialized documents).
"""

from __future__ import annotations


class RivitError(Exception):
    """Base exception for all Rivit errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(RivitError, ValueError):
    """Invalid parse configuration value."""

    def __init__(self, field: str, value: object, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending ParseConfig field
            value: The rejected value
            message: Description of what is accepted
        """
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}={value!r}: {message}")


class SerializationError(RivitError, ValueError):
    """Error while reconstructing a document from serialized data.

    Raised for missing or unknown ``_type`` discriminators and unknown
    enum member names.
    """

    pass
