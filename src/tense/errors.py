# SPDX-License-Identifier: MIT


class TenseError(Exception):
    """Base class for errors raised by tense."""

    pass


class ValidationError(TenseError):
    """Raised when a required field is missing or a value is out of range."""

    pass


class NotFoundError(TenseError):
    """Raised when an update or lookup targets an id that is not stored."""

    pass


class SerializationError(TenseError):
    """Raised when a persisted blob or an import file cannot be read or written."""

    pass
