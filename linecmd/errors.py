from __future__ import annotations


class LinecmdError(Exception):
    pass


class RegistrationError(LinecmdError):
    """A handler could not be added to a registry."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class DuplicateNameError(RegistrationError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"Command with handle {name!r} already exists.")


class InvalidNameError(RegistrationError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"Invalid command name {name!r}: must be a non-empty token without whitespace.")


class StreamError(LinecmdError, OSError):
    """
    The input source or output sink itself failed (closed pipe, bad descriptor, ...).

    This is the only error Shell.run() lets escape; the underlying exception is
    available as __cause__.
    """
