"""Exception types for shellargs."""

from __future__ import annotations


class ShellArgsError(Exception):
    """Base exception for shellargs."""


class LexError(ShellArgsError, ValueError):
    """Base exception for errors raised while splitting a shell-style string."""


class UnterminatedEscapeError(LexError):
    """Raised when the input ends with a backslash that escapes nothing."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Unterminated escape at index {index}")


class UnterminatedQuoteError(LexError):
    """Raised when a quoted region is opened but never closed."""

    def __init__(self, kind: str, start_index: int) -> None:
        self.kind = kind
        self.start_index = start_index
        super().__init__(f"Unterminated {kind} quote starting at index {start_index}")


class ValidationError(ShellArgsError, TypeError):
    """Raised when structured arguments are built from values of the wrong type."""


class ArityError(ShellArgsError, ValueError):
    """Raised when a multi-valued option is created with fewer than 2 values."""


class ArgumentLookupError(ShellArgsError, LookupError):
    """Base exception for failed parameter or option lookups."""


class MissingParameterError(ArgumentLookupError, IndexError):
    """Raised when a positional parameter index is out of range."""

    def __init__(self, index: int, debug_name: str | None = None) -> None:
        self.index = index
        self.debug_name = debug_name
        if debug_name is None:
            super().__init__(f"No parameter #{index}")
        else:
            super().__init__(f"No parameter #{index} ({debug_name})")


class MissingOptionError(ArgumentLookupError):
    """Raised when a required option was never observed."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'No option named "{name}"')


class OptionArityError(ArgumentLookupError):
    """Raised when an option holds more values than the accessor allows."""

    def __init__(self, name: str, count: int) -> None:
        self.name = name
        self.count = count
        super().__init__(f'More than one option named "{name}" ({count} values)')
