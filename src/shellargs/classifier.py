"""Classification of argument tokens into values and options."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

HYPHEN = "-"
EQUALS = "="
END_OF_OPTIONS = "--"


@dataclass(frozen=True)
class OptionCallbacks:
    """Receivers for the structural role of each token."""

    # A positional parameter, or the value of the option reported just before.
    on_value: Callable[[str], None]
    # A flag-style option; the next value may belong to it.
    on_option: Callable[[str], None]
    # An option carrying its value inline (``-x1`` or ``--name=value``).
    on_option_with_value: Callable[[str, str], None]


class OptionClassifier:
    """Walks tokens left to right and reports each one to the callbacks."""

    def __init__(self, callbacks: OptionCallbacks) -> None:
        self._callbacks = callbacks

    def classify(self, tokens: Iterable[str]) -> None:
        parsing_options = True

        for token in tokens:
            if not token:
                continue
            if parsing_options and token.startswith(HYPHEN):
                parsing_options = self._option_or_stop(token)
                continue
            self._callbacks.on_value(token)

    def _option_or_stop(self, token: str) -> bool:
        """Route a hyphen-led token, returning whether option parsing continues."""

        if len(token) == 1:
            self._callbacks.on_value(token)
            return True

        if token[1] != HYPHEN:
            self._short_option(token)
            return True

        if token == END_OF_OPTIONS:
            return False

        self._long_option(token)
        return True

    def _short_option(self, token: str) -> None:
        # "-p" or "-pVM"; the value is glued onto the flag.
        if len(token) == 2:
            self._callbacks.on_option(token[1])
        else:
            self._callbacks.on_option_with_value(token[1], token[2:])

    def _long_option(self, token: str) -> None:
        # "--platform" or "--platform=VM".
        equals = token.find(EQUALS, 2)
        if equals == -1:
            self._callbacks.on_option(token[2:])
        else:
            self._callbacks.on_option_with_value(token[2:equals], token[equals + 1 :])


def classify(tokens: Iterable[str], callbacks: OptionCallbacks) -> None:
    """Report every non-empty token in ``tokens`` to ``callbacks``."""

    OptionClassifier(callbacks).classify(tokens)
