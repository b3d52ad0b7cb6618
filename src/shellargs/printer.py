"""Textual rendering of parsed arguments, mostly for debugging."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from shellargs.args import StructuredArgs
    from shellargs.options import OptionValue

QuoteStyle = Literal["auto", "single", "double"]

HYPHEN = "-"
END_OF_OPTIONS = "--"

_NEEDS_QUOTING = frozenset(" \t\n'\"\\")


def _quote(value: str, quote_style: QuoteStyle) -> str:
    if quote_style == "auto" and value and not _NEEDS_QUOTING.intersection(value):
        return value

    preferred = "'" if quote_style == "single" else '"'
    for quote in (preferred, "'" if preferred == '"' else '"'):
        if quote not in value:
            return f"{quote}{value}{quote}"

    # Both quote kinds present: escape every special character instead.
    return "".join(f"\\{char}" if char in _NEEDS_QUOTING else char for char in value)


def _is_short(name: str) -> bool:
    return len(name) == 1 and name != HYPHEN


class ArgsPrinter:
    """Renders arguments so that splitting and parsing the output yields them back.

    With ``quote_style="auto"`` values are quoted only when necessary; the other
    styles always quote values with the given kind of quote. Option names are
    only quoted when necessary.

    Values starting with a hyphen are glued onto short options (``-n-5``) or
    given inline to long options (``--name=-5``). When a parameter starts with a
    hyphen the options come first, followed by ``--`` and the parameters.

    Long option names containing ``=`` cannot be rendered faithfully, as parsing
    splits ``--name=value`` on the first ``=``.
    """

    def __init__(self, quote_style: QuoteStyle = "auto") -> None:
        if quote_style not in ("auto", "single", "double"):
            raise ValueError(f"Unknown quote style: {quote_style}")
        self.quote_style = quote_style

    def quote(self, value: str) -> str:
        """As needed, wrap ``value`` in quotes or escape it."""
        return _quote(value, self.quote_style)

    def _group(self, name: str, value: str, *, before_end_of_options: bool = False) -> str:
        long_key = f"--{_quote(name, 'auto')}" if name else END_OF_OPTIONS

        # "--=value" is the only way to spell an option without a name.
        if not name:
            return f"{long_key}={self.quote(value)}" if value else f"{long_key}="

        if not value:
            # A bare flag right before "--" would take the next parameter as its value.
            if before_end_of_options:
                return f"{long_key}="
            return f"-{_quote(name, 'auto')}" if _is_short(name) else long_key

        if value.startswith(HYPHEN):
            if _is_short(name):
                return f"-{_quote(name, 'auto')}{self.quote(value)}"
            return f"{long_key}={self.quote(value)}"

        key = f"-{_quote(name, 'auto')}" if _is_short(name) else long_key
        return f"{key} {self.quote(value)}"

    def render_option(self, option: OptionValue) -> str:
        return " ".join(self._group(option.name, value) for value in option.optional_many())

    def _render_options(self, options: Iterable[OptionValue], *, before_end_of_options: bool) -> list[str]:
        groups = [(option.name, value) for option in options for value in option.optional_many()]
        return [
            self._group(name, value, before_end_of_options=before_end_of_options and index == len(groups) - 1)
            for index, (name, value) in enumerate(groups)
        ]

    def render(self, args: StructuredArgs) -> str:
        parameters = [self.quote(parameter) for parameter in args.parameters]

        if not any(parameter.startswith(HYPHEN) for parameter in args.parameters):
            return " ".join(parameters + self._render_options(args.options.values(), before_end_of_options=False))

        parts = self._render_options(args.options.values(), before_end_of_options=True)
        parts.append(END_OF_OPTIONS)
        parts.extend(parameters)
        return " ".join(parts)


DEFAULT_PRINTER = ArgsPrinter()
