"""Structured positional parameters and named options."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from loguru import logger

from shellargs.classifier import OptionCallbacks, classify
from shellargs.errors import MissingParameterError, ValidationError
from shellargs.lexer import argv
from shellargs.options import Absent, Multiple, OptionValue, Single, fold_values
from shellargs.printer import DEFAULT_PRINTER


@dataclass(frozen=True, eq=False)
class StructuredArgs:
    """A set of parameters (positional arguments) and options (named arguments).

    Instances are structurally equal if they hold exactly the same parameters in
    the same order and the same options, where the order of options is not
    considered::

        # All of these are equal.
        foo bar --option a --option b
        foo --option a bar --option b
        --option a --option b foo bar

        # None of these are equal.
        foo bar --option a --option b
        foo bar --option b --option a
        bar foo --option a --option b
    """

    parameters: tuple[str, ...] = ()
    options: Mapping[str, OptionValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        parameters = tuple(self.parameters)
        for parameter in parameters:
            if not isinstance(parameter, str):
                raise ValidationError(f"Unexpected parameter: {parameter!r}")

        options = dict(self.options)
        for name, option in options.items():
            # Absence is synthesized by option_named, never stored.
            if not isinstance(option, (Single, Multiple)):
                raise ValidationError(f"Unexpected option ({name}): {option!r}")

        object.__setattr__(self, "parameters", parameters)
        object.__setattr__(self, "options", MappingProxyType(options))

    @classmethod
    def empty(cls) -> StructuredArgs:
        return EMPTY_ARGS

    @classmethod
    def parse(cls, tokens: Iterable[str]) -> StructuredArgs:
        """Parse an argument vector, e.g. ``sys.argv[1:]`` or the result of ``argv``."""
        return build(tokens)

    @classmethod
    def parse_string(cls, text: str) -> StructuredArgs:
        """Split ``text`` like a shell would, then parse the resulting tokens."""
        return build(argv(text))

    @classmethod
    def from_values(
        cls,
        parameters: Iterable[str],
        options: Mapping[str, str | Sequence[str]] | None = None,
    ) -> StructuredArgs:
        """Create arguments directly, without tokenizing.

        Option values must be a ``str`` or a non-empty sequence of ``str``.
        Prefer ``parse`` where possible as it better reflects real input.
        """

        folded: dict[str, OptionValue] = {}
        for name, value in (options or {}).items():
            folded[name] = fold_values(name, _validated_values(name, value))
        return cls(tuple(parameters), folded)

    def parameter_count(self) -> int:
        return len(self.parameters)

    def __len__(self) -> int:
        return len(self.parameters)

    def parameter_at(self, index: int) -> str:
        return self.require_parameter(index)

    def optional_parameter(self, index: int, default: str | None = None) -> str | None:
        if 0 <= index < len(self.parameters):
            return self.parameters[index]
        return default

    def require_parameter(self, index: int, debug_name: str | None = None) -> str:
        """Return the parameter at ``index``; ``debug_name`` only improves the error."""
        if 0 <= index < len(self.parameters):
            return self.parameters[index]
        raise MissingParameterError(index, debug_name)

    def parameters_as_list(self) -> list[str]:
        return list(self.parameters)

    def option_named(self, name: str) -> OptionValue:
        """Return the option ``name``, or ``Absent`` if it was never observed.

        As all values are strings, an empty value (``''``) usually stands for a
        flag, i.e. ``--verbose``.
        """
        option = self.options.get(name)
        return Absent(name) if option is None else option

    def options_as_map(self) -> dict[str, OptionValue]:
        return dict(self.options)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StructuredArgs):
            return NotImplemented
        return self.parameters == other.parameters and dict(self.options) == dict(other.options)

    def __hash__(self) -> int:
        return hash((self.parameters, frozenset(self.options.items())))

    def __str__(self) -> str:
        return DEFAULT_PRINTER.render(self)


EMPTY_ARGS = StructuredArgs()


def _validated_values(name: str, value: object) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)) and value and all(isinstance(item, str) for item in value):
        return tuple(value)
    raise ValidationError(f"Unexpected value ({name}): {value!r}")


class _ArgumentCollector:
    """Receives classifier events and groups option values by name."""

    def __init__(self) -> None:
        self.parameters: list[str] = []
        self.option_values: dict[str, list[str]] = {}
        self._pending: str | None = None

    def callbacks(self) -> OptionCallbacks:
        return OptionCallbacks(
            on_value=self.on_value,
            on_option=self.on_option,
            on_option_with_value=self.on_option_with_value,
        )

    def resolve_pending(self) -> None:
        # A flag not followed by a value is present with an empty value.
        if self._pending is not None:
            self.option_values.setdefault(self._pending, []).append("")
        self._pending = None

    def on_value(self, value: str) -> None:
        if self._pending is None:
            self.parameters.append(value)
            return
        self.option_values.setdefault(self._pending, []).append(value)
        self._pending = None

    def on_option(self, name: str) -> None:
        self.resolve_pending()
        self._pending = name

    def on_option_with_value(self, name: str, value: str) -> None:
        self.resolve_pending()
        self.option_values.setdefault(name, []).append(value)


def build(tokens: Iterable[str]) -> StructuredArgs:
    """Parse pre-split tokens into ``StructuredArgs``."""

    collector = _ArgumentCollector()
    classify(tokens, collector.callbacks())
    collector.resolve_pending()

    options = {name: fold_values(name, values) for name, values in collector.option_values.items()}
    logger.debug("parsed {} parameter(s) and {} option(s)", len(collector.parameters), len(options))
    return StructuredArgs(tuple(collector.parameters), options)
