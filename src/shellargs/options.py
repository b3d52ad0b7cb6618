"""Three-state value model for named options."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from shellargs.errors import ArityError, MissingOptionError, OptionArityError


@dataclass(frozen=True)
class OptionValue:
    """Result of looking up a named option: absent, single or multiple.

    All accessors are implemented here once over the observed values, so the
    variants only carry data. ``require_*`` accessors raise when the option is
    absent while ``optional_*`` accessors fall back to a default. The ``*_once``
    accessors raise for an option that was given more than once, since neither
    a value nor a default would be correct.
    """

    name: str

    def _observed(self) -> tuple[str, ...]:
        match self:
            case Single(value=value):
                return (value,)
            case Multiple(values=values):
                return values
            case _:
                return ()

    @property
    def count(self) -> int:
        return len(self._observed())

    def __len__(self) -> int:
        return self.count

    @property
    def was_present(self) -> bool:
        """Whether the option was observed at all while parsing."""
        return self.count > 0

    def optional_first(self, default: str | None = None) -> str | None:
        """Return the value, or the first of many; ``default`` when absent."""
        observed = self._observed()
        return observed[0] if observed else default

    def require_first(self) -> str:
        observed = self._observed()
        if not observed:
            raise MissingOptionError(self.name)
        return observed[0]

    def optional_once(self, default: str | None = None) -> str | None:
        """Return the one and only value; ``default`` when absent."""
        observed = self._observed()
        if len(observed) > 1:
            raise OptionArityError(self.name, len(observed))
        return observed[0] if observed else default

    def require_once(self) -> str:
        value = self.optional_once()
        if value is None:
            raise MissingOptionError(self.name)
        return value

    def optional_many(self) -> list[str]:
        """Return all values in observation order, empty when absent."""
        return list(self._observed())

    def require_many(self) -> list[str]:
        observed = self._observed()
        if not observed:
            raise MissingOptionError(self.name)
        return list(observed)

    def __str__(self) -> str:
        from shellargs.printer import DEFAULT_PRINTER

        return DEFAULT_PRINTER.render_option(self)


@dataclass(frozen=True)
class Absent(OptionValue):
    """An option that was looked up but never observed."""


@dataclass(frozen=True)
class Single(OptionValue):
    """An option observed exactly once, e.g. ``--name=value``."""

    value: str


@dataclass(frozen=True)
class Multiple(OptionValue):
    """An option observed two or more times, values in observation order."""

    values: tuple[str, ...]

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if len(values) < 2:
            raise ArityError(f"Values must have at least 2 elements, got {len(values)}")
        object.__setattr__(self, "values", values)


def fold_values(name: str, values: Iterable[str]) -> OptionValue:
    """Fold the observed values of one option into ``Single`` or ``Multiple``."""

    collected = tuple(values)
    if len(collected) == 1:
        return Single(name, collected[0])
    return Multiple(name, collected)
