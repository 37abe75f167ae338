# attachment_validations/options.py
"""
Declared validator options.

An option is either a literal or a callable taking the record being validated
(``lambda record: 500``). The shape is decided once, when the validator is
declared, and resolved again on every validation run since the callable may
depend on record state.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple


class OptionKind(Enum):
    LITERAL = "literal"
    DEFERRED = "deferred"


@dataclass(frozen=True)
class Option:
    kind: OptionKind
    value: Any

    @classmethod
    def parse(cls, raw) -> "Option":
        if isinstance(raw, Option):
            return raw
        if callable(raw):
            return cls(OptionKind.DEFERRED, raw)
        return cls(OptionKind.LITERAL, raw)

    @property
    def is_deferred(self) -> bool:
        return self.kind is OptionKind.DEFERRED

    def resolve(self, record):
        if self.is_deferred:
            return self.value(record)
        return self.value


def parse_optional(raw) -> Optional[Option]:
    return None if raw is None else Option.parse(raw)


def is_bounds(value) -> bool:
    """True for an inclusive ``(min, max)`` pair."""
    return isinstance(value, (tuple, list)) and len(value) == 2


def is_bounds_or_deferred(value) -> bool:
    return callable(value) or is_bounds(value)


def is_number_or_deferred(value) -> bool:
    if isinstance(value, bool):
        return False
    return callable(value) or isinstance(value, (int, float))


def resolve_bounds(option: Option, record) -> Tuple[Any, Any]:
    """Resolve an option to a ``(min, max)`` pair."""
    value = option.resolve(record)
    if not is_bounds(value):
        raise ValueError(f"Expected a (min, max) pair, got {value!r}")
    low, high = value
    return low, high


def as_list(value) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]
