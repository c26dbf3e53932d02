"""
Declarative request validation.

A rule set is an ordered sequence of FieldRule. Every check of every field is
evaluated; failures accumulate in declaration order instead of stopping at
the first one.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, List, Mapping, Sequence, Tuple, Union

Predicate = Callable[[Any], bool]

EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
ID_REGEX = re.compile(r"^[0-9a-f]+$")
PASSWORD_REGEX = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[\W_]).+$")


def as_text(value: Any) -> str:
    """Render a raw JSON value as the string the checks operate on."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def is_blank(value: Any) -> bool:
    return as_text(value) == ""


def not_empty(value: Any) -> bool:
    return not is_blank(value)


def min_length(minimum: int) -> Predicate:
    return lambda value: len(as_text(value)) >= minimum


def max_length(maximum: int) -> Predicate:
    return lambda value: len(as_text(value)) <= maximum


def exact_length(length: int) -> Predicate:
    return lambda value: len(as_text(value)) == length


def matches(pattern: re.Pattern) -> Predicate:
    return lambda value: pattern.fullmatch(as_text(value)) is not None


def is_in(choices: Iterable[Union[str, Enum]]) -> Predicate:
    allowed = frozenset(c.value if isinstance(c, Enum) else c for c in choices)
    return lambda value: as_text(value) in allowed


@dataclass(frozen=True)
class Check:
    predicate: Predicate
    message: Union[str, Enum]


@dataclass(frozen=True)
class FieldRule:
    field: str
    checks: Tuple[Check, ...]
    optional: bool = False

    def errors_for(self, value: Any) -> List[Union[str, Enum]]:
        # Optional fields are only checked when a value was supplied
        if self.optional and is_blank(value):
            return []
        return [check.message for check in self.checks if not check.predicate(value)]


def field(name: str, *checks: Tuple[Predicate, Union[str, Enum]], optional: bool = False) -> FieldRule:
    """Shorthand: field("subject", (not_empty, MSG), (min_length(10), MSG2))."""
    return FieldRule(name, tuple(Check(predicate, message) for predicate, message in checks), optional)


RuleSet = Sequence[FieldRule]


def validate(rules: RuleSet, data: Mapping[str, Any]) -> List[Union[str, Enum]]:
    """Run every rule against `data` and return all failure messages in order."""
    errors: List[Union[str, Enum]] = []
    for rule in rules:
        errors.extend(rule.errors_for(data.get(rule.field)))
    return errors
