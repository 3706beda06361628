"""Shared pieces for calculus modules: catalogue sections and rule-application checks."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Sequence, Tuple

from turnstile.logic.formula import Formula


class RuleApplicationError(ValueError):
    """Raised when a rule constructor cannot be applied to the given derivations."""


@dataclass(frozen=True)
class Section:
    """A titled group of catalogue rows; each row is rendered side by side."""

    title: str
    examples: Tuple[Tuple[object, ...], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "examples", tuple(tuple(row) for row in self.examples))


@dataclass(frozen=True)
class Calculus:
    name: str
    propositions: Tuple[Section, ...] = ()
    rules: Tuple[Section, ...] = ()
    constructors: Dict[str, Callable[..., object]] = field(default_factory=dict)


def require_identical(first: Formula, second: Formula, rule: str) -> Formula:
    if first != second:
        raise RuleApplicationError(f"{rule}: expected identical formulas, got {first!r} and {second!r}")
    return first


def head(formulas: Sequence[Formula], rule: str) -> Formula:
    if not formulas:
        raise RuleApplicationError(f"{rule}: expected a formula at the front of an empty list")
    return formulas[0]


def tail(formulas: Sequence[Formula], rule: str) -> Tuple[Formula, ...]:
    if not formulas:
        raise RuleApplicationError(f"{rule}: cannot drop the front of an empty list")
    return tuple(formulas[1:])


def last(formulas: Sequence[Formula], rule: str) -> Formula:
    if not formulas:
        raise RuleApplicationError(f"{rule}: expected a formula at the end of an empty list")
    return formulas[-1]


def init(formulas: Sequence[Formula], rule: str) -> Tuple[Formula, ...]:
    if not formulas:
        raise RuleApplicationError(f"{rule}: cannot drop the end of an empty list")
    return tuple(formulas[:-1])
