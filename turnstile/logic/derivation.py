"""Derivation trees: premises and rule applications over judgements."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, Tuple, Union

from turnstile.logic.judgement import Judgement


@dataclass(frozen=True)
class Premise:
    result: Judgement
    kind: ClassVar[str] = "premise"


@dataclass(frozen=True)
class Transformation:
    """Application of ``rule`` to the derivations in ``deps``, concluding ``result``."""

    result: Judgement
    rule: str
    deps: Tuple["Derivation", ...] = ()
    kind: ClassVar[str] = "transformation"

    def __post_init__(self) -> None:
        object.__setattr__(self, "deps", tuple(self.deps))

    @property
    def arity(self) -> int:
        return len(self.deps)


Derivation = Union[Premise, Transformation]


def premise(result: Judgement) -> Premise:
    return Premise(result)


def transformation(result: Judgement, deps: Iterable[Derivation], rule: str) -> Transformation:
    return Transformation(result, rule, tuple(deps))


def introduction(result: Judgement, rule: str) -> Transformation:
    """A rule application without dependencies, such as an axiom."""
    return Transformation(result, rule, ())
