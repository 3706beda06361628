"""Propositional formulas."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class Atom:
    value: str
    kind: ClassVar[str] = "atom"


@dataclass(frozen=True)
class Falsum:
    kind: ClassVar[str] = "falsum"


@dataclass(frozen=True)
class Verum:
    kind: ClassVar[str] = "verum"


@dataclass(frozen=True)
class Negation:
    negand: "Formula"
    kind: ClassVar[str] = "negation"


@dataclass(frozen=True)
class Conjunction:
    left: "Formula"
    right: "Formula"
    kind: ClassVar[str] = "conjunction"


@dataclass(frozen=True)
class Disjunction:
    left: "Formula"
    right: "Formula"
    kind: ClassVar[str] = "disjunction"


@dataclass(frozen=True)
class Implication:
    antecedent: "Formula"
    consequent: "Formula"
    kind: ClassVar[str] = "implication"


Formula = Union[Atom, Falsum, Verum, Negation, Conjunction, Disjunction, Implication]

FALSUM = Falsum()
VERUM = Verum()


def atom(value: str) -> Atom:
    return Atom(value)


def negation(negand: Formula) -> Negation:
    return Negation(negand)


def conjunction(left: Formula, right: Formula) -> Conjunction:
    return Conjunction(left, right)


def disjunction(left: Formula, right: Formula) -> Disjunction:
    return Disjunction(left, right)


def implication(antecedent: Formula, consequent: Formula) -> Implication:
    return Implication(antecedent, consequent)
