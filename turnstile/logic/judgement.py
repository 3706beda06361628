"""Sequent judgements: an antecedent and a succedent list of formulas."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from turnstile.logic.formula import Formula


@dataclass(frozen=True)
class Judgement:
    """Both sides keep construction order and duplicates; structural rules rely on it."""

    antecedent: Tuple[Formula, ...] = ()
    succedent: Tuple[Formula, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "antecedent", tuple(self.antecedent))
        object.__setattr__(self, "succedent", tuple(self.succedent))


def judgement(antecedent: Iterable[Formula], succedent: Iterable[Formula]) -> Judgement:
    return Judgement(tuple(antecedent), tuple(succedent))


def conclusion(formula: Formula) -> Judgement:
    """A judgement with an empty antecedent asserting ``formula``."""
    return Judgement((), (formula,))
