"""Łukasiewicz's third axiom system: three axiom schemata and modus ponens."""
from __future__ import annotations

from turnstile.logic.derivation import Derivation, Transformation, introduction, premise, transformation
from turnstile.logic.formula import Formula, Implication, atom, implication, negation
from turnstile.logic.judgement import conclusion
from turnstile.systems.calculus import Calculus, RuleApplicationError, Section, head, require_identical

# Disjunction and conjunction are abbreviations over negation and implication.


def disjunction(a: Formula, b: Formula) -> Formula:
    return implication(negation(a), b)


def conjunction(a: Formula, b: Formula) -> Formula:
    return negation(implication(a, negation(b)))


def a1(p: Formula, q: Formula) -> Transformation:
    return introduction(conclusion(implication(p, implication(q, p))), "A1")


def a2(p: Formula, q: Formula, r: Formula) -> Transformation:
    formula = implication(
        implication(p, implication(q, r)),
        implication(implication(p, q), implication(p, r)),
    )
    return introduction(conclusion(formula), "A2")


def a3(p: Formula, q: Formula) -> Transformation:
    formula = implication(implication(negation(p), negation(q)), implication(q, p))
    return introduction(conclusion(formula), "A3")


def mp(s1: Derivation, s2: Derivation) -> Transformation:
    """Modus ponens: from ``A → C`` and ``A`` conclude ``C``."""
    major = head(s1.result.succedent, "MP")
    if not isinstance(major, Implication):
        raise RuleApplicationError(f"MP: expected an implication, got {major!r}")
    require_identical(major.antecedent, head(s2.result.succedent, "MP"), "MP")
    return transformation(conclusion(major.consequent), [s1, s2], "MP")


A, B, C = atom("A"), atom("B"), atom("C")

CALCULUS = Calculus(
    name="Łukasiewicz Axioms 3",
    propositions=(
        Section("Variables", [[atom(name) for name in "pqrstu"]]),
        Section("Connectives", [[negation(A), implication(A, B)]]),
    ),
    rules=(
        Section("Axioms", [[a1(A, B), a2(A, B, C), a3(A, B)]]),
        Section("Rule", [[mp(premise(conclusion(implication(A, B))), premise(conclusion(A)))]]),
    ),
    constructors={"a1": a1, "a2": a2, "a3": a3, "mp": mp},
)

_p, _q = atom("p"), atom("q")

EXAMPLE = mp(
    a2(_p, implication(_q, negation(_p)), _p),
    a1(_p, implication(_q, negation(_p))),
)
