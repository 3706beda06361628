"""Gentzen's sequent calculus LK."""
from __future__ import annotations

from turnstile.logic.derivation import Derivation, Transformation, introduction, premise, transformation
from turnstile.logic.formula import Formula, atom, conjunction, disjunction, implication, negation
from turnstile.logic.judgement import Judgement
from turnstile.systems.calculus import Calculus, Section, head, init, last, require_identical, tail


def _sides(s: Derivation):
    return s.result.antecedent, s.result.succedent


# Axiom


def i(a: Formula) -> Transformation:
    return introduction(Judgement((a,), (a,)), "I")


# Cut


def cut(s1: Derivation, s2: Derivation) -> Transformation:
    gamma, succedent = _sides(s1)
    antecedent, pi = _sides(s2)
    require_identical(last(succedent, "Cut"), head(antecedent, "Cut"), "Cut")
    delta = init(succedent, "Cut")
    sigma = tail(antecedent, "Cut")
    return transformation(Judgement(gamma + sigma, delta + pi), [s1, s2], "Cut")


# Conjunction & disjunction


def cl1(b: Formula, s: Derivation) -> Transformation:
    antecedent, delta = _sides(s)
    a = last(antecedent, "cl1")
    return transformation(Judgement(init(antecedent, "cl1") + (conjunction(a, b),), delta), [s], "cl1")


def cl2(a: Formula, s: Derivation) -> Transformation:
    antecedent, delta = _sides(s)
    b = last(antecedent, "cl2")
    return transformation(Judgement(init(antecedent, "cl2") + (conjunction(a, b),), delta), [s], "cl2")


def dr1(b: Formula, s: Derivation) -> Transformation:
    gamma, succedent = _sides(s)
    a = head(succedent, "dr1")
    return transformation(Judgement(gamma, (disjunction(a, b),) + tail(succedent, "dr1")), [s], "dr1")


def dr2(a: Formula, s: Derivation) -> Transformation:
    gamma, succedent = _sides(s)
    b = head(succedent, "dr2")
    return transformation(Judgement(gamma, (disjunction(a, b),) + tail(succedent, "dr2")), [s], "dr2")


def dl(s1: Derivation, s2: Derivation) -> Transformation:
    left, delta = _sides(s1)
    right, pi = _sides(s2)
    a, b = last(left, "dl"), last(right, "dl")
    result = Judgement(init(left, "dl") + init(right, "dl") + (disjunction(a, b),), delta + pi)
    return transformation(result, [s1, s2], "dl")


def cr(s1: Derivation, s2: Derivation) -> Transformation:
    gamma, left = _sides(s1)
    sigma, right = _sides(s2)
    a, b = head(left, "cr"), head(right, "cr")
    result = Judgement(gamma + sigma, (conjunction(a, b),) + tail(left, "cr") + tail(right, "cr"))
    return transformation(result, [s1, s2], "cr")


# Implication


def il(s1: Derivation, s2: Derivation) -> Transformation:
    gamma, succedent = _sides(s1)
    antecedent, pi = _sides(s2)
    a, b = head(succedent, "il"), last(antecedent, "il")
    result = Judgement(gamma + init(antecedent, "il") + (implication(a, b),), tail(succedent, "il") + pi)
    return transformation(result, [s1, s2], "il")


def ir(s: Derivation) -> Transformation:
    antecedent, succedent = _sides(s)
    a, b = last(antecedent, "ir"), head(succedent, "ir")
    result = Judgement(init(antecedent, "ir"), (implication(a, b),) + tail(succedent, "ir"))
    return transformation(result, [s], "ir")


# Negation


def nl(s: Derivation) -> Transformation:
    gamma, succedent = _sides(s)
    a = head(succedent, "nl")
    return transformation(Judgement(gamma + (negation(a),), tail(succedent, "nl")), [s], "nl")


def nr(s: Derivation) -> Transformation:
    antecedent, delta = _sides(s)
    a = last(antecedent, "nr")
    return transformation(Judgement(init(antecedent, "nr"), (negation(a),) + delta), [s], "nr")


# Weakening


def swl(a: Formula, s: Derivation) -> Transformation:
    gamma, delta = _sides(s)
    return transformation(Judgement(gamma + (a,), delta), [s], "swl")


def swr(a: Formula, s: Derivation) -> Transformation:
    gamma, delta = _sides(s)
    return transformation(Judgement(gamma, (a,) + delta), [s], "swr")


# Contraction


def scl(s: Derivation) -> Transformation:
    antecedent, delta = _sides(s)
    rest = init(antecedent, "scl")
    a = require_identical(last(antecedent, "scl"), last(rest, "scl"), "scl")
    return transformation(Judgement(init(rest, "scl") + (a,), delta), [s], "scl")


def scr(s: Derivation) -> Transformation:
    gamma, succedent = _sides(s)
    rest = tail(succedent, "scr")
    a = require_identical(head(succedent, "scr"), head(rest, "scr"), "scr")
    return transformation(Judgement(gamma, (a,) + tail(rest, "scr")), [s], "scr")


# Permutation


def srotl(s: Derivation) -> Transformation:
    antecedent, delta = _sides(s)
    a = head(antecedent, "srotl")
    return transformation(Judgement(tail(antecedent, "srotl") + (a,), delta), [s], "srotl")


def srotr(s: Derivation) -> Transformation:
    gamma, succedent = _sides(s)
    a = head(succedent, "srotr")
    return transformation(Judgement(gamma, tail(succedent, "srotr") + (a,)), [s], "srotr")


def sswpl(s: Derivation) -> Transformation:
    antecedent, delta = _sides(s)
    rest = init(antecedent, "sswpl")
    a, b = last(rest, "sswpl"), last(antecedent, "sswpl")
    return transformation(Judgement(init(rest, "sswpl") + (b, a), delta), [s], "sswpl")


def sswpr(s: Derivation) -> Transformation:
    gamma, succedent = _sides(s)
    rest = tail(succedent, "sswpr")
    a, b = head(succedent, "sswpr"), head(rest, "sswpr")
    return transformation(Judgement(gamma, (b, a) + tail(rest, "sswpr")), [s], "sswpr")


# Catalogue

A, B = atom("A"), atom("B")
GAMMA, DELTA, SIGMA, PI = atom("Γ"), atom("Δ"), atom("Σ"), atom("Π")


def _seq(antecedent, succedent) -> Derivation:
    return premise(Judgement(tuple(antecedent), tuple(succedent)))


CALCULUS = Calculus(
    name="Gentzen LK",
    propositions=(
        Section("Variables", [[atom(name) for name in "pqrstu"]]),
        Section("Connectives", [[negation(A), implication(A, B), conjunction(A, B), disjunction(A, B)]]),
    ),
    rules=(
        Section("Axiom", [[i(A)]]),
        Section("Cut", [[cut(_seq([GAMMA], [DELTA, A]), _seq([A, SIGMA], [PI]))]]),
        Section(
            "Logical Rules",
            [
                [cl1(B, _seq([GAMMA, A], [DELTA])), dr1(B, _seq([GAMMA], [A, DELTA]))],
                [cl2(A, _seq([GAMMA, B], [DELTA])), dr2(A, _seq([GAMMA], [B, DELTA]))],
                [
                    dl(_seq([GAMMA, A], [DELTA]), _seq([SIGMA, B], [PI])),
                    cr(_seq([GAMMA], [A, DELTA]), _seq([SIGMA], [B, PI])),
                ],
                [
                    il(_seq([GAMMA], [A, DELTA]), _seq([SIGMA, B], [PI])),
                    ir(_seq([GAMMA, A], [B, DELTA])),
                ],
                [nl(_seq([GAMMA], [A, DELTA])), nr(_seq([GAMMA, A], [DELTA]))],
            ],
        ),
        Section(
            "Structural Rules",
            [
                [swl(A, _seq([GAMMA], [DELTA])), swr(A, _seq([GAMMA], [DELTA]))],
                [scl(_seq([GAMMA, A, A], [DELTA])), scr(_seq([GAMMA], [A, A, DELTA]))],
                [srotl(_seq([SIGMA, A], [PI])), srotr(_seq([SIGMA], [A, PI]))],
                [sswpl(_seq([SIGMA, A, B], [PI])), sswpr(_seq([SIGMA], [A, B, PI]))],
            ],
        ),
    ),
    constructors={
        "i": i,
        "cut": cut,
        "cl1": cl1,
        "cl2": cl2,
        "dr1": dr1,
        "dr2": dr2,
        "dl": dl,
        "cr": cr,
        "il": il,
        "ir": ir,
        "nl": nl,
        "nr": nr,
        "swl": swl,
        "swr": swr,
        "scl": scl,
        "scr": scr,
        "srotl": srotl,
        "srotr": srotr,
        "sswpl": sswpl,
        "sswpr": sswpr,
    },
)

_p, _q = atom("p"), atom("q")

EXAMPLE = ir(swl(implication(_p, implication(_q, negation(_p))), ir(i(_p))))
