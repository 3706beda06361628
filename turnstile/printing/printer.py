"""One-line text for formulas, judgements and rule labels under a theme."""
from __future__ import annotations

import logging
from functools import reduce
from typing import Dict, Optional, Sequence, Tuple

from turnstile.logic.formula import (
    Atom,
    Conjunction,
    Disjunction,
    Falsum,
    Formula,
    Implication,
    Negation,
    Verum,
)
from turnstile.logic.judgement import Judgement
from turnstile.printing.theme import BASIC, Theme

logger = logging.getLogger(__name__)

ATOMIC = 4

# Binding strength per connective; higher binds tighter.
PRECEDENCE: Dict[str, int] = {
    "implication": 1,
    "conjunction": 2,
    "disjunction": 2,
    "negation": 3,
    "falsum": 3,
    "verum": 3,
    "atom": ATOMIC,
}

# Operands at or below this precedence are parenthesized.
OPERAND_THRESHOLD: Dict[str, int] = {
    "negation": 2,
    "conjunction": 2,
    "disjunction": 2,
    "implication": 1,
}


def _unary(theme: Theme, key: str, inner: str) -> str:
    prefix, suffix = theme[key]
    return f"{prefix}{inner}{suffix}"


def _binary(theme: Theme, key: str, left: str, right: str) -> str:
    prefix, infix, suffix = theme[key]
    return f"{prefix}{left}{infix}{right}{suffix}"


def _operand(formula: Formula, parent: str, theme: Theme) -> str:
    text = format_formula(formula, theme)
    precedence = PRECEDENCE[formula.kind]
    if precedence <= OPERAND_THRESHOLD[parent]:
        return _unary(theme, "parenthesis", text)
    if precedence < ATOMIC:
        return _unary(theme, "optional", text)
    return text


def format_formula(formula: Formula, theme: Theme = BASIC) -> str:
    if isinstance(formula, Atom):
        return _unary(theme, "atom", formula.value)
    if isinstance(formula, (Falsum, Verum)):
        (glyph,) = theme[formula.kind]
        return glyph
    if isinstance(formula, Negation):
        return _unary(theme, "negation", _operand(formula.negand, "negation", theme))
    if isinstance(formula, (Conjunction, Disjunction)):
        return _binary(
            theme,
            formula.kind,
            _operand(formula.left, formula.kind, theme),
            _operand(formula.right, formula.kind, theme),
        )
    if isinstance(formula, Implication):
        return _binary(
            theme,
            "implication",
            _operand(formula.antecedent, "implication", theme),
            _operand(formula.consequent, "implication", theme),
        )
    raise TypeError(f"Not a formula: {formula!r}")


def format_formulas(formulas: Sequence[Formula], theme: Theme = BASIC) -> str:
    printed = [format_formula(formula, theme) for formula in formulas]
    if not printed:
        return ""
    return reduce(lambda left, right: _binary(theme, "formulas", left, right), printed)


def format_judgement(judgement: Judgement, theme: Theme = BASIC) -> str:
    """Antecedent, turnstile, succedent; stripped so an empty side leaves no padding."""
    return _binary(
        theme,
        "sequent",
        format_formulas(judgement.antecedent, theme),
        format_formulas(judgement.succedent, theme),
    ).strip()


# rule id -> (connective template whose glyph prefixes the label, suffix)
RULE_LABELS: Dict[str, Tuple[Optional[str], str]] = {
    "cl1": ("conjunction", "L₁"),
    "cl2": ("conjunction", "L₂"),
    "dr1": ("disjunction", "R₁"),
    "dr2": ("disjunction", "R₂"),
    "dl": ("disjunction", "L"),
    "cr": ("conjunction", "R"),
    "il": ("implication", "L"),
    "ir": ("implication", "R"),
    "nl": ("negation", "L"),
    "nr": ("negation", "R"),
    "swl": (None, "WL"),
    "swr": (None, "WR"),
    "scl": (None, "CL"),
    "scr": (None, "CR"),
    "srotl": (None, "RotL"),
    "srotr": (None, "RotR"),
    "sswpl": (None, "PL"),
    "sswpr": (None, "PR"),
}


def format_rule(rule: str, theme: Theme = BASIC) -> str:
    """Display label for a rule identifier; unknown identifiers print verbatim."""
    recipe = RULE_LABELS.get(rule)
    if recipe is None:
        logger.debug("No label for rule '%s', printing it verbatim", rule)
        return rule
    template, suffix = recipe
    prefix = theme.glyph(template) if template else ""
    return prefix + suffix
