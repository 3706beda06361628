from turnstile.logic.formula import (
    FALSUM,
    VERUM,
    atom,
    conjunction,
    disjunction,
    implication,
    negation,
)
from turnstile.logic.judgement import Judgement, conclusion
from turnstile.printing.printer import format_formula, format_formulas, format_judgement, format_rule
from turnstile.printing.theme import ASCII, BASIC

A, B = atom("A"), atom("B")


def test_implication_nests_to_the_right_with_parentheses():
    assert format_formula(implication(A, implication(B, A))) == "A→(B→A)"
    assert format_formula(implication(implication(A, B), A)) == "(A→B)→A"


def test_binary_operands_of_lower_precedence_are_parenthesized():
    assert format_formula(negation(conjunction(A, B))) == "¬(A∧B)"
    assert format_formula(conjunction(disjunction(A, B), A)) == "(A∨B)∧A"
    assert format_formula(implication(conjunction(A, B), disjunction(A, B))) == "A∧B→A∨B"


def test_tighter_operands_stay_bare():
    assert format_formula(negation(negation(A))) == "¬¬A"
    assert format_formula(conjunction(negation(A), FALSUM)) == "¬A∧⊥"
    assert format_formula(disjunction(VERUM, A)) == "⊤∨A"


def test_optional_wrapper_marks_non_atomic_operands():
    theme = BASIC.override("bracketed", {"optional": ("[", "]")})
    assert format_formula(implication(negation(A), B), theme) == "[¬A]→B"
    assert format_formula(negation(A), theme) == "¬A"


def test_formula_lists_keep_order_and_duplicates():
    assert format_formulas([]) == ""
    assert format_formulas([B, A, A]) == "B,A,A"


def test_judgements():
    assert format_judgement(Judgement((A, B), (A,))) == "A,B ⊢ A"
    assert format_judgement(conclusion(A)) == "⊢ A"
    assert format_judgement(Judgement((A,), ())) == "A ⊢"
    assert format_judgement(Judgement((A,), (negation(A),)), ASCII) == "A |- ~A"


def test_rule_labels():
    assert format_rule("cl1") == "∧L₁"
    assert format_rule("dr2") == "∨R₂"
    assert format_rule("nr") == "¬R"
    assert format_rule("scl") == "CL"
    assert format_rule("srotr") == "RotR"
    assert format_rule("ir", ASCII) == "->R"


def test_unknown_rule_labels_print_verbatim():
    assert format_rule("MP") == "MP"
    assert format_rule("Cut") == "Cut"
    assert format_rule("") == ""
