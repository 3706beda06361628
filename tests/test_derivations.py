from turnstile.layout.block import Block
from turnstile.logic.derivation import introduction, premise, transformation
from turnstile.logic.formula import atom, implication
from turnstile.logic.judgement import Judgement, conclusion
from turnstile.printing.derivations import render_derivation
from turnstile.systems import la3, lk

A, B, P = atom("A"), atom("B"), atom("p")


def test_premise_renders_as_bare_sequent():
    assert render_derivation(premise(Judgement((A,), (A,)))) == Block.of("A ⊢ A")


def test_axiom_renders_with_empty_branch_row():
    assert render_derivation(lk.i(A)).lines == (
        "           ",
        "――――――― (I)",
        " A ⊢ A     ",
    )


def test_nested_rules_fuse_with_their_children():
    assert render_derivation(lk.ir(lk.i(P))).lines == (
        "            ",
        "――――――― (I) ",
        " p ⊢ p      ",
        "――――――― (→R)",
        " ⊢ p→p      ",
    )


def test_two_premises_share_one_rule_line():
    node = la3.mp(premise(conclusion(implication(A, B))), premise(conclusion(A)))
    assert render_derivation(node).lines == (
        " ⊢ A→B  ⊢ A      ",
        "―――――――――――― (MP)",
        "    ⊢ B          ",
    )


def test_unknown_rule_is_printed_verbatim():
    block = render_derivation(introduction(conclusion(A), "Foo"))
    assert block.lines[1].endswith(" (Foo)")


def test_rendering_is_pure():
    first = render_derivation(lk.EXAMPLE)
    second = render_derivation(lk.EXAMPLE)
    assert first == second
    assert str(render_derivation(la3.EXAMPLE)) == str(render_derivation(la3.EXAMPLE))


def test_every_rule_line_is_rendered():
    node = transformation(conclusion(A), [lk.i(A), premise(conclusion(A))], "Foo")
    block = render_derivation(node)
    assert sum(1 for line in block.lines if "―" in line) == 2
    assert len({len(line) for line in block.lines}) == 1
