"""Render derivation trees as box-drawn inference diagrams."""
from __future__ import annotations

from turnstile.layout.block import Block
from turnstile.layout.tree import tree_auto
from turnstile.logic.derivation import Derivation, Premise, Transformation
from turnstile.printing.printer import format_judgement, format_rule
from turnstile.printing.theme import BASIC, Theme


def rule_note(rule: str, theme: Theme = BASIC) -> str:
    return f"({format_rule(rule, theme)})"


def render_derivation(node: Derivation, theme: Theme = BASIC) -> Block:
    """Premises render as their bare sequent; rule applications as a tree whose
    branches are the rendered dependencies."""
    if isinstance(node, Premise):
        return Block.of(format_judgement(node.result, theme))
    if isinstance(node, Transformation):
        return tree_auto(
            format_judgement(node.result, theme),
            [render_derivation(dep, theme) for dep in node.deps],
            rule_note(node.rule, theme),
        )
    raise TypeError(f"Not a derivation: {node!r}")
