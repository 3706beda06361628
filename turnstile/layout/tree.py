"""Inference-rule diagrams: premises over a rule line over a conclusion."""
from __future__ import annotations

from typing import Sequence

from turnstile.layout.align import align
from turnstile.layout.block import (
    Block,
    BlockLike,
    as_block,
    center,
    horizontal_rule,
    last_line,
    rectangularize,
    spaced,
    stack,
)

BRANCH_GAP = 2
RULE_OVERHANG = 2


def tree(root: BlockLike, branches: Sequence[BlockLike], note: BlockLike, line_width: int) -> Block:
    """Draw ``branches`` side by side above a rule line of ``line_width`` labelled
    with ``note``, and ``root`` centered below it.

    When the branches' bottom line matches the centered summary line, the rule
    is fused directly under the branches instead of being stacked below them.
    """
    children = center(spaced(branches, BRANCH_GAP), line_width)
    summary = center(last_line(children).strip(), line_width)
    rule_row = spaced([horizontal_rule(line_width), note])
    conclusion = center(root, line_width)

    fused = align(children, rectangularize(stack(summary, rule_row, conclusion)))
    if fused is not None:
        return fused
    return rectangularize(stack(children, rule_row, conclusion))


def tree_auto(root: BlockLike, branches: Sequence[BlockLike], note: BlockLike) -> Block:
    """``tree`` with the rule line sized to span the branch conclusions and the root."""
    span = len(last_line(spaced(branches, BRANCH_GAP)).strip())
    line_width = max(span + RULE_OVERHANG, as_block(root).width + RULE_OVERHANG)
    return tree(root, branches, note, line_width)
