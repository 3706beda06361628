"""Usage sheets for a calculus and console output of rendered blocks."""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import List, Mapping, Optional, TextIO

from turnstile.layout.block import Block, BlockLike, as_block, center, spaced, stack, underline
from turnstile.printing.derivations import render_derivation
from turnstile.printing.printer import format_formula
from turnstile.printing.theme import BASIC, Theme
from turnstile.systems.calculus import Calculus

logger = logging.getLogger(__name__)

BLANK = Block.of("")


@dataclass
class DisplayConfig:
    unit: int = 16
    indent: int = 2

    @classmethod
    def from_mapping(cls, config: Optional[Mapping[str, object]]) -> "DisplayConfig":
        config = config or {}
        return cls(
            unit=int(config.get("unit", cls.unit)),
            indent=int(config.get("indent", cls.indent)),
        )


def render_catalogue(calculus: Calculus, theme: Theme = BASIC, display: Optional[DisplayConfig] = None) -> Block:
    """Typeset the calculus name, its connectives and one instance of every rule."""
    display = display or DisplayConfig()
    half = 2 * display.unit
    full = 4 * display.unit

    parts: List[Block] = [BLANK, BLANK, center(underline(calculus.name, "*"), full), BLANK]
    for section in calculus.propositions:
        parts.extend([BLANK, Block.of(section.title), BLANK, BLANK])
        for row in section.examples:
            formulas = [format_formula(formula, theme) for formula in row]
            parts.extend([center(spaced(formulas, 1), half), BLANK])
    parts.append(BLANK)
    for section in calculus.rules:
        parts.extend([BLANK, Block.of(section.title), BLANK, BLANK])
        for row in section.examples:
            rendered = [center(render_derivation(node, theme), half) for node in row]
            parts.extend([spaced(rendered, 0), BLANK, BLANK])

    logger.debug("Rendered catalogue for %s with theme '%s'", calculus.name, theme.name)
    return stack(*parts)


def emit(block: BlockLike = "", stream: Optional[TextIO] = None, indent: int = 2) -> None:
    """Write a block line by line, indented and with trailing whitespace removed."""
    stream = stream or sys.stdout
    for line in as_block(block).lines:
        stream.write((" " * indent + line).rstrip() + "\n")
