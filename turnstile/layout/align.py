"""Fusing a block onto another along a shared boundary line."""
from __future__ import annotations

from typing import Optional

from turnstile.layout.block import Block, BlockLike, as_block, last_line, margin


def _leading(line: str) -> int:
    return len(line) - len(line.lstrip())


def _trailing(line: str) -> int:
    return len(line) - len(line.rstrip())


def align(top: BlockLike, bottom: BlockLike) -> Optional[Block]:
    """Stack ``bottom`` under ``top`` when top's last line and bottom's first line
    carry the same trimmed text.

    Both blocks are re-margined so the shared text lands in the same columns,
    and the shared line is kept once. Returns ``None`` when the lines differ or
    the boundary is blank; callers fall back to a plain stack.
    """
    top, bottom = as_block(top), as_block(bottom)
    last = last_line(top)
    if not last.strip() or not bottom.lines:
        return None
    first, rest = bottom.lines[0], bottom.lines[1:]
    if first.strip() != last.strip():
        return None

    top_left, top_right = _leading(last), _trailing(last)
    bottom_left, bottom_right = _leading(first), _trailing(first)

    upper = margin(top, max(0, bottom_left - top_left), max(0, bottom_right - top_right))
    lower = margin(Block(rest), max(0, top_left - bottom_left), max(0, top_right - bottom_right))
    return Block(upper.lines + lower.lines)
