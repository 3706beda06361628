"""Rectangular text blocks and the layout algebra over them."""
from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Sequence, Tuple, Union

SPACE = " "
RULE_CHAR = "―"


@dataclass(frozen=True)
class Block:
    """An immutable sequence of text lines; lines may be ragged."""

    lines: Tuple[str, ...] = ("",)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))

    @classmethod
    def of(cls, text: str) -> "Block":
        return cls(tuple(text.split("\n")))

    @property
    def width(self) -> int:
        return max((len(line) for line in self.lines), default=0)

    @property
    def height(self) -> int:
        return len(self.lines)

    def __str__(self) -> str:
        return "\n".join(self.lines)


BlockLike = Union[Block, str]


def as_block(value: BlockLike) -> Block:
    if isinstance(value, Block):
        return value
    return Block.of(value)


def width(block: BlockLike) -> int:
    return as_block(block).width


def last_line(block: BlockLike) -> str:
    lines = as_block(block).lines
    return lines[-1] if lines else ""


def margin(block: BlockLike, left: int, right: int = 0, fill: str = SPACE) -> Block:
    """Pad every line independently; line lengths are not equalized."""
    return Block(tuple(fill * left + line + fill * right for line in as_block(block).lines))


def rectangularize(block: BlockLike) -> Block:
    block = as_block(block)
    size = block.width
    return Block(tuple(line.ljust(size, SPACE) for line in block.lines))


def left_align_to(block: BlockLike, size: int) -> Block:
    block = as_block(block)
    return margin(block, 0, max(0, size - block.width))


def center(block: BlockLike, size: int) -> Block:
    """Center within ``size`` columns. Never clips: a wider block is returned as is."""
    block = as_block(block)
    delta = size - block.width
    left = max(0, delta // 2)
    right = max(0, delta - left)
    return margin(block, left, right)


def concat(first: BlockLike, second: BlockLike) -> Block:
    """Join two blocks side by side, sharing their bottom line."""
    first, second = as_block(first), as_block(second)
    first_width, second_width = first.width, second.width
    count = max(first.height, second.height)
    first_rows = ("",) * (count - first.height) + first.lines
    second_rows = ("",) * (count - second.height) + second.lines
    return Block(
        tuple(
            left.ljust(first_width, SPACE) + right.ljust(second_width, SPACE)
            for left, right in zip(first_rows, second_rows)
        )
    )


def spaced(blocks: Sequence[BlockLike], gap: int = 1) -> Block:
    """Concatenate blocks left to right with ``gap`` blank columns between them."""
    if not blocks:
        return Block.of("")
    head, *tail = [as_block(block) for block in blocks]
    return reduce(concat, (margin(block, gap, 0) for block in tail), head)


def stack(*blocks: BlockLike) -> Block:
    lines: list[str] = []
    for block in blocks:
        lines.extend(as_block(block).lines)
    return Block(tuple(lines))


def underline(block: BlockLike, char: str) -> Block:
    block = as_block(block)
    return Block(block.lines + (char * block.width,))


def horizontal_rule(size: int) -> Block:
    return Block((RULE_CHAR * size,))
