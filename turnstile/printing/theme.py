"""Symbol themes: the glyphs used to typeset formulas, sequents and rule labels."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Sequence, Tuple

import yaml

logger = logging.getLogger(__name__)

NULLARY = ("falsum", "verum")
UNARY = ("atom", "optional", "parenthesis", "negation")
BINARY = ("conjunction", "disjunction", "implication", "formulas", "sequent")

TEMPLATE_SLOTS: Dict[str, int] = {
    **{key: 1 for key in NULLARY},
    **{key: 2 for key in UNARY},
    **{key: 3 for key in BINARY},
}


class ThemeError(ValueError):
    """Raised for missing, unknown or malformed theme templates."""


@dataclass(frozen=True)
class Theme:
    """A complete mapping from template identifier to its glyph slots.

    Nullary templates hold one glyph, unary templates a prefix and suffix,
    binary templates a prefix, infix and suffix.
    """

    name: str
    templates: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        checked: Dict[str, Tuple[str, ...]] = {}
        for key, glyphs in self.templates.items():
            if key not in TEMPLATE_SLOTS:
                raise ThemeError(f"Unknown template '{key}' in theme '{self.name}'")
            glyphs = tuple(str(glyph) for glyph in glyphs)
            if len(glyphs) != TEMPLATE_SLOTS[key]:
                raise ThemeError(
                    f"Template '{key}' in theme '{self.name}' needs {TEMPLATE_SLOTS[key]} glyphs, got {len(glyphs)}"
                )
            checked[key] = glyphs
        missing = [key for key in TEMPLATE_SLOTS if key not in checked]
        if missing:
            raise ThemeError(f"Theme '{self.name}' is missing templates: {', '.join(missing)}")
        object.__setattr__(self, "templates", checked)

    def __getitem__(self, key: str) -> Tuple[str, ...]:
        return self.templates[key]

    def glyph(self, key: str) -> str:
        """All slots of a template joined, e.g. ``∧`` for conjunction."""
        return "".join(self.templates[key])

    def override(self, name: str, templates: Mapping[str, Sequence[str]]) -> "Theme":
        merged = dict(self.templates)
        merged.update({key: tuple(value) for key, value in templates.items()})
        return Theme(name, merged)


BASIC = Theme(
    "basic",
    {
        "falsum": ("⊥",),
        "verum": ("⊤",),
        "atom": ("", ""),
        "optional": ("", ""),
        "parenthesis": ("(", ")"),
        "negation": ("¬", ""),
        "conjunction": ("", "∧", ""),
        "disjunction": ("", "∨", ""),
        "implication": ("", "→", ""),
        "formulas": ("", ",", ""),
        "sequent": ("", " ⊢ ", ""),
    },
)

ASCII = BASIC.override(
    "ascii",
    {
        "falsum": ("_|_",),
        "verum": ("T",),
        "negation": ("~", ""),
        "conjunction": ("", "/\\", ""),
        "disjunction": ("", "\\/", ""),
        "implication": ("", "->", ""),
        "sequent": ("", " |- ", ""),
    },
)

THEMES: Dict[str, Theme] = {theme.name: theme for theme in (BASIC, ASCII)}


def get_theme(name: str) -> Theme:
    try:
        return THEMES[name]
    except KeyError:
        raise ThemeError(f"Unknown theme '{name}'. Available: {', '.join(sorted(THEMES))}") from None


def theme_from_config(config: Mapping[str, object], default_name: str = "custom") -> Theme:
    """Build a theme from a mapping with optional ``name``, ``extends`` and ``templates``."""
    base = get_theme(str(config.get("extends", BASIC.name)))
    templates = config.get("templates") or {}
    if not isinstance(templates, Mapping):
        raise ThemeError("Theme 'templates' must be a mapping")
    name = str(config.get("name", default_name))
    return base.override(name, {key: _glyphs(value) for key, value in templates.items()})


def _glyphs(value: object) -> Tuple[str, ...]:
    # A bare string is a single glyph, not a sequence of characters.
    if isinstance(value, str):
        return (value,)
    if value is None:
        return ("",)
    if not isinstance(value, (list, tuple)):
        raise ThemeError(f"Template glyphs must be a string or a list, got {value!r}")
    return tuple("" if glyph is None else str(glyph) for glyph in value)


def load_theme(path: Path) -> Theme:
    with Path(path).open("r", encoding="utf-8") as handle:
        config = yaml.safe_load(handle) or {}
    if not isinstance(config, Mapping):
        raise ThemeError(f"Theme file {path} must contain a mapping")
    theme = theme_from_config(config, default_name=Path(path).stem)
    logger.debug("Loaded theme '%s' from %s", theme.name, path)
    return theme


def resolve_theme(name_or_path: str) -> Theme:
    """Accept either a builtin theme name or a path to a YAML theme file."""
    if name_or_path in THEMES:
        return THEMES[name_or_path]
    path = Path(name_or_path)
    if path.suffix in {".yaml", ".yml"} or path.exists():
        return load_theme(path)
    return get_theme(name_or_path)
