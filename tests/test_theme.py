from pathlib import Path

import pytest

from turnstile.logic.formula import atom, conjunction
from turnstile.printing.printer import format_formula
from turnstile.printing.theme import ASCII, BASIC, Theme, ThemeError, get_theme, load_theme, resolve_theme

ROOT = Path(__file__).resolve().parents[1]


def test_builtin_themes():
    assert BASIC["sequent"] == ("", " ⊢ ", "")
    assert BASIC.glyph("implication") == "→"
    assert ASCII.glyph("conjunction") == "/\\"
    assert ASCII["parenthesis"] == BASIC["parenthesis"]
    assert get_theme("ascii") is ASCII
    assert resolve_theme("basic") is BASIC


def test_theme_validation():
    with pytest.raises(ThemeError):
        Theme("broken", {"falsum": ("⊥",)})
    with pytest.raises(ThemeError):
        BASIC.override("broken", {"negation": ("¬",)})
    with pytest.raises(ThemeError):
        BASIC.override("broken", {"nand": ("", "|", "")})
    with pytest.raises(ThemeError):
        get_theme("missing")


def test_load_theme_from_yaml(tmp_path: Path):
    path = tmp_path / "words.yaml"
    path.write_text(
        "name: words\n"
        "extends: ascii\n"
        "templates:\n"
        "  conjunction: ['', ' and ', '']\n"
        "  verum: 'true'\n",
        encoding="utf-8",
    )
    theme = load_theme(path)
    assert theme.name == "words"
    assert theme["verum"] == ("true",)
    assert theme["negation"] == ASCII["negation"]
    assert format_formula(conjunction(atom("A"), atom("B")), theme) == "A and B"
    assert resolve_theme(str(path)) == theme


def test_bundled_theme_file():
    theme = load_theme(ROOT / "configs" / "themes" / "ascii.yaml")
    assert theme.name == "plain-ascii"
    assert theme["negation"] == ("~", "")
    assert theme["sequent"] == ("", " |- ", "")


def test_theme_file_must_be_a_mapping(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ThemeError):
        load_theme(path)
