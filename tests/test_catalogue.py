import io

from turnstile.layout.block import Block
from turnstile.printing.catalogue import DisplayConfig, emit, render_catalogue
from turnstile.printing.theme import ASCII
from turnstile.systems import la3, lk


def test_catalogue_header():
    block = render_catalogue(lk.CALCULUS)
    assert block.lines[:2] == ("", "")
    assert block.lines[2] == " " * 27 + "Gentzen LK" + " " * 27
    assert block.lines[3] == " " * 27 + "*" * 10 + " " * 27
    assert block.lines[4] == ""


def test_catalogue_lists_sections_and_rules():
    block = render_catalogue(lk.CALCULUS)
    stripped = [line.strip() for line in block.lines]
    for title in ("Variables", "Connectives", "Axiom", "Cut", "Logical Rules", "Structural Rules"):
        assert title in stripped
    assert "p q r s t u" in stripped
    assert "¬A A→B A∧B A∨B" in stripped
    assert any("(∧L₁)" in line and "(∨R₁)" in line for line in block.lines)
    assert any("(RotL)" in line for line in block.lines)


def test_catalogue_respects_theme_and_unit():
    block = render_catalogue(la3.CALCULUS, ASCII, DisplayConfig(unit=8))
    assert len(block.lines[2]) == 32
    assert any("|- A" in line for line in block.lines)
    assert any("(MP)" in line for line in block.lines)


def test_display_config_from_mapping():
    assert DisplayConfig.from_mapping(None) == DisplayConfig()
    assert DisplayConfig.from_mapping({"unit": 10}) == DisplayConfig(unit=10, indent=2)


def test_emit_indents_and_trims_lines():
    stream = io.StringIO()
    emit(Block.of("ab  \n   \ncd"), stream=stream, indent=2)
    emit(stream=stream)
    assert stream.getvalue() == "  ab\n\n  cd\n\n"
