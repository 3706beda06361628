from pathlib import Path

from render_proofs import main
from scripts.render_catalogues import write_catalogues

ROOT = Path(__file__).resolve().parents[1]


def test_render_sandbox_only(capsys):
    block = main(["--system", "la3", "--skip_usage"])
    out = capsys.readouterr().out
    assert "Sandbox" in out
    assert "(MP)" in out
    assert "(A2)" in out
    assert "Łukasiewicz" not in out
    assert "⊢ p→p" in str(block) or "(p→p)" in str(block)


def test_render_with_usage_and_ascii_theme(capsys):
    main(["--system", "lk", "--theme", "ascii"])
    out = capsys.readouterr().out
    assert "Gentzen LK" in out
    assert " |- " in out
    assert "(->R)" in out
    assert all(line == line.rstrip() for line in out.splitlines())


def test_render_with_config_file():
    block = main(["--config", str(ROOT / "configs" / "render.yaml"), "--skip_usage"])
    assert "(→R)" in str(block)


def test_write_catalogues(tmp_path: Path):
    written = write_catalogues(tmp_path, "basic")
    assert [path.name for path in written] == ["la3.txt", "lk.txt"]
    text = (tmp_path / "lk.txt").read_text(encoding="utf-8")
    assert "Gentzen LK" in text
    assert "Structural Rules" in text
