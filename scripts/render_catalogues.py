#!/usr/bin/env python
"""Write the usage sheet of every bundled calculus to text files."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from turnstile.printing.catalogue import DisplayConfig, emit, render_catalogue
from turnstile.printing.theme import resolve_theme
from turnstile.systems.registry import SYSTEMS


def write_catalogues(output_dir: Path, theme_name: str = "basic", display: DisplayConfig | None = None) -> List[Path]:
    theme = resolve_theme(theme_name)
    display = display or DisplayConfig()
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for name, (calculus, _) in sorted(SYSTEMS.items()):
        path = output_dir / f"{name}.txt"
        with path.open("w", encoding="utf-8") as handle:
            emit(render_catalogue(calculus, theme, display), stream=handle, indent=display.indent)
        written.append(path)
    return written


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Write usage sheets for all calculi.")
    parser.add_argument("--output_dir", type=str, default="catalogues")
    parser.add_argument("--theme", type=str, default="basic")
    parser.add_argument("--unit", type=int, default=DisplayConfig.unit)
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    for path in write_catalogues(Path(args.output_dir), args.theme, DisplayConfig(unit=args.unit)):
        print(f"Wrote {path}")


if __name__ == "__main__":
    main()
