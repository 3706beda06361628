#!/usr/bin/env python
"""Print a calculus' usage sheet and its sandbox derivation."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import yaml

from turnstile.layout.block import Block
from turnstile.printing.catalogue import DisplayConfig, emit, render_catalogue
from turnstile.printing.derivations import render_derivation
from turnstile.printing.theme import BASIC, Theme, resolve_theme, theme_from_config
from turnstile.systems.registry import SYSTEMS, get_system

logger = logging.getLogger("render_proofs")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render proof derivations as text diagrams.")
    parser.add_argument("--system", type=str, default="lk", choices=sorted(SYSTEMS), help="Calculus to display.")
    parser.add_argument("--config", type=str, default="", help="Path to YAML configuration (optional).")
    parser.add_argument("--theme", type=str, default="", help="Builtin theme name or path to a YAML theme.")
    parser.add_argument("--skip_usage", action="store_true", help="Only print the sandbox derivation.")
    parser.add_argument("--log_level", type=str, default="WARNING")
    return parser.parse_args(argv)


def load_config(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def select_theme(args: argparse.Namespace, cfg: dict) -> Theme:
    if args.theme:
        return resolve_theme(args.theme)
    theme_cfg = cfg.get("theme")
    if isinstance(theme_cfg, str):
        return resolve_theme(theme_cfg)
    if theme_cfg:
        return theme_from_config(theme_cfg)
    return BASIC


def main(argv: list[str] | None = None) -> Block:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(name)s: %(message)s")

    cfg = load_config(Path(args.config)) if args.config else {}
    display = DisplayConfig.from_mapping(cfg.get("display"))
    theme = select_theme(args, cfg)
    calculus, example = get_system(args.system)
    logger.info("Rendering %s with theme '%s'", calculus.name, theme.name)

    if not args.skip_usage:
        emit(render_catalogue(calculus, theme, display), indent=display.indent)
        emit(indent=display.indent)
    sandbox = render_derivation(example, theme)
    emit("Sandbox", indent=display.indent)
    emit(indent=display.indent)
    emit(sandbox, indent=display.indent)
    emit(indent=display.indent)
    emit(indent=display.indent)
    return sandbox


if __name__ == "__main__":
    main()
