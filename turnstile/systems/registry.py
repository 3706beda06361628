"""Lookup of the bundled calculi by short name."""
from __future__ import annotations

from typing import Dict, Tuple

from turnstile.logic.derivation import Derivation
from turnstile.systems import la3, lk
from turnstile.systems.calculus import Calculus

SYSTEMS: Dict[str, Tuple[Calculus, Derivation]] = {
    "lk": (lk.CALCULUS, lk.EXAMPLE),
    "la3": (la3.CALCULUS, la3.EXAMPLE),
}


def get_system(name: str) -> Tuple[Calculus, Derivation]:
    """Return the calculus and its sandbox derivation."""
    try:
        return SYSTEMS[name]
    except KeyError:
        raise ValueError(f"Unknown system '{name}'. Available: {', '.join(sorted(SYSTEMS))}") from None
