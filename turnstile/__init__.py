"""turnstile: box-drawn proof derivation diagrams for the terminal."""

__all__ = [
    "layout",
    "logic",
    "printing",
    "systems",
]

__version__ = "0.1.0"
