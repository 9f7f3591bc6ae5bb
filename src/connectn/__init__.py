"""Connect-N game engine for 3x3, 10x10 and 3x3x3 boards."""

__all__ = [
    "config",
    "board",
    "lines",
    "topology",
    "rules",
    "game",
    "ai",
]
