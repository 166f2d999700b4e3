from backend.engine.gamerules.rules import (
    SlideOutcome,
    can_move,
    compact,
    has_adjacent_pair,
    is_stuck,
    merge_line,
    slide,
)

__all__ = [
    "SlideOutcome",
    "can_move",
    "compact",
    "has_adjacent_pair",
    "is_stuck",
    "merge_line",
    "slide",
]
