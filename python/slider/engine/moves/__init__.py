from slider.engine.moves.validator import (
    adjacency,
    apply,
    apply_all,
    direction_of,
    directions_for,
    group_chain_clicks,
    is_adjacent,
    legal_moves,
    resolve_chain,
    successors,
    target_of,
)

__all__ = [
    "adjacency",
    "apply",
    "apply_all",
    "direction_of",
    "directions_for",
    "group_chain_clicks",
    "is_adjacent",
    "legal_moves",
    "resolve_chain",
    "successors",
    "target_of",
]
