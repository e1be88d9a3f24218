from puzzlesearch.engine.movegen.moves import (
    apply_move,
    generate_neighbors,
    legal_directions,
    move_between,
    unfold,
)

__all__ = [
    "apply_move",
    "generate_neighbors",
    "legal_directions",
    "move_between",
    "unfold",
]
