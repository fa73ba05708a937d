from dataclasses import dataclass

@dataclass(slots=True)
class BoardPosition:
    """Grid cell of a tile entity. Row 0 is the top of the board."""
    row: int
    col: int
