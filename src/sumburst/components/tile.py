from dataclasses import dataclass

@dataclass(slots=True)
class NumberTile:
    """Numbered tile; the owning entity id doubles as the tile id.

    Placement lives in a separate BoardPosition component.
    """
    value: int
