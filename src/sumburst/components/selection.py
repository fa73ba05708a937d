from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class Selection:
    """Tile ids chosen by the player, in the order they were picked."""
    tile_ids: List[int] = field(default_factory=list)

    def contains(self, tile_id: int) -> bool:
        return tile_id in self.tile_ids

    def toggle(self, tile_id: int) -> bool:
        """Add or remove tile_id; return True when it is now selected."""
        if tile_id in self.tile_ids:
            self.tile_ids.remove(tile_id)
            return False
        self.tile_ids.append(tile_id)
        return True

    def clear(self) -> List[int]:
        previous = list(self.tile_ids)
        self.tile_ids.clear()
        return previous
