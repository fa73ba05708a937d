"""Components used by the menu and game-over screens."""
from dataclasses import dataclass
from enum import Enum, auto


class MenuAction(Enum):
    """Actions that a screen button can trigger."""
    CLASSIC = auto()
    TIME_ATTACK = auto()
    RESTART = auto()
    MAIN_MENU = auto()


@dataclass
class MenuButton:
    """Interactive button; x/y are its centre."""
    label: str
    action: MenuAction
    x: float
    y: float
    width: float = 280.0
    height: float = 64.0
    enabled: bool = True
    filled: bool = True

    def contains(self, x: float, y: float) -> bool:
        half_w = self.width / 2
        half_h = self.height / 2
        return (
            self.x - half_w <= x <= self.x + half_w
            and self.y - half_h <= y <= self.y + half_h
        )


@dataclass
class MenuLabel:
    """Static text drawn on a screen."""
    text: str
    x: float
    y: float
    size: int = 18
    bold: bool = False


@dataclass
class MenuBackground:
    """Background styling data for the menu screen."""
    color: tuple[int, int, int] = (228, 227, 224)


@dataclass
class MenuTag:
    """Marker component so menu entities can be cleaned up together."""
    pass


@dataclass
class GameOverPanel:
    """Result card shown over the board once the round has ended."""
    score: int
    high_score: int
    new_record: bool
    x: float
    y: float
    width: float = 340.0
    height: float = 360.0


@dataclass
class GameOverTag:
    """Marker for the entities making up the game-over card."""
    pass
