"""Factory helpers for the main menu and game-over entities."""
from esper import World

from sumburst.menu.components import (
    GameOverPanel,
    GameOverTag,
    MenuAction,
    MenuBackground,
    MenuButton,
    MenuLabel,
    MenuTag,
)


def spawn_main_menu(world: World, width: float, height: float, *, best_score: int = 0) -> None:
    """Create the title, mode buttons and (when set) the best score line."""
    center_x = width / 2
    center_y = height / 2

    world.create_entity(MenuBackground(), MenuTag())
    world.create_entity(MenuLabel("SUMBURST", center_x, center_y + 170.0, size=48, bold=True), MenuTag())
    world.create_entity(MenuLabel("Master the math. Clear the grid.", center_x, center_y + 120.0, size=16), MenuTag())

    button_specs = (
        ("CLASSIC MODE", MenuAction.CLASSIC, center_y + 30.0, True),
        ("TIME ATTACK", MenuAction.TIME_ATTACK, center_y - 50.0, False),
    )
    for label, action, y_position, filled in button_specs:
        world.create_entity(
            MenuButton(label=label, action=action, x=center_x, y=y_position, filled=filled),
            MenuTag(),
        )

    if best_score > 0:
        world.create_entity(MenuLabel(f"BEST: {best_score}", center_x, center_y - 140.0, size=18, bold=True), MenuTag())


def clear_menu(world: World) -> None:
    """Remove all entities that are part of the menu UI."""
    for ent in {ent for ent, _ in world.get_component(MenuTag)}:
        world.delete_entity(ent, immediate=True)


def spawn_game_over(
    world: World,
    width: float,
    height: float,
    *,
    score: int,
    high_score: int,
    new_record: bool,
) -> int:
    """Create the result card and its two buttons; return the card entity."""
    center_x = width / 2
    center_y = height / 2
    panel_entity = world.create_entity(
        GameOverPanel(score=score, high_score=high_score, new_record=new_record, x=center_x, y=center_y),
        GameOverTag(),
    )
    world.create_entity(
        MenuButton(label="PLAY AGAIN", action=MenuAction.RESTART, x=center_x, y=center_y - 70.0, width=260.0, height=56.0),
        GameOverTag(),
    )
    world.create_entity(
        MenuButton(label="MAIN MENU", action=MenuAction.MAIN_MENU, x=center_x, y=center_y - 140.0, width=260.0, height=56.0, filled=False),
        GameOverTag(),
    )
    return panel_entity


def clear_game_over(world: World) -> None:
    for ent in {ent for ent, _ in world.get_component(GameOverTag)}:
        world.delete_entity(ent, immediate=True)
