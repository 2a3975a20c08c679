"""Drawing the world into a character grid and turning it into screen text."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .world import (
    ATTACK_RANGE,
    GROUND_Y,
    MAP_HEIGHT,
    MAP_WIDTH,
    VIEW_HEIGHT,
    VIEW_WIDTH,
    Character,
)

RED_BACKGROUND = "\033[41m"
RESET_COLOR = "\033[0m"

EMPTY = "."
GROUND = "_"
PLAYER_HEAD = "O"
PLAYER_BODY = "T"
MONSTER_HEAD = "M"
MONSTER_BODY = "A"
MONSTER_LEG = "&"
PROJECTILE_SMALL = "o"
PROJECTILE_LARGE = "O"

Grid = list[list[str]]

# (right walk frame, left walk frame) -> (left leg, right leg)
_LEG_SHAPES: dict[tuple[int, int], tuple[str, str]] = {
    (0, 0): ("|", "|"),
    (1, 0): ("|", "/"),
    (2, 0): ("|", "|"),
    (3, 0): ("/", "|"),
    (0, 1): ("L", "|"),
    (0, 2): ("|", "|"),
    (0, 3): ("|", "L"),
}


def _background(y: int) -> str:
    return GROUND if y == GROUND_Y else EMPTY


def _inside(grid: Grid, x: int, y: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def _put(grid: Grid, x: int, y: int, char: str) -> None:
    if _inside(grid, x, y):
        grid[y][x] = char


def _cell(grid: Grid, x: int, y: int) -> str:
    return grid[y][x] if _inside(grid, x, y) else _background(y)


def blank_map() -> Grid:
    """Return an empty map: open air above a row of ground."""
    return [list(_background(y) * MAP_WIDTH) for y in range(MAP_HEIGHT)]


def draw_player(grid: Grid, player: Character, camera_offset: int) -> None:
    """Draw the player, with legs posed according to its walk frames."""
    _put(grid, player.head.x - camera_offset, player.head.y, PLAYER_HEAD)
    _put(grid, player.body.x - camera_offset, player.body.y, PLAYER_BODY)
    shape = _LEG_SHAPES.get((player.right_walk_frame, player.left_walk_frame))
    if shape is None:
        return
    left, right = shape
    _put(grid, player.right_leg.x - camera_offset, player.right_leg.y, right)
    _put(grid, player.left_leg.x - camera_offset, player.left_leg.y, left)


def draw_monsters(grid: Grid, monsters: Sequence[Character], camera_offset: int) -> None:
    """Draw every monster whose body lies within the map rows and the view width."""
    for monster in monsters:
        body = monster.body
        if not (0 <= body.y < MAP_HEIGHT and 0 <= body.x < VIEW_WIDTH):
            continue
        _put(grid, body.x - camera_offset, body.y, MONSTER_BODY)
        _put(grid, monster.head.x - camera_offset, monster.head.y, MONSTER_HEAD)
        for leg in (monster.left_leg, monster.right_leg):
            _put(grid, leg.x - camera_offset, leg.y, MONSTER_LEG)


def build_map(player: Character, monsters: Sequence[Character], camera_offset: int) -> Grid:
    """Return a fresh map with the player and monsters drawn on it."""
    grid = blank_map()
    draw_player(grid, player, camera_offset)
    draw_monsters(grid, monsters, camera_offset)
    return grid


def render_map(grid: Grid, player: Character) -> str:
    """Return the visible part of the map, marking the attack hitbox cell in red."""
    marker = player.hitboxes[1]
    lines = []
    for y in range(VIEW_HEIGHT):
        cells = []
        for x in range(VIEW_WIDTH):
            char = grid[y][x]
            if x == marker.x and y == marker.y:
                char = f"{RED_BACKGROUND}{char}{RESET_COLOR}"
            cells.append(char)
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def hitbox_report(player: Character, monsters: Sequence[Character]) -> str:
    """Return debugging lines describing the player's and monsters' hitboxes."""
    box = player.hitboxes[0]
    lines = [
        f"Player hitbox: x={box.x}, y={box.y}, width={box.width}, height={box.height}, "
        f"HP={player.health}, attack={int(player.attacking)}, attackPower={player.attack_power}"
    ]
    for index, monster in enumerate(monsters):
        mbox = monster.hitboxes[0]
        lines.append(
            f"Monster {index} hitbox: x={mbox.x}, y={mbox.y}, width={mbox.width}, "
            f"height={mbox.height},HP={monster.health}, attack={int(monster.attacking)}"
        )
    return "".join(line + "\n" for line in lines)


def attack_frames(grid: Grid, player: Character, camera_offset: int) -> Iterator[str]:
    """Animate a projectile flying from the player, yielding one screen per step."""
    player.attacking = True
    direction = 1 if player.facing_right else -1
    row = player.body.y
    try:
        for step in range(ATTACK_RANGE):
            ahead = player.body.x + direction * (step + 2) - camera_offset
            behind = player.body.x + direction * (step + 1) - camera_offset
            player.hitboxes[1].x = ahead
            player.hitboxes[1].y = row
            _put(grid, behind, row, _cell(grid, ahead, row))
            _put(grid, ahead, row, PROJECTILE_SMALL if step % 2 == 0 else PROJECTILE_LARGE)
            yield render_map(grid, player)
    finally:
        player.attacking = False