"""Game world: characters, hitboxes, physics and collisions."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

MAP_WIDTH = 200
MAP_HEIGHT = 20
VIEW_WIDTH = 120
VIEW_HEIGHT = 20
MONSTER_COUNT = 5
ATTACK_RANGE = 10

GROUND_Y = MAP_HEIGHT - 1
GRAVITY = 0.8
JUMP_GRAVITY = 1.0
AIR_GRAVITY = 0.1
JUMP_VELOCITY = -3.0
STEP = 2
WALK_FRAMES = 4


@dataclass
class Point:
    """A cell position on the map."""

    x: int
    y: int


@dataclass
class Hitbox:
    """An axis-aligned rectangle used for collision tests."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0

    def overlaps(self, other: Hitbox) -> bool:
        """Return True when the two rectangles intersect (touching edges do not)."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


class Key(Enum):
    """Keys the game reacts to."""

    LEFT = "a"
    RIGHT = "d"
    JUMP = " "
    ATTACK = "k"


def _truncate(value: float) -> int:
    return int(value)


@dataclass
class Character:
    """A stick figure: the player or a monster."""

    head: Point
    body: Point
    left_leg: Point
    right_leg: Point
    is_monster: bool = False
    jumping: bool = False
    alive: bool = True
    attacking: bool = False
    velocity: float = 0.0
    jump_velocity: float = 0.0
    left_walk_frame: int = 0
    right_walk_frame: int = 0
    health: int = 10
    facing_right: bool = True
    attack_power: int = 5
    hitboxes: list[Hitbox] = field(default_factory=lambda: [Hitbox(), Hitbox()])

    @property
    def parts(self) -> tuple[Point, Point, Point, Point]:
        return (self.head, self.body, self.left_leg, self.right_leg)

    def shift(self, dx: float, dy: float) -> None:
        """Move every body part, truncating fractional results toward zero."""
        for part in self.parts:
            part.x = _truncate(part.x + dx)
            part.y = _truncate(part.y + dy)

    def land(self) -> None:
        """Stand the character on the ground row."""
        self.head.y = GROUND_Y - 2
        self.body.y = GROUND_Y - 1
        self.left_leg.y = GROUND_Y
        self.right_leg.y = GROUND_Y

    def update_hitboxes(self) -> None:
        """Place the hitboxes around the body."""
        if self.is_monster:
            self.hitboxes[0] = Hitbox(self.body.x - 1, self.body.y - 1, 3, 2)
        else:
            self.hitboxes[0] = Hitbox(self.body.x - 1, self.body.y - 1, 3, 3)
            self.hitboxes[1] = Hitbox(self.body.x, self.body.y, 3, 3)


def make_player() -> Character:
    """Create the player at its starting position in the sky."""
    return Character(
        head=Point(5, 0),
        body=Point(5, 1),
        left_leg=Point(4, 2),
        right_leg=Point(6, 2),
        health=10,
        attack_power=5,
    )


def make_monster(x: int) -> Character:
    """Create a monster standing on the ground with its body at column x."""
    return Character(
        head=Point(x, MAP_HEIGHT - 2),
        body=Point(x, MAP_HEIGHT - 1),
        left_leg=Point(x - 1, MAP_HEIGHT - 1),
        right_leg=Point(x + 1, MAP_HEIGHT - 1),
        is_monster=True,
        health=10,
        attack_power=5,
    )


def spawn_monsters(rng: random.Random, camera_offset: int) -> list[Character]:
    """Place MONSTER_COUNT monsters at random columns of the map."""
    monsters = []
    for _ in range(MONSTER_COUNT):
        world_x = rng.randrange(MAP_WIDTH) + camera_offset
        monsters.append(make_monster(world_x - camera_offset))
    return monsters


def camera_offset_for(character: Character) -> int:
    """Return the camera offset that centres the character, clamped to the map."""
    offset = character.head.x - VIEW_WIDTH // 2
    return max(0, min(offset, MAP_WIDTH - VIEW_WIDTH))


def apply_gravity(character: Character) -> None:
    """Apply falling and jump motion for one tick."""
    if character.left_leg.y < GROUND_Y:
        character.velocity += GRAVITY
        character.shift(0, character.velocity)
        if character.left_leg.y >= GROUND_Y:
            character.land()
            character.velocity = 0.0
            character.jumping = False

    if character.jumping:
        character.shift(0, character.jump_velocity)
        character.jump_velocity += JUMP_GRAVITY
        if character.left_leg.y >= GROUND_Y:
            character.land()
            character.jump_velocity = 0.0
            character.jumping = False


def move(character: Character, keys: Iterable[Key]) -> bool:
    """Handle one tick of input; return True when an attack was requested."""
    pressed = set(keys)

    if character.jumping:
        character.shift(0, character.jump_velocity)
        character.jump_velocity += AIR_GRAVITY
        if character.head.y >= GROUND_Y:
            for part in character.parts:
                part.y = GROUND_Y
            character.jumping = False
            character.jump_velocity = 0.0

    if Key.LEFT in pressed and character.head.x > 0:
        character.shift(-STEP, 0)
        character.left_walk_frame = (character.left_walk_frame + 1) % WALK_FRAMES
        character.right_walk_frame = 0
        character.facing_right = False

    if Key.RIGHT in pressed and character.head.x < MAP_WIDTH - 1:
        character.shift(STEP, 0)
        character.right_walk_frame = (character.right_walk_frame + 1) % WALK_FRAMES
        character.left_walk_frame = 0
        character.facing_right = True

    if Key.JUMP in pressed and not character.jumping and character.left_leg.y == GROUND_Y:
        character.jump_velocity = JUMP_VELOCITY
        character.jumping = True

    return Key.ATTACK in pressed


def check_collision(player: Character, monster: Character) -> bool:
    """Test the player's hitboxes against the monster; damage it on a hit."""
    target = monster.hitboxes[0]
    for box in player.hitboxes:
        if box.is_valid and box.overlaps(target):
            monster.health -= player.attack_power
            return True
    return False


def find_collision(player: Character, monsters: Sequence[Character]) -> int | None:
    """Return the index of the first monster the player collides with, or None."""
    for index, monster in enumerate(monsters):
        if check_collision(player, monster):
            return index
    return None