"""The game loop: state per tick, and the terminal front end."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Iterable

from .render import attack_frames, build_map, hitbox_report, render_map
from .world import (
    Key,
    apply_gravity,
    camera_offset_for,
    find_collision,
    make_player,
    move,
    spawn_monsters,
)

TICK_SECONDS = 0.01
ATTACK_STEP_SECONDS = 0.01


class Game:
    """One running game: the player, the monsters and the current map."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.player = make_player()
        self.camera_offset = 0
        self.monsters = spawn_monsters(self.rng, self.camera_offset)
        self.grid = build_map(self.player, self.monsters, self.camera_offset)
        self.collided: int | None = None

    @property
    def over(self) -> bool:
        return self.collided is not None

    def frame(self) -> str:
        """Rebuild the map and return the screen; records a collision if one occurs."""
        self.camera_offset = camera_offset_for(self.player)
        self.player.update_hitboxes()
        for monster in self.monsters:
            monster.update_hitboxes()
        self.grid = build_map(self.player, self.monsters, self.camera_offset)
        self.collided = find_collision(self.player, self.monsters)
        return render_map(self.grid, self.player) + hitbox_report(self.player, self.monsters)

    def tick(self, keys: Iterable[Key]) -> list[str]:
        """Advance physics and input by one tick; return attack animation screens."""
        apply_gravity(self.player)
        if not move(self.player, keys):
            return []
        report = hitbox_report
        return [
            screen + report(self.player, self.monsters)
            for screen in attack_frames(self.grid, self.player, self.camera_offset)
        ]


def _pressed_keys(term) -> set[Key]:
    keys: set[Key] = set()
    while True:
        stroke = term.inkey(timeout=0)
        if not stroke:
            return keys
        try:
            keys.add(Key(str(stroke).lower()))
        except ValueError:
            continue


def main(argv: list[str] | None = None) -> int:
    """Run the game in the terminal until the player collides with a monster."""
    from blessed import Terminal

    parser = argparse.ArgumentParser(description="Side-scrolling stick-figure game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for monster placement")
    args = parser.parse_args(argv)

    game = Game(random.Random(args.seed))
    term = Terminal()
    out = sys.stdout

    with term.cbreak(), term.hidden_cursor():
        out.write(term.home + term.clear)
        while True:
            screen = game.frame()
            if game.over:
                break
            out.write(term.home + screen)
            out.flush()
            for attack_screen in game.tick(_pressed_keys(term)):
                out.write(term.home + attack_screen)
                out.flush()
                time.sleep(ATTACK_STEP_SECONDS)
            time.sleep(TICK_SECONDS)

    print("Collision! Game over.")
    try:
        input("Press Enter to exit: ")
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())