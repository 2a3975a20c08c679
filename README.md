# concent-game

A small side-scrolling action game played in the terminal. You control a
stick figure in a world 200 columns wide and 20 rows high, seen through a
120-column window that follows you. Five monsters stand at random places
along the ground. The game ends as soon as the player's hitbox overlaps a
monster's.

## Installing

```
pip install .
```

## Playing

```
concent-game
```

Use `concent-game --seed N` to place the monsters the same way every time.

Controls:

| Key     | Action                                              |
|---------|-----------------------------------------------------|
| `A`     | walk left two columns                               |
| `D`     | walk right two columns                              |
| `Space` | jump (only when standing on the ground)             |
| `K`     | throw a projectile that flies ten cells ahead       |

The player starts in the sky and falls to the ground. The map is redrawn
every tick. Under it, debug lines show the hitbox, health and attack state
of the player and of every monster. After a collision the game prints
"Collision! Game over." and waits for Enter.

## Using the pieces

The game logic can be used without a terminal:

- `concent_game.world` has the characters and the physics: `Point`,
  `Hitbox` (with `overlaps`), `Key`, `Character` (with `shift`, `land` and
  `update_hitboxes`), `make_player()`, `make_monster(x)`,
  `spawn_monsters(rng, camera_offset)`, `camera_offset_for(character)`,
  `apply_gravity(character)`, `move(character, keys)`, and the collision
  checks `check_collision(player, monster)` and
  `find_collision(player, monsters)`.
- `concent_game.render` draws into a character grid: `blank_map()`,
  `draw_player(...)`, `draw_monsters(...)`, `build_map(player, monsters,
  camera_offset)`, `render_map(grid, player)`, `hitbox_report(player,
  monsters)`, and `attack_frames(grid, player, camera_offset)`, a generator
  that yields one screen per step of the projectile's flight.
- `concent_game.game.Game` puts them together: create it with a
  `random.Random`, call `frame()` for the text to show (it also records any
  collision in `collided`, and `over` tells whether the game has ended),
  and `tick(keys)` with the keys pressed during that tick; `tick` returns
  the attack animation screens, if any.

## What it does not do

The monsters stand still and never attack. There is no score, no lives and
no level: the first collision ends the game. A projectile is only drawn;
it does not hurt monsters.

## Running the tests

```
pip install .[test]
pytest
```