import random

import pytest

from concent_game.world import (
    GROUND_Y,
    MAP_HEIGHT,
    MAP_WIDTH,
    MONSTER_COUNT,
    VIEW_WIDTH,
    Character,
    Hitbox,
    Key,
    Point,
    apply_gravity,
    camera_offset_for,
    check_collision,
    find_collision,
    make_monster,
    make_player,
    move,
    spawn_monsters,
)


def grounded_player(x=50):
    player = make_player()
    player.shift(x - player.head.x, 0)
    player.land()
    return player


def test_make_player_start_position():
    player = make_player()
    assert player.head == Point(5, 0)
    assert player.body == Point(5, 1)
    assert player.left_leg == Point(4, 2)
    assert player.right_leg == Point(6, 2)
    assert player.health == 10
    assert player.attack_power == 5
    assert player.facing_right is True


def test_make_monster_stands_on_ground():
    monster = make_monster(30)
    assert monster.head == Point(30, MAP_HEIGHT - 2)
    assert monster.body == Point(30, MAP_HEIGHT - 1)
    assert monster.left_leg == Point(29, MAP_HEIGHT - 1)
    assert monster.right_leg == Point(31, MAP_HEIGHT - 1)
    assert monster.is_monster is True


def test_hitbox_overlap_is_symmetric():
    a = Hitbox(0, 0, 3, 3)
    b = Hitbox(2, 2, 3, 3)
    assert a.overlaps(b) is True
    assert b.overlaps(a) is True


def test_hitbox_touching_edges_do_not_overlap():
    a = Hitbox(0, 0, 3, 3)
    b = Hitbox(3, 0, 3, 3)
    assert a.overlaps(b) is False
    assert b.overlaps(a) is False


def test_shift_truncates_fraction():
    player = make_player()
    before = [(p.x, p.y) for p in player.parts]
    player.shift(0, 0.8)
    assert [(p.x, p.y) for p in player.parts] == before


def test_land_places_feet_on_ground():
    player = make_player()
    player.land()
    assert player.left_leg.y == GROUND_Y
    assert player.right_leg.y == GROUND_Y
    assert player.body.y == GROUND_Y - 1
    assert player.head.y == GROUND_Y - 2


def test_update_hitboxes_player_and_monster():
    player = grounded_player(40)
    player.update_hitboxes()
    assert player.hitboxes[0] == Hitbox(player.body.x - 1, player.body.y - 1, 3, 3)
    assert player.hitboxes[1] == Hitbox(player.body.x, player.body.y, 3, 3)

    monster = make_monster(70)
    monster.update_hitboxes()
    assert monster.hitboxes[0] == Hitbox(69, MAP_HEIGHT - 2, 3, 2)
    assert monster.hitboxes[1].width == 0


def test_gravity_eventually_lands_player():
    player = make_player()
    previous = player.left_leg.y
    for _ in range(100):
        apply_gravity(player)
        assert player.left_leg.y >= previous
        previous = player.left_leg.y
        if player.velocity == 0 and player.left_leg.y == GROUND_Y:
            break
    assert player.left_leg.y == GROUND_Y
    assert player.head.y == GROUND_Y - 2
    assert player.jumping is False


def test_gravity_does_nothing_on_ground():
    player = grounded_player()
    before = [(p.x, p.y) for p in player.parts]
    apply_gravity(player)
    assert [(p.x, p.y) for p in player.parts] == before
    assert player.velocity == 0


def test_move_right_steps_and_cycles_frames():
    player = grounded_player(50)
    move(player, {Key.RIGHT})
    assert player.head.x == 52
    assert player.right_walk_frame == 1
    assert player.facing_right is True
    for _ in range(3):
        move(player, {Key.RIGHT})
    assert player.right_walk_frame == 0


def test_move_left_sets_direction_and_resets_other_frame():
    player = grounded_player(50)
    move(player, {Key.RIGHT})
    move(player, {Key.LEFT})
    assert player.head.x == 50
    assert player.facing_right is False
    assert player.left_walk_frame == 1
    assert player.right_walk_frame == 0


def test_move_blocked_at_map_edges():
    player = grounded_player(0)
    move(player, {Key.LEFT})
    assert player.head.x == 0

    player = grounded_player(MAP_WIDTH - 1)
    move(player, {Key.RIGHT})
    assert player.head.x == MAP_WIDTH - 1


def test_jump_only_from_ground():
    player = grounded_player()
    move(player, {Key.JUMP})
    assert player.jumping is True
    assert player.jump_velocity == -3

    airborne = make_player()
    move(airborne, {Key.JUMP})
    assert airborne.jumping is False


def test_jump_cycle_returns_to_ground():
    player = grounded_player()
    move(player, {Key.JUMP})
    highest = player.left_leg.y
    for _ in range(200):
        apply_gravity(player)
        move(player, set())
        highest = min(highest, player.left_leg.y)
        if not player.jumping:
            break
    assert player.jumping is False
    assert highest < GROUND_Y
    apply_gravity(player)
    assert player.left_leg.y == GROUND_Y


def test_move_reports_attack():
    player = grounded_player()
    assert move(player, {Key.ATTACK}) is True
    assert move(player, {Key.RIGHT}) is False


def test_key_values_match_controls():
    assert Key("a") is Key.LEFT
    assert Key("d") is Key.RIGHT
    assert Key("k") is Key.ATTACK


@pytest.mark.parametrize(
    "x, expected",
    [
        (5, 0),
        (MAP_WIDTH - 1, MAP_WIDTH - VIEW_WIDTH),
        (100, 100 - VIEW_WIDTH // 2),
    ],
)
def test_camera_offset_clamped(x, expected):
    player = grounded_player(x)
    assert camera_offset_for(player) == expected


def test_spawn_monsters_deterministic_and_in_range():
    first = spawn_monsters(random.Random(7), 0)
    second = spawn_monsters(random.Random(7), 0)
    assert len(first) == MONSTER_COUNT
    assert [m.body.x for m in first] == [m.body.x for m in second]
    assert all(0 <= m.body.x < MAP_WIDTH for m in first)
    assert all(m.body.y == MAP_HEIGHT - 1 for m in first)


def test_spawn_monsters_ignores_camera_offset():
    base = spawn_monsters(random.Random(3), 0)
    shifted = spawn_monsters(random.Random(3), 40)
    assert [m.body.x for m in base] == [m.body.x for m in shifted]


def test_check_collision_damages_monster():
    player = grounded_player(30)
    monster = make_monster(30)
    player.update_hitboxes()
    monster.update_hitboxes()
    assert check_collision(player, monster) is True
    assert monster.health == 10 - player.attack_power


def test_check_collision_miss_keeps_health():
    player = grounded_player(30)
    monster = make_monster(150)
    player.update_hitboxes()
    monster.update_hitboxes()
    assert check_collision(player, monster) is False
    assert monster.health == 10


def test_zero_size_hitbox_is_ignored():
    player = make_player()
    monster = make_monster(30)
    monster.update_hitboxes()
    player.hitboxes[0] = Hitbox(monster.body.x, monster.body.y - 1, 0, 3)
    assert check_collision(player, monster) is False
    assert monster.health == 10


def test_find_collision_returns_first_index():
    player = grounded_player(30)
    player.update_hitboxes()
    monsters = [make_monster(150), make_monster(30), make_monster(31)]
    for monster in monsters:
        monster.update_hitboxes()
    assert find_collision(player, monsters) == 1
    assert monsters[1].health == 10 - player.attack_power
    assert monsters[2].health == 10


def test_find_collision_none():
    player = grounded_player(30)
    player.update_hitboxes()
    monsters = [make_monster(150), make_monster(180)]
    for monster in monsters:
        monster.update_hitboxes()
    assert find_collision(player, monsters) is None


def test_character_default_hitboxes_are_empty():
    character = Character(Point(0, 0), Point(0, 1), Point(0, 2), Point(1, 2))
    assert [box.is_valid for box in character.hitboxes] == [False, False]