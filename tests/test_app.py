import random

import pygame
import pytest

from zombielab.app import BACKGROUND_COLOR, main, render, to_screen
from zombielab.game import (
    NUM_BUTTERFLIES,
    NUM_CHASING_ZOMBIES,
    NUM_OTHER_ZOMBIES,
    NUM_STARS,
    NUM_SWORD_ITEMS,
    Game,
    WeaponMode,
)

WIDTH, HEIGHT = 1200, 800


@pytest.fixture
def game():
    return Game(WIDTH, HEIGHT, rng=random.Random(7))


@pytest.fixture
def surface():
    return pygame.Surface((WIDTH, HEIGHT))


def test_to_screen_origin_is_window_centre():
    assert to_screen((0.0, 0.0), WIDTH, HEIGHT) == (600.0, 400.0)


def test_to_screen_flips_y():
    x1, y1 = to_screen((0.0, 10.0), WIDTH, HEIGHT)
    x2, y2 = to_screen((0.0, -10.0), WIDTH, HEIGHT)
    assert x1 == x2
    assert y1 < y2


@pytest.mark.parametrize("pixel", [(0, 0), (37, 512), (1199, 799), (600, 400)])
def test_to_screen_inverts_mouse_motion(game, pixel):
    game.mouse_motion(*pixel)
    assert to_screen(game.hat_pos, WIDTH, HEIGHT) == pytest.approx(pixel)


def test_render_fresh_game_draw_order(game, surface):
    drawn = render(surface, game, 0)
    expected = (
        ["airplane"]
        + ["car2"] * (NUM_CHASING_ZOMBIES + NUM_OTHER_ZOMBIES)
        + ["sword"] * NUM_SWORD_ITEMS
        + ["hat"]
        + ["star"] * NUM_STARS
        + ["butterfly"] * NUM_BUTTERFLIES
    )
    assert drawn == expected


def test_render_skips_dead_zombies(game, surface):
    for zombie in game.zombies[:10]:
        zombie.alive = False
    drawn = render(surface, game, 0)
    assert drawn.count("car2") == sum(z.alive for z in game.zombies)


def test_render_gun_mode_with_bullet(game, surface):
    game.mode = WeaponMode.GUN
    game.has_gun = True
    game.bullet_active = True
    game.gun_item.collected = True
    drawn = render(surface, game, 0)
    assert drawn.count("cake") == 4
    assert drawn.count("hat") == 1
    assert drawn[1] == "hat"


def test_render_collected_swords_orbit_player(game, surface):
    for item in game.sword_items[:2]:
        item.collected = True
    drawn = render(surface, game, 0)
    assert drawn[1:3] == ["sword", "sword"]
    assert drawn.count("sword") == NUM_SWORD_ITEMS


def test_render_paints_background_and_player(game, surface):
    game.butterflies = []
    render(surface, game, 0)
    assert tuple(surface.get_at((0, 0)))[:3] == BACKGROUND_COLOR
    assert tuple(surface.get_at((600, 400)))[:3] == (255, 0, 0)


def test_render_advances_butterflies(game, surface):
    before = [b.angle for b in game.butterflies]
    speeds = [b.angle_speed for b in game.butterflies]
    render(surface, game, 500)
    for old, speed, b in zip(before, speeds, game.butterflies):
        assert b.angle == pytest.approx((old + speed) % 360.0 if old + speed > 360.0 else old + speed)


def test_main_rejects_bad_size():
    with pytest.raises(SystemExit):
        main(["--width", "0"])