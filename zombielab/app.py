"""Window, drawing and main loop of the zombie arcade game."""

from __future__ import annotations

import argparse
import os
import sys
from itertools import pairwise

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from zombielab.game import (  # noqa: E402
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    ESCAPE,
    NUM_ORBIT,
    ORBIT_RADIUS,
    SWORD_DISTANCE,
    Game,
    GameState,
    WeaponMode,
)
from zombielab.shapes import (  # noqa: E402
    AIRPLANE,
    BUTTERFLY,
    CAKE,
    CAR2,
    HAT,
    STAR,
    SWORD,
    DrawMode,
    Shape,
    compose,
    rotate,
    scale,
    translate,
)

BACKGROUND_COLOR = (100, 90, 40)
FRAME_MS = 16
GAME_TIMER_DELAY_MS = 1000

PROGRAM_NAME = "2DObjects_ZombieGame"
HELP_LINES = ("    - Keys used: 'ESC', 'WASD', 'Z', 'X', mouse move, click",)


def to_screen(point, width, height):
    """Map a point with the origin at the window centre and y up to pixels."""
    x, y = point
    return (x + width / 2.0, height / 2.0 - y)


def _color(color):
    return tuple(round(c * 255) for c in color)


def _draw_shape(surface, shape: Shape, matrix) -> None:
    width, height = surface.get_size()
    for part in shape.transformed(matrix):
        pts = [to_screen(p, width, height) for p in part.vertices]
        color = _color(part.color)
        if part.mode is DrawMode.POINTS:
            size = max(1, round(part.point_size))
            for px, py in pts:
                rect = pygame.Rect(0, 0, size, size)
                rect.center = (round(px), round(py))
                pygame.draw.rect(surface, color, rect)
        elif len(pts) >= 3:
            first = pts[0]
            for a, b in pairwise(pts[1:]):
                pygame.draw.polygon(surface, color, (first, a, b))


def render(surface, game: Game, time_ms: int) -> list[str]:
    """Draw one frame of ``game`` and return the names of the shapes drawn, in order."""
    drawn: list[str] = []

    def draw(shape: Shape, matrix) -> None:
        _draw_shape(surface, shape, matrix)
        drawn.append(shape.name)

    surface.fill(BACKGROUND_COLOR)

    px, py = game.player_pos
    draw(AIRPLANE, compose(translate(px, py), scale(game.player_scale, game.player_scale)))

    if game.mode is WeaponMode.GUN and game.state is GameState.PLAYING and game.has_gun:
        draw(HAT, translate(*game.hat_pos))

    if game.mode is WeaponMode.SWORD:
        for angle in game.sword_angles():
            draw(SWORD, compose(translate(px, py), rotate(angle), translate(SWORD_DISTANCE, 0.0)))

    if game.mode is WeaponMode.GUN and game.bullet_active:
        bx, by = game.bullet_pos
        draw(CAKE, translate(bx, by))
        for i in range(NUM_ORBIT):
            angle = game.bullet_tick + i * (360.0 / NUM_ORBIT)
            draw(CAKE, compose(translate(bx, by), rotate(angle), translate(ORBIT_RADIUS, 0.0)))

    for zombie in game.zombies:
        if not zombie.alive:
            continue
        factor = game.zombie_scale(zombie) if zombie.pattern == 5 else 1.0
        draw(CAR2, compose(translate(*zombie.pos), scale(factor, factor)))

    for item in game.sword_items:
        if not item.collected:
            draw(SWORD, translate(*item.pos))

    gun = game.gun_item
    if not gun.collected and gun.visible:
        draw(HAT, translate(*gun.pos))

    for pos in game.star_positions():
        draw(STAR, translate(*pos))

    game.update_butterflies(time_ms)
    for b in game.butterflies:
        base = translate(*b.pos)
        left, right, body = BUTTERFLY.parts
        _draw_shape(surface, Shape(BUTTERFLY.name, (left,)), compose(base, rotate(b.wing_flap)))
        _draw_shape(surface, Shape(BUTTERFLY.name, (right,)), compose(base, rotate(-b.wing_flap)))
        _draw_shape(surface, Shape(BUTTERFLY.name, (body,)), base)
        drawn.append(BUTTERFLY.name)

    return drawn


def _greet() -> None:
    border = "*" * 62
    print(f"{border}\n\n  PROGRAM NAME: {PROGRAM_NAME}\n")
    for line in HELP_LINES:
        print(line)
    print(f"\n{border}\n")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Zombie arcade game.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("window size must be positive")

    _greet()
    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
        pygame.display.set_caption(PROGRAM_NAME)
        game = Game(args.width, args.height)
        clock = pygame.time.Clock()
        held: dict[int, str] = {}
        start = pygame.time.get_ticks()
        next_scene = start
        next_game = start + GAME_TIMER_DELAY_MS

        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.VIDEORESIZE:
                    game.resize(event.w, event.h)
                    screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                elif event.type == pygame.KEYDOWN:
                    char = ESCAPE if event.key == pygame.K_ESCAPE else event.unicode
                    if char:
                        held[event.key] = char
                        game.key_down(char)
                elif event.type == pygame.KEYUP:
                    char = held.pop(event.key, None)
                    if char:
                        game.key_up(char)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    game.mouse_click()
                elif event.type == pygame.MOUSEMOTION:
                    game.mouse_motion(*event.pos)

            now = pygame.time.get_ticks()
            if now >= next_scene:
                game.tick_scene(now)
                next_scene = max(next_scene + FRAME_MS, now)
            if now >= next_game:
                game.tick_game()
                next_game = max(next_game + FRAME_MS, now)

            render(screen, game, now)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())