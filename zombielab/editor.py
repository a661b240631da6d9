"""Interactive polygon editor: pick points, close, drag, move and spin."""

from __future__ import annotations

import argparse
import os
import sys
from enum import Enum

from zombielab.polygon import Polygon

BACKGROUND_COLOR = (159, 226, 191)
POINT_COLOR = (0, 0, 255)
LINE_COLOR = (255, 0, 0)
CENTER_POINT_COLOR = (255, 255, 0)

ROTATION_STEP_MS = 100
TRANSLATION_OFFSET = 0.05

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_ANCHOR = (500, 200)

PROGRAM_NAME = "SimplefreeGLUTcode_Polygon_Editor"
HELP_LINES = (
    "    - Keys used: 'p', 'c', 'r', 'f'",
    "    - Special keys used: LEFT, RIGHT, UP, DOWN",
    "    - Mouse used: L-click, R-click and move",
    "    - Other operations: window reshape",
)
POINT_SIZE = 5


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class Button(Enum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"


_STEPS = {
    Direction.LEFT: (-TRANSLATION_OFFSET, 0.0),
    Direction.RIGHT: (TRANSLATION_OFFSET, 0.0),
    Direction.DOWN: (0.0, -TRANSLATION_OFFSET),
    Direction.UP: (0.0, TRANSLATION_OFFSET),
}


class Editor:
    """Editor state driven by keyboard, mouse and timer events."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.anchor = DEFAULT_ANCHOR
        self.polygon = Polygon()
        self.right_button_pressed = False
        self.rotation_mode = False
        self.polygon_mode = False
        self.running = True
        self._prev = (0, 0)

    def key(self, key: str) -> None:
        """Handle an ordinary key: c clears, p closes, r toggles spin, f quits."""
        if key == "c":
            if not self.rotation_mode:
                self.polygon.clear()
                self.polygon_mode = False
        elif key == "p":
            if not self.polygon_mode:
                if len(self.polygon) >= 3:
                    self.polygon.close()
                    self.polygon_mode = True
                    print("*** Polygon selection is finished!", file=sys.stderr)
                else:
                    print("*** Choose at least three points!", file=sys.stderr)
        elif key == "r":
            if self.polygon_mode:
                if not self.rotation_mode:
                    self.polygon.update_center()
                self.rotation_mode = not self.rotation_mode
        elif key == "f":
            self.running = False

    def special(self, direction: Direction | str) -> None:
        """Nudge a finished polygon with an arrow key."""
        if self.rotation_mode or not self.polygon_mode:
            return
        self.polygon.move(*_STEPS[Direction(direction)])

    def mouse_press(self, button: Button | str, pressed: bool, x: int, y: int, shift: bool) -> None:
        """Shift-click adds points; a right-button drag moves a finished polygon."""
        if self.rotation_mode:
            return
        button = Button(button)
        if not self.polygon_mode:
            if button is Button.LEFT and pressed and shift:
                self.polygon.add_point(x, y, self.width, self.height)
        elif button is Button.RIGHT:
            self.right_button_pressed = pressed
            if pressed:
                self._prev = (x, y)

    def mouse_move(self, x: int, y: int) -> None:
        if self.right_button_pressed and not self.rotation_mode and self.polygon_mode:
            prev_x, prev_y = self._prev
            dx = 2.0 * (x - prev_x) / self.width
            dy = 2.0 * (prev_y - y) / self.height
            self._prev = (x, y)
            self.polygon.move(dx, dy)

    def tick(self) -> bool:
        """Advance the spin by one step; return whether anything turned."""
        if not self.rotation_mode:
            return False
        self.polygon.rotate()
        return True

    def resize(self, width: int, height: int) -> None:
        print(f"### The new window size is {width}x{height}.")
        self.width = width
        self.height = height


def _to_screen(point, width, height):
    x, y = point
    return (round((x + 1.0) / 2.0 * width), round((1.0 - y) / 2.0 * height))


def _draw(pygame, screen, editor: Editor) -> None:
    screen.fill(BACKGROUND_COLOR)
    size = (editor.width, editor.height)
    pts = [_to_screen(p, *size) for p in editor.polygon.points]

    def dot(pos, color):
        rect = pygame.Rect(0, 0, POINT_SIZE, POINT_SIZE)
        rect.center = pos
        pygame.draw.rect(screen, color, rect)

    for pos in pts:
        dot(pos, POINT_COLOR)
    if len(pts) >= 2:
        pygame.draw.lines(screen, LINE_COLOR, True, pts)
    if editor.rotation_mode:
        dot(_to_screen(editor.polygon.center, *size), CENTER_POINT_COLOR)


def _greet() -> None:
    border = "*" * 62
    print(f"{border}\n\n  PROGRAM NAME: {PROGRAM_NAME}\n")
    for line in HELP_LINES:
        print(line)
    print(f"\n{border}\n")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Interactive polygon editor.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("window size must be positive")

    import pygame

    editor = Editor(args.width, args.height)
    _greet()
    os.environ.setdefault("SDL_VIDEO_WINDOW_POS", "{},{}".format(*editor.anchor))
    pygame.init()
    arrows = {
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_UP: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
    }
    buttons = {1: Button.LEFT, 2: Button.MIDDLE, 3: Button.RIGHT}
    try:
        screen = pygame.display.set_mode((editor.width, editor.height), pygame.RESIZABLE)
        pygame.display.set_caption(PROGRAM_NAME)
        clock = pygame.time.Clock()
        last_step = pygame.time.get_ticks()
        while editor.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    editor.running = False
                elif event.type == pygame.VIDEORESIZE:
                    editor.resize(event.w, event.h)
                    screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                elif event.type == pygame.KEYDOWN:
                    if event.key in arrows:
                        editor.special(arrows[event.key])
                    elif event.unicode:
                        editor.key(event.unicode)
                elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                    button = buttons.get(event.button)
                    if button is not None:
                        shift = bool(pygame.key.get_mods() & pygame.KMOD_SHIFT)
                        pressed = event.type == pygame.MOUSEBUTTONDOWN
                        editor.mouse_press(button, pressed, *event.pos, shift)
                elif event.type == pygame.MOUSEMOTION:
                    editor.mouse_move(*event.pos)
            now = pygame.time.get_ticks()
            if not editor.rotation_mode:
                last_step = now
            elif now - last_step >= ROTATION_STEP_MS:
                editor.tick()
                last_step = now
            _draw(pygame, screen, editor)
            pygame.display.flip()
            clock.tick(60)
    finally:
        print("\n^^^ The control is at the close callback function now.\n")
        pygame.quit()
    print("^^^ The control is at the end of main function now.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())