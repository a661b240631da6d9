"""Rules and state of the zombie arcade game, free of any drawing code."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum

from zombielab.shapes import TO_RADIAN

Vec = tuple[float, float]

DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 800

SURVIVE_TIME = 60
FRAMES_PER_SECOND = 60
RESPAWN_PERIOD = 10

PLAYER_SPEED = 3.0
BULLET_SPEED = 10.0
ORBIT_RADIUS = 20.0
NUM_ORBIT = 3
SWORD_DISTANCE = 40.0
BODY_RADIUS = 20.0
ITEM_RADIUS = 10.0

SAFE_DISTANCE = 150.0
MAX_ATTEMPTS = 100
NUM_CHASING_ZOMBIES = 15
NUM_OTHER_ZOMBIES = 15
NUM_SWORD_ITEMS = 3
NUM_STARS = 20
NUM_BUTTERFLIES = 5

ESCAPE = "\x1b"


class WeaponMode(Enum):
    SWORD = "sword"
    GUN = "gun"


class GameState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"
    GAME_CLEAR = "game_clear"


@dataclass
class Zombie:
    """An enemy; ``pattern`` selects how it moves (0 chases the player)."""

    pos: Vec
    pattern: int = 0
    origin: Vec | None = None
    angle: float = 0.0
    alive: bool = True
    tick: float = 0.0
    velocity: Vec = (0.0, 0.0)

    def __post_init__(self) -> None:
        if self.origin is None:
            self.origin = self.pos


@dataclass
class SwordItem:
    pos: Vec
    collected: bool = False


@dataclass
class GunItem:
    pos: Vec = (0.0, 0.0)
    collected: bool = False
    visible: bool = True


@dataclass
class Star:
    center: Vec
    angle_offset: float
    distance: float
    rotation_speed: float = 0.1


@dataclass
class Butterfly:
    center: Vec
    angle: float
    radius_x: float
    radius_y: float
    angle_speed: float
    wing_flap: float = 0.0
    pos: Vec = (0.0, 0.0)


def is_colliding(a: Vec, ar: float, b: Vec, br: float) -> bool:
    """Two circles overlap when their centres are closer than the sum of radii."""
    return math.dist(a, b) < ar + br


def _normalize(v: Vec) -> Vec:
    length = math.hypot(*v)
    if length == 0.0:
        return (0.0, 0.0)
    return (v[0] / length, v[1] / length)


def _unit(degrees: float) -> Vec:
    rad = degrees * TO_RADIAN
    return (math.cos(rad), math.sin(rad))


class Game:
    """The whole game world, advanced by explicit update and input calls."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.running = True
        self.keys: set[str] = set()
        self.player_speed = PLAYER_SPEED
        self.player_scale = 1.0
        self.bullet_dir: Vec = (0.0, 0.0)
        self.bullet_pos: Vec = (0.0, 0.0)
        self.star_global_angle = 0.0
        self.zombies: list[Zombie] = []
        self.sword_items: list[SwordItem] = []
        self.gun_item = GunItem()
        self.stars: list[Star] = []
        self.butterflies: list[Butterfly] = []
        self.reset()

    # ----- setup -------------------------------------------------------

    def reset(self) -> None:
        """Start a fresh round with new zombies, items, stars and butterflies."""
        self.player_pos: Vec = (0.0, 0.0)
        self.hat_pos: Vec = self.player_pos
        self.bullet_active = False
        self.bullet_tick = 0.0
        self.score = 0
        self.elapsed_time = 0
        self.frame_counter = 0
        self.state = GameState.PLAYING
        self.mode = WeaponMode.SWORD
        self.has_gun = False
        self.sword_angle = 0.0
        self._init_zombies()
        self._init_items()
        self._init_stars()
        self._init_butterflies()
        print("===> Game restarted!")

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def _random_position(self, margin: float) -> Vec:
        hw, hh = self.width / 2.0, self.height / 2.0
        pos: Vec = (0.0, 0.0)
        for _ in range(MAX_ATTEMPTS):
            pos = (
                self.rng.uniform(-hw + margin, hw - margin),
                self.rng.uniform(-hh + margin, hh - margin),
            )
            if math.dist(pos, self.player_pos) >= SAFE_DISTANCE:
                break
        return pos

    def _init_zombies(self) -> None:
        self.zombies = [Zombie(self._random_position(100.0), 0) for _ in range(NUM_CHASING_ZOMBIES)]
        for _ in range(NUM_OTHER_ZOMBIES):
            pos = self._random_position(50.0)
            self.zombies.append(Zombie(pos, self.rng.randint(1, 8)))

    def _init_items(self) -> None:
        self.sword_items = [SwordItem(self._random_position(50.0)) for _ in range(NUM_SWORD_ITEMS)]
        self.gun_item = GunItem(self._random_position(50.0))
        self.has_gun = False

    def _init_stars(self) -> None:
        self.stars = [
            Star((0.0, 0.0), 360.0 * i / NUM_STARS, 50.0 + i * 20.0)
            for i in range(NUM_STARS)
        ]

    def _init_butterflies(self) -> None:
        uniform = self.rng.uniform
        self.butterflies = [
            Butterfly(
                center=(uniform(-300.0, 300.0), uniform(-200.0, 200.0)),
                angle=uniform(0.0, 360.0),
                radius_x=uniform(100.0, 250.0),
                radius_y=uniform(80.0, 180.0),
                angle_speed=uniform(0.3, 0.8),
            )
            for _ in range(NUM_BUTTERFLIES)
        ]

    # ----- derived geometry -------------------------------------------

    def sword_count(self) -> int:
        return sum(item.collected for item in self.sword_items)

    def sword_angles(self) -> list[float]:
        """Angles in degrees of the swords circling the player."""
        n = self.sword_count()
        return [self.sword_angle + (360.0 / n) * i for i in range(n)]

    def orbit_positions(self) -> list[Vec]:
        """Positions of the cakes circling the bullet."""
        bx, by = self.bullet_pos
        result = []
        for i in range(NUM_ORBIT):
            ux, uy = _unit(self.bullet_tick + i * (360.0 / NUM_ORBIT))
            result.append((bx + ux * ORBIT_RADIUS, by + uy * ORBIT_RADIUS))
        return result

    def zombie_scale(self, zombie: Zombie) -> float:
        """Size factor a zombie has for collisions."""
        if zombie.pattern == 5:
            return 1.0 + 1.3 * math.sin(zombie.tick)
        if zombie.pattern == 6:
            return zombie.angle
        return 1.0

    def star_positions(self) -> list[Vec]:
        result = []
        for star in self.stars:
            ux, uy = _unit(self.star_global_angle + star.angle_offset)
            cx, cy = star.center
            result.append((cx + ux * star.distance, cy + uy * star.distance))
        return result

    # ----- updates -----------------------------------------------------

    def _pressed(self, key: str) -> bool:
        return key.lower() in self.keys or key.upper() in self.keys

    def update_player(self) -> None:
        if self.state is not GameState.PLAYING:
            return
        x, y = self.player_pos
        if self._pressed("w"):
            y += self.player_speed
        if self._pressed("s"):
            y -= self.player_speed
        if self._pressed("a"):
            x -= self.player_speed
        if self._pressed("d"):
            x += self.player_speed
        hw, hh = self.width / 2.0, self.height / 2.0
        self.player_pos = (min(max(x, -hw), hw), min(max(y, -hh), hh))

        if self.mode is WeaponMode.SWORD and self.sword_count() > 0:
            self.sword_angle += 3.0

        t = math.fmod(self.elapsed_time, 60.0)
        if t < 30.0:
            self.player_scale = 1.0 + 2.0 * (t / 30.0)
        else:
            self.player_scale = 3.0 - 2.0 * ((t - 30.0) / 30.0)

    def update_bullet(self) -> None:
        if self.state is not GameState.PLAYING or not self.bullet_active:
            return
        bx, by = self.bullet_pos
        dx, dy = self.bullet_dir
        self.bullet_pos = (bx + dx * BULLET_SPEED, by + dy * BULLET_SPEED)
        self.bullet_tick += 10.0
        if self.bullet_tick >= 360.0:
            self.bullet_tick -= 360.0
        hw, hh = self.width / 2.0, self.height / 2.0
        bx, by = self.bullet_pos
        if bx < -hw or bx > hw or by < -hh or by > hh:
            self.bullet_active = False

    def update_zombies(self) -> None:
        if self.state is not GameState.PLAYING:
            return
        hw, hh = self.width / 2.0, self.height / 2.0
        for z in self.zombies:
            if not z.alive:
                continue
            z.tick += 0.1
            x, y = z.pos
            ox, oy = z.origin
            match z.pattern:
                case 0:
                    px, py = self.player_pos
                    dx, dy = _normalize((px - x, py - y))
                    z.pos = (x + dx * 1.5, y + dy * 1.5)
                case 1:
                    z.pos = (ox + 50.0 * math.sin(z.tick), y)
                case 2:
                    z.pos = (x, oy + 50.0 * math.sin(z.tick))
                case 3:
                    z.pos = (ox + 50.0 * math.cos(z.tick), oy + 50.0 * math.sin(z.tick))
                case 4:
                    vx, vy = z.velocity
                    x, y = x + vx, y + vy
                    if x > hw + 50.0 or y < -hh - 50.0:
                        x, y = -hw - 50.0, hh + 50.0
                    z.pos = (x, y)
                case 5:
                    x += 3.0
                    if x > hw:
                        x = -hw
                    z.pos = (x, y)
                case 6:
                    z.angle = 1.0 + 0.5 * math.sin(z.tick * 2.0)
                case 7:
                    z.pos = (ox + 40.0 * math.sin(z.tick * 5.0), y)
                case 8:
                    dx = (self.rng.randrange(200) - 100) / 100.0
                    dy = (self.rng.randrange(200) - 100) / 100.0
                    ux, uy = _normalize((dx, dy))
                    z.pos = (x + ux * 2.0, y + uy * 2.0)

    def update_background_stars(self) -> None:
        self.star_global_angle += 0.1
        if self.star_global_angle > 360.0:
            self.star_global_angle -= 360.0

    def update_butterflies(self, time_ms: int) -> None:
        """Move butterflies along wobbling ellipses; ``time_ms`` is the wall clock."""
        seconds = time_ms * 0.001
        for i, b in enumerate(self.butterflies):
            b.angle += b.angle_speed
            if b.angle > 360.0:
                b.angle -= 360.0
            rad = b.angle * TO_RADIAN
            wiggle_x = 10.0 * math.sin(seconds * 2.0 + i)
            wiggle_y = 10.0 * math.cos(seconds * 3.0 + i)
            cx, cy = b.center
            b.pos = (
                cx + b.radius_x * math.cos(rad) + wiggle_x,
                cy + b.radius_y * math.sin(rad) + wiggle_y,
            )
            b.wing_flap = math.sin(time_ms * 0.01 + rad) * 20.0

    def _all_dead(self) -> bool:
        return not any(z.alive for z in self.zombies)

    def check_collisions(self) -> None:
        if self.state is not GameState.PLAYING:
            return
        player_radius = BODY_RADIUS * self.player_scale
        for z in self.zombies:
            if not z.alive:
                continue
            zombie_radius = BODY_RADIUS * self.zombie_scale(z)
            if is_colliding(self.player_pos, player_radius, z.pos, zombie_radius):
                self.state = GameState.GAME_OVER
                print(f"===> GAME OVER! Final Score: {self.score}, Time: {self.elapsed_time} seconds")
                return

            if self.mode is WeaponMode.SWORD:
                px, py = self.player_pos
                for angle in self.sword_angles():
                    ux, uy = _unit(angle)
                    tip = (px + ux * SWORD_DISTANCE, py + uy * SWORD_DISTANCE)
                    if is_colliding(z.pos, zombie_radius, tip, ITEM_RADIUS):
                        z.alive = False
                        self.score += 2
                        break

            if self.mode is WeaponMode.GUN and self.bullet_active:
                if is_colliding(z.pos, BODY_RADIUS, self.bullet_pos, ITEM_RADIUS):
                    z.alive = False
                    self.bullet_active = False
                    self.score += 1
                    continue
                for orbit in self.orbit_positions():
                    if is_colliding(z.pos, BODY_RADIUS, orbit, ITEM_RADIUS):
                        z.alive = False
                        self.bullet_active = False
                        self.score += 1
                        break

        for item in self.sword_items:
            if not item.collected and is_colliding(self.player_pos, player_radius, item.pos, ITEM_RADIUS):
                item.collected = True
                print("===> Sword acquired!")

        gun = self.gun_item
        if (not gun.collected and gun.visible
                and is_colliding(self.player_pos, player_radius, gun.pos, ITEM_RADIUS)):
            gun.collected = True
            self.has_gun = True
            print("===> Gun acquired!")

        if self._all_dead():
            self.state = GameState.GAME_CLEAR
            print(f"===> CLEAR! All zombies defeated. Score: {self.score}, Time: {self.elapsed_time} seconds")

    # ----- timers ------------------------------------------------------

    def tick_scene(self, time_ms: int) -> None:
        """One frame of the animation timer."""
        if self.state is not GameState.PLAYING:
            return
        self.update_player()
        self.update_bullet()
        self.update_zombies()
        self.update_background_stars()
        self.update_butterflies(time_ms)
        self.check_collisions()

    def tick_game(self) -> None:
        """One frame of the game-clock timer: counts seconds and ends the round."""
        if self.state is not GameState.PLAYING:
            return
        self.update_player()
        self.update_zombies()
        self.update_bullet()
        self.check_collisions()

        self.frame_counter += 1
        if self.frame_counter < FRAMES_PER_SECOND:
            return
        self.frame_counter = 0
        self.elapsed_time += 1

        if self.elapsed_time % RESPAWN_PERIOD == 0:
            for z in self.zombies:
                if z.pattern == 0:
                    pos = self._random_position(50.0)
                    z.pos = pos
                    z.origin = pos
                    z.tick = 0.0

        if self._all_dead():
            self.state = GameState.GAME_CLEAR
            print(f"===> CLEAR! All zombies eliminated. Time: {self.elapsed_time} seconds. Score: {self.score}")

        if self.elapsed_time >= SURVIVE_TIME:
            self.state = GameState.GAME_OVER
            print(f"===> GAME OVER! Time limit exceeded. Score: {self.score}, Time: {self.elapsed_time} seconds")
            return

        print(f"TIME: {self.elapsed_time}s   SCORE: {self.score}")

    # ----- input -------------------------------------------------------

    def key_down(self, key: str) -> None:
        self.keys.add(key)
        if key == ESCAPE:
            self.running = False
        elif key in ("z", "Z"):
            self.mode = WeaponMode.SWORD
        elif key in ("x", "X"):
            self.mode = WeaponMode.GUN
        elif key in ("r", "R"):
            self.reset()

    def key_up(self, key: str) -> None:
        self.keys.discard(key)

    def mouse_click(self) -> None:
        """A left click fires a bullet toward the aiming hat in gun mode."""
        if self.state is not GameState.PLAYING or self.mode is not WeaponMode.GUN:
            return
        self.bullet_active = True
        self.bullet_pos = self.player_pos
        hx, hy = self.hat_pos
        px, py = self.player_pos
        self.bullet_dir = _normalize((hx - px, hy - py))

    def mouse_motion(self, x: int, y: int) -> None:
        """Move the aiming hat to a window pixel (origin top-left)."""
        if self.state is not GameState.PLAYING:
            return
        self.hat_pos = (x - self.width / 2.0, self.height / 2.0 - y)