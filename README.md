# zombielab

This package contains a small 2D arcade game and a polygon editor. Both are drawn with pygame.

## Install

```
pip install .
```

## The zombie game

```
zombielab [--width W] [--height H]
```

The default window size is 1200x800.

You fly a small airplane around a field of zombie cars. Each zombie moves in its own way:

- some chase you;
- some sway or circle around the spot where they started;
- some slide across the screen;
- one kind wanders at random.

Every 10 seconds, the chasing zombies reappear at new places.

Controls:

- `W` `A` `S` `D` move the player.
- `Z` switches to sword mode. The swords you have picked up circle around you.
- `X` switches to gun mode. A left click fires a cake toward the mouse pointer, with three smaller cakes circling it. After you collect the hat item, a hat marks the point you are aiming at.
- `R` restarts the game.
- `Esc` quits.

Over a 60-second cycle, the player grows to three times its size and shrinks back. A sword kill is worth 2 points and a gun kill is worth 1.

You clear the game by destroying every zombie. The game ends in either of these cases:

- a zombie touches you;
- 60 seconds pass before every zombie is gone.

The time and score are printed once a second.

## The polygon editor

```
zombielab-editor [--width W] [--height H]
```

The default window size is 800x600.

- Shift and left click to add points.
- `p` closes the polygon. It needs at least three points.
- `c` clears the points. This does nothing while the polygon is rotating.
- `r` starts or stops rotation about the polygon's centre of gravity. The closed polygon turns 5 degrees every 100 ms.
- The arrow keys move the closed polygon while it is not rotating.
- Dragging with the right button also moves the closed polygon while it is not rotating.
- `f` quits.

## Library use

The game logic does not depend on the display.

- `zombielab.game.Game(width, height, rng=None)` holds the game state. Step it with `tick_game()` and `tick_scene(time_ms)`. Feed it input with `key_down`, `key_up`, `mouse_click` and `mouse_motion`, and read its fields directly. You can pass a seeded `random.Random` as `rng` to get repeatable rounds.
- `zombielab.shapes` holds the shapes the game draws. It also has helpers for 2D affine matrices: `identity`, `translate`, `rotate`, `scale`, `compose` and `apply`.
- For the editor, `zombielab.polygon.Polygon` and `zombielab.editor.Editor` can be driven in the same way.

## Tests

```
pip install .[test]
pytest
```