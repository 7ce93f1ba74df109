# cubraycaster

A first-person maze explorer in the classic raycasting style. It reads a
`.cub` scene file that gives four wall textures, a floor colour, a ceiling
colour and a map. It then opens a 960×720 window in which you walk through
the maze, and a minimap in the top-right corner shows where you are.

## Installation

```
pip install .
```

`pygame` handles the window and the input.

## Running

```
cubraycaster path/to/scene.cub
```

The command takes exactly one argument. If the arguments are wrong, or the
scene or one of its textures is invalid, it prints a message to standard
error and exits with status 1. The message has the form
`ERROR[: context]: message`, for example `ERROR: Map is not surrounded by walls`.

### Controls

| Key / action      | Effect                 |
|-------------------|------------------------|
| `W` / `S`         | move forward / back    |
| `A` / `D`         | strafe left / right    |
| `←` / `→`         | turn left / right      |
| mouse movement    | turn                   |
| `Esc`, close box  | quit                   |

When the pointer reaches within 20 pixels of the left or right edge of the
window, it is warped to the other side so that you can keep turning.

## Scene file format

```
NO	./textures/north.xpm
SO	./textures/south.xpm
WE	./textures/west.xpm
EA	./textures/east.xpm

F	120,90,60
C	40,140,220

111111
100001
10N001
111111
```

* `NO`, `SO`, `WE`, `EA`: paths to the `.xpm` wall textures. Each path must
  name a file that exists and can be read, and it must end in `.xpm`. Relative
  paths are resolved from the current working directory.
* `F`, `C`: floor and ceiling colours as `R,G,B`. Each value runs from 0 to 255.
* The character right after an identifier must not be printable. Use a **tab**,
  not a space, to separate the identifier from its value. A space there is
  rejected as an invalid texture or colour line.
* Each element may be given only once. Blank lines between elements are
  ignored.
* The map starts at the first line whose first non-blank character is a digit.
  It must be the last element in the file, and only whitespace may follow it.
  It must be at least three lines high. It may hold only `1` (wall), `0`
  (floor), spaces, and exactly one player start: `N`, `S`, `E` or `W`, for the
  direction the player faces. Walls must close the map on every side. A space
  that lies inside the map must be bordered by walls.

### Textures

The textures are plain-text XPM images. Colours may be given as `#RGB`,
`#RRGGBB` or longer hex forms, as `None`, or as one of a few names: black,
white, red, green, blue, yellow, cyan, magenta, gray/grey. Each texture is
used as a square whose side is the image height. Square images whose side is
a power of two, such as 64×64, work best. Pixels whose colour is zero
(black or `None`) are not drawn, so the ceiling or floor shows through. North
and east walls are drawn darker than south and west walls.

## Library use

You can use the parsing and rendering pieces without opening a window:

```python
from cubraycaster.scene import load_scene
from cubraycaster.player import spawn_player
from cubraycaster.textures import load_textures
from cubraycaster.raycast import render_frame
from cubraycaster.minimap import build_minimap, render_minimap

scene = load_scene("maps/level.cub")
player = spawn_player(scene.player_x, scene.player_y, scene.player_dir)
textures = load_textures(scene)
frame = render_frame(player, scene.grid, scene.width, scene.height, textures,
                     scene.hex_ceiling, scene.hex_floor, 320, 240)
tiles = build_minimap(scene.grid, scene.width, scene.height, player.x, player.y)
```

* `cubraycaster.scene`: `load_scene`, `parse_scene`, `validate_map`,
  `validate_textures`, `parse_rgb`, `rgb_to_hex`, and the `Scene` dataclass.
* `cubraycaster.mapcheck`: the wall and character checks on a map grid.
* `cubraycaster.player`: `Player` with `rotate`, `try_move` and `step`, and
  `spawn_player`.
* `cubraycaster.raycast`: `cast_ray`, `draw_column`, `texture_index`,
  `render_frame`, and the `Ray` dataclass. Frames are lists of rows of
  `0xRRGGBB` integers.
* `cubraycaster.textures`: `parse_xpm`, `load_xpm`, `load_textures`, and
  `Texture`.
* `cubraycaster.minimap`: `minimap_origin`, `build_minimap`, `render_minimap`.
* `cubraycaster.game`: `Game`, which handles input and composes frames. It
  draws to the screen only when it is given a pygame surface. `main` is the
  command's entry point.

When something is invalid, these functions raise
`cubraycaster.errors.CubError`.

## What it does not do

The window size is fixed at 960×720. There are no doors, sprites, sound or
collectibles, and no way to save or edit maps. The game only lets you walk
through the maze. The XPM reader covers only the colour forms listed above.