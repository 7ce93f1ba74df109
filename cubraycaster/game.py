"""The game window: input handling, the update loop and frame composition."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from .errors import ERROR_MLX, ERROR_WIN, INV_USAGE, CubError, format_message
from .minimap import MINIMAP_SQUARE, MINIMAP_TILE, build_minimap, render_minimap
from .player import spawn_player
from .raycast import render_frame
from .scene import Scene, load_scene
from .textures import load_textures

WIN_WIDTH = 960
WIN_HEIGHT = 720
MOUSE = 20
TITLE = "Cub3D"


class Game:
    """A running game over a validated scene and its loaded textures."""

    def __init__(
        self,
        scene: Scene,
        textures: Sequence,
        screen_width: int = WIN_WIDTH,
        screen_height: int = WIN_HEIGHT,
        screen=None,
    ):
        self.scene = scene
        self.textures = list(textures)
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.screen = screen
        self.player = spawn_player(scene.player_x, scene.player_y, scene.player_dir)
        self.check_move = 0
        self.running = True
        self._old_mouse_x = screen_width // 2

    def handle_key_down(self, key: int) -> None:
        """React to a pressed key."""
        player = self.player
        if key == pygame.K_ESCAPE:
            self.running = False
        if key == pygame.K_LEFT:
            player.rot -= 1
        if key == pygame.K_RIGHT:
            player.rot += 1
        if key == pygame.K_w:
            player.move_y = 1
        if key == pygame.K_a:
            player.move_x = -1
        if key == pygame.K_s:
            player.move_y = -1
        if key == pygame.K_d:
            player.move_x = 1

    def handle_key_up(self, key: int) -> None:
        """React to a released key."""
        player = self.player
        if key == pygame.K_ESCAPE:
            self.running = False
        if key == pygame.K_w and player.move_y == 1:
            player.move_y = 0
        if key == pygame.K_s and player.move_y == -1:
            player.move_y = 0
        if key == pygame.K_a and player.move_x == -1:
            player.move_x += 1
        if key == pygame.K_d and player.move_x == 1:
            player.move_x -= 1
        if key == pygame.K_LEFT and player.rot <= 1:
            player.rot = 0
        if key == pygame.K_RIGHT and player.rot >= -1:
            player.rot = 0

    def handle_mouse(self, x: int) -> int | None:
        """Turn the view with horizontal mouse motion.

        Returns the x position the pointer should be warped to when it
        reaches a window edge, otherwise ``None``.
        """
        warp = None
        if x > self.screen_width - MOUSE:
            warp = MOUSE
        if x < MOUSE:
            warp = self.screen_width - MOUSE
        if x == self._old_mouse_x:
            return warp
        direction = -1 if x < self._old_mouse_x else 1
        self.check_move += self.player.rotate(direction)
        self._old_mouse_x = x
        return warp

    def update(self) -> bool:
        """Apply held input once; return whether the view needs redrawing."""
        self.check_move += self.player.step(self.scene.grid)
        return self.check_move != 0

    def render(self) -> list[list[int]]:
        """Compose the 3D view with the minimap and show it if a screen is set."""
        scene = self.scene
        frame = render_frame(
            self.player,
            scene.grid,
            scene.width,
            scene.height,
            self.textures,
            scene.hex_ceiling,
            scene.hex_floor,
            self.screen_width,
            self.screen_height,
        )
        tiles = build_minimap(
            scene.grid, scene.width, scene.height, self.player.x, self.player.y
        )
        minimap = render_minimap(tiles)
        left = self.screen_width - (MINIMAP_SQUARE + MINIMAP_TILE * 2)
        top = MINIMAP_TILE * 2
        for dy, line in enumerate(minimap):
            y = top + dy
            if not 0 <= y < self.screen_height:
                continue
            row = frame[y]
            for dx, colour in enumerate(line):
                x = left + dx
                if 0 <= x < self.screen_width:
                    row[x] = colour
        if self.screen is not None:
            self._blit(frame)
        return frame

    def _blit(self, frame: list[list[int]]) -> None:
        data = b"".join(
            (colour & 0xFFFFFF).to_bytes(3, "big") for row in frame for colour in row
        )
        surface = pygame.image.frombuffer(
            data, (self.screen_width, self.screen_height), "RGB"
        )
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def run(self) -> None:
        """Draw the first frame and process events until the game ends."""
        self.render()
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self.handle_key_down(event.key)
                elif event.type == pygame.KEYUP:
                    self.handle_key_up(event.key)
                elif event.type == pygame.MOUSEMOTION:
                    x, y = event.pos
                    warp = self.handle_mouse(x)
                    if warp is not None:
                        pygame.mouse.set_pos((warp, y))
            if not self.running:
                break
            if self.update():
                self.render()


def _fail(error: CubError) -> int:
    print(error, file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the scene file given as the only argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(format_message(None, INV_USAGE), file=sys.stderr)
        return 1
    try:
        scene = load_scene(args[0])
    except CubError as error:
        return _fail(error)
    try:
        pygame.init()
    except pygame.error:
        return _fail(CubError(ERROR_MLX))
    try:
        try:
            screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        except pygame.error:
            return _fail(CubError(ERROR_WIN))
        pygame.display.set_caption(TITLE)
        try:
            textures = load_textures(scene)
        except CubError as error:
            return _fail(error)
        Game(scene, textures, screen=screen).run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())