"""Viewport the game world is drawn into."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Viewport:
    """Pixel geometry of the game world.

    The file manager sets the world size after every successful level load;
    the front end reads it back to lay out the board.
    """

    screen_width: int = 1024
    screen_height: int = 768
    game_world_width: int = 0
    game_world_height: int = 0
    north_panel_height: int = 0
    margin_left: int = 0
    margin_top: int = 0

    def set_game_world_size(self, width: int, height: int) -> None:
        self.game_world_width = width
        self.game_world_height = height

    def set_north_panel_height(self, height: int) -> None:
        self.north_panel_height = height

    def init_viewport_margins(self) -> None:
        """Centre the game world in the area below the north panel."""
        free_height = self.screen_height - self.north_panel_height
        self.margin_left = max(0, (self.screen_width - self.game_world_width) // 2)
        self.margin_top = self.north_panel_height + max(
            0, (free_height - self.game_world_height) // 2
        )
