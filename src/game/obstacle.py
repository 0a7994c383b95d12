# src/game/obstacle.py
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List
import pygame
from .config import (
    SCREEN_HEIGHT, GAP_Y_MIN, GAP_Y_MAX, GAP_SIZE_START, GAP_SIZE_MIN,
    WALL_SPRITE_WIDTH, WALL_SPRITE_HEIGHT, SHEET_WALL
)
from .player import Player
from .terminal import Layer

@dataclass
class Obstacle:
    """A wall at world column `x` with an opening of `size` cells centred on `gap_y`."""
    x: int
    gap_y: int
    size: int

    @classmethod
    def new(cls, x: int, score: int, rng: random.Random) -> "Obstacle":
        """Random gap height; the gap shrinks by one cell per point down to GAP_SIZE_MIN."""
        return cls(
            x=x,
            gap_y=rng.randrange(GAP_Y_MIN, GAP_Y_MAX),
            size=max(GAP_SIZE_MIN, GAP_SIZE_START - score),
        )

    @property
    def upper_bound(self) -> int:
        return self.gap_y - self.size // 2

    @property
    def lower_bound(self) -> int:
        return self.gap_y + self.size // 2

    def wall_rows(self) -> List[int]:
        """
        Top rows of the wall blocks, upper segment first.
        The upper segment starts above the screen so its last block ends on the
        gap edge; the lower one starts on the gap edge and runs past the bottom.
        """
        start = -(self.upper_bound % WALL_SPRITE_HEIGHT)
        upper = list(range(start, self.upper_bound, WALL_SPRITE_HEIGHT))
        lower = list(range(self.lower_bound, SCREEN_HEIGHT, WALL_SPRITE_HEIGHT))
        return upper + lower

    def render(self, layer: Layer, player_x: int):
        layer.cls()
        screen_x = self.x - player_x
        for y in self.wall_rows():
            layer.add_sprite(
                pygame.Rect(screen_x, y, WALL_SPRITE_WIDTH, WALL_SPRITE_HEIGHT),
                SHEET_WALL,
                0,
            )

    def hit_obstacle(self, player: Player) -> bool:
        hit_box = player.hit_box
        does_x_match = hit_box.left < self.x <= hit_box.right
        player_above_gap = hit_box.top < self.upper_bound
        player_below_gap = hit_box.bottom > self.lower_bound
        return does_x_match and (player_above_gap or player_below_gap)
