# src/game/player.py
from __future__ import annotations
import pygame
from dataclasses import dataclass
from .config import (
    PLAYER_START_X, PLAYER_START_Y, GRAVITY, TERMINAL_VELOCITY, FLAP_VELOCITY,
    FLAP_CYCLE_MAX, PLAYER_SPRITE_WIDTH, PLAYER_SPRITE_HEIGHT, DRAGON_FRAMES,
    SHEET_DRAGON
)
from .terminal import Layer

@dataclass
class Player:
    """
    The dragon. World x advances one cell per physics tick; the screen keeps it
    pinned to the left edge and scrolls the walls instead.
    - y grows downwards, 0 is the top of the screen
    - flap_cycle is the wing animation phase, 0..FLAP_CYCLE_MAX
    """
    x: int
    y: float
    velocity: float = 0.0
    flap_cycle: float = 0.0

    @classmethod
    def spawn(cls) -> "Player":
        return cls(x=PLAYER_START_X, y=PLAYER_START_Y)

    @property
    def animation_frame(self) -> int:
        return min(DRAGON_FRAMES - 1, int(self.flap_cycle))

    @property
    def hit_box(self) -> pygame.Rect:
        """Half the sprite height, centred on y: the sprite has blank space around the wings."""
        hit_box_height = PLAYER_SPRITE_HEIGHT // 2
        top = int(self.y) - hit_box_height // 2
        return pygame.Rect(self.x, top, PLAYER_SPRITE_WIDTH, hit_box_height)

    def gravity_and_move(self):
        """Advance one physics tick."""
        if self.velocity < TERMINAL_VELOCITY:
            # rounded so ten steps of 0.2 land exactly on the cap
            self.velocity = min(TERMINAL_VELOCITY, round(self.velocity + GRAVITY, 6))

        self.y += self.velocity
        self.x += 1
        if self.y < 0.0:
            self.y = 0.0

        # Wing easing: quick snap, linger mid-pose, quick settle
        if self.flap_cycle > 3.0:
            self.flap_cycle -= 0.4
        elif self.flap_cycle > 2.0:
            self.flap_cycle -= 0.1
        elif self.flap_cycle > 0.0:
            self.flap_cycle -= 0.5

        if self.flap_cycle < 0.0:
            self.flap_cycle = 0.0

    def flap(self):
        self.velocity = FLAP_VELOCITY
        self.flap_cycle = FLAP_CYCLE_MAX

    def render(self, layer: Layer):
        layer.cls()
        render_y = int(self.y) - PLAYER_SPRITE_HEIGHT // 2
        layer.add_sprite(
            pygame.Rect(0, render_y, PLAYER_SPRITE_WIDTH, PLAYER_SPRITE_HEIGHT),
            SHEET_DRAGON,
            self.animation_frame,
        )
