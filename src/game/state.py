# src/game/state.py
from __future__ import annotations
import random
from enum import Enum
from typing import Optional
from .config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION, NAVY,
    LAYER_TEXT, LAYER_PLAYER, LAYER_WALLS
)
from .obstacle import Obstacle
from .player import Player
from .terminal import Key, Terminal


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    END = "end"


class State:
    """
    Top of the game: owns the dragon, the current wall, the score and the mode.
    The host calls `tick` once per rendered frame. Physics only advances once
    `frame_time` has built up more than FRAME_DURATION ms; input and drawing
    happen every frame.
    """
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.player = Player.spawn()
        self.frame_time = 0.0
        self.obstacle = Obstacle.new(SCREEN_WIDTH, 0, self.rng)
        self.mode = GameMode.MENU
        self.score = 0
        self.death_cause: Optional[str] = None   # "wall" | "fell" | None

    def restart(self):
        self.player = Player.spawn()
        self.frame_time = 0.0
        self.obstacle = Obstacle.new(SCREEN_WIDTH, 0, self.rng)
        self.score = 0
        self.death_cause = None
        self.mode = GameMode.PLAYING

    def tick(self, term: Terminal):
        if self.mode is GameMode.MENU:
            self.main_menu(term)
        elif self.mode is GameMode.END:
            self.dead(term)
        else:
            self.play(term)

    # -------------------- Modes --------------------

    def play(self, term: Terminal):
        term.cls_bg(NAVY)

        self.frame_time += term.frame_time_ms
        if self.frame_time > FRAME_DURATION:
            self.frame_time = 0.0
            self.player.gravity_and_move()

        if term.key is Key.SPACE:
            self.player.flap()

        self.player.render(term.layer(LAYER_PLAYER))

        text = term.layer(LAYER_TEXT)
        text.print(0, 0, "Press SPACE to flap.")
        text.print(0, 1, f"Score: {self.score}")

        self.obstacle.render(term.layer(LAYER_WALLS), self.player.x)

        if self.player.x > self.obstacle.x:
            self.score += 1
            self.obstacle = Obstacle.new(self.player.x + SCREEN_WIDTH, self.score, self.rng)

        if int(self.player.y) > SCREEN_HEIGHT:
            self.death_cause = "fell"
            self.mode = GameMode.END
        elif self.obstacle.hit_obstacle(self.player):
            self.death_cause = "wall"
            self.mode = GameMode.END

    def main_menu(self, term: Terminal):
        term.cls_all()
        text = term.layer(LAYER_TEXT)
        text.print_centered(5, "Welcome to Flappy Dragon")
        text.print_centered(8, "(P) Play Game")
        text.print_centered(9, "(Q) Quit Game")
        self._menu_keys(term)

    def dead(self, term: Terminal):
        term.cls_all()
        text = term.layer(LAYER_TEXT)
        text.print_centered(5, "You are dead!")
        text.print_centered(6, f"You earned {self.score} points")
        text.print_centered(8, "(P) Play Again")
        text.print_centered(9, "(Q) Quit Game")
        self._menu_keys(term)

    def _menu_keys(self, term: Terminal):
        if term.key is Key.P:
            self.restart()
        elif term.key is Key.Q:
            term.quitting = True
