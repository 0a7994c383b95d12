# src/game/terminal.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
import pygame
from .config import SCREEN_WIDTH, SCREEN_HEIGHT, LAYER_COUNT, LAYER_TEXT, BLACK


class Key(Enum):
    """Keys the game reacts to. Host backends map their own key codes onto these."""
    SPACE = "space"
    P = "p"
    Q = "q"


@dataclass
class Sprite:
    rect: pygame.Rect   # in terminal cells
    sheet: str
    index: int


@dataclass
class Glyph:
    x: int
    y: int
    text: str


@dataclass
class Layer:
    """
    One console of the terminal. Draw calls are recorded, not rasterised:
    the host decides how to paint them (see render.draw_terminal).
    """
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    sprites: List[Sprite] = field(default_factory=list)
    glyphs: List[Glyph] = field(default_factory=list)

    def cls(self):
        self.sprites.clear()
        self.glyphs.clear()

    def add_sprite(self, rect: pygame.Rect, sheet: str, index: int = 0):
        self.sprites.append(Sprite(rect=pygame.Rect(rect), sheet=sheet, index=int(index)))

    def print(self, x: int, y: int, text: str):
        self.glyphs.append(Glyph(x, y, text))

    def print_centered(self, y: int, text: str):
        self.print(self.width // 2 - len(text) // 2, y, text)

    def texts(self) -> List[str]:
        return [g.text for g in self.glyphs]


class Terminal:
    """
    Narrow host interface seen by the game core:
    - per-frame elapsed time (ms) and the key pressed this frame (or None)
    - a stack of layers to draw into
    - a quitting flag the core sets to ask the host to shut down
    """
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 layer_count: int = LAYER_COUNT):
        self.width = width
        self.height = height
        self.layers: List[Layer] = [Layer(width, height) for _ in range(layer_count)]
        self.background: Tuple[int, int, int] = BLACK
        self.frame_time_ms: float = 0.0
        self.key: Optional[Key] = None
        self.quitting: bool = False

    def begin_frame(self, elapsed_ms: float, key: Optional[Key] = None):
        self.frame_time_ms = float(elapsed_ms)
        self.key = key

    def layer(self, index: int) -> Layer:
        return self.layers[index]

    def cls_all(self):
        self.background = BLACK
        for layer in self.layers:
            layer.cls()

    def cls_bg(self, color: Tuple[int, int, int]):
        """Clear the text layer and paint the background with `color`."""
        self.background = color
        self.layers[LAYER_TEXT].cls()
