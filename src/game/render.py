# src/game/render.py
from __future__ import annotations
from typing import Optional
import pygame
from .config import (
    CELL_PX, SHEET_DRAGON, SHEET_WALL, COLOR_FG,
    COLOR_DRAGON, COLOR_DRAGON_BELLY, COLOR_WING, COLOR_WALL, COLOR_WALL_EDGE
)
from .terminal import Sprite, Terminal

# Wing tip height per animation frame, as a fraction of the sprite height above
# (negative) or below (positive) the body line. Frame 3 is right after a flap.
WING_TIP = (0.35, 0.05, -0.25, -0.45)


def _draw_dragon(surf: pygame.Surface, r: pygame.Rect, frame: int):
    w, h = r.width, r.height
    body = pygame.Rect(r.left + w * 0.15, r.top + h * 0.40, w * 0.60, h * 0.30)
    pygame.draw.ellipse(surf, COLOR_DRAGON, body)
    belly = body.inflate(-body.width * 0.4, -body.height * 0.5).move(0, body.height * 0.15)
    pygame.draw.ellipse(surf, COLOR_DRAGON_BELLY, belly)

    # head + tail
    head_c = (int(r.left + w * 0.82), int(r.top + h * 0.45))
    pygame.draw.circle(surf, COLOR_DRAGON, head_c, max(1, int(h * 0.13)))
    pygame.draw.polygon(surf, COLOR_DRAGON, [
        (body.left, body.centery - h * 0.05),
        (body.left, body.centery + h * 0.05),
        (r.left, body.centery - h * 0.15),
    ])
    eye = (head_c[0] + max(1, int(w * 0.04)), head_c[1] - max(1, int(h * 0.04)))
    pygame.draw.circle(surf, (255, 255, 255), eye, max(1, int(h * 0.03)))

    # wing
    tip_y = body.top + WING_TIP[frame % len(WING_TIP)] * h
    pygame.draw.polygon(surf, COLOR_WING, [
        (body.left + body.width * 0.25, body.top + 1),
        (body.left + body.width * 0.75, body.top + 1),
        (body.left + body.width * 0.35, tip_y),
    ])


def _draw_wall(surf: pygame.Surface, r: pygame.Rect):
    pygame.draw.rect(surf, COLOR_WALL, r)
    pygame.draw.rect(surf, COLOR_WALL_EDGE, r, width=max(1, r.width // 12))


def _draw_sprite(surf: pygame.Surface, sp: Sprite, cell_px: int):
    r = pygame.Rect(sp.rect.x * cell_px, sp.rect.y * cell_px,
                    sp.rect.width * cell_px, sp.rect.height * cell_px)
    if sp.sheet == SHEET_DRAGON:
        _draw_dragon(surf, r, sp.index)
    elif sp.sheet == SHEET_WALL:
        _draw_wall(surf, r)
    else:
        raise ValueError(f"Unknown sprite sheet: {sp.sheet!r}")


def draw_terminal(surf: pygame.Surface, term: Terminal,
                  font: Optional[pygame.font.Font] = None, cell_px: int = CELL_PX):
    """Paint every layer of `term` onto `surf`, lowest layer first. Text is skipped without a font."""
    surf.fill(term.background)
    for layer in term.layers:
        for sp in layer.sprites:
            _draw_sprite(surf, sp, cell_px)
        if font is None:
            continue
        for g in layer.glyphs:
            surf.blit(font.render(g.text, True, COLOR_FG), (g.x * cell_px, g.y * cell_px))
