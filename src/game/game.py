# src/game/game.py
import argparse, random
import pygame
from pygame import K_SPACE, K_p, K_q, K_ESCAPE
from .config import SCREEN_WIDTH, SCREEN_HEIGHT, CELL_PX, FPS, SEED_DEFAULT
from .render import draw_terminal
from .state import State
from .terminal import Key, Terminal

KEYMAP = {
    K_SPACE: Key.SPACE,
    K_p: Key.P,
    K_q: Key.Q,
}

def parse_args():
    p = argparse.ArgumentParser(description="Flappy Dragon")
    p.add_argument("--seed", type=int, default=SEED_DEFAULT,
                   help="Seed for wall gaps. Omit for a random run.")
    p.add_argument("--cell-px", type=int, default=CELL_PX,
                   help="Pixels per terminal cell (window is 80x50 cells).")
    p.add_argument("--fps", type=int, default=FPS, help="Render frame cap.")
    args = p.parse_args()
    if args.cell_px < 2:
        raise ValueError("--cell-px must be >= 2")
    if args.fps < 1:
        raise ValueError("--fps must be >= 1")
    return args

def run():
    args = parse_args()

    pygame.init()
    pygame.display.set_caption("Flappy Dragon")
    screen = pygame.display.set_mode((SCREEN_WIDTH * args.cell_px, SCREEN_HEIGHT * args.cell_px))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", args.cell_px)

    term = Terminal()
    state = State(random.Random(args.seed))

    while not term.quitting:
        elapsed_ms = clock.tick(args.fps)

        # one key per frame: the last mapped key pressed wins
        key = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                term.quitting = True
            elif event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    term.quitting = True
                key = KEYMAP.get(event.key, key)

        term.begin_frame(elapsed_ms, key)
        state.tick(term)

        draw_terminal(screen, term, font, args.cell_px)
        pygame.display.flip()

    pygame.quit()

if __name__ == "__main__":
    run()
