# src/env/flappy_env.py
from __future__ import annotations
import os
import random
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.game.config import SCREEN_WIDTH, SCREEN_HEIGHT, CELL_PX, FRAME_DURATION
from src.game.render import draw_terminal
from src.game.state import State, GameMode
from src.game.terminal import Key, Terminal
from src.env.observations import build_observation, OBS_LOW, OBS_HIGH


class FlappyEnv(gym.Env):
    """
    Flappy Dragon Gymnasium environment (vector observations).
    - Every host frame is `frame_ms` long; above FRAME_DURATION so each frame is
      exactly one physics tick.
    - Agent acts every `frame_skip` frames; a FLAP presses SPACE on the first one.
    - Observation: shape (6,), float32 (see observations.build_observation).
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 20}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 1,
                 frame_ms: float = FRAME_DURATION + 10.0,
                 max_steps: Optional[int] = 2000,
                 cell_px: int = CELL_PX):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert frame_ms > FRAME_DURATION, "frame_ms must exceed FRAME_DURATION"
        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.frame_ms = float(frame_ms)
        self.max_steps = max_steps
        self.cell_px = int(cell_px)

        # Actions: 0 = NOOP, 1 = FLAP
        self.action_space = gym.spaces.Discrete(2)
        self.observation_space = gym.spaces.Box(low=OBS_LOW, high=OBS_HIGH, dtype=np.float32)

        # --- Runtime state ---
        self.state: Optional[State] = None
        self.term = Terminal()
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        # Rendering
        self.screen = None
        self.clock = None
        self.font = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)  # initializes self.np_random

        # Gap layout follows the given seed; otherwise draw one from np_random
        if seed is None:
            seed = int(self.np_random.integers(0, 2**31 - 1))
        self.current_seed = int(seed)

        self.term = Terminal()
        self.state = State(random.Random(self.current_seed))
        self.state.restart()
        self.timestep = 0

        # zero-length frame: draws the opening layout without advancing physics
        self.term.begin_frame(0.0, None)
        self.state.tick(self.term)

        obs = self._get_obs()
        info = {"seed": self.current_seed, "score": 0}
        return obs, info

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.state is not None, "Call reset() before step()"

        score_before = self.state.score
        for i in range(self.frame_skip):
            key = Key.SPACE if (action == 1 and i == 0) else None
            self.term.begin_frame(self.frame_ms, key)
            self.state.tick(self.term)
            if self.state.mode is GameMode.END:
                break

        alive = self.state.mode is GameMode.PLAYING
        reward = 1.0 if alive else -1.0

        self.timestep += 1
        terminated = not alive
        truncated = (self.max_steps is not None) and (self.timestep >= self.max_steps)

        obs = self._get_obs()
        info = {
            "score": self.state.score,
            "passed": self.state.score - score_before,
            "player_x": self.state.player.x,
            "timestep": self.timestep,
            "seed": self.current_seed,
            "death_cause": self.state.death_cause,
        }

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.state is not None
        return build_observation(self.state.player, self.state.obstacle)

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None:
            return

        size = (SCREEN_WIDTH * self.cell_px, SCREEN_HEIGHT * self.cell_px)
        if self.screen is None:
            if self.render_mode == "rgb_array":
                os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
            pygame.init()
            if self.render_mode == "human":
                pygame.display.set_caption("Flappy Dragon - Gym Env")
                self.screen = pygame.display.set_mode(size)
            else:
                self.screen = pygame.Surface(size)
            self.clock = pygame.time.Clock()
            self.font = pygame.font.SysFont("jetbrainsmono", self.cell_px)

        if self.render_mode == "human":
            # Pump the event queue so the OS doesn't think we're hung
            pygame.event.pump()

        draw_terminal(self.screen, self.term, self.font, self.cell_px)

        if self.render_mode == "human":
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        # (H, W, 3) uint8
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.font = None
