# src/env/observations.py
from __future__ import annotations
import numpy as np

from src.game.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, TERMINAL_VELOCITY, FLAP_CYCLE_MAX
)

OBS_SIZE = 6
OBS_LOW = np.array([0.0, -1.0, 0.0, 0.0, 0.0, 0.0], dtype=np.float32)
OBS_HIGH = np.array([1.0, 1.0, 1.0, 1.0, 1.0, 1.0], dtype=np.float32)

def _clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else (hi if x > hi else x)

def build_observation(player, obstacle) -> np.ndarray:
    """
    Returns a fixed (6,) float32 vector:
      [ y_norm, velocity_norm, flap_norm, dx_norm, gap_top_norm, gap_bottom_norm ]
    - y_norm          player y over the screen height, in [0,1]
    - velocity_norm   velocity over the terminal velocity, in [-1,1]
    - flap_norm       wing phase over its maximum, in [0,1]
    - dx_norm         cells until the wall over the screen width, in [0,1]
    - gap_*_norm      gap edges over the screen height, in [0,1]
    """
    feats = [
        _clamp(player.y / SCREEN_HEIGHT, 0.0, 1.0),
        _clamp(player.velocity / TERMINAL_VELOCITY, -1.0, 1.0),
        _clamp(player.flap_cycle / FLAP_CYCLE_MAX, 0.0, 1.0),
        _clamp((obstacle.x - player.x) / SCREEN_WIDTH, 0.0, 1.0),
        _clamp(obstacle.upper_bound / SCREEN_HEIGHT, 0.0, 1.0),
        _clamp(obstacle.lower_bound / SCREEN_HEIGHT, 0.0, 1.0),
    ]
    return np.asarray(feats, dtype=np.float32)
