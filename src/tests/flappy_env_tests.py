# src/tests/flappy_env_tests.py
"""
Quick tests for FlappyEnv (Gymnasium environment).

Usage (from repo root):
  python -m src.tests.flappy_env_tests
  python -m src.tests.flappy_env_tests --render
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Tuple

import numpy as np
from gymnasium.utils.env_checker import check_env

from src.env.flappy_env import FlappyEnv


def test_api_check():
    """Verify Gym API contract (spaces, step/reset signatures, types)."""
    env = FlappyEnv()
    try:
        check_env(env, skip_render_check=True)
    finally:
        env.close()


def test_smoke(steps: int = 300, seed: int = 123):
    """Short random rollout: no crashes, obs in space, reward type, proper terminations."""
    env = FlappyEnv()
    try:
        obs, info = env.reset(seed=seed)
        assert env.observation_space.contains(obs), "Initial observation not in space"
        assert info["seed"] == seed and info["score"] == 0

        for t in range(steps):
            a = env.action_space.sample()
            obs, r, term, trunc, info = env.step(a)
            assert isinstance(r, float), "Reward must be a float"
            assert env.observation_space.contains(obs), f"Step {t}: observation out of bounds"
            if term or trunc:
                break
    finally:
        env.close()


def test_determinism(steps: int = 300, seed: int = 123):
    """Same seed + same action sequence => identical obs/reward/terminal flags."""
    def rollout(seed_val: int, action_seq: List[int]) -> List[Tuple[np.ndarray, float, bool, bool]]:
        env = FlappyEnv()
        traj: List[Tuple[np.ndarray, float, bool, bool]] = []
        try:
            env.reset(seed=seed_val)
            for a in action_seq:
                obs, r, term, trunc, _ = env.step(int(a))
                traj.append((obs.copy(), float(r), bool(term), bool(trunc)))
                if term or trunc:
                    break
        finally:
            env.close()
        return traj

    rng = np.random.RandomState(42)
    action_seq = [int(rng.random_sample() < 0.2) for _ in range(steps)]

    t1 = rollout(seed, action_seq)
    t2 = rollout(seed, action_seq)

    assert len(t1) == len(t2), "Determinism: trajectory length mismatch"
    for i, ((o1, r1, te1, tr1), (o2, r2, te2, tr2)) in enumerate(zip(t1, t2)):
        assert np.allclose(o1, o2), f"Determinism: obs mismatch at step {i}"
        assert (r1, te1, tr1) == (r2, te2, tr2), f"Determinism: transition mismatch at step {i}"


def test_noop_falls_to_death():
    env = FlappyEnv()
    try:
        env.reset(seed=5)
        for t in range(100):
            _, r, term, trunc, info = env.step(0)
            if term:
                break
            assert r == 1.0, "Alive steps earn +1"
        assert term and r == -1.0, "Falling must terminate with -1"
        assert info["death_cause"] == "fell"
        assert info["player_x"] == 5 + info["timestep"], "One physics tick per decision"
    finally:
        env.close()


def test_flap_climbs():
    env = FlappyEnv()
    try:
        obs0, _ = env.reset(seed=9)
        obs1, _, _, _, _ = env.step(1)
        assert obs1[1] < 0.0, "Velocity points up right after a flap"
        assert obs1[2] == 1.0, "Wing phase is at its maximum right after a flap"
        assert obs1[0] > obs0[0], "The flap lands after this frame's physics tick"
        obs2, _, _, _, _ = env.step(0)
        assert obs2[0] < obs1[0], "Dragon rises on the tick after a flap"
    finally:
        env.close()


def test_truncation():
    env = FlappyEnv(max_steps=5)
    try:
        env.reset(seed=1)
        trunc = False
        for _ in range(5):
            _, _, term, trunc, _ = env.step(0)
            assert not term
        assert trunc, "Truncated after max_steps decisions"
    finally:
        env.close()


def test_rgb_array_render():
    env = FlappyEnv(render_mode="rgb_array", cell_px=4)
    try:
        env.reset(seed=2)
        env.step(1)
        frame = env.render()
        assert isinstance(frame, np.ndarray) and frame.dtype == np.uint8
        assert frame.shape == (50 * 4, 80 * 4, 3), f"Unexpected frame shape {frame.shape}"
    finally:
        env.close()


def render_demo(steps: int, seed: int) -> None:
    """Open a window and run a short NOOP demo so you can visually verify behavior."""
    env = FlappyEnv(render_mode="human")
    try:
        env.reset(seed=seed)
        for _ in range(steps):
            _, _, term, trunc, _ = env.step(0)
            if term or trunc:
                break
    finally:
        env.close()
    print("✓ Render demo finished")


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=123, help="Episode seed for tests")
    ap.add_argument("--steps", type=int, default=300, help="Max decision steps per test")
    ap.add_argument("--render", action="store_true", help="Run a short visual demo")
    args = ap.parse_args()

    try:
        test_api_check()
        print("✓ API check ok")
        test_smoke(steps=args.steps, seed=args.seed)
        print("✓ Smoke test ok")
        test_determinism(steps=args.steps, seed=args.seed)
        print("✓ Determinism ok")
        for t in (test_noop_falls_to_death, test_flap_climbs, test_truncation, test_rgb_array_render):
            t()
            print(f"✓ {t.__name__}")
        if args.render:
            render_demo(steps=min(args.steps, 200), seed=args.seed)
    except AssertionError as e:
        print(f"✗ Test failed: {e}", file=sys.stderr)
        sys.exit(1)
    else:
        print("🎉 All selected tests passed")


if __name__ == "__main__":
    main()
