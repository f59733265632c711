from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from shapes_boom.game import Action, GameConfig, GameSession, ShapeType
from shapes_boom.storage import HighScoreStore
from shapes_boom.visualization.palette import render_rgb


class ShapesBoomEnv(gym.Env):
    """Single-player falling-block environment around a `GameSession`.

    Each step applies one `Action` and then advances the session clock by
    `frame_ms`, so gravity fires every `drop_interval / frame_ms` steps.
    Game over resets the board inside the session; the episode terminates
    on that step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 frame_ms: float = 100.0, max_episode_steps: int = 10000,
                 store: Optional[HighScoreStore] = None) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.store = store
        self.game = GameSession(self.config, store=store)
        self.render_mode = render_mode
        self.frame_ms = float(frame_ms)
        self.max_episode_steps = int(max_episode_steps)

        top = max(int(k) for k in ShapeType)
        self.observation_space = spaces.Box(
            low=-top, high=top, shape=(self.config.height, self.config.width), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Action))
        self._steps = 0

    def _get_info(self) -> Dict[str, Any]:
        info = self.game.info()
        info["steps"] = self._steps
        return info

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.config = replace(self.config, random_seed=seed)
            self.game = GameSession(self.config, store=self.store)
        else:
            self.game.reset()
        self._steps = 0
        return self.game.get_state(), self._get_info()

    def step(self, action):
        score_before = self.game.score
        game_overs_before = self.game.game_overs

        self.game.handle(Action(int(action)))
        self.game.update(self.frame_ms)
        self._steps += 1

        terminated = self.game.game_overs > game_overs_before
        truncated = self._steps >= self.max_episode_steps
        # Game over zeroes the score; that drop is not a reward signal.
        reward = 0.0 if terminated else float(self.game.score - score_before)

        return self.game.get_state(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            return render_rgb(self.game.get_state())
        return None

    def close(self) -> None:
        pass
