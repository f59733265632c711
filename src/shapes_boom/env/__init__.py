"""Gymnasium environments for Shapes Boom."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="ShapesBoom-10x20-v0",
    entry_point="shapes_boom.env.shapes_boom_env:ShapesBoomEnv",
)

__all__ = ["ShapesBoom-10x20-v0"]
