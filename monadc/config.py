"""Optimizer configuration (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class OptimizerConfig:
    """Groups optimizer configuration."""

    identity_start: int = constants.DEFAULT_IDENTITY_START
    identity_limit: int = constants.DEFAULT_IDENTITY_LIMIT
