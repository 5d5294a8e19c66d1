"""Configuration helpers for the triangle solver."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Tuple

STRATEGY_NAMES: Tuple[str, ...] = ("SSA", "ASA", "SAS", "SSS")


@dataclass
class SolverConfig:
    # side assigned by ASA when only angles are known; any positive value works
    nominal_side: float = 100.0
    strategy_order: Tuple[str, ...] = STRATEGY_NAMES
    precision: int = 2
    right_angle_tol: float = 1e-9

    def __post_init__(self) -> None:
        if self.nominal_side <= 0:
            raise ValueError("nominal_side must be positive")
        unknown = [name for name in self.strategy_order if name not in STRATEGY_NAMES]
        if unknown:
            raise ValueError(f"unknown strategies in strategy_order: {unknown}")
        if self.precision < 0:
            raise ValueError("precision must be non-negative")
        self.strategy_order = tuple(self.strategy_order)


_SOLVER_CONFIG = SolverConfig()


def get_solver_config() -> SolverConfig:
    return copy.deepcopy(_SOLVER_CONFIG)


def set_solver_config(config: SolverConfig) -> None:
    global _SOLVER_CONFIG
    _SOLVER_CONFIG = copy.deepcopy(config)
