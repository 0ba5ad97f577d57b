"""Configuration helpers for topological validation."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class ValidationConfig:
    """Switches for the rules applied by :func:`planar_kernel.validate`."""

    require_finite: bool = True
    allow_repeated_points: bool = False


_VALIDATION_CONFIG = ValidationConfig()


def get_validation_config() -> ValidationConfig:
    return copy.deepcopy(_VALIDATION_CONFIG)


def set_validation_config(config: ValidationConfig) -> None:
    global _VALIDATION_CONFIG
    _VALIDATION_CONFIG = copy.deepcopy(config)


__all__ = ["ValidationConfig", "get_validation_config", "set_validation_config"]
