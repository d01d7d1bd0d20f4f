"""Utility functions."""

from varianteffect.utils.logging_config import (
    EffectDecisionLogger,
    get_logger,
    reset_logger,
)

__all__ = [
    'EffectDecisionLogger',
    'get_logger',
    'reset_logger',
]
