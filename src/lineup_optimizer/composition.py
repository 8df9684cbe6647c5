"""Composition presets and requirement validation."""

import logging

from src.lineup_optimizer.config import DEFAULT_MODE, MODE_COMPOSITIONS
from src.lineup_optimizer.models import CompositionRequirement

logger = logging.getLogger(__name__)


class CompositionError(ValueError):
    """Raised when a composition requirement is malformed."""


def ensure_valid(requirement: CompositionRequirement) -> CompositionRequirement:
    """Return *requirement* unchanged, or raise listing every problem.

    Raises:
        CompositionError: If :meth:`CompositionRequirement.validate` fails.
    """
    is_valid, errors = requirement.validate()
    if not is_valid:
        raise CompositionError("Invalid composition requirement: " + "; ".join(errors))
    return requirement


def requirement_for_mode(mode: str) -> CompositionRequirement:
    """Build the composition preset for a game mode.

    Unknown modes fall back to the default preset with a warning.
    """
    key = (mode or "").strip().lower()
    preset = MODE_COMPOSITIONS.get(key)
    if preset is None:
        logger.warning("Unknown game mode %r, using %r composition", mode, DEFAULT_MODE)
        preset = MODE_COMPOSITIONS[DEFAULT_MODE]

    return CompositionRequirement(
        required_classes=dict(preset["required_classes"]),
        min_tier=preset["min_tier"],
        max_tier=preset["max_tier"],
        max_tier_spread=preset.get("max_tier_spread"),
    )
