from src.lineup_optimizer.composition import (
    CompositionError,
    ensure_valid,
    requirement_for_mode,
)
from src.lineup_optimizer.models import (
    CompositionRequirement,
    LineupResult,
    OptimizerConfig,
)
from src.lineup_optimizer.optimizer import (
    LineupOptimizer,
    filter_participants,
    optimize_lineup,
)

__all__ = [
    "CompositionError",
    "CompositionRequirement",
    "LineupOptimizer",
    "LineupResult",
    "OptimizerConfig",
    "ensure_valid",
    "filter_participants",
    "optimize_lineup",
    "requirement_for_mode",
]
