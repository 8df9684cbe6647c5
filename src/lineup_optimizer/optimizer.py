"""Greedy lineup optimizer.

Picks at most one vehicle per player to fill a class composition,
preferring higher quality scores, while keeping every selected tier
within the allowed spread of every other.
"""

import logging
from typing import Collection, Dict, Iterable, List, Optional

from src.lineup_optimizer.composition import ensure_valid
from src.lineup_optimizer.models import (
    CompositionRequirement,
    LineupResult,
    OptimizerConfig,
)
from src.scoring.models import ScoredVehicle

logger = logging.getLogger(__name__)


class LineupOptimizer:
    """Select a high-scoring lineup that satisfies a composition.

    The selection is a single greedy pass over vehicles sorted by score.
    It is deterministic (ties keep input order) but not guaranteed to find
    the best possible total: an early high pick can block a better
    combination later.

    The optimizer holds only its config; every call works on its own
    input and never mutates the vehicles passed in.
    """

    def __init__(self, config: Optional[OptimizerConfig] = None):
        self.config = config or OptimizerConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def optimize(
        self,
        vehicles: Iterable[ScoredVehicle],
        requirement: CompositionRequirement,
    ) -> LineupResult:
        """Build a lineup from *vehicles* for *requirement*.

        Args:
            vehicles: Scored vehicles of the eligible participants.
            requirement: Target composition.

        Returns:
            A :class:`LineupResult`. If too few vehicles qualify the result
            is partial; compare ``result.composition`` with the requirement
            (or call ``result.shortfall``) to detect it.

        Raises:
            CompositionError: If the requirement is malformed.
        """
        ensure_valid(requirement)

        eligible = self.eligible_vehicles(vehicles, requirement)
        ranked = sorted(eligible, key=lambda v: v.quality_score, reverse=True)
        max_spread = requirement.effective_tier_spread(self.config.default_max_tier_spread)

        selected = self._greedy_select(ranked, requirement, max_spread)
        composition = self._realized_composition(selected, requirement)
        result = LineupResult.from_selection(selected, composition)

        missing = result.shortfall(requirement)
        if missing:
            logger.warning(
                "Partial lineup: %d/%d vehicles selected, missing %s",
                len(selected), requirement.total_required,
                ", ".join(f"{cls}={n}" for cls, n in sorted(missing.items())),
            )

        logger.info(
            "Lineup: %d vehicles from %d eligible, total score %.2f, avg tier %.2f",
            len(result.vehicles), len(eligible),
            result.total_score, result.average_tier,
        )
        return result

    def eligible_vehicles(
        self,
        vehicles: Iterable[ScoredVehicle],
        requirement: CompositionRequirement,
    ) -> List[ScoredVehicle]:
        """Drop vehicles below the battle floor or outside the tier range."""
        eligible = []
        for vehicle in vehicles:
            if vehicle.battles < self.config.min_battles:
                logger.debug(
                    "Excluding %s (%s): %d battles < %d",
                    vehicle.name, vehicle.player_id,
                    vehicle.battles, self.config.min_battles,
                )
                continue
            if not requirement.min_tier <= vehicle.tier <= requirement.max_tier:
                logger.debug(
                    "Excluding %s (%s): tier %d outside [%d, %d]",
                    vehicle.name, vehicle.player_id, vehicle.tier,
                    requirement.min_tier, requirement.max_tier,
                )
                continue
            eligible.append(vehicle)
        return eligible

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _greedy_select(
        ranked: List[ScoredVehicle],
        requirement: CompositionRequirement,
        max_spread: int,
    ) -> List[ScoredVehicle]:
        total_required = requirement.total_required
        used_players = set()
        class_counts: Dict[str, int] = {}
        selected: List[ScoredVehicle] = []
        low_tier = high_tier = None

        for vehicle in ranked:
            if len(selected) >= total_required:
                break

            if vehicle.player_id in used_players:
                continue

            quota = requirement.required_classes.get(vehicle.vehicle_class, 0)
            if class_counts.get(vehicle.vehicle_class, 0) >= quota:
                continue

            if selected:
                spread = max(high_tier, vehicle.tier) - min(low_tier, vehicle.tier)
                if spread > max_spread:
                    logger.debug(
                        "Skipping %s (%s): tier %d would widen spread to %d > %d",
                        vehicle.name, vehicle.player_id, vehicle.tier,
                        spread, max_spread,
                    )
                    continue
                low_tier = min(low_tier, vehicle.tier)
                high_tier = max(high_tier, vehicle.tier)
            else:
                low_tier = high_tier = vehicle.tier

            selected.append(vehicle)
            used_players.add(vehicle.player_id)
            class_counts[vehicle.vehicle_class] = class_counts.get(vehicle.vehicle_class, 0) + 1

        return selected

    @staticmethod
    def _realized_composition(
        selected: List[ScoredVehicle],
        requirement: CompositionRequirement,
    ) -> Dict[str, int]:
        """Selected count per class, listing every requested class."""
        composition = {cls: 0 for cls in requirement.required_classes}
        for vehicle in selected:
            composition[vehicle.vehicle_class] = composition.get(vehicle.vehicle_class, 0) + 1
        return composition


def optimize_lineup(
    vehicles: Iterable[ScoredVehicle],
    requirement: CompositionRequirement,
    config: Optional[OptimizerConfig] = None,
) -> LineupResult:
    """Functional wrapper around :meth:`LineupOptimizer.optimize`."""
    return LineupOptimizer(config).optimize(vehicles, requirement)


def filter_participants(
    vehicles: Iterable[ScoredVehicle],
    participant_ids: Collection[str],
) -> List[ScoredVehicle]:
    """Keep only vehicles owned by the given participants."""
    wanted = set(participant_ids)
    return [v for v in vehicles if v.player_id in wanted]
