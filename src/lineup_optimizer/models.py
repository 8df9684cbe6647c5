"""Lineup request and result models."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from src.lineup_optimizer.config import DEFAULT_MAX_TIER_SPREAD, DEFAULT_MIN_BATTLES
from src.scoring.models import ScoredVehicle


@dataclass(frozen=True)
class OptimizerConfig:
    """Tunable eligibility settings for the optimizer."""

    min_battles: int = DEFAULT_MIN_BATTLES
    default_max_tier_spread: int = DEFAULT_MAX_TIER_SPREAD


@dataclass(frozen=True)
class CompositionRequirement:
    """Target team shape: per-class counts, tier bounds, tier spread."""

    required_classes: Dict[str, int]
    min_tier: int
    max_tier: int
    max_tier_spread: Optional[int] = None  # None -> OptimizerConfig default

    @property
    def total_required(self) -> int:
        return sum(self.required_classes.values())

    def effective_tier_spread(self, default: int = DEFAULT_MAX_TIER_SPREAD) -> int:
        if self.max_tier_spread is None:
            return default
        return self.max_tier_spread

    def validate(self) -> Tuple[bool, List[str]]:
        """
        Check the requirement is well formed.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if not self.required_classes:
            errors.append("required_classes cannot be empty")

        counts_ok = True
        for vehicle_class, count in self.required_classes.items():
            if not _is_int(count):
                errors.append(f"Count for {vehicle_class!r} must be an integer (got {count!r})")
                counts_ok = False
            elif count < 0:
                errors.append(f"Count for {vehicle_class!r} cannot be negative (got {count})")
                counts_ok = False

        if self.required_classes and counts_ok and self.total_required == 0:
            errors.append("At least one vehicle must be required")

        if not _is_int(self.min_tier) or not _is_int(self.max_tier):
            errors.append(
                f"Tier bounds must be integers "
                f"(got min_tier={self.min_tier!r}, max_tier={self.max_tier!r})"
            )
        elif self.min_tier > self.max_tier:
            errors.append(
                f"min_tier ({self.min_tier}) cannot exceed max_tier ({self.max_tier})"
            )

        if self.max_tier_spread is not None:
            if not _is_int(self.max_tier_spread):
                errors.append(
                    f"max_tier_spread must be an integer (got {self.max_tier_spread!r})"
                )
            elif self.max_tier_spread < 0:
                errors.append(
                    f"max_tier_spread cannot be negative (got {self.max_tier_spread})"
                )

        return (len(errors) == 0, errors)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class LineupResult:
    """Vehicles chosen for one lineup request."""

    vehicles: List[ScoredVehicle] = field(default_factory=list)
    total_score: float = 0.0
    average_tier: float = 0.0
    composition: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_selection(
        cls,
        selected: List[ScoredVehicle],
        composition: Dict[str, int],
    ) -> "LineupResult":
        total_score = sum(v.quality_score for v in selected)
        average_tier = (
            sum(v.tier for v in selected) / len(selected) if selected else 0.0
        )
        return cls(
            vehicles=list(selected),
            total_score=total_score,
            average_tier=average_tier,
            composition=dict(composition),
        )

    @property
    def player_ids(self) -> List[str]:
        return [v.player_id for v in self.vehicles]

    def shortfall(self, requirement: CompositionRequirement) -> Dict[str, int]:
        """Missing vehicles per class (only classes with a deficit)."""
        missing = {}
        for vehicle_class, required in requirement.required_classes.items():
            have = self.composition.get(vehicle_class, 0)
            if have < required:
                missing[vehicle_class] = required - have
        return missing

    def is_complete(self, requirement: CompositionRequirement) -> bool:
        return not self.shortfall(requirement)

    def to_dict(self) -> dict:
        return {
            "vehicles": [v.to_dict() for v in self.vehicles],
            "total_score": round(self.total_score, 2),
            "average_tier": round(self.average_tier, 2),
            "composition": dict(self.composition),
        }
