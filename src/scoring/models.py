"""Data models for vehicle scoring."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Baseline:
    """Expected per-battle performance for one tier/class."""

    win_rate: float  # percent
    survival_rate: float  # percent
    damage: float
    frags: float


@dataclass(frozen=True)
class VehicleMetrics:
    """Inputs to the quality-score model for a single vehicle."""

    vehicle_class: str
    tier: int
    win_rate: float  # percent, 0-100
    survival_rate: float  # percent, 0-100
    avg_damage: float
    battles: int
    avg_frags: Optional[float] = None


@dataclass(frozen=True)
class VehicleRecord:
    """Snapshot of one player-owned vehicle as of the last data refresh."""

    vehicle_id: str
    player_id: str
    name: str
    tier: int
    vehicle_class: str
    battles: int
    wins: int
    survived: int
    avg_damage: float
    avg_frags: Optional[float] = None
    player_name: str = ""

    @property
    def win_rate(self) -> float:
        """Win rate in percent (0 when the vehicle has no battles)."""
        if self.battles <= 0:
            return 0.0
        return self.wins / self.battles * 100

    @property
    def survival_rate(self) -> float:
        """Survival rate in percent (0 when the vehicle has no battles)."""
        if self.battles <= 0:
            return 0.0
        return self.survived / self.battles * 100

    def to_metrics(self) -> VehicleMetrics:
        return VehicleMetrics(
            vehicle_class=self.vehicle_class,
            tier=self.tier,
            win_rate=self.win_rate,
            survival_rate=self.survival_rate,
            avg_damage=self.avg_damage,
            battles=self.battles,
            avg_frags=self.avg_frags,
        )


@dataclass(frozen=True)
class ScoredVehicle:
    """A VehicleRecord plus its quality score and the inputs behind it."""

    record: VehicleRecord
    quality_score: float
    win_rate: float
    survival_rate: float
    avg_damage: float
    expected_damage: Optional[float] = None
    damage_ratio: Optional[float] = None

    @property
    def vehicle_id(self) -> str:
        return self.record.vehicle_id

    @property
    def player_id(self) -> str:
        return self.record.player_id

    @property
    def player_name(self) -> str:
        return self.record.player_name

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def tier(self) -> int:
        return self.record.tier

    @property
    def vehicle_class(self) -> str:
        return self.record.vehicle_class

    @property
    def battles(self) -> int:
        return self.record.battles

    def to_dict(self) -> dict:
        """Flat JSON-friendly representation."""
        return {
            "vehicle_id": self.vehicle_id,
            "player_id": self.player_id,
            "player_name": self.player_name,
            "name": self.name,
            "tier": self.tier,
            "vehicle_class": self.vehicle_class,
            "battles": self.battles,
            "quality_score": round(self.quality_score, 2),
            "win_rate": round(self.win_rate, 2),
            "survival_rate": round(self.survival_rate, 2),
            "avg_damage": round(self.avg_damage, 1),
            "expected_damage": self.expected_damage,
            "damage_ratio": (
                round(self.damage_ratio, 3) if self.damage_ratio is not None else None
            ),
        }
