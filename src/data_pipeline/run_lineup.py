"""Build a lineup from a roster CSV.

Usage:
    python -m src.data_pipeline.run_lineup ROSTER_CSV [mode] [participant_id ...]

Examples:
    python -m src.data_pipeline.run_lineup data/raw/roster.csv ranked
    python -m src.data_pipeline.run_lineup data/raw/roster.csv clan 1001 1002 1003
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from src.data_pipeline.cleaning import VehicleDataCleaner
from src.data_pipeline.config import PROCESSED_DATA_DIR
from src.data_pipeline.ingestion import RosterIngester
from src.data_pipeline.vehicle_scoring import VehicleFrameScorer
from src.lineup_optimizer.composition import requirement_for_mode
from src.lineup_optimizer.config import DEFAULT_MODE
from src.lineup_optimizer.models import OptimizerConfig
from src.lineup_optimizer.optimizer import LineupOptimizer, filter_participants
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def run_lineup(
    roster_file: Path,
    mode: str = DEFAULT_MODE,
    participants: Optional[Iterable[str]] = None,
    output_dir: Optional[Path] = None,
    config: Optional[OptimizerConfig] = None,
) -> Path:
    """Score a roster and write the optimized lineup as JSON.

    Args:
        roster_file: Roster CSV (one row per player-owned vehicle).
        mode: Game mode preset, e.g. ``"ranked"`` or ``"clan"``.
        participants: Player IDs to draw from. ``None`` means everyone
            in the roster.
        output_dir: Directory for JSON output.
            Defaults to ``data/processed/``.
        config: Optimizer settings; defaults to :class:`OptimizerConfig`.

    Returns:
        Path to the generated JSON file.

    Raises:
        FileNotFoundError: If the roster file doesn't exist.
        IngestionError: If the roster file is malformed.
    """
    roster_file = Path(roster_file)
    if output_dir is None:
        output_dir = PROCESSED_DATA_DIR

    requirement = requirement_for_mode(mode)
    logger.info("Building %s lineup from %s", mode, roster_file)

    # 1. Ingest
    logger.info("Step 1/4: Reading roster...")
    raw = RosterIngester(roster_file).read_vehicles()

    # 2. Clean
    logger.info("Step 2/4: Cleaning roster...")
    cleaned = VehicleDataCleaner().clean(raw)

    # 3. Score
    logger.info("Step 3/4: Calculating quality scores...")
    scorer = VehicleFrameScorer()
    vehicles = scorer.to_scored_vehicles(scorer.score_frame(cleaned))

    if participants is not None:
        participant_ids = [str(p) for p in participants]
        vehicles = filter_participants(vehicles, participant_ids)
        logger.info(
            "Restricted to %d participants: %d vehicles",
            len(set(participant_ids)), len(vehicles),
        )

    # 4. Optimize
    logger.info("Step 4/4: Optimizing lineup...")
    optimizer = LineupOptimizer(config)
    result = optimizer.optimize(vehicles, requirement)

    output_data = {
        "metadata": {
            "version": "1.0",
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "source": roster_file.name,
            "mode": mode,
            "requirement": {
                "required_classes": dict(requirement.required_classes),
                "min_tier": requirement.min_tier,
                "max_tier": requirement.max_tier,
                "max_tier_spread": requirement.effective_tier_spread(
                    optimizer.config.default_max_tier_spread
                ),
            },
            "min_battles": optimizer.config.min_battles,
            "candidate_vehicles": len(vehicles),
            "complete": result.is_complete(requirement),
            "shortfall": result.shortfall(requirement),
        },
        "lineup": result.to_dict(),
    }

    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / f"lineup_{mode.strip().lower() or DEFAULT_MODE}.json"

    with open(output_file, "w") as f:
        json.dump(output_data, f, indent=2)

    logger.info("Lineup complete! Output: %s", output_file)
    for vehicle in result.vehicles:
        logger.info(
            "  %-14s %s: %s (T%d) score %.2f",
            vehicle.vehicle_class, vehicle.player_name or vehicle.player_id,
            vehicle.name, vehicle.tier, vehicle.quality_score,
        )

    return output_file


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)

    roster = Path(sys.argv[1])
    mode = sys.argv[2] if len(sys.argv) > 2 else DEFAULT_MODE
    participants = sys.argv[3:] or None

    try:
        output = run_lineup(roster, mode, participants)
        print(f"Lineup complete: {output}")
    except Exception:
        logger.exception("Lineup generation failed")
        sys.exit(1)
