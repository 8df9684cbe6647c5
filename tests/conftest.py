"""Shared fixtures for the lineup builder test suite."""

import textwrap

import pytest

from src.data_pipeline.cleaning import VehicleDataCleaner
from src.data_pipeline.vehicle_scoring import VehicleFrameScorer
from src.lineup_optimizer.optimizer import LineupOptimizer

# A small roster export: 6 players, mixed class labels, one low-battle
# vehicle and one out-of-range tier.
ROSTER_CSV = textwrap.dedent("""\
    vehicle_id,player_id,player_name,name,tier,vehicle_class,battles,wins,survived,avg_damage,avg_frags
    v1,1001,Alpha,Gearing,10,DD,200,120,70,"62,000",1.4
    v2,1001,Alpha,Yamato,10,BB,150,80,60,"110,500",1.0
    v3,1002,Bravo,Shimakaze,10,Destroyer,120,60,30,48000,1.1
    v4,1003,Charlie,Hindenburg,10,CA,90,50,35,80000,
    v5,1004,Delta,Montana,10,Battleship,300,160,130,"105,000",1.2
    v6,1005,Echo,Moskva,10,Cruiser,8,6,5,90000,2.0
    v7,1006,Foxtrot,Baltimore,8,CA,100,55,40,60000,1.2
    v8,1006,Foxtrot,Zao,10,CA,60,30,20,70000,1.0
""")


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture(scope="module")
def cleaner():
    return VehicleDataCleaner()


@pytest.fixture(scope="module")
def frame_scorer():
    return VehicleFrameScorer()


@pytest.fixture
def optimizer():
    return LineupOptimizer()


# ------------------------------------------------------------------
# File fixtures
# ------------------------------------------------------------------

@pytest.fixture
def roster_csv(tmp_path):
    """Sample roster CSV written to a temp directory."""
    path = tmp_path / "roster.csv"
    path.write_text(ROSTER_CSV)
    return path
