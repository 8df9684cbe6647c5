"""Tests for src.data_pipeline.cleaning."""

import pandas as pd
import pytest

from src.data_pipeline.cleaning import VEHICLE_CLASS_ALIASES, VehicleDataCleaner


def _make_raw_df(rows):
    """Build a DataFrame shaped like RosterIngester output."""
    defaults = {
        "player_name": "",
        "name": "Ship",
        "tier": 10.0,
        "battles": 100.0,
        "wins": 50.0,
        "survived": 30.0,
        "avg_damage": 50000.0,
        "avg_frags": float("nan"),
    }
    return pd.DataFrame([{**defaults, **row} for row in rows])


# ── Class normalization ──────────────────────────────────────────────

class TestNormalizeVehicleClass:
    @pytest.mark.parametrize("raw, expected", [
        ("DD", "fast-attack"),
        ("Destroyer", "fast-attack"),
        ("CA", "heavy-cruiser"),
        ("cruiser", "heavy-cruiser"),
        ("BB", "battleship"),
        ("Battleship", "battleship"),
        ("CV", "carrier"),
        ("AirCarrier", "carrier"),
        ("Air Carrier", "carrier"),
        ("SS", "submarine"),
        ("Submarine", "submarine"),
        ("fast-attack", "fast-attack"),
        ("Heavy-Cruiser", "heavy-cruiser"),
        (" bb ", "battleship"),
    ])
    def test_known_labels(self, cleaner, raw, expected):
        assert cleaner.normalize_vehicle_class(raw) == expected

    @pytest.mark.parametrize("raw", ["Frigate", "", "  ", None, float("nan")])
    def test_unknown_labels(self, cleaner, raw):
        assert cleaner.normalize_vehicle_class(raw) is None

    def test_every_alias_maps_to_canonical_class(self, cleaner):
        for alias, canonical in VEHICLE_CLASS_ALIASES.items():
            assert cleaner.normalize_vehicle_class(alias.upper()) == canonical


# ── DataFrame cleaning ───────────────────────────────────────────────

class TestClean:
    def test_normalizes_classes(self, cleaner):
        df = _make_raw_df([
            {"vehicle_id": "v1", "player_id": "p1", "vehicle_class": "DD"},
            {"vehicle_id": "v2", "player_id": "p2", "vehicle_class": "Battleship"},
        ])
        out = cleaner.clean(df)
        assert out["vehicle_class"].tolist() == ["fast-attack", "battleship"]

    def test_drops_unknown_class(self, cleaner, caplog):
        df = _make_raw_df([
            {"vehicle_id": "v1", "player_id": "p1", "vehicle_class": "DD"},
            {"vehicle_id": "v2", "player_id": "p2", "vehicle_class": "Frigate"},
        ])
        out = cleaner.clean(df)
        assert out["vehicle_id"].tolist() == ["v1"]
        assert "unrecognized vehicle class" in caplog.text

    def test_drops_missing_tier(self, cleaner):
        df = _make_raw_df([
            {"vehicle_id": "v1", "player_id": "p1", "vehicle_class": "DD"},
            {"vehicle_id": "v2", "player_id": "p2", "vehicle_class": "BB", "tier": float("nan")},
        ])
        out = cleaner.clean(df)
        assert out["vehicle_id"].tolist() == ["v1"]

    def test_counts_become_ints(self, cleaner):
        df = _make_raw_df([
            {"vehicle_id": "v1", "player_id": "p1", "vehicle_class": "DD",
             "battles": float("nan"), "wins": float("nan"), "survived": float("nan")},
        ])
        out = cleaner.clean(df)
        row = out.iloc[0]
        assert row["battles"] == 0 and row["wins"] == 0 and row["survived"] == 0
        for col in ("tier", "battles", "wins", "survived"):
            assert pd.api.types.is_integer_dtype(out[col]), col

    def test_wins_and_survivals_clamped_to_battles(self, cleaner):
        df = _make_raw_df([
            {"vehicle_id": "v1", "player_id": "p1", "vehicle_class": "CA",
             "battles": 20.0, "wins": 25.0, "survived": -3.0},
        ])
        row = cleaner.clean(df).iloc[0]
        assert row["wins"] == 20
        assert row["survived"] == 0

    def test_missing_damage_is_zero(self, cleaner):
        df = _make_raw_df([
            {"vehicle_id": "v1", "player_id": "p1", "vehicle_class": "CA",
             "avg_damage": float("nan")},
        ])
        assert cleaner.clean(df).iloc[0]["avg_damage"] == 0.0

    def test_duplicate_vehicles_keep_last(self, cleaner):
        df = _make_raw_df([
            {"vehicle_id": "v1", "player_id": "p1", "vehicle_class": "CA", "battles": 10.0},
            {"vehicle_id": "v2", "player_id": "p2", "vehicle_class": "BB"},
            {"vehicle_id": "v1", "player_id": "p1", "vehicle_class": "CA", "battles": 40.0},
        ])
        out = cleaner.clean(df)
        assert sorted(out["vehicle_id"].tolist()) == ["v1", "v2"]
        assert out[out["vehicle_id"] == "v1"].iloc[0]["battles"] == 40

    def test_does_not_mutate_input(self, cleaner):
        df = _make_raw_df([
            {"vehicle_id": "v1", "player_id": "p1", "vehicle_class": "DD"},
        ])
        cleaner.clean(df)
        assert df.loc[0, "vehicle_class"] == "DD"
        assert df.loc[0, "tier"] == 10.0

    def test_empty_frame(self, cleaner):
        df = _make_raw_df([
            {"vehicle_id": "v1", "player_id": "p1", "vehicle_class": "Frigate"},
        ])
        out = cleaner.clean(df)
        assert out.empty
