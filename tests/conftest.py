"""
Shared pytest fixtures for centroid engine tests.

Writes a minimal config and a few point-record files into tmp_path.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

import pytest

from centroid_engine.shapes import GeoJsonPoint, GeoPoint, KmlPoint
from centroid_engine.utils.config_loader import resolve_config


_MIN_CONFIG_YAML = """\
logging:
  level: "WARNING"
  to_file: false
  to_json: false
  dir: "{LOGS}"

adapters:
  geojson_coordinate_order: "lat_lon"

output:
  precision: null
"""


@pytest.fixture(scope="function")
def cfg_path(tmp_path: Path) -> Path:
    """Writes configs/centroid.yaml into tmp_path and returns its path."""
    cfg_dir = tmp_path / "configs"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    text = _MIN_CONFIG_YAML.replace("{LOGS}", str((tmp_path / "logs").as_posix()))
    p = cfg_dir / "centroid.yaml"
    p.write_text(text, encoding="utf-8")
    return p


@pytest.fixture(scope="function")
def cfg(cfg_path: Path) -> Dict:
    return resolve_config(cfg_path)


@pytest.fixture
def demo_shapes():
    """One of each shape; centroid is (6.4/3, 3.0)."""
    return [KmlPoint(1.0, 2.0, 4.0), GeoPoint(3.0, 2.0), GeoJsonPoint((2.4, 5.0), None)]


@pytest.fixture
def records_json(tmp_path: Path) -> Path:
    records = [
        {"kind": "kml", "latitude": 1.0, "longitude": 2.0, "altitude": 4},
        {"kind": "geo", "latitude": 3.0, "longitude": 2.0},
        {"kind": "geojson", "coordinates": [2.4, 5.0], "properties": None},
    ]
    p = tmp_path / "points.json"
    p.write_text(json.dumps(records), encoding="utf-8")
    return p
