"""
Record decoding — turns plain mappings (JSON/YAML) into point shapes.

This is the input side of the CLI, not part of the aggregation core. Supported
record forms:

    {"kind": "kml", "latitude": .., "longitude": .., "altitude": ..}   -> KmlPoint
    {"kind": "geo", "latitude": .., "longitude": ..}                   -> GeoPoint
    {"kind": "geojson", "coordinates": [a, b], "properties": {..}}     -> GeoJsonPoint
    {"type": "Point", "coordinates": [a, b]}                           -> GeoJsonPoint
    {"type": "Feature", "geometry": {"type": "Point", ..}, ...}        -> GeoJsonPoint
    {"type": "FeatureCollection", "features": [...]}                   -> expanded

A document is either a list of records, a FeatureCollection, or a mapping with a
"points" list.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .shapes import GeoJsonPoint, GeoPoint, KmlPoint, PointShape
from .utils.logging_utils import get_logger

log = get_logger("centroid.records")


class RecordError(ValueError):
    """A record could not be decoded into a point shape."""


def _number(rec: Mapping[str, Any], key: str, idx: int, default: Optional[float] = None) -> float:
    if key not in rec or rec[key] is None:
        if default is not None:
            return default
        raise RecordError(f"record {idx}: missing field '{key}'")
    val = rec[key]
    if isinstance(val, bool):
        raise RecordError(f"record {idx}: field '{key}' must be a number, got {val!r}")
    try:
        return float(val)
    except (TypeError, ValueError) as e:
        raise RecordError(f"record {idx}: field '{key}' must be a number, got {val!r}") from e


def _pair(raw: Any, idx: int) -> tuple:
    if not isinstance(raw, (list, tuple)) or len(raw) < 2:
        raise RecordError(f"record {idx}: 'coordinates' must be a list of at least two numbers")
    if isinstance(raw[0], bool) or isinstance(raw[1], bool):
        raise RecordError(f"record {idx}: non-numeric coordinates {raw!r}")
    try:
        return float(raw[0]), float(raw[1])
    except (TypeError, ValueError) as e:
        raise RecordError(f"record {idx}: non-numeric coordinates {raw!r}") from e


def _properties(raw: Any, idx: int) -> Optional[Dict[str, str]]:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise RecordError(f"record {idx}: 'properties' must be a mapping or null")
    return {str(k): "" if v is None else str(v) for k, v in raw.items()}


def decode_record(rec: Any, idx: int = 0) -> PointShape:
    """Decode a single record mapping into a point shape."""
    if not isinstance(rec, Mapping):
        raise RecordError(f"record {idx}: expected a mapping, got {type(rec).__name__}")

    kind = str(rec.get("kind") or rec.get("type") or "").strip().lower()

    if kind == "kml":
        return KmlPoint(
            latitude=_number(rec, "latitude", idx),
            longitude=_number(rec, "longitude", idx),
            altitude=_number(rec, "altitude", idx, default=0.0),
        )
    if kind == "geo":
        return GeoPoint(latitude=_number(rec, "latitude", idx), longitude=_number(rec, "longitude", idx))
    if kind in ("geojson", "point"):
        return GeoJsonPoint(coordinates=_pair(rec.get("coordinates"), idx), properties=_properties(rec.get("properties"), idx))
    if kind == "feature":
        geom = rec.get("geometry") or {}
        if not isinstance(geom, Mapping) or str(geom.get("type", "")).lower() != "point":
            raise RecordError(f"record {idx}: only Point features are supported")
        return GeoJsonPoint(coordinates=_pair(geom.get("coordinates"), idx), properties=_properties(rec.get("properties"), idx))

    raise RecordError(f"record {idx}: unknown point kind {kind or '<missing>'!r}")


def decode_records(doc: Any) -> List[PointShape]:
    """Decode a whole document (see module docstring) into shapes, in order."""
    if isinstance(doc, Mapping):
        if str(doc.get("type", "")).lower() == "featurecollection":
            items = doc.get("features") or []
        elif "points" in doc:
            items = doc["points"] or []
        else:
            items = [doc]
    elif isinstance(doc, list):
        items = doc
    else:
        raise RecordError(f"expected a list of records or a mapping, got {type(doc).__name__}")

    shapes: List[PointShape] = []
    for i, rec in enumerate(items):
        if isinstance(rec, Mapping) and str(rec.get("type", "")).lower() == "featurecollection":
            shapes.extend(decode_records(rec))
        else:
            shapes.append(decode_record(rec, i))
    log.debug("Decoded %d record(s)", len(shapes))
    return shapes


def load_records(path: str | Path) -> List[PointShape]:
    """Read a .json/.geojson or .yaml/.yml file of point records."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Input not found: {p}")
    text = p.read_text(encoding="utf-8")
    try:
        if p.suffix.lower() in (".yml", ".yaml"):
            doc = yaml.safe_load(text)
        else:
            doc = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise RecordError(f"{p}: could not parse input ({e})") from e
    shapes = decode_records(doc)
    log.info("Loaded %d point(s) from %s", len(shapes), p.as_posix())
    return shapes
