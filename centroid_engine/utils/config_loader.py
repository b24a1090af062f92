"""
Config loader & resolver

- load_yaml(path): loads YAML into dict (requires PyYAML)
- resolve_config(path, overrides_json): loads, applies optional JSON overrides, fills defaults
"""
from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import yaml
except ImportError as e:
    raise ImportError(
        "PyYAML is required to load configs. Install with: pip install pyyaml"
    ) from e


DEFAULTS: Dict[str, Any] = {
    "logging": {"level": "INFO", "to_file": False, "to_json": False, "dir": "logs"},
    "adapters": {"geojson_coordinate_order": "lat_lon"},
    "output": {"precision": None},
}


def load_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {p}")
    return yaml.safe_load(p.read_text(encoding="utf-8")) or {}


def deep_merge(a: Dict, b: Dict) -> Dict:
    """Recursively merge dict b into a (returns a new dict)."""
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _normalize_sections(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Empty sections (`logging:` loads as None) fall back to defaults; other non-mappings are rejected."""
    for section, default in DEFAULTS.items():
        value = cfg.get(section)
        if value is None:
            cfg[section] = copy.deepcopy(default)
        elif not isinstance(value, dict):
            raise ValueError(f"Config section '{section}' must be a mapping, got {type(value).__name__}")
    return cfg


def resolve_config(path: Optional[str | Path] = None, overrides_json: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the effective config: DEFAULTS <- YAML file (if given) <- JSON overrides.

    overrides_json example: '{"adapters": {"geojson_coordinate_order": "lon_lat"}}'
    """
    cfg = copy.deepcopy(DEFAULTS)
    if path:
        loaded = load_yaml(path)
        if not isinstance(loaded, dict):
            raise ValueError(f"Config {path} must be a YAML mapping")
        cfg = _normalize_sections(deep_merge(cfg, loaded))
    if overrides_json:
        overrides = json.loads(overrides_json)
        if not isinstance(overrides, dict):
            raise ValueError("Config overrides must be a JSON object")
        cfg = _normalize_sections(deep_merge(cfg, overrides))
    return cfg
