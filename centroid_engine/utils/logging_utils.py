# centroid_engine/utils/logging_utils.py
# ======================================================================================
# Logging Utilities — config-driven logging for the centroid engine
# --------------------------------------------------------------------------------------
# Design
#   - init_logging(cfg): root logger with console + optional file/JSONL handlers.
#   - get_logger(name): retrieve a namespaced logger ("centroid.<area>").
#
# Library modules only ever call get_logger(); handlers are installed by the CLI.
# ======================================================================================

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _utc_tag() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


class _JSONLogHandler(logging.Handler):
    """
    Writes one JSON object per record (JSONL) to a file.
    """

    def __init__(self, path: Path, level: int = logging.INFO) -> None:
        super().__init__(level)
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self.path.open("a", encoding="utf-8")

    def emit(self, record: logging.LogRecord) -> None:
        try:
            log_entry = {
                "time": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
                "level": record.levelname,
                "logger": record.name,
                "msg": record.getMessage(),
            }
            self._fh.write(json.dumps(log_entry, ensure_ascii=False) + "\n")
            self._fh.flush()
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        try:
            if not self._fh.closed:
                self._fh.close()
        finally:
            super().close()


def init_logging(cfg: Dict[str, Any]) -> None:
    """
    Configure the root logger from cfg["logging"] (level, to_file, to_json, dir).

    File and JSONL logs are named centroid_<UTC timestamp>.log / .jsonl under dir.
    """
    log_cfg = (cfg or {}).get("logging") or {}
    level = getattr(logging, str(log_cfg.get("level", "INFO")).upper(), logging.INFO)

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    root.setLevel(level)

    # stderr keeps stdout clean for --json output
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(ch)

    log_dir = Path(log_cfg.get("dir", "logs"))
    stem = f"centroid_{_utc_tag()}"

    if log_cfg.get("to_file", False):
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / f"{stem}.log", encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(fh)

    if log_cfg.get("to_json", False):
        root.addHandler(_JSONLogHandler(log_dir / f"{stem}.jsonl", level=level))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
