from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

_log = logging.getLogger("encloop")


@dataclass
class EventLogger:
    """
    Structured event logger (JSON Lines).

    - fixed fields (ts, stage, event)
    - meta dict reserved for structured diagnostics
    - one event per line (append-only)

    Without a log_path, events only go to the "encloop" stdlib logger.
    """
    log_path: Optional[Path] = None

    def log(self, stage: str, event: str, meta: Optional[Dict[str, Any]] = None) -> None:
        record = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime()),
            "stage": stage,
            "event": event,
            "meta": meta or {},
        }
        _log.debug("%s/%s %s", stage, event, record["meta"])
        if self.log_path is None:
            return
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with self.log_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
