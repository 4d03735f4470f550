from __future__ import annotations

import json
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from .config import LoopConfig
from .schemas import RunStatus


def run_id_for(cfg: LoopConfig) -> str:
    """
    Base run id: YYYY-MM-DD_HHMMSS_<encoding>-x<repeat>

    The encoding keeps only [a-z0-9_-], so "UTF-16" becomes "utf-16".
    """
    ts = time.strftime("%Y-%m-%d_%H%M%S", time.localtime())
    enc = re.sub(r"[^a-z0-9_-]+", "", cfg.encoding.lower())[:32] or "enc"
    return f"{ts}_{enc}-x{cfg.repeat}"


def new_run_dir(cfg: LoopConfig) -> Path:
    """Create a fresh directory under cfg.record_dir; same-second runs get -2, -3, ..."""
    if not cfg.record_dir:
        raise ValueError("record_dir is not set")
    root = Path(cfg.record_dir)
    root.mkdir(parents=True, exist_ok=True)

    base = run_id_for(cfg)
    n = 1
    while True:
        run_dir = root / (base if n == 1 else f"{base}-{n}")
        try:
            run_dir.mkdir()
            return run_dir
        except FileExistsError:
            n += 1


@dataclass
class RunRecorder:
    """Artifacts of one recorded run; status.json is rewritten on every step change."""
    run_dir: Path
    status: RunStatus = field(init=False)

    def __post_init__(self) -> None:
        self.status = RunStatus(run_id=self.run_dir.name)
        self._save_status()

    @classmethod
    def create(cls, cfg: LoopConfig) -> "RunRecorder":
        rec = cls(new_run_dir(cfg))
        rec.save_json("config.json", cfg.model_dump())
        return rec

    @property
    def log_path(self) -> Path:
        return self.run_dir / "logs.jsonl"

    def save_json(self, name: str, obj: Any) -> None:
        with (self.run_dir / name).open("w", encoding="utf-8") as f:
            json.dump(obj, f, ensure_ascii=False, indent=2)

    def mark(self, step: str, state: str, message: Optional[str] = None) -> None:
        setattr(self.status.steps, step, state)
        if state == "fail":
            self.status.error = {"step": step, "message": message or ""}
        self._save_status()

    def save_report(self, report_md: str) -> None:
        (self.run_dir / "report.md").write_text(report_md, encoding="utf-8")

    def _save_status(self) -> None:
        self.save_json("status.json", self.status.model_dump())
