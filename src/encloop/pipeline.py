from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from .config import LoopConfig
from .logger import EventLogger
from .run_manager import RunRecorder
from .runner import run_roundtrip
from .schemas import RoundTripResult


def run_benchmark(cfg: LoopConfig, opener=open) -> Tuple[RoundTripResult, Optional[Path]]:
    """
    Run one round-trip benchmark, recording artifacts when cfg.record_dir is set.

    Artifacts (record mode):
      config.json, status.json (per step), logs.jsonl, result.json, report.md
    """
    if not cfg.record_dir:
        return run_roundtrip(cfg, opener=opener), None

    rec = RunRecorder.create(cfg)
    logger = EventLogger(log_path=rec.log_path)

    result = run_roundtrip(cfg, logger=logger, opener=opener, on_step=rec.mark)

    rec.save_json("result.json", result.model_dump())
    rec.save_report(_render_report_md(result))
    logger.log("pipeline", "done", {"run_id": rec.run_dir.name})
    return result, rec.run_dir


def _render_report_md(result: RoundTripResult) -> str:
    lines = []
    lines.append("# Encode/Decode Round-Trip Report\n")
    lines.append(f"**Encoding**: {result.encoding} (codec `{result.codec}`)\n")
    lines.append(f"- Repeat: {result.repeat}")
    lines.append(f"- Buffer size: {result.buffer_size} chars")
    lines.append(f"- Writes / reads: {result.writes} / {result.reads}")
    lines.append(f"- Chars written / read: {result.chars_written} / {result.chars_read}")
    lines.append(f"- Loop time: {result.elapsed_s:.6f} s")
    lines.append(f"- Throughput: {result.chars_per_second:,.0f} chars/s")
    lines.append("")
    return "\n".join(lines)
