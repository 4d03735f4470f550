from __future__ import annotations

import os
import tempfile
import time
from contextlib import ExitStack
from pathlib import Path
from typing import Callable, Optional

from .charbuf import make_chars
from .config import LoopConfig, resolve_encoding
from .logger import EventLogger
from .schemas import RoundTripResult

StepHook = Callable[[str, str, Optional[str]], None]


def _noop_hook(step: str, state: str, message: Optional[str] = None) -> None:
    return None


def run_roundtrip(
    cfg: LoopConfig,
    logger: Optional[EventLogger] = None,
    opener: Callable = open,
    on_step: Optional[StepHook] = None,
) -> RoundTripResult:
    """
    Write the buffer to a temp file and read it back, `cfg.repeat` times.

    Steps:
      1) setup: resolve encoding, build buffer, create temp file, open streams
      2) loop: one full write + one read of up to buffer_size chars per pass
      3) cleanup: close streams, delete the temp file

    Read data is discarded, never compared with what was written.
    Any OSError propagates; the temp file is removed on the way out.
    """
    logger = logger or EventLogger()
    hook = on_step or _noop_hook

    step = "setup"
    logger.log(step, "start", {"encoding": cfg.encoding, "repeat": cfg.repeat})
    try:
        codec = resolve_encoding(cfg.encoding).name
    except LookupError as e:
        logger.log(step, "fail", {"error": str(e)})
        hook(step, "fail", str(e))
        raise

    chars = make_chars(cfg.seed, cfg.buffer_size, cfg.low, cfg.high)
    result = RoundTripResult(
        encoding=cfg.encoding,
        codec=codec,
        repeat=cfg.repeat,
        buffer_size=cfg.buffer_size,
    )

    try:
        fd, name = tempfile.mkstemp(prefix=cfg.temp_prefix, suffix=cfg.temp_suffix, dir=cfg.temp_dir)
    except OSError as e:
        logger.log(step, "fail", {"error": str(e)})
        hook(step, "fail", str(e))
        raise
    os.close(fd)
    path = Path(name)
    result.temp_path = str(path)

    unlink_tried = False
    try:
        with ExitStack() as stack:
            writer = stack.enter_context(opener(path, "w", encoding=cfg.encoding, newline=""))
            reader = stack.enter_context(opener(path, "r", encoding=cfg.encoding, newline=""))
            logger.log(step, "done", {"temp_path": str(path), "buffer_size": len(chars)})
            hook(step, "ok", None)

            step = "loop"
            start = time.perf_counter()
            for _ in range(cfg.repeat):
                writer.write(chars)
                result.writes += 1
                result.chars_written += len(chars)
                result.chars_read += len(reader.read(cfg.buffer_size))
                result.reads += 1
            result.elapsed_s = time.perf_counter() - start
            logger.log(step, "done", {
                "writes": result.writes,
                "reads": result.reads,
                "elapsed_s": round(result.elapsed_s, 6),
            })
            hook(step, "ok", None)
            step = "cleanup"

        unlink_tried = True
        path.unlink()
    except Exception as e:
        logger.log(step, "fail", {"error": str(e)})
        hook(step, "fail", str(e))
        raise
    finally:
        # also runs on KeyboardInterrupt; a failed delete is not retried
        if not unlink_tried:
            path.unlink(missing_ok=True)

    logger.log(step, "done", {"temp_path": str(path)})
    hook(step, "ok", None)
    return result
