from __future__ import annotations

from .result import RoundTripResult
from .run_status import StepState, StepStatus, RunStatus

__all__ = [
    "RoundTripResult",
    "StepState",
    "StepStatus",
    "RunStatus",
]
