from __future__ import annotations
from typing import Dict, Optional, Literal
from pydantic import BaseModel, Field


StepState = Literal["pending", "ok", "fail"]


class StepStatus(BaseModel):
    setup: StepState = "pending"
    loop: StepState = "pending"
    cleanup: StepState = "pending"


class RunStatus(BaseModel):
    run_id: str
    steps: StepStatus = Field(default_factory=StepStatus)
    error: Optional[Dict[str, str]] = None
