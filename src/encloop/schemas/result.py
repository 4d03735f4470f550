from __future__ import annotations

from pydantic import BaseModel


class RoundTripResult(BaseModel):
    encoding: str
    codec: str
    repeat: int
    buffer_size: int
    writes: int = 0
    reads: int = 0
    chars_written: int = 0
    chars_read: int = 0
    elapsed_s: float = 0.0
    temp_path: str = ""

    @property
    def chars_per_second(self) -> float:
        """Characters moved (written + read) per second of loop time."""
        if self.elapsed_s <= 0:
            return 0.0
        return (self.chars_written + self.chars_read) / self.elapsed_s
