from __future__ import annotations

import codecs
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


def resolve_encoding(name: str) -> codecs.CodecInfo:
    """
    Resolve `name` through the codec registry.

    Raises LookupError for unknown names and for codecs that are not
    str <-> bytes text encodings (e.g. 'hex', 'rot13').
    """
    info = codecs.lookup(name)
    # str.encode refuses non-text codecs with a LookupError
    "".encode(info.name)
    return info


class LoopConfig(BaseModel):
    """
    Configuration for one round-trip run.

    Notes:
    - Keep config serializable (JSON) so a recorded run can be reproduced.
    - The encoding is resolved here once, before any file is touched.
    """
    encoding: str = "UTF-8"
    repeat: int = Field(default=50, ge=0)

    # buffer generation
    seed: int = 1
    buffer_size: int = Field(default=16384, ge=0)
    low: str = Field(default=" ", min_length=1, max_length=1)
    high: str = Field(default="z", min_length=1, max_length=1)

    # temp file naming (mkstemp)
    temp_prefix: str = "random_ascii"
    temp_suffix: str = "txt"
    temp_dir: Optional[str] = None

    # run artifacts (off unless requested)
    record_dir: Optional[str] = None

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, v: str) -> str:
        try:
            resolve_encoding(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v!r} ({e})") from e
        return v

    @model_validator(mode="after")
    def _check_range(self) -> "LoopConfig":
        if ord(self.high) <= ord(self.low):
            raise ValueError(f"empty character range [{self.low!r}, {self.high!r})")
        return self

    @property
    def codec_name(self) -> str:
        return codecs.lookup(self.encoding).name


DEFAULT_CONFIG = LoopConfig()
