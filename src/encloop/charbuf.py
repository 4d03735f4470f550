from __future__ import annotations

from .jrandom import JavaRandom


def make_chars(seed: int = 1, size: int = 16384, low: str = " ", high: str = "z") -> str:
    """
    Build the benchmark buffer: `size` characters drawn from [low, high).

    The draw order matches `low + Random(seed).nextInt(high - low)` on the JVM,
    so the buffer is reproducible across runs and implementations.
    """
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    span = ord(high) - ord(low)
    if span <= 0:
        raise ValueError(f"empty character range [{low!r}, {high!r})")

    rng = JavaRandom(seed)
    base = ord(low)
    return "".join(chr(base + rng.next_int(span)) for _ in range(size))
