"""
encloop package.

Encode/decode round-trip benchmark:
- deterministic character buffer (java.util.Random compatible)
- one writer and one reader bound to the same temp file
- optional run recording (JSONL event log + status/result artifacts)
"""

__version__ = "0.1.0"
