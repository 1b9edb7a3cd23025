"""
Document identifiers: validation of raw values and generation of new ids.

Identifiers follow the ObjectId layout: 12 bytes rendered as 24 hex
characters (4-byte timestamp, 5-byte per-process random, 3-byte counter).
"""
import itertools
import os
import random
import re
import time
from typing import Any, Optional

OBJECT_ID_LENGTH = 24

_OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")
_PROCESS_UNIQUE = os.urandom(5)
_counter = itertools.count(random.randint(0, 0xFFFFFF))


def clean_and_validate_id(raw_id: Any) -> Optional[str]:
    """
    Normalize a raw identifier and check it against the ObjectId format.

    Route placeholders sometimes leak into values (``":64f..."``), so a single
    leading colon is stripped after trimming. Returns the normalized string,
    or None when the value is absent, of the wrong type, or malformed.
    """
    if not raw_id:
        return None
    # bool is an int subclass but never an identifier
    if isinstance(raw_id, bool) or not isinstance(raw_id, (str, int, float)):
        return None

    candidate = str(raw_id).strip()
    if candidate.startswith(":"):
        candidate = candidate[1:]

    if _OBJECT_ID_PATTERN.fullmatch(candidate):
        return candidate
    return None


def new_object_id() -> str:
    """Generate a new 24-hex-character identifier."""
    timestamp = int(time.time()) & 0xFFFFFFFF
    counter = next(_counter) & 0xFFFFFF
    raw = timestamp.to_bytes(4, "big") + _PROCESS_UNIQUE + counter.to_bytes(3, "big")
    return raw.hex()
