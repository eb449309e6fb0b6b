"""
Legacy plain-text exercise grammar.

    entries := entry ("|" entry)*
    entry   := <integer-id> "=" <float-duration>

The same string is still embedded in the JSON payload under "exercises".
"""

import logging
import re
from typing import Dict, Mapping

from .protocol import ENTRY_SEPARATOR, PAIR_SEPARATOR


logger = logging.getLogger(__name__)

# ASCII only; no whitespace, digit separators or other numeral systems
ID_PATTERN = re.compile(r"[+-]?[0-9]+")
DURATION_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_exercise_string(text: str) -> Dict[int, float]:
    """
    Parse "<id>=<duration>|..." into a mapping.

    Malformed entries are skipped one by one; they never fail the parse.

    Example:
        >>> parse_exercise_string("12=5.0|bad|34=2.5")
        {12: 5.0, 34: 2.5}
    """
    result: Dict[int, float] = {}
    skipped = 0

    for entry in text.split(ENTRY_SEPARATOR):
        if not entry:
            continue

        parts = entry.split(PAIR_SEPARATOR, 1)
        if len(parts) != 2:
            skipped += 1
            continue

        raw_id, raw_duration = parts
        if not ID_PATTERN.fullmatch(raw_id) or not DURATION_PATTERN.fullmatch(raw_duration):
            skipped += 1
            continue

        result[int(raw_id)] = float(raw_duration)

    if skipped:
        logger.debug("Skipped %d malformed exercise entries", skipped)

    return result


def format_exercise_string(exercises: Mapping[int, float]) -> str:
    """Inverse of parse_exercise_string(); durations in shortest round-trip form."""
    return ENTRY_SEPARATOR.join(
        f"{int(exercise_id)}{PAIR_SEPARATOR}{float(duration)!r}"
        for exercise_id, duration in exercises.items()
    )
