# file: src/module4_training_container/container.py

"""
Notes container: reading and writing training payloads in a note field.

Formats recognised on read, in order:
    1. MARKER + invisible codec output of the JSON payload   (current)
    2. MARKER + visible JSON payload                         (pre-codec)
    3. [MARKER +] "<id>=<duration>|..."                       (legacy)
Anything else reads as EMPTY. Writes always produce format 1.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from module1_invisible_alphabet import extract_invisible
from module3_invisible_codec import InvisibleCodec, CODEC_ERRORS

from .errors import PayloadEncodingError, PayloadFormatError
from .legacy import parse_exercise_string
from .payload import DetailedTrainingLog, TrainingPayload
from .protocol import MARKER


logger = logging.getLogger(__name__)


class NotesKind(enum.Enum):
    CURRENT = "current"
    LEGACY = "legacy"
    EMPTY = "empty"


@dataclass
class ParsedNotes:
    """
    Result of reading a note field.

    Attributes:
        kind: Which format matched
        payload: Full payload (CURRENT only)
        exercises: Exercise id -> duration map (empty for EMPTY)
        hidden: True if the payload came from invisible text
        suspect_corruption: The note looked like current format but failed
            to decode and was read through the legacy fallback instead
    """
    kind: NotesKind
    payload: Optional[TrainingPayload] = None
    exercises: Dict[int, float] = field(default_factory=dict)
    hidden: bool = False
    suspect_corruption: bool = False

    @property
    def detailed_log(self) -> Optional[DetailedTrainingLog]:
        return self.payload.detailed_log if self.payload is not None else None


def _current(payload: TrainingPayload, hidden: bool) -> ParsedNotes:
    return ParsedNotes(
        kind=NotesKind.CURRENT,
        payload=payload,
        exercises=payload.exercise_map(),
        hidden=hidden,
    )


def read_notes(notes: Optional[str], codec: Optional[InvisibleCodec] = None) -> ParsedNotes:
    """
    Interpret a note field.

    Args:
        notes: Raw note text, possibly None
        codec: Codec to decode with (default configuration if None)

    Returns:
        ParsedNotes; never raises for malformed notes
    """
    if not notes:
        return ParsedNotes(kind=NotesKind.EMPTY)

    has_marker = notes.startswith(MARKER)
    remainder = notes[len(MARKER):] if has_marker else notes
    suspect = False

    if has_marker:
        codec = codec or InvisibleCodec()
        plaintext = codec.decode(remainder)
        if plaintext is not None:
            try:
                return _current(TrainingPayload.from_json(plaintext), hidden=True)
            except PayloadFormatError as e:
                logger.warning("Invisible notes decoded but payload is malformed: %s", e)
                suspect = True

        try:
            return _current(TrainingPayload.from_json(remainder), hidden=False)
        except PayloadFormatError:
            pass

        if plaintext is None and extract_invisible(remainder):
            suspect = True
            logger.warning(
                "Notes carry %s and hidden symbols but failed to decode; "
                "falling back to legacy parse",
                MARKER,
            )

    exercises = parse_exercise_string(remainder)
    if exercises:
        return ParsedNotes(kind=NotesKind.LEGACY, exercises=exercises, suspect_corruption=suspect)

    return ParsedNotes(kind=NotesKind.EMPTY, suspect_corruption=suspect)


def encode_payload(payload: TrainingPayload, codec: Optional[InvisibleCodec] = None) -> str:
    """
    Render a payload as MARKER + invisible text.

    Raises:
        PayloadEncodingError: If the codec cannot encode the payload
    """
    codec = codec or InvisibleCodec()
    try:
        hidden = codec.encode_checked(payload.to_json())
    except CODEC_ERRORS as e:
        raise PayloadEncodingError(f"Failed to encode training payload: {e}") from e
    return MARKER + hidden


def write_notes(
    exercises: Mapping[int, float],
    detailed_log: Optional[DetailedTrainingLog] = None,
    codec: Optional[InvisibleCodec] = None,
) -> str:
    """
    Serialize exercises (and an optional detailed log) into note text.

    Args:
        exercises: Exercise id -> duration
        detailed_log: Optional per-set log
        codec: Codec to encode with (default configuration if None)

    Returns:
        MARKER followed by the invisible payload

    Raises:
        PayloadEncodingError: If encoding fails
    """
    payload = TrainingPayload.from_exercises(exercises, detailed_log)
    return encode_payload(payload, codec)
