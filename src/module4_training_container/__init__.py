# file: src/module4_training_container/__init__.py

"""
Module 4: Training Notes Container

Stores structured training data in a plain-text note field behind the
visible MARKER prefix, using the invisible codec (Module 3), with
backward-compatible reads of older visible formats.

Public API:
    - read_notes(notes, codec=None) -> ParsedNotes
    - write_notes(exercises, detailed_log=None, codec=None) -> str
    - TrainingRecord: record owning a notes field
    - parse_exercise_string / format_exercise_string: legacy grammar
"""

from .protocol import MARKER
from .payload import WorkoutSet, ExerciseLog, DetailedTrainingLog, TrainingPayload
from .legacy import parse_exercise_string, format_exercise_string
from .container import NotesKind, ParsedNotes, read_notes, write_notes, encode_payload
from .record import TrainingRecord
from .errors import ContainerError, PayloadEncodingError, PayloadFormatError

__version__ = "1.0.0"

__all__ = [
    "MARKER",
    "WorkoutSet",
    "ExerciseLog",
    "DetailedTrainingLog",
    "TrainingPayload",
    "parse_exercise_string",
    "format_exercise_string",
    "NotesKind",
    "ParsedNotes",
    "read_notes",
    "write_notes",
    "encode_payload",
    "TrainingRecord",
    "ContainerError",
    "PayloadEncodingError",
    "PayloadFormatError",
]
