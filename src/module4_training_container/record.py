"""
Training record that owns a notes field.

Only the notes handling lives here; persistence and exercise lookup are
the caller's concern (see the resolve argument of exercises()).
"""

import datetime
import logging
import uuid
from dataclasses import dataclass, field
from typing import Callable, Dict, Hashable, Mapping, Optional, TypeVar

from module1_invisible_alphabet import extract_invisible
from module3_invisible_codec import InvisibleCodec

from .container import ParsedNotes, read_notes, write_notes
from .payload import DetailedTrainingLog


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


@dataclass
class TrainingRecord:
    name: str
    start_time: datetime.datetime
    end_time: datetime.datetime
    notes: Optional[str] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    codec: Optional[InvisibleCodec] = field(default=None, repr=False, compare=False)

    def _codec(self) -> InvisibleCodec:
        if self.codec is None:
            self.codec = InvisibleCodec()
        return self.codec

    def parsed_notes(self) -> ParsedNotes:
        return read_notes(self.notes, self._codec())

    def exercises(self, resolve: Optional[Callable[[int], Optional[T]]] = None) -> Dict:
        """
        Exercise durations stored in the notes.

        Args:
            resolve: Optional lookup from exercise id to an exercise object.
                When given, keys are resolved objects and ids that resolve
                to None are dropped.

        Returns:
            {id: duration} or {exercise: duration}
        """
        by_id = self.parsed_notes().exercises
        if resolve is None:
            return by_id

        resolved = {}
        for exercise_id, duration in by_id.items():
            item = resolve(exercise_id)
            if item is None:
                logger.debug("Exercise %d not found; dropping it from %s", exercise_id, self.id)
                continue
            resolved[item] = duration
        return resolved

    def detailed_log(self) -> Optional[DetailedTrainingLog]:
        return self.parsed_notes().detailed_log

    def update_notes(
        self,
        exercises: Mapping[int, float],
        detailed_log: Optional[DetailedTrainingLog] = None,
    ) -> None:
        """
        Replace the notes with a freshly encoded payload.

        Raises:
            PayloadEncodingError: If encoding fails. notes is left unchanged.
        """
        self.notes = write_notes(exercises, detailed_log, self._codec())

    @classmethod
    def from_event_notes(
        cls,
        raw_notes: Optional[str],
        name: str,
        start_time: datetime.datetime,
        end_time: datetime.datetime,
        codec: Optional[InvisibleCodec] = None,
    ) -> "TrainingRecord":
        """
        Build a record from a calendar event note.

        The note may mix visible text with hidden symbols; only the hidden
        symbols are decoded and become the record's notes. Visible text is
        never read as training data: if nothing decodes, notes is None.
        """
        codec = codec or InvisibleCodec()
        raw_notes = raw_notes or ""

        hidden = extract_invisible(raw_notes)
        decoded = codec.decode(hidden) if hidden else None

        return cls(
            name=name,
            start_time=start_time,
            end_time=end_time,
            notes=decoded,
            codec=codec,
        )
