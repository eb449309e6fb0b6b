"""
Structured training payload and its JSON form.

    TrainingPayload
        exercises:   "<id>=<duration>|..."  (legacy string, always present)
        detailedLog: DetailedTrainingLog    (optional)
            logs: [ExerciseLog]
                exerciseID: int
                sets: [WorkoutSet {id, reps?, weight?}]

Absent optionals are omitted from the JSON; set ids are upper-case UUID
strings.
"""

import json
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .errors import PayloadFormatError
from .legacy import parse_exercise_string, format_exercise_string
from .protocol import (
    KEY_EXERCISES,
    KEY_DETAILED_LOG,
    KEY_LOGS,
    KEY_EXERCISE_ID,
    KEY_SETS,
    KEY_SET_ID,
    KEY_REPS,
    KEY_WEIGHT,
    JSON_DUMP_KW,
)


@dataclass
class WorkoutSet:
    """A single set of an exercise, e.g. 10 reps at 50 kg."""
    reps: Optional[int] = None
    weight: Optional[float] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {KEY_SET_ID: str(self.id).upper()}
        if self.reps is not None:
            data[KEY_REPS] = self.reps
        if self.weight is not None:
            data[KEY_WEIGHT] = self.weight
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WorkoutSet":
        raw_id = data.get(KEY_SET_ID)
        reps = data.get(KEY_REPS)
        weight = data.get(KEY_WEIGHT)
        return cls(
            id=uuid.UUID(raw_id) if raw_id is not None else uuid.uuid4(),
            reps=int(reps) if reps is not None else None,
            weight=float(weight) if weight is not None else None,
        )


@dataclass
class ExerciseLog:
    """Detailed log for one exercise within a session."""
    exercise_id: int
    sets: List[WorkoutSet] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            KEY_EXERCISE_ID: self.exercise_id,
            KEY_SETS: [s.to_dict() for s in self.sets],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExerciseLog":
        return cls(
            exercise_id=int(data[KEY_EXERCISE_ID]),
            sets=[WorkoutSet.from_dict(s) for s in data[KEY_SETS]],
        )


@dataclass
class DetailedTrainingLog:
    """Complete detailed log for a training session."""
    logs: List[ExerciseLog] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {KEY_LOGS: [log.to_dict() for log in self.logs]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DetailedTrainingLog":
        return cls(logs=[ExerciseLog.from_dict(log) for log in data[KEY_LOGS]])


@dataclass
class TrainingPayload:
    exercises: str = ""
    detailed_log: Optional[DetailedTrainingLog] = None

    @classmethod
    def from_exercises(
        cls,
        exercises: Mapping[int, float],
        detailed_log: Optional[DetailedTrainingLog] = None,
    ) -> "TrainingPayload":
        return cls(exercises=format_exercise_string(exercises), detailed_log=detailed_log)

    def exercise_map(self) -> Dict[int, float]:
        return parse_exercise_string(self.exercises)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {KEY_EXERCISES: self.exercises}
        if self.detailed_log is not None:
            data[KEY_DETAILED_LOG] = self.detailed_log.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TrainingPayload":
        exercises = data[KEY_EXERCISES]
        if not isinstance(exercises, str):
            raise TypeError(f"'{KEY_EXERCISES}' must be a string, got {type(exercises).__name__}")
        raw_log = data.get(KEY_DETAILED_LOG)
        return cls(
            exercises=exercises,
            detailed_log=DetailedTrainingLog.from_dict(raw_log) if raw_log is not None else None,
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), **JSON_DUMP_KW)

    @classmethod
    def from_json(cls, text: str) -> "TrainingPayload":
        """
        Parse a payload from its JSON text.

        Raises:
            PayloadFormatError: If text is not JSON or lacks required keys
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise PayloadFormatError(f"Payload is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise PayloadFormatError(f"Payload root must be an object, got {type(data).__name__}")

        try:
            return cls.from_dict(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise PayloadFormatError(f"Malformed training payload: {e!r}") from e
