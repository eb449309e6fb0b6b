"""Notes container protocol constants.

Single source of truth for the literals written into note fields.
Changing any of them breaks reads of notes that already exist.
"""

# Visible prefix marking a note that carries a training payload
MARKER = "#TRAINING#"

# Legacy plain-text grammar: "<id>=<duration>|<id>=<duration>"
ENTRY_SEPARATOR = "|"
PAIR_SEPARATOR = "="

# JSON keys of the serialized payload
KEY_EXERCISES = "exercises"
KEY_DETAILED_LOG = "detailedLog"
KEY_LOGS = "logs"
KEY_EXERCISE_ID = "exerciseID"
KEY_SETS = "sets"
KEY_SET_ID = "id"
KEY_REPS = "reps"
KEY_WEIGHT = "weight"

# Compact JSON, non-ASCII kept as-is (it is compressed anyway)
JSON_DUMP_KW = {"separators": (",", ":"), "ensure_ascii": False}
