# lc_norm_tool/core/domain/enums.py

"""Domain enumerations for the LC call number normalizer"""

# Standard library imports
from enum import Enum


class FailureKind(Enum):
    """Why a field recognizer could not read its field"""

    UNEXPECTED_END = "UnexpectedEnd"  # Input exhausted before the field could be read
    UNEXPECTED_CHARACTER = "UnexpectedCharacter"  # Required character class not matched
    MALFORMED_NUMBER = "MalformedNumber"  # Class number substring is not a real number
    TRAILING_CONTENT = "TrailingContent"  # Non-whitespace left after every field was tried


class FieldName(Enum):
    """Fields of an LC call number, in the order they are read"""

    PREFIX = "prefix"
    CLASS_NUMBER = "class_number"
    FIRST_CUTTER = "first_cutter"
    SECOND_CUTTER = "second_cutter"
    YEAR = "year"
    NOTE = "note"
    RECORD = "record"  # Whole-record checks after all fields were attempted


class RowStatus(Enum):
    """Outcome of normalizing one row of a catalog table"""

    NORMALIZED = "normalized"  # Parsed and rewritten in canonical form
    NO_RECORD = "no_record"  # Empty LC cell
    ERROR = "error"  # Cell could not be parsed
    REJECTED_NOTE = "rejected_note"  # Parsed, but carried a note and notes are rejected


# Human-readable descriptions for failure kinds
FAILURE_KIND_DESCRIPTIONS = {
    FailureKind.UNEXPECTED_END: "Input ended before a required field",
    FailureKind.UNEXPECTED_CHARACTER: "Unexpected character for field",
    FailureKind.MALFORMED_NUMBER: "Class number is not a valid number",
    FailureKind.TRAILING_CONTENT: "Unconsumed text after all fields",
}
