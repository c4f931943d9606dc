# lc_norm_tool/core/domain/call_number.py

"""LC call number domain models and their canonical rendering

A call number such as ``HD 1695.55 .K55 .V5 2010`` is held as an ``LCRecord``
built from typed fields. Every field knows how to render itself; the record
joins the rendered fields with single spaces in a fixed order.
"""

# Standard library imports
from decimal import Decimal
from string import ascii_letters
from string import digits
from string import whitespace

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

_ALPHA = frozenset(ascii_letters)
_ALNUM = frozenset(ascii_letters + digits)


def format_class_number(value: float) -> str:
    """Render a class number as the shortest decimal that round-trips

    Integral values drop the fractional part (224.0 -> "224"). Exponent
    notation is never produced.

    Args:
        value: Non-negative class number

    Returns:
        Decimal text for the value
    """
    if value.is_integer():
        return str(int(value))

    text = repr(value)
    if "e" in text or "E" in text:
        return format(Decimal(text), "f")
    return text


class Prefix(BaseModel):
    """Top-level subject class, one or two letters (e.g. "HD")"""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., min_length=1, max_length=2, description="Subject class letters")

    @field_validator("value")
    @classmethod
    def validate_letters(cls, v: str) -> str:
        """Only ASCII letters make up a prefix"""
        if not all(char in _ALPHA for char in v):
            raise ValueError(f"Prefix must be alphabetic, got {v!r}")
        return v

    def render(self) -> str:
        return self.value


class ClassNumber(BaseModel):
    """Numeric subclass following the prefix (e.g. 1695.55)"""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., ge=0.0, description="Class number as a real number")

    def render(self) -> str:
        return format_class_number(self.value)


class CutterSegment(BaseModel):
    """Author/subject cutter code (e.g. ".K55")"""

    model_config = ConfigDict(frozen=True)

    leading_dot: bool = Field(False, description="Whether a '.' preceded the body in the source")
    body: str = Field(..., min_length=1, description="Alphanumeric cutter code")

    @field_validator("body")
    @classmethod
    def validate_body(cls, v: str) -> str:
        """Body starts with a letter and holds only letters and digits"""
        if v[0] not in _ALPHA:
            raise ValueError(f"Cutter body must start with a letter, got {v!r}")
        if not all(char in _ALNUM for char in v):
            raise ValueError(f"Cutter body must be alphanumeric, got {v!r}")
        return v

    def render(self) -> str:
        if self.leading_dot:
            return f".{self.body}"
        return self.body


class Year(BaseModel):
    """Publication year with an optional one-letter suffix (e.g. 1988b)"""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=0, le=9999, description="Four-digit year")
    suffix: str | None = Field(None, description="Single letter directly after the year")

    @field_validator("suffix")
    @classmethod
    def validate_suffix(cls, v: str | None) -> str | None:
        """A suffix is exactly one letter"""
        if v is not None and (len(v) != 1 or v not in _ALPHA):
            raise ValueError(f"Year suffix must be a single letter, got {v!r}")
        return v

    def render(self) -> str:
        return f"{self.value:04d}{self.suffix or ''}"


class Note(BaseModel):
    """Trailing free text such as volume or copy annotations"""

    model_config = ConfigDict(frozen=True)

    body: str = Field(..., min_length=1, description="Trimmed note text")

    @field_validator("body")
    @classmethod
    def validate_trimmed(cls, v: str) -> str:
        """A note is never empty and carries no surrounding ASCII whitespace"""
        if v != v.strip(whitespace) or not v:
            raise ValueError(f"Note must be non-empty trimmed text, got {v!r}")
        return v

    def render(self) -> str:
        return self.body


class LCRecord(BaseModel):
    """A complete, structured LC call number

    Fields always appear in this order. A record is built once by the
    assembler and never modified afterwards.
    """

    model_config = ConfigDict(frozen=True)

    prefix: Prefix
    class_number: ClassNumber
    first_cutter: CutterSegment
    second_cutter: CutterSegment | None = None
    year: Year | None = None
    note: Note | None = None

    def render(self) -> str:
        """Render the canonical single-spaced form of the call number

        Returns:
            Canonical text, e.g. "HD 1695.55 .K55 .V5 2010"
        """
        parts = [self.prefix.render(), self.class_number.render(), self.first_cutter.render()]

        if self.second_cutter is not None:
            parts.append(self.second_cutter.render())
        if self.year is not None:
            parts.append(self.year.render())
        if self.note is not None:
            parts.append(self.note.render())

        return " ".join(parts)

    def __str__(self) -> str:
        return self.render()
