# lc_norm_tool/core/types/results.py

"""Discriminated outcome types returned by ``maybe_parse``"""

# Standard library imports
from typing import Literal
from typing import TypeGuard
from typing import assert_never

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from lc_norm_tool.core.domain.call_number import LCRecord
from lc_norm_tool.core.domain.enums import FailureKind
from lc_norm_tool.core.domain.errors import CallNumberParseError
from lc_norm_tool.core.domain.errors import PositionedFailure
from lc_norm_tool.core.domain.errors import format_failure_chain


class NoRecord(BaseModel):
    """The cell was empty; there is no call number to parse"""

    model_config = ConfigDict(frozen=True)

    type: Literal["no_record"] = "no_record"


class ParsedRecord(BaseModel):
    """The cell parsed into a complete record"""

    model_config = ConfigDict(frozen=True)

    type: Literal["record"] = "record"
    record: LCRecord


class ParseFailed(BaseModel):
    """The cell could not be parsed; carries the full failure chain"""

    model_config = ConfigDict(frozen=True)

    type: Literal["error"] = "error"
    message: str
    failures: list[PositionedFailure] = Field(..., min_length=1)

    @classmethod
    def from_error(cls, error: CallNumberParseError) -> "ParseFailed":
        return cls(message=error.message, failures=error.failures)

    @property
    def kind(self) -> FailureKind:
        """Kind of the fatal failure"""
        return self.failures[-1].kind

    def describe(self) -> str:
        return format_failure_chain(self.message, self.failures)


# Discriminated union for parse outcomes
type ParseOutcome = NoRecord | ParsedRecord | ParseFailed


def is_parsed(outcome: ParseOutcome) -> TypeGuard[ParsedRecord]:
    """Type guard for successful parses"""
    return outcome.type == "record"


def describe_outcome(outcome: ParseOutcome) -> str:
    """One-line human description of an outcome"""
    match outcome.type:
        case "record":
            return outcome.record.render()
        case "no_record":
            return "no call number"
        case "error":
            return outcome.message
        case _:
            assert_never(outcome.type)


__all__ = [
    "NoRecord",
    "ParsedRecord",
    "ParseFailed",
    "ParseOutcome",
    "is_parsed",
    "describe_outcome",
]
